# -*- coding: utf-8 -*-
"""Application state for the crank schematic and the handlers the UI calls.

The controller owns the linkage parameters, the tabulated path of M, the
animation state and the validated entry fields. Every handler runs one state
transition to completion and then notifies listeners so the view can repaint.
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import Callable, List, Optional

from .animation import AnimationController, Period
from .geometry import MechanismPose, Point2, check_linkage, solve_pose
from .tabulation import PathTabulator, TabulatedPath
from .validated_field import ValidatedField, parse_length, parse_period
from ..utils.constants import (
    DEFAULT_AB,
    DEFAULT_AM_PER_AB,
    DEFAULT_OA,
    DEFAULT_PERIOD_S,
    PATH_TABULATION_SIZE,
)

logger = logging.getLogger(__name__)


def _sync_field(field: ValidatedField[float], value: float) -> None:
    # Keep the user's text (e.g. "2*pi") when it already parses to the value.
    if field.parsed != value:
        field.set_value(value)


@dataclass
class LinkageParameters:
    oa: float = DEFAULT_OA
    ab: float = DEFAULT_AB
    am_per_ab: float = DEFAULT_AM_PER_AB


class SchematicController:
    def __init__(
        self,
        params: Optional[LinkageParameters] = None,
        period: Period = DEFAULT_PERIOD_S,
        resolution: int = PATH_TABULATION_SIZE,
        autorun: bool = True,
        clock: Callable[[], float] = time.monotonic,
    ):
        self._clock = clock
        self.params = params if params is not None else LinkageParameters()
        self.trace_path = False
        self.tabulator = PathTabulator(resolution, self.params.oa, self.params.ab, self.params.am_per_ab)
        self.animation = AnimationController(period, autorun=autorun, now=clock())

        self.oa_field = ValidatedField.from_value(self.params.oa, parse_length)
        self.ab_field = ValidatedField.from_value(self.params.ab, parse_length)
        self.period_field = ValidatedField.from_value(self.animation.period, parse_period)

        self.configuration_error: Optional[str] = None
        self._listeners: List[Callable[[], None]] = []
        self._check_configuration()

    # ---- listeners ----
    def add_listener(self, callback: Callable[[], None]) -> None:
        self._listeners.append(callback)

    def _changed(self) -> None:
        for cb in list(self._listeners):
            cb()

    # ---- linkage parameters ----
    def _check_configuration(self) -> None:
        err = check_linkage(self.params.oa, self.params.ab, self.params.am_per_ab)
        if err and err != self.configuration_error:
            logger.warning("Unsolvable linkage (oa=%g, ab=%g): %s", self.params.oa, self.params.ab, err)
        self.configuration_error = err

    def _retabulate(self) -> None:
        self.tabulator.update(self.params.oa, self.params.ab, self.params.am_per_ab)
        self._check_configuration()
        self._changed()

    def set_oa(self, oa: float) -> None:
        self.params.oa = float(oa)
        _sync_field(self.oa_field, self.params.oa)
        self._retabulate()

    def set_ab(self, ab: float) -> None:
        self.params.ab = float(ab)
        _sync_field(self.ab_field, self.params.ab)
        self._retabulate()

    def set_am_per_ab(self, am_per_ab: float) -> None:
        self.params.am_per_ab = float(am_per_ab)
        self._retabulate()

    # ---- entry fields ----
    def on_oa_edited(self, text: str) -> bool:
        value, ok = self.oa_field.edit(text)
        if value is not None:
            self.set_oa(value)
        return ok

    def on_ab_edited(self, text: str) -> bool:
        value, ok = self.ab_field.edit(text)
        if value is not None:
            self.set_ab(value)
        return ok

    def on_period_edited(self, text: str) -> bool:
        value, ok = self.period_field.edit(text)
        if value is not None:
            self.set_period(value)
        return ok

    # ---- animation ----
    @property
    def progress(self) -> float:
        return self.animation.progress

    @property
    def autorun(self) -> bool:
        return self.animation.autorun

    def set_period(self, period: Period) -> None:
        self.animation.set_period(period)
        _sync_field(self.period_field, self.animation.period)
        self._changed()

    def set_progress(self, progress: float) -> None:
        self.animation.set_progress(progress)
        self._changed()

    def set_autorun(self, autorun: bool, now: Optional[float] = None) -> None:
        self.animation.set_autorun(autorun, self._clock() if now is None else now)
        self._changed()

    def set_trace_path(self, trace_path: bool) -> None:
        self.trace_path = bool(trace_path)
        self._changed()

    def tick(self, now: Optional[float] = None) -> float:
        progress = self.animation.tick(self._clock() if now is None else now)
        self._changed()
        return progress

    # ---- read side for rendering ----
    @property
    def path(self) -> TabulatedPath:
        return self.tabulator.path

    def pose(self) -> MechanismPose:
        return solve_pose(self.params.oa, self.params.ab, self.params.am_per_ab, self.progress)

    def trace_points(self) -> List[Point2]:
        """Tabulated M positions covered so far in the current cycle."""
        return self.path.prefix(self.progress)

    def scale(self) -> float:
        """World-to-unit factor that fits the mechanism into the axes."""
        reach = self.params.oa + self.params.ab
        if not reach > 0.0:
            return 1.0
        return 0.9 / reach
