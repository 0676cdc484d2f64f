# -*- coding: utf-8 -*-
"""Time-driven progress of the mechanism.

The controller does no scheduling of its own. The UI delivers ``tick(now)``
at a fixed cadence while autorun is on; ``now`` is a monotonic timestamp in
seconds.
"""

from __future__ import annotations

import logging
import math
from datetime import timedelta
from typing import Union

logger = logging.getLogger(__name__)

Period = Union[float, int, timedelta]


def wrap_progress(x: float) -> float:
    """``x`` modulo 1, always in [0, 1)."""
    r = x % 1.0
    # -1e-17 % 1.0 rounds to 1.0
    if r >= 1.0:
        return 0.0
    return r


def period_seconds(period: Period) -> float:
    if isinstance(period, timedelta):
        seconds = period.total_seconds()
    else:
        seconds = float(period)
    if not math.isfinite(seconds) or seconds < 0.0:
        raise ValueError(f"Period must be a finite, non-negative duration, got {period!r}")
    return seconds


class AnimationController:
    def __init__(self, period: Period, autorun: bool = True, progress: float = 0.0, now: float = 0.0):
        self._period = period_seconds(period)
        self._autorun = bool(autorun)
        self._progress = 0.0
        self.set_progress(progress)
        self.last_tick_time = float(now)

    @property
    def progress(self) -> float:
        return self._progress

    @property
    def autorun(self) -> bool:
        return self._autorun

    @property
    def period(self) -> float:
        return self._period

    def tick(self, now: float) -> float:
        """Advance progress by the time elapsed since the previous tick."""
        if not self._autorun:
            return self._progress
        if self._period == 0.0:
            logger.debug("Zero period: progress held at %g", self._progress)
        else:
            elapsed = now - self.last_tick_time
            self._progress = wrap_progress(self._progress + elapsed / self._period)
        self.last_tick_time = now
        return self._progress

    def set_autorun(self, autorun: bool, now: float) -> None:
        autorun = bool(autorun)
        if autorun:
            # Do not integrate the time spent paused.
            self.last_tick_time = now
        self._autorun = autorun

    def set_progress(self, progress: float) -> None:
        progress = float(progress)
        if not (0.0 <= progress <= 1.0):
            raise ValueError(f"Progress must be in [0, 1], got {progress!r}")
        self._progress = wrap_progress(progress)

    def set_period(self, period: Period) -> None:
        self._period = period_seconds(period)
