# -*- coding: utf-8 -*-
"""Tabulated trajectory of point M over one progress cycle."""

from __future__ import annotations

import logging
import math
import numbers
from typing import Iterator, Optional, Tuple

import numpy as np

from .geometry import Point2, solve_pose

logger = logging.getLogger(__name__)


class TabulatedPath:
    """Fixed-size sequence of M positions; entry i is the pose at progress i/len."""

    def __init__(self, points: np.ndarray):
        if points.ndim != 2 or points.shape[1] != 2 or points.shape[0] < 1:
            raise ValueError(f"Expected an (N, 2) array with N >= 1, got shape {points.shape}")
        self._points = points
        self._points.setflags(write=False)

    def __len__(self) -> int:
        return int(self._points.shape[0])

    def __getitem__(self, i: int) -> Point2:
        x, y = self._points[i]
        return Point2(float(x), float(y))

    def __iter__(self) -> Iterator[Point2]:
        for x, y in self._points:
            yield Point2(float(x), float(y))

    def count_up_to(self, progress: float) -> int:
        """Number of samples covered by ``progress``: floor(progress * len)."""
        n = int(math.floor(progress * len(self)))
        return max(0, min(n, len(self)))

    def prefix(self, progress: float) -> list[Point2]:
        return [self[i] for i in range(self.count_up_to(progress))]

    def as_array(self) -> np.ndarray:
        return self._points


def tabulate_path(oa: float, ab: float, am_per_ab: float, resolution: int) -> TabulatedPath:
    if isinstance(resolution, bool) or not isinstance(resolution, numbers.Integral) or resolution < 1:
        raise ValueError(f"resolution must be a positive int, got {resolution!r}")
    resolution = int(resolution)
    points = np.empty((resolution, 2), dtype=np.float64)
    for i in range(resolution):
        m = solve_pose(oa, ab, am_per_ab, i / resolution).m
        points[i, 0] = m.x
        points[i, 1] = m.y
    return TabulatedPath(points)


class PathTabulator:
    """Keeps the tabulated path in step with the linkage parameters.

    The full path is recomputed whenever the (oa, ab, am_per_ab) triple
    changes. Repeated updates with an identical triple (a slider re-emitting
    its value) reuse the cached path.
    """

    def __init__(self, resolution: int, oa: float, ab: float, am_per_ab: float):
        self.resolution = resolution
        self._key: Optional[Tuple[float, float, float]] = None
        self._path: Optional[TabulatedPath] = None
        self.update(oa, ab, am_per_ab)

    @property
    def path(self) -> TabulatedPath:
        assert self._path is not None
        return self._path

    def update(self, oa: float, ab: float, am_per_ab: float) -> bool:
        """Retabulate if the parameters changed. Returns True when recomputed."""
        key = (float(oa), float(ab), float(am_per_ab))
        if self._path is not None and key == self._key:
            return False
        self._path = tabulate_path(key[0], key[1], key[2], self.resolution)
        self._key = key
        logger.debug("Retabulated M path: oa=%g ab=%g am/ab=%g n=%d", *key, self.resolution)
        return True
