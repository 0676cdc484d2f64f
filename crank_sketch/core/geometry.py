# -*- coding: utf-8 -*-
"""Closed-form pose of the two-link chain O-A-B with B sliding on the x axis.

O is fixed at the origin, OA rotates about O and B stays on the x axis. The
pose is a pure function of the link lengths, the ratio AM/AB that places M on
link AB, and the normalized progress ``p`` of one driving revolution.

Degenerate inputs are not rejected here: ``ob == 0`` or a link pair with no
real circle intersection produce NaN/inf coordinates. Use
:func:`check_linkage` at the boundary to detect configurations that cannot be
solved over a full cycle.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Point2:
    x: float
    y: float

    def lerp(self, other: "Point2", t: float) -> "Point2":
        """Return ``self + t * (other - self)``."""
        return Point2(self.x + t * (other.x - self.x), self.y + t * (other.y - self.y))

    def as_tuple(self) -> tuple[float, float]:
        return self.x, self.y

    def is_finite(self) -> bool:
        return math.isfinite(self.x) and math.isfinite(self.y)


ORIGIN = Point2(0.0, 0.0)


@dataclass(frozen=True)
class MechanismPose:
    a: Point2
    b: Point2
    m: Point2

    @property
    def o(self) -> Point2:
        return ORIGIN

    def is_finite(self) -> bool:
        return self.a.is_finite() and self.b.is_finite() and self.m.is_finite()


def slider_distance(oa: float, ab: float, t: float) -> float:
    """Distance |OB| for driving angle ``t`` (radians).

    The three branches are distinct configurations of the chain and are kept
    separate; the equal-length branch must not be folded into the others.
    """
    if oa < ab:
        return oa * math.cos(t) + ab
    if oa == ab:
        return (oa + ab) * math.cos(t)
    return oa + ab * math.cos(t)


def _div(num: float, den: float) -> float:
    # IEEE semantics instead of ZeroDivisionError
    if den == 0.0:
        if num == 0.0 or math.isnan(num):
            return math.nan
        return math.copysign(math.inf, num) * math.copysign(1.0, den)
    return num / den


def _sqrt(v: float) -> float:
    # NaN for negative arguments instead of ValueError
    if math.isnan(v) or v < 0.0:
        return math.nan
    return math.sqrt(v)


def solve_pose(oa: float, ab: float, am_per_ab: float, progress: float) -> MechanismPose:
    """Solve A, B and M for ``progress`` in [0, 1).

    A lies in the lower half-plane for ``progress < 0.5`` and in the upper
    half-plane from 0.5 on.
    """
    t = progress * math.tau
    ob = slider_distance(oa, ab, t)
    b = Point2(ob, 0.0)

    a_x = _div(ob * ob + oa * oa - ab * ab, 2.0 * ob)
    a_y = _sqrt(oa * oa - a_x * a_x)
    if progress < 0.5:
        a_y = -a_y
    a = Point2(a_x, a_y)

    m = a.lerp(b, am_per_ab) if ab != 0.0 else a
    return MechanismPose(a, b, m)


def check_linkage(oa: float, ab: float, am_per_ab: float) -> Optional[str]:
    """Return why (oa, ab, am_per_ab) cannot be solved for a full cycle, or None."""
    for name, value in (("OA", oa), ("AB", ab), ("AM/AB", am_per_ab)):
        if not math.isfinite(value):
            return f"{name} must be a finite number"
    if oa < 0.0:
        return "OA must not be negative"
    if ab < 0.0:
        return "AB must not be negative"
    if oa == 0.0 and ab == 0.0:
        return "OA and AB cannot both be zero"
    return None
