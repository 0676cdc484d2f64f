# -*- coding: utf-8 -*-
"""Headless runs of the animation loop and CSV export of poses."""

from __future__ import annotations

import csv
from typing import Any, Dict, List

from .animation import AnimationController, Period
from .geometry import solve_pose
from .tabulation import TabulatedPath

FRAME_COLUMNS = ["frame", "time", "progress", "ax", "ay", "bx", "by", "mx", "my"]
PATH_COLUMNS = ["index", "progress", "mx", "my"]


def simulate(
    oa: float,
    ab: float,
    am_per_ab: float,
    period: Period,
    duration: float,
    framerate: int,
    start_progress: float = 0.0,
) -> List[Dict[str, Any]]:
    """Tick an autorunning controller at ``framerate`` for ``duration`` seconds.

    Returns one record per frame, including frame 0 before the first tick.
    """
    if framerate <= 0:
        raise ValueError(f"framerate must be positive, got {framerate!r}")
    if duration < 0:
        raise ValueError(f"duration must not be negative, got {duration!r}")
    anim = AnimationController(period, autorun=True, progress=start_progress, now=0.0)
    n_frames = int(round(duration * framerate))
    frames: List[Dict[str, Any]] = []
    for frame in range(n_frames + 1):
        now = frame / framerate
        if frame > 0:
            anim.tick(now)
        pose = solve_pose(oa, ab, am_per_ab, anim.progress)
        frames.append({
            "frame": frame,
            "time": now,
            "progress": anim.progress,
            "ax": pose.a.x,
            "ay": pose.a.y,
            "bx": pose.b.x,
            "by": pose.b.y,
            "mx": pose.m.x,
            "my": pose.m.y,
        })
    return frames


def write_frames_csv(path: str, frames: List[Dict[str, Any]]) -> None:
    with open(path, "w", newline="", encoding="utf-8") as f:
        w = csv.writer(f)
        w.writerow(FRAME_COLUMNS)
        for r in frames:
            w.writerow([r.get(c) for c in FRAME_COLUMNS])


def write_path_csv(path: str, tab: TabulatedPath) -> None:
    n = len(tab)
    with open(path, "w", newline="", encoding="utf-8") as f:
        w = csv.writer(f)
        w.writerow(PATH_COLUMNS)
        for i, p in enumerate(tab):
            w.writerow([i, i / n, p.x, p.y])
