"""Path optimizer — clamp, drop near-duplicate consecutive points, discard short paths.

Clamping happens before the duplicate test, so every comparison is made between clamped
points. That makes a second pass a no-op.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

import numpy as np
from numpy.typing import NDArray

from sigilforge.engine.config import DEFAULT_CONFIG, EngineConfig
from sigilforge.utils.geometry import is_finite, to_points

Path = NDArray[np.float64]


def optimize_path(path: Any, config: EngineConfig = DEFAULT_CONFIG) -> Path:
    """Optimize one path. Returns an Nx2 array, possibly with fewer than 2 points."""
    points = to_points(path)
    points = points[is_finite(points)]
    if len(points) == 0:
        return points
    points = np.clip(points, config.clamp_min, config.clamp_max)

    eps = config.dedupe_epsilon
    keep = [0]
    last = points[0]
    for i in range(1, len(points)):
        dx, dy = np.abs(points[i] - last)
        if dx >= eps or dy >= eps:
            keep.append(i)
            last = points[i]
    return points[keep]


def optimize_paths(paths: Iterable[Any], config: EngineConfig = DEFAULT_CONFIG) -> list[Path]:
    """Optimize every path and drop those left with fewer than ``min_path_points`` points.

    Order of paths and of points within a path is preserved.
    """
    optimized = (optimize_path(p, config) for p in paths)
    return [p for p in optimized if len(p) >= config.min_path_points]
