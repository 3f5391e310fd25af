"""Leaf-node geometry helpers. No engine imports."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

import numpy as np
from numpy.typing import NDArray


def to_points(path: Any) -> NDArray[np.float64]:
    """Coerce a path into an Nx2 float array.

    Accepts an Nx2 array, a sequence of (x, y) pairs, a sequence of {"x", "y"} mappings,
    or a sequence of objects with ``x``/``y`` attributes. Points that cannot be read as two
    numbers are skipped.
    """
    if isinstance(path, np.ndarray):
        if path.ndim == 2 and path.shape[1] == 2:
            return path.astype(np.float64, copy=False)
        return np.empty((0, 2))

    coords: list[tuple[float, float]] = []
    for point in path or ():
        xy = point_coords(point)
        if xy is not None:
            coords.append(xy)
    if not coords:
        return np.empty((0, 2))
    return np.array(coords, dtype=np.float64)


def point_coords(point: Any) -> tuple[float, float] | None:
    """Read (x, y) from a point-like value, or None if it is not numeric."""
    if isinstance(point, Mapping):
        x, y = point.get("x"), point.get("y")
    elif hasattr(point, "x") and hasattr(point, "y"):
        x, y = point.x, point.y
    elif isinstance(point, (tuple, list, np.ndarray)) and len(point) == 2:
        x, y = point[0], point[1]
    else:
        return None
    if not _is_number(x) or not _is_number(y):
        return None
    return (float(x), float(y))


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float, np.integer, np.floating)) and not isinstance(value, bool)


def stack_points(paths: Iterable[NDArray[np.float64]]) -> NDArray[np.float64]:
    """All points of all paths as one Nx2 array."""
    arrays = [p for p in paths if len(p) > 0]
    if not arrays:
        return np.empty((0, 2))
    return np.vstack(arrays)


def segment_lengths(points: NDArray[np.float64]) -> NDArray[np.float64]:
    """Euclidean length of every consecutive segment."""
    if len(points) < 2:
        return np.empty(0)
    diffs = np.diff(points, axis=0)
    return np.sqrt(np.sum(diffs**2, axis=1))


def path_length(points: NDArray[np.float64]) -> float:
    return float(np.sum(segment_lengths(points)))


def bbox(points: NDArray[np.float64]) -> tuple[float, float, float, float]:
    """Compute (xmin, ymin, xmax, ymax) bounding box."""
    if len(points) == 0:
        return (0.0, 0.0, 0.0, 0.0)
    return (
        float(np.min(points[:, 0])),
        float(np.min(points[:, 1])),
        float(np.max(points[:, 0])),
        float(np.max(points[:, 1])),
    )


def centroid(points: NDArray[np.float64]) -> tuple[float, float]:
    """Compute centroid of a point set."""
    if len(points) == 0:
        return (0.0, 0.0)
    return (float(np.mean(points[:, 0])), float(np.mean(points[:, 1])))


def is_finite(points: NDArray[np.float64]) -> NDArray[np.bool_]:
    """Row mask of points whose coordinates are both finite."""
    if len(points) == 0:
        return np.zeros(0, dtype=bool)
    return np.all(np.isfinite(points), axis=1)
