"""Analyzer — complexity statistics, bounding box and approximate symmetry of a path set.

All functions accept engine arrays or any point-like paths (see ``to_points``), so the same
code serves freshly generated sigils and paths read back from storage or SVG.
"""

from __future__ import annotations

import math
from collections.abc import Iterable
from typing import Any

import numpy as np
from scipy.spatial import cKDTree

from sigilforge.engine.config import DEFAULT_CONFIG, EngineConfig
from sigilforge.models.sigil import BoundingBox, ComplexityStats, SymmetryReport
from sigilforge.utils.geometry import bbox, centroid, is_finite, path_length, stack_points, to_points


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def _as_arrays(paths: Iterable[Any] | None) -> list[np.ndarray]:
    if not paths:
        return []
    return [to_points(p) for p in paths]


def complexity_stats(paths: Iterable[Any] | None) -> ComplexityStats:
    """score = 3 * paths + points + 100 * length; density = length / points."""
    arrays = _as_arrays(paths)
    path_count = len(arrays)
    point_count = sum(len(p) for p in arrays)
    total_length = sum(path_length(p) for p in arrays if len(p) > 1)

    return ComplexityStats(
        paths=path_count,
        points=point_count,
        total_length=round(total_length, 3),
        complexity=_round_half_up(path_count * 3 + point_count + total_length * 100),
        density=round(total_length / point_count, 3) if point_count > 0 else 0.0,
    )


def _finite_points(paths: Iterable[Any] | None) -> np.ndarray:
    points = stack_points(_as_arrays(paths))
    return points[is_finite(points)]


def bounding_box(paths: Iterable[Any] | None) -> BoundingBox:
    """Min/max over all valid points; the full unit square when there are none."""
    points = _finite_points(paths)
    if len(points) == 0:
        return BoundingBox()

    min_x, min_y, max_x, max_y = bbox(points)
    return BoundingBox(
        min_x=min_x,
        min_y=min_y,
        max_x=max_x,
        max_y=max_y,
        width=max_x - min_x,
        height=max_y - min_y,
        center_x=(min_x + max_x) / 2,
        center_y=(min_y + max_y) / 2,
    )


def _match_pct(tree: cKDTree, reflected: np.ndarray, tolerance: float) -> int:
    dists, _ = tree.query(reflected, k=1)
    matched = int(np.sum(dists < tolerance))
    return _round_half_up(matched / len(reflected) * 100)


def analyze_symmetry(paths: Iterable[Any] | None, config: EngineConfig = DEFAULT_CONFIG) -> SymmetryReport:
    """Share of points whose mirror image (about the centroid) has a neighbour within tolerance.

    horizontal: x mirrored; vertical: y mirrored; radial: 180 degree rotation.
    Heuristic nearest-neighbour match, not an exact symmetry test.
    """
    points = _finite_points(paths)
    if len(points) == 0:
        return SymmetryReport()

    cx, cy = centroid(points)
    tree = cKDTree(points)
    tol = config.symmetry_tolerance

    mirrored_x = np.column_stack([2 * cx - points[:, 0], points[:, 1]])
    mirrored_y = np.column_stack([points[:, 0], 2 * cy - points[:, 1]])
    rotated = np.column_stack([2 * cx - points[:, 0], 2 * cy - points[:, 1]])

    horizontal = _match_pct(tree, mirrored_x, tol)
    vertical = _match_pct(tree, mirrored_y, tol)
    radial = _match_pct(tree, rotated, tol)
    return SymmetryReport(
        horizontal_pct=horizontal,
        vertical_pct=vertical,
        radial_pct=radial,
        average_pct=_round_half_up((horizontal + vertical + radial) / 3),
    )
