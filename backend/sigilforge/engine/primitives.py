"""Geometry primitives — pure functions producing paths from numeric parameters.

Every function returns Nx2 float arrays (or lists of them) in unit-square coordinates.
Nothing here reads text or categories; that is the pattern library's job.
"""

from __future__ import annotations

import math
from collections.abc import Sequence

import numpy as np
from numpy.typing import NDArray

from sigilforge.engine.tables import (
    GOLDEN_RATIO,
    ICOSAHEDRON_EDGES,
    ICOSAHEDRON_VERTICES,
    PHI,
    Motif,
)

Path = NDArray[np.float64]


def polyline(points: Sequence[tuple[float, float]]) -> Path:
    return np.array(points, dtype=np.float64).reshape(-1, 2)


def segment(x0: float, y0: float, x1: float, y1: float) -> Path:
    return np.array([[x0, y0], [x1, y1]], dtype=np.float64)


def ring(cx: float, cy: float, radius: float | NDArray[np.float64], angles: NDArray[np.float64]) -> Path:
    """Points at the given angles (radians) around a centre."""
    return np.column_stack([cx + np.cos(angles) * radius, cy + np.sin(angles) * radius])


def circle(cx: float, cy: float, radius: float, segments: int = 32) -> Path:
    """Closed circle sampled with ``segments + 1`` points (first == last)."""
    angles = np.arange(segments + 1) / segments * 2 * np.pi
    return ring(cx, cy, radius, angles)


def regular_polygon(
    cx: float,
    cy: float,
    radius: float,
    sides: int,
    phase: float = 0.0,
    closed: bool = True,
) -> Path:
    """Regular n-gon; ``phase`` rotates the first vertex (radians)."""
    count = sides + 1 if closed else sides
    angles = np.arange(count) / sides * 2 * np.pi + phase
    return ring(cx, cy, radius, angles)


def star_polygon(
    cx: float,
    cy: float,
    radius: float,
    points: int,
    step: int,
    phase: float = 0.0,
) -> Path:
    """{points/step} star: visit every ``step``-th vertex, closed."""
    vertices = regular_polygon(cx, cy, radius, points, phase=phase, closed=False)
    order = [(i * step) % points for i in range(points)] + [0]
    return vertices[order]


def alternating_star(
    cx: float,
    cy: float,
    outer: float,
    inner: float,
    vertices: int,
    phase: float = 0.0,
    closed: bool = True,
) -> Path:
    """Star outline whose radius alternates outer/inner at each vertex."""
    idx = np.arange(vertices)
    radii = np.where(idx % 2 == 0, outer, inner)
    pts = ring(cx, cy, radii, idx / vertices * 2 * np.pi + phase)
    if closed:
        pts = np.vstack([pts, pts[:1]])
    return pts


def arc(
    cx: float,
    cy: float,
    radius: float,
    start_deg: float,
    end_deg: float,
    step_deg: float,
) -> Path:
    """Arc sampled every ``step_deg`` degrees, endpoints inclusive."""
    count = int(round((end_deg - start_deg) / step_deg)) + 1
    angles = np.radians(start_deg + np.arange(count) * step_deg)
    return ring(cx, cy, radius, angles)


def rectangle(x0: float, y0: float, x1: float, y1: float) -> Path:
    return polyline([(x0, y0), (x1, y0), (x1, y1), (x0, y1), (x0, y0)])


def cross(cx: float, cy: float, half: float) -> list[Path]:
    return [segment(cx, cy - half, cx, cy + half), segment(cx - half, cy, cx + half, cy)]


def motif(cx: float, cy: float, size: float, shape: Motif) -> list[Path]:
    """Place a unit-coordinate motif at (cx, cy) scaled by ``size``."""
    return [polyline([(cx + x * size, cy + y * size) for x, y in stroke]) for stroke in shape]


def heart_curve(
    cx: float,
    cy: float,
    scale: float | NDArray[np.float64],
    t: NDArray[np.float64],
) -> Path:
    """Classic parametric heart, y pointing down the canvas.

    x = 16 sin³t, y = -(13 cos t - 5 cos 2t - 2 cos 3t - cos 4t), both times ``scale``.
    """
    x = 16 * np.sin(t) ** 3
    y = 13 * np.cos(t) - 5 * np.cos(2 * t) - 2 * np.cos(3 * t) - np.cos(4 * t)
    return np.column_stack([cx + scale * x, cy - scale * y])


def infinity_loop(cx: float, cy: float, width: float, height: float, samples: int = 50) -> Path:
    """Lemniscate traced twice over ``samples`` points."""
    t = np.arange(samples) / samples * 4 * np.pi
    denom = 1 + np.sin(t) ** 2
    return np.column_stack([
        cx + width * np.cos(t) / denom,
        cy + height * np.sin(t) * np.cos(t) / denom,
    ])


def golden_spiral(cx: float, cy: float, samples: int, growth: float = 0.02, angle_step: float = 0.3) -> Path:
    """Sunflower-style spiral: radius grows with sqrt(i) scaled down by the golden ratio."""
    i = np.arange(samples)
    radii = growth * np.sqrt(i) / GOLDEN_RATIO
    return ring(cx, cy, radii, i * angle_step)


def fibonacci_spiral(cx: float, cy: float, max_radius: float, samples: int = 50, angle_step: float = 0.2) -> Path:
    """Logarithmic spiral damped by phi^(-i/10)."""
    i = np.arange(samples)
    radii = (max_radius / samples) * i * np.power(PHI, -i / 10)
    return ring(cx, cy, radii, i * angle_step)


def keep_inside(points: Path, lo: float, hi: float) -> Path:
    """Drop points outside the [lo, hi] window on either axis."""
    if len(points) == 0:
        return points
    mask = np.all((points >= lo) & (points <= hi), axis=1)
    return points[mask]


def fractal_branches(
    x: float,
    y: float,
    length: float,
    angle: float,
    depth: int,
    shrink: float = 0.7,
    deviation: float = math.pi / 6,
    min_length: float = 0.02,
) -> list[Path]:
    """Binary branching tree: one segment, then two children at ±deviation.

    Stops when ``depth`` reaches 0 or the segment would be shorter than ``min_length``.
    """
    if depth < 0:
        raise ValueError(f"fractal depth must be non-negative, got {depth}")
    if depth == 0 or length < min_length:
        return []

    end_x = x + math.cos(angle) * length
    end_y = y + math.sin(angle) * length
    paths = [segment(x, y, end_x, end_y)]

    child = length * shrink
    for branch_angle in (angle - deviation, angle + deviation):
        paths.extend(
            fractal_branches(end_x, end_y, child, branch_angle, depth - 1, shrink, deviation, min_length)
        )
    return paths


def icosahedron_projection(cx: float, cy: float, scale: float) -> list[Path]:
    """Orthographic projection of the 12 icosahedron vertices, one segment per edge."""
    vertices = np.array(ICOSAHEDRON_VERTICES)
    projected = np.column_stack([cx + vertices[:, 0] * scale, cy + vertices[:, 1] * scale])
    return [projected[[a, b]] for a, b in ICOSAHEDRON_EDGES]


def grid_lines(cx: float, cy: float, half_size: float, cells: int) -> list[Path]:
    """Square lattice of ``cells`` x ``cells``: alternating horizontal/vertical lines."""
    paths: list[Path] = []
    step = (half_size * 2) / cells
    lo, hi = cx - half_size, cx + half_size
    top, bottom = cy - half_size, cy + half_size
    for i in range(cells + 1):
        paths.append(segment(lo, top + i * step, hi, top + i * step))
        paths.append(segment(lo + i * step, top, lo + i * step, bottom))
    return paths


def cell_center(cx: float, cy: float, half_size: float, cells: int, row: int, col: int) -> tuple[float, float]:
    step = (half_size * 2) / cells
    return (cx - half_size + col * step + step / 2, cy - half_size + row * step + step / 2)
