"""Tarot style — the card-centre glyph.

A consonant walk bent by the category, an initials walk at high complexity, and one
category emblem. The emblems double as the static fallback shapes of the generator.
"""

from __future__ import annotations

import math
from typing import Callable

import numpy as np

from sigilforge.engine import primitives as geo
from sigilforge.engine.context import GenerationContext
from sigilforge.engine.registry import Category, Complexity, Style, pattern

BASE_RADIUS = 0.2
INITIALS_RADIUS = 0.12


def _walk_point(category: Category, i: int, code: int, length: int) -> tuple[float, float]:
    """Angle and radius of the i-th consonant, bent by the category."""
    angle = (code - 97) / 25 * 2 * math.pi
    radius = BASE_RADIUS + (i / length) * 0.15

    if category is Category.LOVE:
        angle += math.sin(i * 0.5) * 0.3
        radius *= 1 + math.cos(angle * 2) * 0.2
    elif category is Category.PROSPERITY:
        angle += i * (math.pi / 8)
        radius *= 1 + i * 0.05
    elif category is Category.PROTECTION:
        angle = (i / length) * 2 * math.pi
        radius = BASE_RADIUS + math.sin(angle * 3) * 0.1
    elif category is Category.WISDOM:
        angle += math.log(i + 1) * 0.5
        radius += math.cos(angle) * 0.05
    else:
        angle += (code % 7) * math.pi / 7
    return angle, radius


@pattern(
    id="tarot.consonant_walk",
    style=Style.TAROT,
    order=10,
    description="One vertex per consonant, modulated by category",
)
def consonant_walk(ctx: GenerationContext) -> list[geo.Path]:
    points = []
    for i in range(ctx.text_length):
        angle, radius = _walk_point(ctx.category, i, ctx.char_code(i), ctx.text_length)
        points.append((ctx.cx + math.cos(angle) * radius, ctx.cy + math.sin(angle) * radius))
    return [geo.polyline(points)] if len(points) > 1 else []


@pattern(
    id="tarot.initials_walk",
    style=Style.TAROT,
    order=20,
    min_complexity=Complexity.HIGH,
    description="Inner walk through the initials, rotated half a turn",
)
def initials_walk(ctx: GenerationContext) -> list[geo.Path]:
    if len(ctx.initials) < 2:
        return []
    codes = np.array([ord(c) for c in ctx.initials], dtype=np.float64)
    angles = (codes - 97) / 25 * 2 * np.pi + np.pi
    return [geo.ring(ctx.cx, ctx.cy, INITIALS_RADIUS, angles)]


@pattern(
    id="tarot.emblem",
    style=Style.TAROT,
    order=30,
    description="Category emblem at the card centre",
)
def emblem(ctx: GenerationContext) -> list[geo.Path]:
    return [category_emblem(ctx.category, ctx.cx, ctx.cy)]


# --- Category emblems -----------------------------------------------------------


def _heart(cx: float, cy: float) -> geo.Path:
    size = 0.08
    t = np.arange(0.0, 2 * np.pi + 1e-9, 0.1)
    return geo.heart_curve(cx, cy, size / 16, t)


def _spiral(cx: float, cy: float) -> geo.Path:
    return geo.fibonacci_spiral(cx, cy, 0.15, samples=50, angle_step=0.2)


def _circle(cx: float, cy: float) -> geo.Path:
    return geo.circle(cx, cy, 0.25, 24)


def _tree(cx: float, cy: float) -> geo.Path:
    size = 0.18
    points = [(cx, cy + size), (cx, cy - size)]
    for angle in (math.pi / 4, 3 * math.pi / 4, -math.pi / 4, -3 * math.pi / 4):
        points.append((cx, cy))
        points.append((cx + math.cos(angle) * size * 0.7, cy + math.sin(angle) * size * 0.7))
    return geo.polyline(points)


def _hexagon(cx: float, cy: float) -> geo.Path:
    return geo.regular_polygon(cx, cy, 0.1, 6)


CATEGORY_EMBLEMS: dict[Category, Callable[[float, float], geo.Path]] = {
    Category.LOVE: _heart,
    Category.PROSPERITY: _spiral,
    Category.PROTECTION: _circle,
    Category.WISDOM: _tree,
    Category.GENERAL: _hexagon,
}


def category_emblem(category: Category, cx: float = 0.5, cy: float = 0.5) -> geo.Path:
    return CATEGORY_EMBLEMS.get(category, _hexagon)(cx, cy)
