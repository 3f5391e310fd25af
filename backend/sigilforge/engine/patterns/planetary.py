"""Planetary seals — a planetary square chosen by text length and a grid-walk sigil on it."""

from __future__ import annotations

from sigilforge.engine import glyphs
from sigilforge.engine import primitives as geo
from sigilforge.engine.context import GenerationContext
from sigilforge.engine.registry import Category, pattern
from sigilforge.engine.tables import PLANETS

SQUARE_HALF_SIZE = 0.2


@pattern(
    id="general.planetary",
    category=Category.GENERAL,
    order=90,
    description="Planetary square with its glyph and a walk through the cells",
)
def planetary_seal(ctx: GenerationContext) -> list[geo.Path]:
    index = ctx.text_length % len(PLANETS)
    planet = PLANETS[index]
    n = planet.square_order

    paths = geo.grid_lines(ctx.cx, ctx.cy, SQUARE_HALF_SIZE, n)
    paths.extend(glyphs.planetary_symbol(ctx.cx, ctx.cy, SQUARE_HALF_SIZE * 0.3, index))

    # Walk through a slightly smaller square, starting in its first cell
    walk_half = SQUARE_HALF_SIZE * 0.8
    points = [geo.cell_center(ctx.cx, ctx.cy, walk_half, n, 0, 0)]
    for i in range(ctx.text_length):
        row, col = divmod(ctx.char_code(i) % (n * n), n)
        points.append(geo.cell_center(ctx.cx, ctx.cy, walk_half, n, row, col))
    paths.append(geo.polyline(points))
    return paths
