"""Solomonic tradition — pentagram, triangle of art, magic square and the Seal of Solomon.

All four pieces are drawn for the general category. The magic square and the seal read
the processed text; the pentagram and triangle are fixed figures.
"""

from __future__ import annotations

import math

from sigilforge.engine import glyphs
from sigilforge.engine import primitives as geo
from sigilforge.engine.context import GenerationContext
from sigilforge.engine.registry import Category, Complexity, pattern

_UP = -math.pi / 2
INNER_PENTAGON_RATIO = 0.618
MAX_SEAL_MARKERS = 72


@pattern(
    id="general.solomonic.pentagram",
    category=Category.GENERAL,
    order=10,
    description="Pentagram, inner golden pentagon and five divine-name stars",
)
def solomonic_pentagram(ctx: GenerationContext) -> list[geo.Path]:
    radius = 0.25
    paths = [
        glyphs.pentagram(ctx.cx, ctx.cy, radius),
        geo.regular_polygon(ctx.cx, ctx.cy, radius * INNER_PENTAGON_RATIO, 5, phase=_UP),
    ]
    for i in range(5):
        angle = math.radians(i * 72 - 90)
        x = ctx.cx + math.cos(angle) * radius * 1.2
        y = ctx.cy + math.sin(angle) * radius * 1.2
        paths.extend(glyphs.divine_name(x, y, 0.02))
    return paths


@pattern(
    id="general.solomonic.triangle",
    category=Category.GENERAL,
    order=11,
    description="Triangle of art with inverted inner triangle and Hebrew corner glyphs",
)
def solomonic_triangle(ctx: GenerationContext) -> list[geo.Path]:
    size = 0.2
    outer = glyphs.triangle(ctx.cx, ctx.cy, size, pointing_up=True)
    paths = [outer, glyphs.triangle(ctx.cx, ctx.cy, size * 0.5, pointing_up=False)]
    for index, (x, y) in enumerate(outer[:3]):
        paths.extend(glyphs.hebrew_letter(float(x), float(y), 0.03, index))
    return paths


@pattern(
    id="general.solomonic.magic_square",
    category=Category.GENERAL,
    order=12,
    description="Magic-square grid sized by the text with a symbol per letter",
)
def magic_square(ctx: GenerationContext) -> list[geo.Path]:
    half = 0.15
    grid = min(ctx.text_length, ctx.config.magic_square_max_grid)
    cell = (half * 2) / grid

    paths = geo.grid_lines(ctx.cx, ctx.cy, half, grid)
    for i in range(min(ctx.text_length, grid * grid)):
        row, col = divmod(i, grid)
        x, y = geo.cell_center(ctx.cx, ctx.cy, half, grid, row, col)
        paths.extend(glyphs.magic_square_symbol(x, y, cell * 0.3, ctx.char_code(i)))
    return paths


@pattern(
    id="general.solomonic.seal",
    category=Category.GENERAL,
    order=13,
    min_complexity=Complexity.MEDIUM,
    description="Double hexagram, guard circles and up to 72 name markers",
)
def seal_of_solomon(ctx: GenerationContext) -> list[geo.Path]:
    radius = 0.3
    complexity = max(ctx.text_length, 4)
    paths = [
        *glyphs.hexagram(ctx.cx, ctx.cy, radius),
        geo.circle(ctx.cx, ctx.cy, radius * 1.3, 72),
        geo.circle(ctx.cx, ctx.cy, radius * 0.4, 36),
    ]
    for i in range(min(complexity * 6, MAX_SEAL_MARKERS)):
        angle = i / MAX_SEAL_MARKERS * 2 * math.pi
        x = ctx.cx + math.cos(angle) * radius * 1.15
        y = ctx.cy + math.sin(angle) * radius * 1.15
        paths.extend(glyphs.sacred_name_marker(x, y, 0.01))
    return paths
