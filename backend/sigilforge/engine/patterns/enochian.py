"""Enochian tradition — the 12x13 tablet, an angelic walk and the four watchtowers."""

from __future__ import annotations

import math

from sigilforge.engine import glyphs
from sigilforge.engine import primitives as geo
from sigilforge.engine.context import GenerationContext
from sigilforge.engine.registry import Category, Complexity, pattern
from sigilforge.engine.tables import WATCHTOWERS

TABLET_ROWS = 12
TABLET_COLS = 13


@pattern(
    id="general.enochian.tablet",
    category=Category.GENERAL,
    order=20,
    min_complexity=Complexity.MEDIUM,
    description="12x13 tablet with a heptagram on every third diagonal",
)
def enochian_tablet(ctx: GenerationContext) -> list[geo.Path]:
    half = 0.2
    cell_w = (half * 2) / TABLET_COLS
    cell_h = (half * 2) / TABLET_ROWS
    glyph_size = min(cell_w, cell_h) * 0.3

    paths = []
    for row in range(TABLET_ROWS):
        for col in range(TABLET_COLS):
            x = ctx.cx - half + col * cell_w
            y = ctx.cy - half + row * cell_h
            paths.append(geo.rectangle(x, y, x + cell_w, y + cell_h))
            if (row + col) % 3 == 0:
                paths.extend(glyphs.heptagram(x + cell_w / 2, y + cell_h / 2, glyph_size))
    return paths


@pattern(
    id="general.enochian.angelic",
    category=Category.GENERAL,
    order=21,
    description="Angelic sigil: walk an angle step per letter with code-based jitter",
)
def angelic_sigil(ctx: GenerationContext) -> list[geo.Path]:
    base_radius = 0.15
    step = 2 * math.pi / ctx.text_length
    angle = 0.0
    points = []
    for i in range(ctx.text_length):
        code = ctx.char_code(i)
        radius = base_radius * (1 + (code % 50) / 100)
        points.append((ctx.cx + math.cos(angle) * radius, ctx.cy + math.sin(angle) * radius))
        angle += step + (code % 30) / 100
    return [geo.polyline(points)] if len(points) > 1 else []


@pattern(
    id="general.enochian.watchtowers",
    category=Category.GENERAL,
    order=22,
    min_complexity=Complexity.MEDIUM,
    description="Square-and-cross glyphs at the four watchtowers",
)
def watchtowers(ctx: GenerationContext) -> list[geo.Path]:
    paths = []
    for _name, angle in WATCHTOWERS:
        x = ctx.cx + math.cos(angle) * 0.35
        y = ctx.cy + math.sin(angle) * 0.35
        paths.extend(glyphs.watchtower(x, y, 0.04))
    return paths
