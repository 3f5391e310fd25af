"""Goetic tradition — outer circle, binding triangle, divine names and letter seals."""

from __future__ import annotations

import math

from sigilforge.engine import glyphs
from sigilforge.engine import primitives as geo
from sigilforge.engine.context import GenerationContext
from sigilforge.engine.registry import Category, Complexity, pattern

CIRCLE_RADIUS = 0.3
DIVINE_NAMES = 4
MAX_SEALS = 12


@pattern(
    id="general.goetic",
    category=Category.GENERAL,
    order=30,
    min_complexity=Complexity.MEDIUM,
    description="Goetic circle with up to 12 seals keyed by character code",
)
def goetic_circle(ctx: GenerationContext) -> list[geo.Path]:
    r = CIRCLE_RADIUS
    paths = [
        geo.circle(ctx.cx, ctx.cy, r, 72),
        glyphs.triangle(ctx.cx, ctx.cy, r * 0.5, pointing_up=True),
    ]

    for i in range(DIVINE_NAMES):
        angle = i / DIVINE_NAMES * 2 * math.pi
        x = ctx.cx + math.cos(angle) * r * 1.2
        y = ctx.cy + math.sin(angle) * r * 1.2
        paths.extend(glyphs.divine_name(x, y, 0.03))

    for i in range(min(ctx.text_length, MAX_SEALS)):
        angle = i / MAX_SEALS * 2 * math.pi
        x = ctx.cx + math.cos(angle) * r * 0.8
        y = ctx.cy + math.sin(angle) * r * 0.8
        paths.extend(glyphs.goetic_seal(x, y, 0.02, ctx.char_code(i)))
    return paths
