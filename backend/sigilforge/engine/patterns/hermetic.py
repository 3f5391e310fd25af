"""Hermetic tradition — planetary ring, elemental cardinals and a central hexagram."""

from __future__ import annotations

import math

from sigilforge.engine import glyphs
from sigilforge.engine import primitives as geo
from sigilforge.engine.context import GenerationContext
from sigilforge.engine.registry import Category, Complexity, pattern
from sigilforge.engine.tables import HERMETIC_ELEMENTS, PLANETS


@pattern(
    id="general.hermetic",
    category=Category.GENERAL,
    order=40,
    min_complexity=Complexity.HIGH,
    description="Hermetic circle with seven planets, four elements and a hexagram",
)
def hermetic_seal(ctx: GenerationContext) -> list[geo.Path]:
    radius = 0.25
    paths = [geo.circle(ctx.cx, ctx.cy, radius, 64)]

    for index in range(len(PLANETS)):
        angle = index / len(PLANETS) * 2 * math.pi
        x = ctx.cx + math.cos(angle) * radius * 1.3
        y = ctx.cy + math.sin(angle) * radius * 1.3
        paths.extend(glyphs.planetary_symbol(x, y, 0.03, index))

    paths.extend(glyphs.hexagram(ctx.cx, ctx.cy, 0.1))
    paths.append(geo.circle(ctx.cx, ctx.cy, 0.01, 8))

    for index, name in enumerate(HERMETIC_ELEMENTS):
        angle = math.radians(index * 90)
        x = ctx.cx + math.cos(angle) * radius * 0.7
        y = ctx.cy + math.sin(angle) * radius * 0.7
        paths.extend(glyphs.element(x, y, 0.025, name))
    return paths
