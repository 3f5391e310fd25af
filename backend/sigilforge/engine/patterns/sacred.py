"""Sacred geometry — icosahedron projection, Flower of Life, Metatron's Cube and a vortex.

Only the vortex depends on the text; the other three are fixed constructions scaled from
the canvas centre.
"""

from __future__ import annotations

import math

import numpy as np

from sigilforge.engine import primitives as geo
from sigilforge.engine.context import GenerationContext
from sigilforge.engine.registry import Category, Complexity, pattern
from sigilforge.engine.tables import METATRON_EDGES, METATRON_POSITIONS


@pattern(
    id="general.sacred.icosahedron",
    category=Category.GENERAL,
    order=50,
    min_complexity=Complexity.HIGH,
    description="Orthographic icosahedron projection",
)
def icosahedron(ctx: GenerationContext) -> list[geo.Path]:
    return geo.icosahedron_projection(ctx.cx, ctx.cy, ctx.config.icosahedron_scale)


@pattern(
    id="general.sacred.flower_of_life",
    category=Category.GENERAL,
    order=60,
    min_complexity=Complexity.HIGH,
    description="Layered Flower of Life circles",
)
def flower_of_life(ctx: GenerationContext) -> list[geo.Path]:
    radius = 0.25
    layers = min(max(ctx.text_length, 4), ctx.config.flower_of_life_max_layers)
    paths = []
    for layer in range(layers):
        circle_radius = radius * (0.5 + layer * 0.25)
        count = 1 if layer == 0 else 6 * layer
        distance = layer * circle_radius * 0.8
        for i in range(count):
            angle = i / count * 2 * math.pi
            x = ctx.cx + math.cos(angle) * distance
            y = ctx.cy + math.sin(angle) * distance
            paths.append(geo.circle(x, y, circle_radius, 24))
    return paths


@pattern(
    id="general.sacred.metatron",
    category=Category.GENERAL,
    order=70,
    min_complexity=Complexity.MEDIUM,
    description="Metatron's Cube: 13 circles and 24 fixed connections",
)
def metatrons_cube(ctx: GenerationContext) -> list[geo.Path]:
    scale = 0.3 * 0.15
    centres = [(ctx.cx + x * scale, ctx.cy + y * scale) for x, y in METATRON_POSITIONS]
    paths = [geo.circle(x, y, scale * 0.3, 16) for x, y in centres]
    for a, b in METATRON_EDGES:
        paths.append(geo.segment(*centres[a], *centres[b]))
    return paths


@pattern(
    id="general.sacred.vortex",
    category=Category.GENERAL,
    order=80,
    description="Vortex-mathematics spiral stepping through digit sums 1..9",
)
def vortex(ctx: GenerationContext) -> list[geo.Path]:
    i = np.arange(ctx.text_length * 9)
    digit_sum = (i % 9) + 1
    angles = digit_sum / 9 * 2 * np.pi + i * 0.1
    radii = 0.1 + digit_sum / 9 * 0.2
    return [geo.ring(ctx.cx, ctx.cy, radii, angles)]
