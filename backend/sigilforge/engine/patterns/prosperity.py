"""Prosperity — Fibonacci-scaled spirals, expanding polygons and a Vesica Piscis."""

from __future__ import annotations

import numpy as np

from sigilforge.engine import glyphs
from sigilforge.engine import primitives as geo
from sigilforge.engine.context import GenerationContext
from sigilforge.engine.registry import Category, Complexity, pattern
from sigilforge.engine.tables import FIBONACCI

MAX_LAYERS = 5


@pattern(
    id="prosperity.spirals",
    category=Category.PROSPERITY,
    order=10,
    description="One Fibonacci spiral and one expanding polygon per word (max 5)",
)
def fibonacci_spirals(ctx: GenerationContext) -> list[geo.Path]:
    paths = []
    for layer in range(min(ctx.word_count, MAX_LAYERS)):
        fib = FIBONACCI[layer]
        base_radius = fib * 0.008
        turns = 2 + layer * 0.5
        samples = ctx.text_length * fib

        i = np.arange(samples)
        angles = i / samples * 2 * np.pi * turns
        radii = base_radius * (1 + i / samples * fib)
        spiral = geo.keep_inside(geo.ring(ctx.cx, ctx.cy, radii, angles), 0.05, 0.95)
        if len(spiral) > 1:
            paths.append(spiral)

        paths.append(geo.regular_polygon(ctx.cx, ctx.cy, 0.1 + layer * 0.05, 6 + layer))
    return paths


@pattern(
    id="prosperity.vesica",
    category=Category.PROSPERITY,
    order=20,
    min_complexity=Complexity.MEDIUM,
    description="Vesica Piscis overlay",
)
def vesica_overlay(ctx: GenerationContext) -> list[geo.Path]:
    return glyphs.vesica_piscis(ctx.cx, ctx.cy, 0.2)
