"""Protection — nested harmonic polygons, star overlays, a rune ring and elemental crosses."""

from __future__ import annotations

import math

import numpy as np

from sigilforge.engine import glyphs
from sigilforge.engine import primitives as geo
from sigilforge.engine.context import GenerationContext
from sigilforge.engine.registry import Category, Complexity, pattern
from sigilforge.engine.tables import ELEMENTAL_DIRECTIONS

MANDALA_RADII = (0.35, 0.25, 0.15, 0.08)
STAR_LAYERS = 2
RUNE_DISTANCE = 0.28
RUNE_SIZE = 0.04
MAX_RUNES = 8


@pattern(
    id="protection.mandala",
    category=Category.PROTECTION,
    order=10,
    description="Four nested polygons with harmonic radius perturbation and stars",
)
def protection_mandala(ctx: GenerationContext) -> list[geo.Path]:
    base_sides = max(6, ctx.text_length)
    paths = []
    for layer, radius in enumerate(MANDALA_RADII):
        sides = base_sides + layer * 2
        i = np.arange(sides + 1)
        codes = np.array([ctx.char_code(k) for k in i], dtype=np.float64)
        harmonic = 1 + 0.1 * np.sin(i * codes * 0.1)
        angles = i / sides * 2 * np.pi - np.pi / 2
        paths.append(geo.ring(ctx.cx, ctx.cy, radius * harmonic, angles))

        if layer < STAR_LAYERS:
            star_angles = np.arange(0, sides, 2) / sides * 2 * np.pi - np.pi / 2
            star = geo.ring(ctx.cx, ctx.cy, radius * 0.7, star_angles)
            paths.append(np.vstack([star, star[:1]]))
    return paths


@pattern(
    id="protection.runes",
    category=Category.PROTECTION,
    order=20,
    min_complexity=Complexity.MEDIUM,
    description="Ring of rune motifs chosen by character code",
)
def rune_ring(ctx: GenerationContext) -> list[geo.Path]:
    count = min(ctx.text_length, MAX_RUNES)
    paths = []
    for i in range(count):
        angle = i / count * 2 * math.pi
        x = ctx.cx + math.cos(angle) * RUNE_DISTANCE
        y = ctx.cy + math.sin(angle) * RUNE_DISTANCE
        paths.extend(glyphs.rune(x, y, RUNE_SIZE, ctx.char_code(i)))
    return paths


@pattern(
    id="protection.elemental_crosses",
    category=Category.PROTECTION,
    order=30,
    min_complexity=Complexity.HIGH,
    description="Elemental glyphs at the four cardinal angles",
)
def elemental_crosses(ctx: GenerationContext) -> list[geo.Path]:
    paths = []
    for name, angle in ELEMENTAL_DIRECTIONS:
        x = ctx.cx + math.cos(angle) * 0.4
        y = ctx.cy + math.sin(angle) * 0.4
        paths.extend(glyphs.element(x, y, 0.03, name))
    return paths
