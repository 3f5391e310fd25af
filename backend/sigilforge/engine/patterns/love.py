"""Love — layered hearts with an infinity loop, and a golden-ratio spiral.

Heart radius breathes with the character codes; points leaving the [0.05, 0.95] window are
dropped rather than clamped so the hearts keep their outline.
"""

from __future__ import annotations

import numpy as np

from sigilforge.engine import primitives as geo
from sigilforge.engine.context import GenerationContext
from sigilforge.engine.registry import Category, Complexity, pattern

HEART_LAYERS = 3
# The infinity loop is drawn straight after this heart layer
INFINITY_AFTER_LAYER = 1


@pattern(
    id="love.hearts",
    category=Category.LOVE,
    order=10,
    description="Three nested heart curves modulated by character codes, joined by an infinity loop",
)
def layered_hearts(ctx: GenerationContext) -> list[geo.Path]:
    samples = ctx.text_length * 3
    t = np.arange(samples) / samples * 2 * np.pi
    codes = np.array([ctx.char_code(i) for i in range(samples)], dtype=np.float64)

    paths = []
    for layer in range(HEART_LAYERS):
        scale = 0.15 + layer * 0.08
        offset = layer * 0.02
        radii = scale * (1 + 0.3 * np.sin(codes * 0.1))
        heart = geo.heart_curve(ctx.cx + offset, ctx.cy - offset, radii * 0.15, t)
        heart = geo.keep_inside(heart, 0.05, 0.95)
        if len(heart) > 1:
            paths.append(heart)
        if layer == INFINITY_AFTER_LAYER and ctx.complexity >= Complexity.MEDIUM:
            paths.append(geo.infinity_loop(ctx.cx, ctx.cy, 0.2, 0.15, samples=50))
    return paths


@pattern(
    id="love.golden_spiral",
    category=Category.LOVE,
    order=30,
    min_complexity=Complexity.HIGH,
    description="Golden-ratio spiral connector",
)
def golden_connector(ctx: GenerationContext) -> list[geo.Path]:
    spiral = geo.golden_spiral(ctx.cx, ctx.cy, ctx.text_length * 5)
    spiral = geo.keep_inside(spiral, 0.1, 0.9)
    return [spiral] if len(spiral) > 1 else []
