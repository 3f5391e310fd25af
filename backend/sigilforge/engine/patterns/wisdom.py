"""Wisdom — Tree of Life graph, a trunk curve, fractal branches and a knowledge spiral."""

from __future__ import annotations

import math

import numpy as np

from sigilforge.engine import primitives as geo
from sigilforge.engine.context import GenerationContext
from sigilforge.engine.registry import Category, Complexity, pattern
from sigilforge.engine.tables import TREE_OF_LIFE_POSITIONS, tree_of_life_edges

SEPHIRA_RADIUS = 0.03
FRACTAL_DEPTH = 3


@pattern(
    id="wisdom.trunk",
    category=Category.WISDOM,
    order=10,
    description="Gently swaying trunk rising through the tree",
)
def trunk(ctx: GenerationContext) -> list[geo.Path]:
    t = np.linspace(0.0, 1.0, 20)
    return [np.column_stack([
        ctx.cx + 0.02 * np.sin(t * 2 * np.pi) * t,
        ctx.cy + 0.4 - t * 0.6,
    ])]


@pattern(
    id="wisdom.tree_of_life",
    category=Category.WISDOM,
    order=20,
    description="Ten sephirot and their connecting paths",
)
def tree_of_life(ctx: GenerationContext) -> list[geo.Path]:
    nodes = [(ctx.cx + dx, ctx.cy + dy) for dx, dy in TREE_OF_LIFE_POSITIONS]
    paths = [geo.circle(x, y, SEPHIRA_RADIUS, 16) for x, y in nodes]
    for a, b in tree_of_life_edges():
        paths.append(geo.segment(*nodes[a], *nodes[b]))
    return paths


@pattern(
    id="wisdom.fractal",
    category=Category.WISDOM,
    order=30,
    min_complexity=Complexity.MEDIUM,
    description="Binary fractal branching above the crown",
)
def fractal_crown(ctx: GenerationContext) -> list[geo.Path]:
    cfg = ctx.config
    return geo.fractal_branches(
        ctx.cx,
        ctx.cy - 0.1,
        0.15,
        0.0,
        FRACTAL_DEPTH,
        shrink=cfg.fractal_shrink,
        deviation=math.radians(cfg.fractal_deviation_deg),
        min_length=cfg.fractal_min_length,
    )


@pattern(
    id="wisdom.knowledge_spiral",
    category=Category.WISDOM,
    order=40,
    min_complexity=Complexity.HIGH,
    description="Archimedean spiral sized by the text",
)
def knowledge_spiral(ctx: GenerationContext) -> list[geo.Path]:
    samples = ctx.text_length * 10
    i = np.arange(samples)
    radii = 0.05 + i / samples * 0.2
    spiral = geo.keep_inside(geo.ring(ctx.cx, ctx.cy, radii, i * 0.5), 0.1, 0.9)
    return [spiral] if len(spiral) > 1 else []
