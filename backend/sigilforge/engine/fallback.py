"""Static fallback shapes used when generation cannot produce a normal sigil."""

from __future__ import annotations

import math

from sigilforge.engine import primitives as geo
from sigilforge.engine.config import DEFAULT_CONFIG, EngineConfig
from sigilforge.engine.patterns.tarot_style import category_emblem
from sigilforge.engine.registry import Category

METHOD_SACRED_GEOMETRY = "sacred-geometry"
METHOD_TAROT = "tarot-sigil"
METHOD_DEGENERATE = "degenerate-seed"
METHOD_CATEGORY_FALLBACK = "category-fallback"
METHOD_INVALID_INPUT = "invalid-input-fallback"


def degenerate_pattern(seed_char: str, config: EngineConfig = DEFAULT_CONFIG) -> list[geo.Path]:
    """Single segment from the centre, its direction picked by the seed character."""
    code = ord(seed_char[0]) if seed_char else ord("a")
    angle = (code % 26) / 26 * 2 * math.pi
    length = config.degenerate_segment_length
    return [
        geo.segment(
            config.center_x,
            config.center_y,
            config.center_x + math.cos(angle) * length,
            config.center_y + math.sin(angle) * length,
        )
    ]


def category_fallback(category: Category, config: EngineConfig = DEFAULT_CONFIG) -> list[geo.Path]:
    """Fixed low-complexity shape for a category."""
    return [category_emblem(category, config.center_x, config.center_y)]
