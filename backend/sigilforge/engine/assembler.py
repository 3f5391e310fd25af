"""Path assembler — run the registered generators for a context and add the initials overlay.

Initials are placed on a ring around the main pattern. Depending on their position some
are swapped for a digit or an upside-down letter before their glyph is drawn, the old
sigil practice of concealing the source letters.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field

from sigilforge.engine import glyphs
from sigilforge.engine.config import DEFAULT_CONFIG, EngineConfig
from sigilforge.engine.context import GenerationContext
from sigilforge.engine.fallback import METHOD_DEGENERATE, METHOD_SACRED_GEOMETRY, METHOD_TAROT, degenerate_pattern
from sigilforge.engine.primitives import Path
from sigilforge.engine.registry import Style, register_builtin_patterns
from sigilforge.engine.tables import REVERSED_LETTERS

logger = logging.getLogger(__name__)


@dataclass
class AssembledPaths:
    """Raw (unoptimized) output of one assembly."""

    main: list[Path] = field(default_factory=list)
    initials: list[Path] = field(default_factory=list)
    method: str = METHOD_SACRED_GEOMETRY
    generators_run: list[str] = field(default_factory=list)

    @property
    def all_paths(self) -> list[Path]:
        return [*self.main, *self.initials]


def overlay_character(letter: str, position: int) -> str:
    """Character actually drawn for an initial at ``position`` (text length + index)."""
    if position % 4 == 0:
        return str((ord(letter) - 96) % 10)
    if position % 3 == 0:
        return REVERSED_LETTERS.get(letter, letter)
    return letter


def initials_overlay(initials: str, text_length: int, config: EngineConfig = DEFAULT_CONFIG) -> list[Path]:
    count = len(initials)
    paths: list[Path] = []
    for index, letter in enumerate(initials):
        angle = index / count * 2 * math.pi - math.pi / 2
        x = config.center_x + math.cos(angle) * config.initials_ring_radius
        y = config.center_y + math.sin(angle) * config.initials_ring_radius
        char = overlay_character(letter, text_length + index)
        paths.extend(glyphs.initial_glyph(x, y, config.initials_glyph_size, ord(char)))
    return paths


def assemble_paths(ctx: GenerationContext) -> AssembledPaths:
    """Concatenate generator output in registry order, then the initials overlay.

    Exceptions from generators propagate; the caller owns the fallback.
    """
    registry = register_builtin_patterns()
    result = AssembledPaths(method=METHOD_TAROT if ctx.style is Style.TAROT else METHOD_SACRED_GEOMETRY)

    if ctx.intention.is_degenerate:
        logger.debug("No letters left after reduction of %r, using degenerate seed", ctx.intention.original)
        result.main = degenerate_pattern(ctx.intention.seed_char, ctx.config)
        result.method = METHOD_DEGENERATE
    else:
        for spec in registry.select(ctx.category, ctx.style, ctx.complexity):
            produced = spec.fn(ctx)
            result.main.extend(produced)
            result.generators_run.append(spec.id)
            logger.debug("%s produced %d paths", spec.id, len(produced))

    if ctx.style is Style.SIGIL and ctx.initials:
        result.initials = initials_overlay(ctx.initials, ctx.text_length, ctx.config)

    return result
