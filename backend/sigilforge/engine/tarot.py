"""Tarot card design — compose a centre glyph with corners, border, symbols and backgrounds.

Every design is recomputed from scratch per call. The centre glyph reuses the sigil
pipeline with the tarot style profile, so it shares optimization and validation with sigils.
"""

from __future__ import annotations

import logging
import math
from typing import Any

import numpy as np

from sigilforge.engine import glyphs
from sigilforge.engine import primitives as geo
from sigilforge.engine.config import DEFAULT_CONFIG, EngineConfig
from sigilforge.engine.generator import generate_sigil
from sigilforge.engine.optimizer import optimize_paths
from sigilforge.engine.primitives import Path
from sigilforge.engine.registry import Category, Complexity, Style
from sigilforge.engine.tarot_data import (
    DEFAULT_MAJOR_COLORS,
    DEFAULT_MINOR_COLORS,
    DEFAULT_SPREAD,
    DEFAULT_VARIANT,
    INVALID_CARD_COLORS,
    MAJOR_ARCANA,
    MINOR_SUITS,
    SPREADS,
    TAROT_VARIANTS,
)
from sigilforge.models.sigil import Point, paths_to_points
from sigilforge.models.tarot import (
    ArcanaInfo,
    CardColors,
    CardElement,
    SuitInfo,
    TarotCard,
    TarotCardDesign,
    TarotSpread,
    TarotVariant,
)

logger = logging.getLogger(__name__)

CORNER_POSITIONS = ((0.08, 0.08), (0.92, 0.08), (0.92, 0.92), (0.08, 0.92))
CORNER_SIZE = 0.04
BORDER_OUTER = 0.47
BORDER_INNER = 0.43
SYMBOL_ORBIT = 0.32
SYMBOL_SIZE = 0.03
DEFAULT_SYMBOL_RADIUS = 0.2
PIP_RADIUS = 0.25 * 0.4
PIP_SPACING = 0.08


# --- Reference lookups ----------------------------------------------------------


def get_complete_card_info(card_type: str, number: Any = None, suit: str | None = None) -> ArcanaInfo | SuitInfo | None:
    """Reference entry for a Major Arcana number or a Minor suit; None when unknown."""
    if card_type == "major":
        try:
            index = int(number)
        except (TypeError, ValueError):
            return None
        return MAJOR_ARCANA[index] if 0 <= index < len(MAJOR_ARCANA) else None
    if card_type == "minor" and suit:
        return MINOR_SUITS.get(suit)
    return None


def _card_info(card: TarotCard) -> ArcanaInfo | SuitInfo | None:
    return get_complete_card_info(card.type, card.number, card.suit)


def get_variant(variant: str | None) -> TarotVariant:
    found = TAROT_VARIANTS.get(variant or DEFAULT_VARIANT)
    if found is None:
        logger.warning("Unknown tarot variant %r, using %s", variant, DEFAULT_VARIANT)
        return TAROT_VARIANTS[DEFAULT_VARIANT]
    return found


def get_card_colors(card: TarotCard | None, variant: TarotVariant | None = None) -> CardColors:
    """Card palette; a variant's palette overrides it colour by colour."""
    if card is None:
        logger.warning("Invalid card passed to get_card_colors")
        return INVALID_CARD_COLORS

    info = _card_info(card)
    if info is not None:
        base = info.colors
    else:
        base = DEFAULT_MAJOR_COLORS if card.type == "major" else DEFAULT_MINOR_COLORS

    if variant is None or not variant.color_palette:
        return base
    palette = list(variant.color_palette) + [None, None, None]
    return CardColors(
        primary=palette[0] or base.primary,
        secondary=palette[1] or base.secondary,
        accent=palette[2] or base.accent,
    )


def get_card_imagery(card: TarotCard | None) -> str:
    if card is None:
        logger.warning("Invalid card passed to get_card_imagery")
        return "A mystical scene with abstract symbols."
    info = _card_info(card)
    if info is not None:
        return info.imagery
    return "Mystical major arcana imagery" if card.type == "major" else "Mystical minor arcana imagery"


def get_tarot_spread(spread_type: str = DEFAULT_SPREAD) -> TarotSpread:
    """Spread layout by id; unknown ids get the three-card spread."""
    return SPREADS.get(spread_type) or SPREADS[DEFAULT_SPREAD]


def _card_symbols(card: TarotCard) -> tuple[str, ...]:
    info = _card_info(card)
    if info is not None and info.symbols:
        return info.symbols
    return ("star",) if card.type == "major" else ("pentacle",)


def card_category(card: TarotCard) -> Category:
    info = _card_info(card)
    return Category.parse(info.sigil_category) if info is not None else Category.GENERAL


# --- Card parts -----------------------------------------------------------------


def pip_count(rank: Any) -> int:
    """Symbols on a minor card: 1 for an Ace, 2 for court cards, else the rank (max 10)."""
    if str(rank) == "Ace":
        return 1
    try:
        return max(1, min(int(rank), 10))
    except (TypeError, ValueError):
        return 2


def default_center(card: TarotCard, cx: float = 0.5, cy: float = 0.5) -> list[Path]:
    """Centre glyph without an intention: a star for major cards, suit pips for minor cards."""
    if card.type == "major":
        return glyphs.tarot_symbol("star", cx, cy, DEFAULT_SYMBOL_RADIUS)

    symbol = _card_symbols(card)[0]
    count = pip_count(card.number)
    paths: list[Path] = []
    for i in range(count):
        offset_y = cy + (i - (count - 1) / 2) * PIP_SPACING
        paths.extend(glyphs.tarot_symbol(symbol, cx, offset_y, PIP_RADIUS))
    return paths


def corner_elements(card: TarotCard) -> list[tuple[str, tuple[float, float], list[Path]]]:
    symbols = _card_symbols(card)
    corners = []
    for index, (x, y) in enumerate(CORNER_POSITIONS):
        symbol = symbols[index % len(symbols)]
        corners.append((symbol, (x, y), glyphs.tarot_symbol(symbol, x, y, CORNER_SIZE)))
    return corners


def border_pattern(card: TarotCard, cx: float = 0.5, cy: float = 0.5) -> list[Path]:
    """Segmented outer ring with a radial tick in the middle of each segment."""
    segments = 16 if card.type == "major" else 12
    paths: list[Path] = []
    for i in range(segments):
        a1 = i * 2 * math.pi / segments
        a2 = (i + 1) * 2 * math.pi / segments
        mid = (a1 + a2) / 2
        paths.append(geo.ring(cx, cy, BORDER_OUTER, np.array([a1, a2])))
        paths.append(geo.polyline([
            (cx + math.cos(mid) * BORDER_INNER, cy + math.sin(mid) * BORDER_INNER),
            (cx + math.cos(mid) * BORDER_OUTER, cy + math.sin(mid) * BORDER_OUTER),
        ]))
    return paths


def symbolic_elements(card: TarotCard, cx: float = 0.5, cy: float = 0.5) -> list[tuple[str, tuple[float, float], list[Path]]]:
    symbols = _card_symbols(card)
    count = 4 if card.type == "major" else 2
    elements = []
    for i in range(count):
        angle = i * 2 * math.pi / count
        x = cx + math.cos(angle) * SYMBOL_ORBIT
        y = cy + math.sin(angle) * SYMBOL_ORBIT
        symbol = symbols[i % len(symbols)]
        elements.append((symbol, (x, y), glyphs.tarot_symbol(symbol, x, y, SYMBOL_SIZE)))
    return elements


def _waves(count: int, base_y: float, spacing: float, samples: int, frequency: float, phase_step: float) -> list[Path]:
    x = np.linspace(0.0, 1.0, samples)
    return [
        np.column_stack([x, base_y + i * spacing + np.sin(x * np.pi * frequency + i * phase_step) * 0.02])
        for i in range(count)
    ]


def _celestial_stars() -> list[Path]:
    paths = []
    for i in range(5):
        x = 0.1 + i * 0.2
        y = 0.1 + math.sin(i) * 0.1
        paths.append(geo.alternating_star(x, y, 0.02, 0.01, 8, closed=False))
    return paths


def _flames() -> list[Path]:
    x = np.linspace(0.2, 0.8, 13)
    t = (x - 0.2) / 0.6
    return [np.column_stack([x, 0.7 + i * 0.1 + np.sin(t * np.pi * 6) * 0.03 * (1 - t)]) for i in range(2)]


def _clouds() -> list[Path]:
    t = np.arange(0.0, np.pi, 0.1)
    return [
        np.column_stack([0.1 + i * 0.3 + np.cos(t) * 0.08, 0.15 + i * 0.1 + np.sin(t) * 0.04])
        for i in range(3)
    ]


def _mountain() -> list[Path]:
    x = np.linspace(0.0, 1.0, 21)
    return [np.column_stack([x, 0.8 + np.sin(x * np.pi * 2) * 0.1 + np.cos(x * np.pi * 4) * 0.05])]


ELEMENT_BACKGROUNDS = {
    "fire": _flames,
    "water": lambda: _waves(4, 0.6, 0.08, 34, 3, 0.5),
    "air": _clouds,
    "earth": _mountain,
}


def background(card: TarotCard) -> list[Path]:
    """Imagery-driven strokes for major cards, element-driven strokes for minor suits."""
    info = _card_info(card)
    if info is None:
        return []

    if isinstance(info, ArcanaInfo):
        imagery = info.imagery.lower()
        paths: list[Path] = []
        if "sun" in imagery or "stars" in imagery:
            paths.extend(_celestial_stars())
        if "water" in imagery or "moon" in imagery:
            paths.extend(_waves(3, 0.8, 0.05, 21, 4, 1.0))
        return paths

    builder = ELEMENT_BACKGROUNDS.get(info.element)
    return builder() if builder else []


def back_pattern(variant: TarotVariant, cx: float = 0.5, cy: float = 0.5) -> list[Path]:
    """Characteristic card-back pattern of a historical variant."""
    if variant.back_pattern == "lattice":
        return geo.grid_lines(cx, cy, 0.4, 8)
    if variant.back_pattern == "hexagram":
        return [*glyphs.hexagram(cx, cy, 0.35), geo.circle(cx, cy, 0.4, 48)]
    if variant.back_pattern == "diamond-lattice":
        return [glyphs.diamond(0.1 + i * 0.2, 0.1 + j * 0.2, 0.08) for i in range(5) for j in range(5)]

    # Seed of life: one circle and six around it
    paths = [geo.circle(cx, cy, 0.1, 24)]
    for i in range(6):
        angle = i * math.pi / 3
        paths.append(geo.circle(cx + math.cos(angle) * 0.1, cy + math.sin(angle) * 0.1, 0.1, 24))
    return paths


def _element(symbol: str, position: tuple[float, float], paths: list[Path], config: EngineConfig) -> CardElement:
    return CardElement(
        paths=paths_to_points(optimize_paths(paths, config)),
        position=Point(x=position[0], y=position[1]),
        symbol=symbol,
    )


def generate_card_design(
    card: TarotCard,
    intention: str | None = None,
    variant: str | None = DEFAULT_VARIANT,
    category: Any = None,
    complexity: Any = Complexity.HIGH,
    config: EngineConfig | None = None,
) -> TarotCardDesign:
    """Compose a full card. Without an intention the centre is the card's default symbol."""
    cfg = config or DEFAULT_CONFIG
    variant_style = get_variant(variant)
    cx, cy = cfg.center_x, cfg.center_y

    center_sigil = None
    if intention:
        sigil_category = Category.parse(category) if category is not None else card_category(card)
        center_sigil = generate_sigil(intention, sigil_category, complexity, Style.TAROT, cfg)
        center_paths = center_sigil.paths
    else:
        center_paths = paths_to_points(optimize_paths(default_center(card, cx, cy), cfg))

    return TarotCardDesign(
        card=card,
        variant=variant_style.id,
        style=variant_style.style,
        center_sigil=center_sigil,
        center_paths=center_paths,
        corners=[_element(s, pos, p, cfg) for s, pos, p in corner_elements(card)],
        border=paths_to_points(optimize_paths(border_pattern(card, cx, cy), cfg)),
        symbols=[_element(s, pos, p, cfg) for s, pos, p in symbolic_elements(card, cx, cy)],
        background=paths_to_points(optimize_paths(background(card), cfg)),
        back_pattern=paths_to_points(optimize_paths(back_pattern(variant_style, cx, cy), cfg)),
        colors=get_card_colors(card, variant_style),
        imagery=get_card_imagery(card),
    )
