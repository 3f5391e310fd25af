"""Small reusable glyphs shared by several pattern modules.

Each function takes a centre and a size and returns a list of paths. Selection by character
code happens here so the pattern modules stay declarative.
"""

from __future__ import annotations

import math
from typing import Callable

import numpy as np

from sigilforge.engine import primitives as geo
from sigilforge.engine.primitives import Path
from sigilforge.engine.tables import (
    ELEMENT_MOTIFS,
    HEBREW_LETTER_MOTIFS,
    MAGIC_SQUARE_SYMBOLS,
    RUNE_MOTIFS,
)

_UP = -math.pi / 2
_DOWN = math.pi / 2


def initial_glyph(cx: float, cy: float, size: float, code: int) -> list[Path]:
    """Nested polygon pair with spokes; side count 3..8 from the character code."""
    sides = 3 + code % 6
    outer = geo.regular_polygon(cx, cy, size, sides)
    inner = geo.regular_polygon(cx, cy, size * 0.5, sides, phase=math.pi / sides)
    spokes = [np.vstack([outer[i], inner[i]]) for i in range(sides)]
    return [outer, inner, *spokes]


def rune(cx: float, cy: float, size: float, code: int) -> list[Path]:
    return geo.motif(cx, cy, size, RUNE_MOTIFS[code % len(RUNE_MOTIFS)])


def element(cx: float, cy: float, size: float, name: str) -> list[Path]:
    return geo.motif(cx, cy, size, ELEMENT_MOTIFS[name])


def hebrew_letter(cx: float, cy: float, size: float, index: int) -> list[Path]:
    return geo.motif(cx, cy, size, HEBREW_LETTER_MOTIFS[index % len(HEBREW_LETTER_MOTIFS)])


def divine_name(cx: float, cy: float, size: float) -> list[Path]:
    """Twelve-pointed star alternating full and half radius."""
    return [geo.alternating_star(cx, cy, size, size * 0.5, 12)]


def sacred_name_marker(cx: float, cy: float, size: float) -> list[Path]:
    return [geo.circle(cx, cy, size, 8), geo.circle(cx, cy, size * 0.5, 8)]


def triangle(cx: float, cy: float, radius: float, pointing_up: bool = True) -> Path:
    return geo.regular_polygon(cx, cy, radius, 3, phase=_UP if pointing_up else _DOWN)


def hexagram(cx: float, cy: float, radius: float) -> list[Path]:
    return [triangle(cx, cy, radius, True), triangle(cx, cy, radius, False)]


def heptagram(cx: float, cy: float, size: float) -> list[Path]:
    return [geo.star_polygon(cx, cy, size, 7, 2)]


def pentagram(cx: float, cy: float, radius: float) -> Path:
    return geo.star_polygon(cx, cy, radius, 5, 2, phase=_UP)


def diamond(cx: float, cy: float, size: float) -> Path:
    return geo.polyline([(cx, cy - size), (cx + size, cy), (cx, cy + size), (cx - size, cy), (cx, cy - size)])


def watchtower(cx: float, cy: float, size: float) -> list[Path]:
    return [geo.rectangle(cx - size, cy - size, cx + size, cy + size), *geo.cross(cx, cy, size)]


def vesica_piscis(cx: float, cy: float, radius: float) -> list[Path]:
    offset = radius * 0.5
    return [geo.circle(cx - offset, cy, radius), geo.circle(cx + offset, cy, radius)]


# --- Magic square cell symbols -----------------------------------------------

_MAGIC_SQUARE_BUILDERS: dict[str, Callable[[float, float, float], list[Path]]] = {
    "cross": lambda x, y, s: geo.cross(x, y, s),
    "circle": lambda x, y, s: [geo.circle(x, y, s, 12)],
    "triangle": lambda x, y, s: geo.motif(x, y, s, ELEMENT_MOTIFS["fire"]),
    "square": lambda x, y, s: [geo.rectangle(x - s, y - s, x + s, y + s)],
    "diamond": lambda x, y, s: [diamond(x, y, s)],
    "pentagram": lambda x, y, s: [pentagram(x, y, s)],
}


def magic_square_symbol(cx: float, cy: float, size: float, code: int) -> list[Path]:
    name = MAGIC_SQUARE_SYMBOLS[code % len(MAGIC_SQUARE_SYMBOLS)]
    return _MAGIC_SQUARE_BUILDERS[name](cx, cy, size)


# --- Goetic seals ---------------------------------------------------------------


def _seal_ringed_cross(cx: float, cy: float, size: float) -> list[Path]:
    return [geo.circle(cx, cy, size, 16), *geo.cross(cx, cy, size * 0.7)]


def _seal_diamond(cx: float, cy: float, size: float) -> list[Path]:
    inner = geo.polyline([
        (cx, cy - size * 0.5),
        (cx + size * 0.4, cy + size * 0.3),
        (cx - size * 0.4, cy + size * 0.3),
        (cx, cy - size * 0.5),
    ])
    return [diamond(cx, cy, size), inner]


def _seal_hexagon(cx: float, cy: float, size: float) -> list[Path]:
    vertices = geo.regular_polygon(cx, cy, size, 6, closed=False)
    diagonals = [np.vstack([vertices[i], vertices[i + 3]]) for i in range(3)]
    return [geo.regular_polygon(cx, cy, size, 6), *diagonals]


def _seal_zigzag(points: int) -> Callable[[float, float, float], list[Path]]:
    def build(cx: float, cy: float, size: float) -> list[Path]:
        count = points * 2
        i = np.arange(count)
        radii = size * (0.3 + 0.7 * (i % 2))
        return [geo.ring(cx, cy, radii, i / count * 4 * np.pi)]

    return build


GOETIC_SEALS: tuple[Callable[[float, float, float], list[Path]], ...] = (
    _seal_ringed_cross,
    _seal_diamond,
    _seal_hexagon,
    _seal_zigzag(3),
    _seal_zigzag(4),
    _seal_zigzag(5),
    _seal_zigzag(6),
    _seal_zigzag(7),
)


def goetic_seal(cx: float, cy: float, size: float, code: int) -> list[Path]:
    return GOETIC_SEALS[code % len(GOETIC_SEALS)](cx, cy, size)


# --- Planetary symbols ----------------------------------------------------------


def _sun(cx: float, cy: float, s: float) -> list[Path]:
    return [geo.circle(cx, cy, s, 24), geo.circle(cx, cy, s * 0.2, 8)]


def _moon(cx: float, cy: float, s: float) -> list[Path]:
    outer = geo.arc(cx, cy, s, -60, 60, 5)
    inner = geo.arc(cx + 0.3 * s, cy, s * 0.8, 135, 225, 5)
    return [outer, inner]


def _mars(cx: float, cy: float, s: float) -> list[Path]:
    tip = (cx + s, cy - s)
    return [
        geo.circle(cx, cy, s * 0.7, 16),
        geo.segment(cx + s * 0.5, cy - s * 0.5, *tip),
        geo.segment(*tip, cx + s * 0.8, cy - s),
        geo.segment(*tip, cx + s, cy - s * 0.8),
    ]


def _mercury(cx: float, cy: float, s: float) -> list[Path]:
    crescent = geo.arc(cx, cy - s * 0.5, s * 0.3, 120, 240, 10)
    return [
        geo.circle(cx, cy, s * 0.5, 16),
        geo.segment(cx, cy + s * 0.5, cx, cy + s),
        geo.segment(cx - s * 0.3, cy + s * 0.75, cx + s * 0.3, cy + s * 0.75),
        crescent,
    ]


def _jupiter(cx: float, cy: float, s: float) -> list[Path]:
    t = np.linspace(0.0, 1.0, 21)
    curve = np.column_stack([cx - s * 0.5 + t * s * 0.8, cy + s * 0.3 - t**2 * s * 1.3])
    return [
        geo.segment(cx - s * 0.5, cy - s, cx - s * 0.5, cy + s * 0.3),
        geo.segment(cx - s * 0.8, cy, cx - s * 0.2, cy),
        curve,
    ]


def _venus(cx: float, cy: float, s: float) -> list[Path]:
    return [
        geo.circle(cx, cy - s * 0.2, s * 0.6, 16),
        geo.segment(cx, cy + s * 0.4, cx, cy + s),
        geo.segment(cx - s * 0.4, cy + s * 0.7, cx + s * 0.4, cy + s * 0.7),
    ]


def _saturn(cx: float, cy: float, s: float) -> list[Path]:
    t = np.linspace(0.0, np.pi, 16)
    curve = np.column_stack([cx - s * 0.6 + np.cos(t) * s * 0.6, cy + s * 0.2 + np.sin(t) * s * 0.3])
    return [
        geo.segment(cx, cy - s, cx, cy + s * 0.2),
        geo.segment(cx - s * 0.4, cy - s * 0.4, cx + s * 0.4, cy - s * 0.4),
        curve,
    ]


# Same order as tables.PLANETS
PLANETARY_SYMBOLS: tuple[Callable[[float, float, float], list[Path]], ...] = (
    _sun, _moon, _mars, _mercury, _jupiter, _venus, _saturn,
)


def planetary_symbol(cx: float, cy: float, size: float, index: int) -> list[Path]:
    return PLANETARY_SYMBOLS[index % len(PLANETARY_SYMBOLS)](cx, cy, size)


# --- Tarot symbols --------------------------------------------------------------


def _tarot_sun(cx: float, cy: float, r: float) -> list[Path]:
    return [geo.alternating_star(cx, cy, r, r * 0.6, 16, closed=False)]


def _tarot_moon(cx: float, cy: float, r: float) -> list[Path]:
    t = np.linspace(0.0, np.pi, 21)
    return [np.column_stack([cx + np.cos(t) * r, cy + np.sin(t) * r * 0.8])]


def _tarot_star(cx: float, cy: float, r: float) -> list[Path]:
    return [geo.alternating_star(cx, cy, r, r * 0.5, 10)]


def _tarot_wand(cx: float, cy: float, r: float) -> list[Path]:
    return [
        geo.segment(cx, cy - r, cx, cy + r),
        geo.segment(cx - r * 0.2, cy - r * 0.7, cx + r * 0.2, cy - r * 0.7),
    ]


def _tarot_cup(cx: float, cy: float, r: float) -> list[Path]:
    t = np.linspace(0.0, 1.0, 21)
    return [np.column_stack([
        cx + (t - 0.5) * r * 1.2,
        cy + np.sin(t * np.pi) * r * 0.3 - t * r * 0.8,
    ])]


def _tarot_sword(cx: float, cy: float, r: float) -> list[Path]:
    return [
        geo.segment(cx, cy - r, cx, cy + r),
        geo.segment(cx - r * 0.3, cy + r * 0.6, cx + r * 0.3, cy + r * 0.6),
    ]


def _tarot_pentacle(cx: float, cy: float, r: float) -> list[Path]:
    return [geo.regular_polygon(cx, cy, r, 5, phase=_UP), geo.circle(cx, cy, r * 1.1, 24)]


def _tarot_pentagram(cx: float, cy: float, r: float) -> list[Path]:
    return [pentagram(cx, cy, r), geo.circle(cx, cy, r * 1.1, 24)]


def _tarot_cross(cx: float, cy: float, r: float) -> list[Path]:
    return [
        geo.segment(cx, cy - r, cx, cy + r),
        geo.segment(cx - r * 0.6, cy - r * 0.3, cx + r * 0.6, cy - r * 0.3),
    ]


def _tarot_default(cx: float, cy: float, r: float) -> list[Path]:
    return [geo.regular_polygon(cx, cy, r, 6)]


TAROT_SYMBOLS: dict[str, Callable[[float, float, float], list[Path]]] = {
    "sun": _tarot_sun,
    "moon": _tarot_moon,
    "star": _tarot_star,
    "stars": _tarot_star,
    "wand": _tarot_wand,
    "cup": _tarot_cup,
    "cups": _tarot_cup,
    "sword": _tarot_sword,
    "pentacle": _tarot_pentacle,
    "pentagram": _tarot_pentagram,
    "cross": _tarot_cross,
}


def tarot_symbol(name: str, cx: float, cy: float, radius: float) -> list[Path]:
    """Card symbol by name; unnamed symbols fall back to a hexagon."""
    return TAROT_SYMBOLS.get(name, _tarot_default)(cx, cy, radius)
