"""Static lookup tables for the pattern library.

Every table is immutable (tuples / MappingProxyType). Glyph motifs are polylines in
unit coordinates, scaled and translated by the caller: (0, -1) is the top of the glyph,
(0, 1) the bottom.
"""

from __future__ import annotations

import math
from types import MappingProxyType
from typing import NamedTuple

PHI = (1 + math.sqrt(5)) / 2
GOLDEN_RATIO = 1.618033988749

Motif = tuple[tuple[tuple[float, float], ...], ...]

# --- Initials overlay ---------------------------------------------------------

# Upside-down letter forms used for mirrored initials
REVERSED_LETTERS = MappingProxyType({
    "a": "ɐ", "b": "q", "c": "ɔ", "d": "p", "e": "ǝ", "f": "ɟ",
    "g": "ƃ", "h": "ɥ", "i": "ᴉ", "j": "ɾ", "k": "ʞ", "l": "l",
    "m": "ɯ", "n": "u", "o": "o", "p": "d", "q": "b", "r": "ɹ",
    "s": "s", "t": "ʇ", "u": "n", "v": "ʌ", "w": "ʍ", "x": "x",
    "y": "ʎ", "z": "z",
})

# --- Protection ---------------------------------------------------------------

RUNE_MOTIFS: tuple[Motif, ...] = (
    # isa with crossbar
    (((0.0, -1.0), (0.0, 1.0)), ((-0.5, -0.5), (0.5, -0.5))),
    # thurisaz triangle
    (((0.0, -1.0), (-1.0, 1.0), (1.0, 1.0), (0.0, -1.0)),),
    # gebo
    (((-1.0, -1.0), (1.0, 1.0)), ((-1.0, 1.0), (1.0, -1.0))),
    # fehu
    (((-0.5, 1.0), (-0.5, -1.0)), ((-0.5, -0.2), (0.5, -0.8)), ((-0.5, 0.3), (0.5, -0.3))),
    # tiwaz
    (((0.0, 1.0), (0.0, -1.0)), ((-0.6, -0.4), (0.0, -1.0), (0.6, -0.4))),
    # algiz
    (((0.0, 1.0), (0.0, -1.0)), ((-0.7, -0.7), (0.0, 0.0), (0.7, -0.7))),
    # othala
    (
        ((0.0, -1.0), (0.6, -0.3), (0.0, 0.4), (-0.6, -0.3), (0.0, -1.0)),
        ((-0.6, 1.0), (0.0, 0.4), (0.6, 1.0)),
    ),
    # sowilo
    (((0.5, -1.0), (-0.5, -0.3), (0.5, 0.3), (-0.5, 1.0)),),
)

_TRIANGLE_UP = ((0.0, -1.0), (-1.0, 1.0), (1.0, 1.0), (0.0, -1.0))
_TRIANGLE_DOWN = ((0.0, 1.0), (-1.0, -1.0), (1.0, -1.0), (0.0, 1.0))
_HALF_BAR = ((-0.5, 0.0), (0.5, 0.0))

ELEMENT_MOTIFS: MappingProxyType[str, Motif] = MappingProxyType({
    "fire": (_TRIANGLE_UP,),
    "earth": (_TRIANGLE_DOWN,),
    "air": (_TRIANGLE_UP, _HALF_BAR),
    "water": (_TRIANGLE_DOWN, _HALF_BAR),
})

# Elemental crosses around the protection mandala, by angle (radians)
ELEMENTAL_DIRECTIONS: tuple[tuple[str, float], ...] = (
    ("fire", 0.0),
    ("earth", math.pi / 2),
    ("air", math.pi),
    ("water", 3 * math.pi / 2),
)

# --- Wisdom -------------------------------------------------------------------

# Sephirot offsets from the canvas centre
TREE_OF_LIFE_POSITIONS: tuple[tuple[float, float], ...] = (
    (0.0, -0.3),    # Kether
    (-0.15, -0.15),  # Chokmah
    (0.15, -0.15),   # Binah
    (-0.25, 0.0),    # Chesed
    (0.0, 0.0),      # Tiphereth
    (0.25, 0.0),     # Geburah
    (-0.15, 0.15),   # Netzach
    (0.15, 0.15),    # Hod
    (0.0, 0.25),     # Yesod
    (0.0, 0.35),     # Malkuth
)

TREE_OF_LIFE_ADJACENCY = MappingProxyType({
    0: (1, 2, 4),
    1: (0, 3, 4),
    2: (0, 4, 5),
    3: (1, 4, 6),
    4: (0, 1, 2, 3, 5, 6, 7),
    5: (2, 4, 7),
    6: (3, 4, 8),
    7: (4, 5, 8),
    8: (6, 7, 9),
    9: (8,),
})


def tree_of_life_edges() -> tuple[tuple[int, int], ...]:
    """Undirected paths of the tree, each listed once, in index order."""
    edges = {
        (min(a, b), max(a, b))
        for a, targets in TREE_OF_LIFE_ADJACENCY.items()
        for b in targets
    }
    return tuple(sorted(edges))


# --- Sacred geometry ----------------------------------------------------------

ICOSAHEDRON_VERTICES: tuple[tuple[float, float, float], ...] = tuple(
    (x / PHI, y / PHI, z / PHI)
    for x, y, z in (
        (1, PHI, 0), (-1, PHI, 0), (1, -PHI, 0), (-1, -PHI, 0),
        (0, 1, PHI), (0, -1, PHI), (0, 1, -PHI), (0, -1, -PHI),
        (PHI, 0, 1), (-PHI, 0, 1), (PHI, 0, -1), (-PHI, 0, -1),
    )
)

ICOSAHEDRON_EDGES: tuple[tuple[int, int], ...] = (
    (0, 1), (0, 4), (0, 6), (0, 8), (0, 10),
    (1, 4), (1, 6), (1, 9), (1, 11),
    (2, 3), (2, 5), (2, 7), (2, 8), (2, 10),
    (3, 5), (3, 7), (3, 9), (3, 11),
    (4, 5), (4, 8), (4, 9),
    (5, 8), (5, 9),
    (6, 7), (6, 10), (6, 11),
    (7, 10), (7, 11),
    (8, 10),
    (9, 11),
)

# Metatron's Cube: centre, inner ring, outer ring (unit hex lattice)
METATRON_POSITIONS: tuple[tuple[float, float], ...] = (
    (0.0, 0.0),
    (0.0, -1.0), (0.866, -0.5), (0.866, 0.5),
    (0.0, 1.0), (-0.866, 0.5), (-0.866, -0.5),
    (0.0, -2.0), (1.732, -1.0), (1.732, 1.0),
    (0.0, 2.0), (-1.732, 1.0), (-1.732, -1.0),
)

METATRON_EDGES: tuple[tuple[int, int], ...] = (
    (0, 1), (0, 2), (0, 3), (0, 4), (0, 5), (0, 6),
    (1, 2), (2, 3), (3, 4), (4, 5), (5, 6), (6, 1),
    (1, 7), (2, 8), (3, 9), (4, 10), (5, 11), (6, 12),
    (7, 8), (8, 9), (9, 10), (10, 11), (11, 12), (12, 7),
)

FIBONACCI: tuple[int, ...] = (1, 1, 2, 3, 5, 8, 13, 21, 34, 55)

# --- Ceremonial traditions ----------------------------------------------------

HEBREW_LETTER_MOTIFS: tuple[Motif, ...] = (
    # aleph
    (((-1.0, 1.0), (0.0, -1.0)), ((0.0, -1.0), (1.0, 1.0)), ((-0.5, 0.0), (0.5, 0.0))),
    # bet
    (((-1.0, -1.0), (-1.0, 1.0), (1.0, 1.0)), ((-1.0, 0.0), (0.5, 0.0))),
    # gimel
    (((-1.0, -1.0), (1.0, -1.0), (0.0, 0.0), (1.0, 1.0)),),
)

# Per-cell magic-square symbols, selected by char code % 6
MAGIC_SQUARE_SYMBOLS: tuple[str, ...] = ("cross", "circle", "triangle", "square", "diamond", "pentagram")

WATCHTOWERS: tuple[tuple[str, float], ...] = (
    ("east", 0.0),
    ("south", math.pi / 2),
    ("west", math.pi),
    ("north", 3 * math.pi / 2),
)

HERMETIC_ELEMENTS: tuple[str, ...] = ("fire", "water", "air", "earth")


class Planet(NamedTuple):
    name: str
    square_order: int
    magic_constant: int


# Index doubles as the planetary glyph id
PLANETS: tuple[Planet, ...] = (
    Planet("sun", 6, 111),
    Planet("moon", 9, 369),
    Planet("mars", 5, 65),
    Planet("mercury", 8, 260),
    Planet("jupiter", 4, 34),
    Planet("venus", 7, 175),
    Planet("saturn", 3, 15),
)
