"""Tests for tarot reference data and card design composition."""

from __future__ import annotations

import pytest

from sigilforge.engine.fallback import METHOD_TAROT
from sigilforge.engine.tarot import (
    back_pattern,
    background,
    border_pattern,
    default_center,
    generate_card_design,
    get_card_colors,
    get_card_imagery,
    get_complete_card_info,
    get_tarot_spread,
    get_variant,
    pip_count,
)
from sigilforge.engine.tarot_data import INVALID_CARD_COLORS, MAJOR_ARCANA, MINOR_SUITS, TAROT_VARIANTS
from sigilforge.engine.validation import validate_sigil_data
from sigilforge.models.tarot import TarotCard

FOOL = TarotCard(type="major", number=0, name="The Fool")
THREE_OF_CUPS = TarotCard(type="minor", number="3", suit="cups")


def _all_paths(design):
    yield from design.center_paths
    yield from design.border
    yield from design.background
    yield from design.back_pattern
    for element in [*design.corners, *design.symbols]:
        yield from element.paths


def test_major_arcana_complete():
    assert len(MAJOR_ARCANA) == 22
    assert [a.number for a in MAJOR_ARCANA] == list(range(22))
    assert get_complete_card_info("major", 0).name == "The Fool"
    assert get_complete_card_info("major", "21").name == "The World"


def test_card_info_unknown():
    assert get_complete_card_info("major", 22) is None
    assert get_complete_card_info("major", "x") is None
    assert get_complete_card_info("minor", 3, "coins") is None
    assert get_complete_card_info("minor", 3) is None


def test_minor_suits():
    assert set(MINOR_SUITS) == {"wands", "cups", "swords", "pentacles"}
    assert get_complete_card_info("minor", 3, "cups").element == "water"
    assert len(MINOR_SUITS["wands"].cards) == 14


def test_card_colors_variant_override():
    colors = get_card_colors(FOOL, get_variant("marseilles"))
    assert (colors.primary, colors.secondary, colors.accent) == ("#DC143C", "#FFD700", "#4169E1")


def test_card_colors_without_variant():
    assert get_card_colors(FOOL).primary == MAJOR_ARCANA[0].colors.primary
    assert get_card_colors(None) == INVALID_CARD_COLORS


def test_card_imagery():
    assert "cups" in get_card_imagery(THREE_OF_CUPS)
    assert get_card_imagery(TarotCard(type="minor", number=2, suit="coins")) == "Mystical minor arcana imagery"
    assert get_card_imagery(None).startswith("A mystical scene")


def test_unknown_variant_defaults():
    assert get_variant("tarot-of-atlantis").id == "rider-waite"
    assert get_variant(None).id == "rider-waite"


def test_spreads():
    assert get_tarot_spread("celtic-cross").name == "Celtic Cross"
    assert get_tarot_spread("mystery").id == "three-card"
    assert len(get_tarot_spread().positions) == 3


@pytest.mark.parametrize("rank,expected", [("Ace", 1), ("3", 3), (7, 7), ("10", 10), ("Queen", 2), ("Page", 2)])
def test_pip_count(rank, expected):
    assert pip_count(rank) == expected


def test_default_center_minor_pips():
    assert len(default_center(THREE_OF_CUPS)) == 3
    assert len(default_center(FOOL)) == 1


def test_border_segments():
    assert len(border_pattern(FOOL)) == 32
    assert len(border_pattern(THREE_OF_CUPS)) == 24


def test_backgrounds():
    # The Fool's imagery mentions the sun: five small stars
    assert len(background(FOOL)) == 5
    assert len(background(THREE_OF_CUPS)) == 4
    assert len(background(TarotCard(type="minor", number=2, suit="pentacles"))) == 1
    assert background(TarotCard(type="minor", number=2, suit="coins")) == []


@pytest.mark.parametrize(
    "variant,expected",
    [("rider-waite", 7), ("marseilles", 18), ("thoth", 3), ("visconti", 25)],
)
def test_back_patterns(variant, expected):
    assert len(back_pattern(TAROT_VARIANTS[variant])) == expected


def test_design_without_intention():
    design = generate_card_design(FOOL)
    assert design.center_sigil is None
    assert design.variant == "rider-waite"
    assert design.style == "symbolic-pictorial"
    assert len(design.corners) == 4
    assert [c.symbol for c in design.corners] == ["sun", "cliff", "dog", "rose"]
    assert (design.corners[0].position.x, design.corners[0].position.y) == (0.08, 0.08)
    assert len(design.symbols) == 4
    assert design.imagery == MAJOR_ARCANA[0].imagery


def test_design_with_intention_uses_card_category():
    lovers = TarotCard(type="major", number=6)
    design = generate_card_design(lovers, intention="open my heart")
    assert design.center_sigil.method == METHOD_TAROT
    assert design.center_sigil.category == "love"
    assert design.center_paths == design.center_sigil.paths
    assert validate_sigil_data(design.center_sigil)


def test_design_category_override():
    design = generate_card_design(FOOL, intention="open my heart", category="wisdom", complexity="low")
    assert design.center_sigil.category == "wisdom"


def test_design_is_deterministic():
    a = generate_card_design(THREE_OF_CUPS, intention="heal", variant="visconti")
    b = generate_card_design(THREE_OF_CUPS, intention="heal", variant="visconti")
    assert a.center_paths == b.center_paths
    assert a.border == b.border
    assert a.back_pattern == b.back_pattern


@pytest.mark.parametrize("variant", list(TAROT_VARIANTS))
def test_design_paths_inside_card(variant):
    design = generate_card_design(THREE_OF_CUPS, intention="heal", variant=variant)
    for path in _all_paths(design):
        assert len(path) >= 2
        for p in path:
            assert 0.0 <= p.x <= 1.0
            assert 0.0 <= p.y <= 1.0
