"""Tests for the pattern registry."""

import pytest

from sigilforge.engine.context import GenerationContext
from sigilforge.engine.registry import (
    Category,
    Complexity,
    PatternRegistry,
    PatternSpec,
    Style,
    register_builtin_patterns,
)


def _noop(ctx: GenerationContext) -> list:
    return []


def test_register_and_get():
    reg = PatternRegistry()
    spec = PatternSpec(id="love.test", fn=_noop, category=Category.LOVE)
    reg.register(spec)
    assert reg.get("love.test") is spec
    assert reg.count == 1


def test_duplicate_id_rejected():
    reg = PatternRegistry()
    reg.register(PatternSpec(id="dup", fn=_noop))
    with pytest.raises(ValueError, match="Duplicate"):
        reg.register(PatternSpec(id="dup", fn=_noop))


def test_select_orders_by_order_then_id():
    reg = PatternRegistry()
    reg.register(PatternSpec(id="b", fn=_noop, category=Category.LOVE, order=10))
    reg.register(PatternSpec(id="a", fn=_noop, category=Category.LOVE, order=10))
    reg.register(PatternSpec(id="c", fn=_noop, category=Category.LOVE, order=5))
    ids = [s.id for s in reg.select(Category.LOVE)]
    assert ids == ["c", "a", "b"]


def test_select_filters_category_style_and_complexity():
    reg = PatternRegistry()
    reg.register(PatternSpec(id="love", fn=_noop, category=Category.LOVE))
    reg.register(PatternSpec(id="any", fn=_noop, category=None))
    reg.register(PatternSpec(id="tarot", fn=_noop, style=Style.TAROT))
    reg.register(PatternSpec(id="rich", fn=_noop, category=Category.LOVE, min_complexity=Complexity.HIGH))

    assert [s.id for s in reg.select(Category.LOVE, complexity=Complexity.LOW)] == ["any", "love"]
    assert [s.id for s in reg.select(Category.WISDOM)] == ["any"]
    assert [s.id for s in reg.select(Category.LOVE, Style.TAROT)] == ["tarot"]
    assert "rich" in [s.id for s in reg.select(Category.LOVE, complexity=Complexity.HIGH)]


def test_builtin_patterns_loaded_once():
    reg = register_builtin_patterns()
    count = reg.count
    assert count == 28
    assert register_builtin_patterns().count == count


@pytest.mark.parametrize(
    "category,expected",
    [
        (Category.LOVE, 2),
        (Category.PROSPERITY, 2),
        (Category.PROTECTION, 3),
        (Category.WISDOM, 4),
        (Category.GENERAL, 14),
    ],
)
def test_builtin_generators_per_category(category, expected):
    reg = register_builtin_patterns()
    assert len(reg.select(category, Style.SIGIL, Complexity.HIGH)) == expected


def test_low_complexity_skips_heavy_generators():
    reg = register_builtin_patterns()
    low = [s.id for s in reg.select(Category.GENERAL, Style.SIGIL, Complexity.LOW)]
    assert low == [
        "general.solomonic.pentagram",
        "general.solomonic.triangle",
        "general.solomonic.magic_square",
        "general.enochian.angelic",
        "general.sacred.vortex",
        "general.planetary",
    ]


def test_tarot_style_shared_across_categories():
    reg = register_builtin_patterns()
    for category in Category:
        ids = [s.id for s in reg.select(category, Style.TAROT, Complexity.HIGH)]
        assert ids == ["tarot.consonant_walk", "tarot.initials_walk", "tarot.emblem"]


def test_parse_helpers():
    assert Category.parse("LOVE") is Category.LOVE
    assert Category.parse("nonsense") is Category.GENERAL
    assert Category.parse(None) is Category.GENERAL
    assert Complexity.parse("medium") is Complexity.MEDIUM
    assert Complexity.parse("bogus") is Complexity.HIGH
    assert Style.parse("tarot") is Style.TAROT
    assert Style.parse(None) is Style.SIGIL
