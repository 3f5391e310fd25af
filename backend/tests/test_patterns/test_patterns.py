"""Tests for the pattern library, glyphs and the path assembler."""

from __future__ import annotations

import numpy as np
import pytest

from sigilforge.engine import glyphs
from sigilforge.engine import primitives as geo
from sigilforge.engine.assembler import assemble_paths, initials_overlay, overlay_character
from sigilforge.engine.context import GenerationContext
from sigilforge.engine.fallback import METHOD_DEGENERATE, category_fallback, degenerate_pattern
from sigilforge.engine.intention import process_intention
from sigilforge.engine.patterns.tarot_style import CATEGORY_EMBLEMS
from sigilforge.engine.registry import Category, Complexity, Style, register_builtin_patterns
from sigilforge.engine.tables import PLANETS
from tests.conftest import SAMPLE_INTENTIONS


def _ctx(intention: str, category=Category.GENERAL, style=Style.SIGIL, complexity=Complexity.HIGH):
    return GenerationContext(
        intention=process_intention(intention),
        category=category,
        style=style,
        complexity=complexity,
    )


@pytest.mark.parametrize("intention", SAMPLE_INTENTIONS)
def test_every_pattern_returns_finite_paths(intention):
    reg = register_builtin_patterns()
    for spec in reg.all():
        category = spec.category or Category.GENERAL
        paths = spec.fn(_ctx(intention, category, spec.style))
        assert isinstance(paths, list), spec.id
        for path in paths:
            assert path.ndim == 2 and path.shape[1] == 2, spec.id
            assert np.isfinite(path).all(), spec.id


def test_single_consonant_intention():
    # one letter exercises every divisor that depends on text length
    reg = register_builtin_patterns()
    for spec in reg.all():
        category = spec.category or Category.GENERAL
        spec.fn(_ctx("b", category, spec.style))


def test_magic_square_grid_capped():
    reg = register_builtin_patterns()
    fn = reg.get("general.solomonic.magic_square").fn
    ctx = _ctx("bcdfghjklmnpqrstvwxz")
    paths = fn(ctx)
    # 7x7 grid: 8 horizontal and 8 vertical lines, then one symbol per letter
    assert all(p.shape == (2, 2) for p in paths[:16])
    rows = sorted({round(float(p[0, 1]), 6) for p in paths[:16:2]})
    assert len(rows) == 8
    assert len(paths) > 16


def test_seal_marker_count_capped():
    reg = register_builtin_patterns()
    fn = reg.get("general.solomonic.seal").fn
    short = fn(_ctx("bc"))
    long = fn(_ctx("bcdfghjklmnpqrstvwxz"))
    # hexagram (2) + 2 circles + 2 circles per marker
    assert len(short) == 4 + 2 * 24
    assert len(long) == 4 + 2 * 72


def test_planetary_square_chosen_by_length():
    reg = register_builtin_patterns()
    fn = reg.get("general.planetary").fn
    ctx = _ctx("bcd")
    planet = PLANETS[3 % 7]
    paths = fn(ctx)
    grid = 2 * (planet.square_order + 1)
    # final path is the walk: start cell plus one vertex per letter
    assert len(paths[-1]) == ctx.text_length + 1
    assert len(paths) > grid


def test_tree_of_life_draws_nodes_and_edges():
    reg = register_builtin_patterns()
    paths = reg.get("wisdom.tree_of_life").fn(_ctx("wisdom", Category.WISDOM))
    circles = [p for p in paths if len(p) == 17]
    assert len(circles) == 10


def test_initials_walk_needs_two_initials():
    reg = register_builtin_patterns()
    fn = reg.get("tarot.initials_walk").fn
    assert fn(_ctx("clarity", style=Style.TAROT)) == []
    assert len(fn(_ctx("find my purpose", style=Style.TAROT))) == 1


def test_overlay_character_rules():
    assert overlay_character("b", 4) == "2"
    assert overlay_character("b", 3) == "q"
    assert overlay_character("b", 5) == "b"
    assert overlay_character("z", 8) == "6"


def test_initials_overlay_on_ring():
    paths = initials_overlay("fmp", 8)
    assert len(paths) > 0
    centres = np.vstack(paths)
    dist = np.hypot(centres[:, 0] - 0.5, centres[:, 1] - 0.5)
    assert dist.min() > 0.35 - 0.031
    assert dist.max() < 0.35 + 0.031


def test_assembler_order_and_initials():
    assembled = assemble_paths(_ctx("I am love", Category.LOVE))
    assert assembled.generators_run == ["love.hearts", "love.golden_spiral"]
    assert assembled.initials
    tail = assembled.all_paths[-len(assembled.initials):]
    assert all(a is b for a, b in zip(tail, assembled.initials))


def test_assembler_degenerate_input():
    assembled = assemble_paths(_ctx("aeiou"))
    assert assembled.method == METHOD_DEGENERATE
    assert assembled.generators_run == []
    assert len(assembled.main) == 1


def test_assembler_tarot_has_no_overlay():
    assembled = assemble_paths(_ctx("find my purpose", Category.WISDOM, Style.TAROT))
    assert assembled.initials == []


def test_degenerate_pattern_direction():
    (seg,) = degenerate_pattern("a")
    np.testing.assert_allclose(seg[0], [0.5, 0.5])
    assert np.hypot(*(seg[1] - seg[0])) == pytest.approx(0.2)


@pytest.mark.parametrize("category", list(Category))
def test_category_fallback_shapes(category):
    paths = category_fallback(category)
    assert len(paths) == 1
    assert len(paths[0]) >= 2
    assert ((paths[0] >= 0) & (paths[0] <= 1)).all()
    assert category in CATEGORY_EMBLEMS


def test_goetic_seals_distinct():
    shapes = [glyphs.goetic_seal(0.5, 0.5, 0.1, code) for code in range(8)]
    signatures = {tuple(len(p) for p in s) for s in shapes}
    assert len(signatures) == 8


def test_tarot_symbol_fallback_is_hexagon():
    (hexagon,) = glyphs.tarot_symbol("chalice-of-nowhere", 0.5, 0.5, 0.1)
    assert hexagon.shape == (7, 2)


def test_initial_glyph_sides_from_code():
    outer, inner, *spokes = glyphs.initial_glyph(0.5, 0.5, 0.03, ord("a"))
    sides = 3 + ord("a") % 6
    assert len(outer) == sides + 1
    assert len(spokes) == sides


def test_hexagon_seal_diagonals_cross_centre():
    hexagon, *diagonals = glyphs.goetic_seal(0.5, 0.5, 0.1, ord("r"))
    assert hexagon.shape == (7, 2)
    assert len(diagonals) == 3
    for diagonal in diagonals:
        np.testing.assert_allclose(diagonal.mean(axis=0), [0.5, 0.5], atol=1e-12)


@pytest.mark.parametrize("intention", ["bjrz", "strength", "bring me peace"])
def test_goetic_circle_with_every_seal_shape(intention):
    reg = register_builtin_patterns()
    paths = reg.get("general.goetic").fn(_ctx(intention))
    assert all(np.isfinite(p).all() for p in paths)


def test_infinity_loop_follows_second_heart():
    reg = register_builtin_patterns()
    fn = reg.get("love.hearts").fn
    infinity = geo.infinity_loop(0.5, 0.5, 0.2, 0.15, samples=50)

    paths = fn(_ctx("bcdfghjklmnpqrstvwxz", Category.LOVE, complexity=Complexity.MEDIUM))
    assert len(paths) == 4
    np.testing.assert_allclose(paths[2], infinity)

    low = fn(_ctx("bcdfghjklmnpqrstvwxz", Category.LOVE, complexity=Complexity.LOW))
    assert len(low) == 3
    assert not any(p.shape == infinity.shape and np.allclose(p, infinity) for p in low)
