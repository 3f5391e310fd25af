"""Tests for geometry primitives and static tables."""

import math

import numpy as np
import pytest

from sigilforge.engine import primitives as geo
from sigilforge.engine.tables import (
    ICOSAHEDRON_EDGES,
    ICOSAHEDRON_VERTICES,
    METATRON_EDGES,
    PLANETS,
    REVERSED_LETTERS,
    RUNE_MOTIFS,
    tree_of_life_edges,
)


def test_circle_is_closed():
    c = geo.circle(0.5, 0.5, 0.2, 16)
    assert c.shape == (17, 2)
    np.testing.assert_allclose(c[0], c[-1], atol=1e-12)
    np.testing.assert_allclose(np.hypot(c[:, 0] - 0.5, c[:, 1] - 0.5), 0.2)


def test_regular_polygon_open_and_closed():
    assert geo.regular_polygon(0.5, 0.5, 0.1, 6).shape == (7, 2)
    assert geo.regular_polygon(0.5, 0.5, 0.1, 6, closed=False).shape == (6, 2)


def test_pentagram_visits_every_vertex():
    star = geo.star_polygon(0.5, 0.5, 0.2, 5, 2)
    assert star.shape == (6, 2)
    assert len({(round(x, 9), round(y, 9)) for x, y in star[:-1]}) == 5


def test_arc_endpoints_inclusive():
    a = geo.arc(0.5, 0.5, 0.1, -60, 60, 5)
    assert len(a) == 25
    np.testing.assert_allclose(a[0], [0.5 + 0.1 * math.cos(math.radians(-60)), 0.5 + 0.1 * math.sin(math.radians(-60))])


def test_heart_curve_top_and_bottom():
    t = np.array([0.0, math.pi])
    heart = geo.heart_curve(0.5, 0.5, 0.01, t)
    # t=0 is the cleft (above centre), t=pi the tip (below centre)
    assert heart[0, 1] == pytest.approx(0.5 - 0.01 * 5)
    assert heart[1, 1] == pytest.approx(0.5 + 0.01 * 17)


def test_keep_inside_drops_points():
    pts = np.array([[0.5, 0.5], [0.99, 0.5], [0.5, 0.01]])
    assert len(geo.keep_inside(pts, 0.05, 0.95)) == 1


def test_fractal_branch_count():
    # depth 3 with no early stop: 1 + 2 + 4 segments
    branches = geo.fractal_branches(0.5, 0.4, 0.15, 0.0, 3)
    assert len(branches) == 7
    assert all(b.shape == (2, 2) for b in branches)


def test_fractal_stops_below_min_length():
    assert geo.fractal_branches(0.5, 0.5, 0.01, 0.0, 5) == []


def test_fractal_negative_depth_rejected():
    with pytest.raises(ValueError):
        geo.fractal_branches(0.5, 0.5, 0.1, 0.0, -1)


def test_grid_lines():
    lines = geo.grid_lines(0.5, 0.5, 0.2, 4)
    assert len(lines) == 10
    assert geo.cell_center(0.5, 0.5, 0.2, 4, 0, 0) == pytest.approx((0.35, 0.35))


def test_icosahedron_has_thirty_unique_edges():
    assert len(ICOSAHEDRON_VERTICES) == 12
    assert len(ICOSAHEDRON_EDGES) == 30
    assert len({tuple(sorted(e)) for e in ICOSAHEDRON_EDGES}) == 30
    degree = [0] * 12
    for a, b in ICOSAHEDRON_EDGES:
        degree[a] += 1
        degree[b] += 1
    assert degree == [5] * 12
    assert len(geo.icosahedron_projection(0.5, 0.5, 0.2)) == 30


def test_tree_of_life_edges_listed_once():
    edges = tree_of_life_edges()
    assert len(edges) == len(set(edges))
    assert all(a < b for a, b in edges)


def test_static_tables():
    assert len(RUNE_MOTIFS) == 8
    assert len(METATRON_EDGES) == 24
    assert len(PLANETS) == 7
    assert REVERSED_LETTERS["b"] == "q"
