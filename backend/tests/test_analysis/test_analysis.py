"""Tests for the optimizer, analyzer and validator."""

from __future__ import annotations

import math

import numpy as np
import pytest

from sigilforge.engine.analysis import analyze_symmetry, bounding_box, complexity_stats
from sigilforge.engine.generator import generate_sigil
from sigilforge.engine.optimizer import optimize_path, optimize_paths
from sigilforge.engine.validation import InvalidSigilError, ensure_valid, find_sigil_issues, validate_sigil_data
from tests.conftest import ALL_CATEGORIES, SAMPLE_INTENTIONS


# --- Optimizer ---


def test_optimize_clamps_dedupes_and_drops_nan(noisy_path):
    result = optimize_path(noisy_path)
    np.testing.assert_allclose(result, [[0.0, 0.5], [0.1, 0.1], [0.5, 1.0], [0.9, 0.9]])


def test_optimize_is_idempotent(noisy_path):
    once = optimize_path(noisy_path)
    np.testing.assert_array_equal(optimize_path(once), once)


@pytest.mark.parametrize("intention", SAMPLE_INTENTIONS)
def test_generated_paths_already_optimal(intention):
    arrays = generate_sigil(intention, "general").path_arrays()
    for path in arrays:
        np.testing.assert_array_equal(optimize_path(path), path)


def test_optimize_paths_drops_short_paths():
    paths = [
        np.array([[0.5, 0.5], [0.5002, 0.5001]]),
        np.array([[0.1, 0.1], [0.2, 0.2]]),
        np.empty((0, 2)),
    ]
    result = optimize_paths(paths)
    assert len(result) == 1
    np.testing.assert_allclose(result[0], [[0.1, 0.1], [0.2, 0.2]])


def test_optimize_accepts_point_dicts():
    result = optimize_path([{"x": 0.2, "y": 0.3}, {"x": "bad", "y": 0.1}, {"x": 0.4, "y": 0.3}])
    np.testing.assert_allclose(result, [[0.2, 0.3], [0.4, 0.3]])


# --- Analyzer ---


def test_complexity_stats_formula():
    stats = complexity_stats([np.array([[0.0, 0.0], [1.0, 0.0]])])
    assert stats.paths == 1
    assert stats.points == 2
    assert stats.total_length == pytest.approx(1.0)
    assert stats.complexity == 3 + 2 + 100
    assert stats.density == pytest.approx(0.5)


def test_complexity_stats_empty():
    stats = complexity_stats([])
    assert stats.paths == 0
    assert stats.density == 0.0


def test_bounding_box_empty_is_unit_square():
    box = bounding_box([])
    assert (box.min_x, box.min_y, box.max_x, box.max_y) == (0.0, 0.0, 1.0, 1.0)


def test_bounding_box_ignores_nan():
    box = bounding_box([np.array([[0.2, 0.3], [math.nan, 0.9], [0.6, 0.5]])])
    assert box.min_x == pytest.approx(0.2)
    assert box.max_y == pytest.approx(0.5)
    assert box.center_x == pytest.approx(0.4)
    assert box.width == pytest.approx(0.4)


@pytest.mark.parametrize("category", ALL_CATEGORIES)
def test_bounding_box_contains_generated_sigil(category):
    result = generate_sigil("abundance flows to me easily", category)
    box = bounding_box(result.path_arrays())
    assert box.min_x >= 0 and box.max_x <= 1
    assert box.min_y >= 0 and box.max_y <= 1
    for path in result.paths:
        for p in path:
            assert box.min_x <= p.x <= box.max_x
            assert box.min_y <= p.y <= box.max_y


def test_mirrored_polygon_scores_high(octagon):
    report = analyze_symmetry([octagon])
    assert max(report.horizontal_pct, report.vertical_pct) >= 90
    assert report.radial_pct == 100


def test_asymmetric_path_scores_lower():
    path = np.array([[0.1, 0.1], [0.15, 0.12], [0.2, 0.15], [0.9, 0.8]])
    report = analyze_symmetry([path])
    assert report.horizontal_pct < 100


@pytest.mark.parametrize("category", ALL_CATEGORIES)
def test_symmetry_percentages_bounded(category):
    report = analyze_symmetry(generate_sigil("find my purpose", category).path_arrays())
    for value in (report.horizontal_pct, report.vertical_pct, report.radial_pct, report.average_pct):
        assert 0 <= value <= 100


def test_symmetry_of_nothing():
    report = analyze_symmetry([])
    assert report.average_pct == 0


# --- Validator ---


def test_valid_sigil_dict():
    assert validate_sigil_data({"intention": "x", "paths": [[{"x": 0.1, "y": 0.2}, {"x": 1.0, "y": 0.0}]]})


@pytest.mark.parametrize(
    "data,fragment",
    [
        ({"intention": 1, "paths": [[{"x": 0.1, "y": 0.1}]]}, "intention"),
        ({"intention": "x", "paths": []}, "non-empty"),
        ({"intention": "x"}, "non-empty"),
        ({"intention": "x", "paths": [[]]}, "empty"),
        ({"intention": "x", "paths": [[{"x": "a", "y": 0.1}]]}, "non-numeric"),
        ({"intention": "x", "paths": [[{"x": math.nan, "y": 0.1}]]}, "NaN"),
        ({"intention": "x", "paths": [[{"x": 1.2, "y": 0.1}]]}, "outside"),
        ("not a sigil", "object"),
    ],
)
def test_invalid_sigil_data(data, fragment):
    issues = find_sigil_issues(data)
    assert issues
    assert any(fragment in issue for issue in issues)
    assert not validate_sigil_data(data)


def test_ensure_valid_raises_with_issues():
    with pytest.raises(InvalidSigilError) as exc_info:
        ensure_valid({"intention": None, "paths": []})
    assert len(exc_info.value.issues) == 2
    assert isinstance(exc_info.value, ValueError)
