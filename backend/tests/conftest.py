"""Shared test fixtures."""

from __future__ import annotations

import numpy as np
import pytest

from sigilforge.engine.registry import Category


# Sample intentions covering short, long, multi-word and punctuated input

SAMPLE_INTENTIONS = [
    "I am love",
    "find my purpose",
    "protect my home and family",
    "abundance flows to me easily",
    "clarity",
    "Wisdom guides every step I take, today & always!",
]

ALL_CATEGORIES = [c.value for c in Category]

VOWEL_ONLY_INTENTION = "aeiou"

# A sigil exported at 100px: one triangle and one open stroke
TRIANGLE_SIGIL_SVG = '''<svg width="100" height="100" viewBox="0 0 100 100" xmlns="http://www.w3.org/2000/svg">
  <rect width="100" height="100" fill="#000"/>
  <path d="M 50 20 L 80 70 L 20 70 L 50 20" stroke="#fff" stroke-width="2" fill="none" opacity="0.8"/>
  <path d="M 10 90 L 90 90" stroke="#fff" stroke-width="2" fill="none" opacity="0.8"/>
  <text x="50" y="80" text-anchor="middle" fill="#666" font-size="12">love &amp; light</text>
</svg>'''

# Curved path from a hand-drawn sigil, no viewBox
CURVED_SIGIL_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" width="200" height="200">
  <path d="M 20 100 C 60 20 140 20 180 100" fill="none" stroke="#fff"/>
</svg>'''


@pytest.fixture
def octagon() -> np.ndarray:
    """Regular octagon centred on the canvas, without the closing point."""
    angles = np.arange(8) / 8 * 2 * np.pi
    return np.column_stack([0.5 + 0.3 * np.cos(angles), 0.5 + 0.3 * np.sin(angles)])


@pytest.fixture
def noisy_path() -> np.ndarray:
    """Path with out-of-range points, a NaN and near-duplicate neighbours."""
    return np.array([
        [-0.2, 0.5],
        [0.1, 0.1],
        [0.1004, 0.1003],
        [np.nan, 0.4],
        [0.5, 1.4],
        [0.5, 1.2],
        [0.9, 0.9],
        [0.9, 0.9],
    ])
