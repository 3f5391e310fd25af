"""Engine configuration — named defaults for every tuning constant."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class EngineConfig:
    """Controls geometry sizing, optimization and analysis thresholds."""

    # Canvas centre in normalized unit-square coordinates
    center_x: float = 0.5
    center_y: float = 0.5

    # Path optimization
    dedupe_epsilon: float = 0.001  # per-axis delta below which a point is a duplicate
    clamp_min: float = 0.0
    clamp_max: float = 1.0
    min_path_points: int = 2

    # Symmetry analysis
    symmetry_tolerance: float = 0.1  # Euclidean match radius

    # Initials overlay
    initials_ring_radius: float = 0.35
    initials_glyph_size: float = 0.03

    # Pattern sizing
    magic_square_max_grid: int = 7
    flower_of_life_max_layers: int = 4
    icosahedron_scale: float = 0.2

    # Fractal branches
    fractal_shrink: float = 0.7
    fractal_deviation_deg: float = 30.0
    fractal_min_length: float = 0.02

    # Degenerate seed segment (vowel-only / invalid input)
    degenerate_segment_length: float = 0.2


DEFAULT_CONFIG = EngineConfig()
