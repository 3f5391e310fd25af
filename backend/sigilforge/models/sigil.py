"""Sigil data model — the persisted/exported shape of a generated sigil.

JSON field names follow the camelCase output contract (``hasInitials``, ``totalLength``...);
Python code uses the snake_case attribute names.
"""

from __future__ import annotations

from datetime import datetime, timezone

import numpy as np
from numpy.typing import NDArray
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)


class Point(_CamelModel):
    x: float
    y: float


class ComplexityStats(_CamelModel):
    paths: int = 0
    points: int = 0
    total_length: float = 0.0
    complexity: int = 0
    density: float = 0.0


class BoundingBox(_CamelModel):
    min_x: float = 0.0
    min_y: float = 0.0
    max_x: float = 1.0
    max_y: float = 1.0
    width: float = 1.0
    height: float = 1.0
    center_x: float = 0.5
    center_y: float = 0.5


class SymmetryReport(_CamelModel):
    horizontal_pct: int = 0
    vertical_pct: int = 0
    radial_pct: int = 0
    average_pct: int = 0


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class SigilResult(_CamelModel):
    """One generated sigil. Frozen: derive variants with ``model_copy(update=...)``."""

    intention: str
    category: str
    paths: list[list[Point]]
    method: str
    complexity: ComplexityStats = Field(default_factory=ComplexityStats)
    has_initials: bool = False
    timestamp: datetime = Field(default_factory=_utcnow)
    variation: int | None = None

    def path_arrays(self) -> list[NDArray[np.float64]]:
        """Paths as Nx2 float arrays."""
        return [np.array([(p.x, p.y) for p in path], dtype=np.float64).reshape(-1, 2) for path in self.paths]

    @property
    def point_count(self) -> int:
        return sum(len(path) for path in self.paths)


class SigilMetadata(_CamelModel):
    intention: str
    processed_text: str
    initials: str
    word_count: int
    original_length: int
    processed_length: int
    initials_count: int
    complexity: ComplexityStats
    bounding_box: BoundingBox
    timestamp: datetime = Field(default_factory=_utcnow)


def paths_to_points(paths: list[NDArray[np.float64]]) -> list[list[Point]]:
    return [[Point(x=float(x), y=float(y)) for x, y in path] for path in paths]
