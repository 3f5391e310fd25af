"""API response models."""

from __future__ import annotations

from pydantic import BaseModel, Field

from sigilforge.models.sigil import BoundingBox, ComplexityStats, SymmetryReport


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str = "0.1.0"
    patterns_registered: int = 0


class CategoriesResponse(BaseModel):
    categories: list[str] = Field(default_factory=list)
    complexities: list[str] = Field(default_factory=list)
    styles: list[str] = Field(default_factory=list)


class AnalyzeResponse(BaseModel):
    complexity: ComplexityStats
    bounding_box: BoundingBox
    symmetry: SymmetryReport
    valid: bool = False
    issues: list[str] = Field(default_factory=list)
    caption: str | None = None
    processing_time_ms: float = 0.0
