"""API request models."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

from sigilforge.models.sigil import Point
from sigilforge.models.tarot import TarotCard

INTENTION_MAX_LENGTH = 300

# hex colours and CSS colour names only
COLOUR_PATTERN = r"^(#[0-9A-Fa-f]{3,8}|[A-Za-z]+)$"


class GenerateRequest(BaseModel):
    intention: str = Field(..., min_length=1, max_length=INTENTION_MAX_LENGTH, description="Intention text")
    category: str = Field(default="general", description="general, love, prosperity, protection or wisdom")
    complexity: str = Field(default="high", description="Complexity hint (low, medium, high)")
    style: str = Field(default="sigil", description="Style profile (sigil or tarot)")


class VariationsRequest(BaseModel):
    intention: str = Field(..., min_length=1, max_length=INTENTION_MAX_LENGTH, description="Intention text")
    category: str = Field(default="general", description="Sigil category")
    count: int = Field(default=3, ge=1, le=10, description="Number of variations")
    complexity: str = Field(default="high", description="Complexity hint (low, medium, high)")


class AnalyzeRequest(BaseModel):
    paths: list[list[Point]] | None = Field(default=None, description="Normalized paths to analyze")
    svg: str | None = Field(default=None, description="Exported sigil SVG, used when paths are absent")


class ExportRequest(BaseModel):
    sigil: dict[str, Any] = Field(..., description="SigilResult JSON")
    canvas_size: int | None = Field(default=None, ge=16, le=4096, description="Canvas width/height in px")
    background: str = Field(default="#000", pattern=COLOUR_PATTERN, description="Background fill")
    stroke: str = Field(default="#fff", pattern=COLOUR_PATTERN, description="Path stroke colour")
    stroke_width: float = Field(default=2, gt=0, description="Path stroke width")


class MetadataRequest(BaseModel):
    intention: str = Field(..., min_length=1, max_length=INTENTION_MAX_LENGTH, description="Intention text")
    category: str = Field(default="general", description="Sigil category")


class TarotCardRequest(BaseModel):
    card: TarotCard = Field(..., description="The drawn card")
    intention: str | None = Field(default=None, max_length=INTENTION_MAX_LENGTH, description="Optional intention")
    variant: str = Field(default="rider-waite", description="Historical deck variant")
    category: str | None = Field(default=None, description="Sigil category override for the centre glyph")
    complexity: str = Field(default="high", description="Complexity hint (low, medium, high)")
