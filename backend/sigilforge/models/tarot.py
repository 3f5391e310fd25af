"""Tarot data model — reference data, card draws and composed card designs."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from sigilforge.models.sigil import Point, SigilResult


class CardColors(BaseModel):
    model_config = ConfigDict(frozen=True)

    primary: str
    secondary: str
    accent: str


class ArcanaInfo(BaseModel):
    """Reference entry for one Major Arcana card."""

    model_config = ConfigDict(frozen=True)

    number: int
    name: str
    element: str
    imagery: str
    colors: CardColors
    symbols: tuple[str, ...]
    keywords: str
    symbolism: str
    sigil_category: str = "general"


class SuitInfo(BaseModel):
    """Reference entry for one Minor Arcana suit."""

    model_config = ConfigDict(frozen=True)

    suit: str
    element: str
    imagery: str
    colors: CardColors
    symbols: tuple[str, ...]
    keywords: str
    symbolism: str
    sigil_category: str = "general"
    cards: tuple[str, ...] = ()
    type: Literal["minor"] = "minor"


class TarotVariant(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    year: int
    style: str
    color_palette: tuple[str, ...]
    characteristics: tuple[str, ...] = ()
    back_pattern: str = "flower-of-life"


class TarotCard(BaseModel):
    """A drawn card: a Major Arcana number, or a Minor rank within a suit."""

    type: Literal["major", "minor"] = "major"
    number: int | str = 0
    suit: str | None = None
    name: str = ""


class CardElement(BaseModel):
    paths: list[list[Point]] = Field(default_factory=list)
    position: Point | None = None
    symbol: str | None = None


class TarotCardDesign(BaseModel):
    card: TarotCard
    variant: str
    style: str
    center_sigil: SigilResult | None = None
    center_paths: list[list[Point]] = Field(default_factory=list)
    corners: list[CardElement] = Field(default_factory=list)
    border: list[list[Point]] = Field(default_factory=list)
    symbols: list[CardElement] = Field(default_factory=list)
    background: list[list[Point]] = Field(default_factory=list)
    back_pattern: list[list[Point]] = Field(default_factory=list)
    colors: CardColors
    imagery: str = ""


class SpreadPosition(BaseModel):
    name: str
    description: str


class TarotSpread(BaseModel):
    id: str
    name: str
    positions: list[SpreadPosition]
