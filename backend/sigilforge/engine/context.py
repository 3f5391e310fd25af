"""GenerationContext — the read-only inputs every pattern generator receives."""

from __future__ import annotations

from dataclasses import dataclass, field

from sigilforge.engine.config import DEFAULT_CONFIG, EngineConfig
from sigilforge.engine.intention import ProcessedIntention
from sigilforge.engine.registry import Category, Complexity, Style


@dataclass(frozen=True)
class GenerationContext:
    """Inputs for a single generation call. Created fresh per call, never shared."""

    intention: ProcessedIntention
    category: Category = Category.GENERAL
    style: Style = Style.SIGIL
    complexity: Complexity = Complexity.HIGH
    config: EngineConfig = field(default=DEFAULT_CONFIG)

    @property
    def text(self) -> str:
        return self.intention.processed_text

    @property
    def text_length(self) -> int:
        return len(self.intention.processed_text)

    @property
    def initials(self) -> str:
        return self.intention.initials

    @property
    def word_count(self) -> int:
        return self.intention.word_count

    @property
    def cx(self) -> float:
        return self.config.center_x

    @property
    def cy(self) -> float:
        return self.config.center_y

    def char_code(self, index: int) -> int:
        """Character code of the processed text, wrapping around its length."""
        return ord(self.text[index % self.text_length])
