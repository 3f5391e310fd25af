"""Intention processing — reduce free text to the traditional sigil letter skeleton."""

from __future__ import annotations

import re
from dataclasses import dataclass

_VOWELS_AND_SPACE_RE = re.compile(r"[aeiou\s]")
_VOWEL_RE = re.compile(r"[aeiou]")


@dataclass(frozen=True)
class ProcessedIntention:
    original: str
    processed_text: str
    initials: str
    word_count: int

    @property
    def is_degenerate(self) -> bool:
        """True when nothing survives reduction (e.g. an all-vowel intention)."""
        return not self.processed_text

    @property
    def letter_count(self) -> int:
        return len(re.sub(r"\s", "", self.original))

    @property
    def vowel_count(self) -> int:
        return len(_VOWEL_RE.findall(self.original.lower()))

    @property
    def seed_char(self) -> str:
        """Character used to seed the degenerate pattern."""
        if self.initials:
            return self.initials[0]
        stripped = self.original.strip()
        return stripped[0].lower() if stripped else "a"


def process_intention(intention: str) -> ProcessedIntention:
    """Lower-case, strip vowels and whitespace, keep each letter once at its first position.

    Initials are the first letter of every whitespace-separated word.
    """
    words = intention.split()
    initials = "".join(word[0].lower() for word in words)

    reduced = _VOWELS_AND_SPACE_RE.sub("", intention.lower())
    # dict preserves insertion order: first occurrence wins
    processed = "".join(dict.fromkeys(reduced))

    return ProcessedIntention(
        original=intention,
        processed_text=processed,
        initials=initials,
        word_count=max(len(words), 1),
    )
