"""Pattern registry — every sub-generator is a standalone function registered via decorator.

Usage:
    @pattern(id="love.hearts", category=Category.LOVE, order=10)
    def layered_hearts(ctx: GenerationContext) -> list[Path]:
        return [geo.heart_curve(...)]

Adding a new generator = creating one function with the decorator. Nothing else changes.
"""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable

import numpy as np
from numpy.typing import NDArray

if TYPE_CHECKING:
    from sigilforge.engine.context import GenerationContext

logger = logging.getLogger(__name__)

Path = NDArray[np.float64]
PatternFn = Callable[["GenerationContext"], list[Path]]


class Category(str, enum.Enum):
    GENERAL = "general"
    LOVE = "love"
    PROSPERITY = "prosperity"
    PROTECTION = "protection"
    WISDOM = "wisdom"

    @classmethod
    def parse(cls, value: object) -> Category:
        """Map a raw category value to a member; anything unknown becomes GENERAL."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value.strip().lower())
            except ValueError:
                pass
        logger.warning("Unknown category %r, using general", value)
        return cls.GENERAL


class Complexity(enum.IntEnum):
    LOW = 0
    MEDIUM = 1
    HIGH = 2

    @classmethod
    def parse(cls, value: object) -> Complexity:
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            member = cls.__members__.get(value.strip().upper())
            if member is not None:
                return member
        return cls.HIGH


class Style(str, enum.Enum):
    SIGIL = "sigil"
    TAROT = "tarot"

    @classmethod
    def parse(cls, value: object) -> Style:
        if isinstance(value, cls):
            return value
        if isinstance(value, str) and value.strip().lower() == cls.TAROT.value:
            return cls.TAROT
        return cls.SIGIL


@dataclass
class PatternSpec:
    id: str
    fn: PatternFn
    category: Category | None = None  # None = every category
    style: Style = Style.SIGIL
    order: int = 0
    min_complexity: Complexity = Complexity.LOW
    description: str = ""

    def applies_to(self, category: Category, style: Style, complexity: Complexity) -> bool:
        return (
            self.style == style
            and (self.category is None or self.category == category)
            and self.min_complexity <= complexity
        )


class PatternRegistry:
    """Registry of all pattern generators."""

    def __init__(self) -> None:
        self._patterns: dict[str, PatternSpec] = {}

    def register(self, spec: PatternSpec) -> None:
        if spec.id in self._patterns:
            raise ValueError(f"Duplicate pattern ID: {spec.id}")
        self._patterns[spec.id] = spec
        logger.debug(
            "Registered pattern %s (%s/%s)",
            spec.id,
            spec.style.value,
            spec.category.value if spec.category else "*",
        )

    def get(self, pattern_id: str) -> PatternSpec:
        return self._patterns[pattern_id]

    def select(
        self,
        category: Category,
        style: Style = Style.SIGIL,
        complexity: Complexity = Complexity.HIGH,
    ) -> list[PatternSpec]:
        """Generators for a category/style in draw order, gated by complexity."""
        specs = [s for s in self._patterns.values() if s.applies_to(category, style, complexity)]
        return sorted(specs, key=lambda s: (s.order, s.id))

    def all(self) -> list[PatternSpec]:
        return sorted(self._patterns.values(), key=lambda s: (s.style.value, s.order, s.id))

    @property
    def count(self) -> int:
        return len(self._patterns)


# Module-level singleton
_registry = PatternRegistry()
_builtins_loaded = False


def get_registry() -> PatternRegistry:
    return _registry


def pattern(
    *,
    id: str,
    category: Category | None = None,
    style: Style = Style.SIGIL,
    order: int = 0,
    min_complexity: Complexity = Complexity.LOW,
    description: str = "",
):
    """Decorator to register a pattern generator."""

    def decorator(fn: PatternFn) -> PatternFn:
        spec = PatternSpec(
            id=id,
            fn=fn,
            category=category,
            style=style,
            order=order,
            min_complexity=min_complexity,
            description=description,
        )
        _registry.register(spec)
        return fn

    return decorator


def register_builtin_patterns() -> PatternRegistry:
    """Import every module in sigilforge.engine.patterns so @pattern decorators fire."""
    global _builtins_loaded
    if _builtins_loaded:
        return _registry

    import importlib
    import pkgutil

    package = importlib.import_module("sigilforge.engine.patterns")
    modules = sorted(pkgutil.iter_modules(package.__path__), key=lambda m: m.name)
    for module in modules:
        importlib.import_module(f"sigilforge.engine.patterns.{module.name}")

    _builtins_loaded = True
    logger.info("Loaded %d pattern generators", _registry.count)
    return _registry
