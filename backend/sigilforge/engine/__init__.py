"""Sigilforge symbolic geometry engine."""

from sigilforge.engine.registry import Category, Complexity, Style, pattern, get_registry, register_builtin_patterns
from sigilforge.engine.config import EngineConfig, DEFAULT_CONFIG
from sigilforge.engine.context import GenerationContext
from sigilforge.engine.generator import generate_sigil, generate_variations, get_sigil_metadata
from sigilforge.engine.analysis import analyze_symmetry, bounding_box, complexity_stats
from sigilforge.engine.validation import InvalidSigilError, validate_sigil_data

__all__ = [
    "Category",
    "Complexity",
    "Style",
    "pattern",
    "get_registry",
    "register_builtin_patterns",
    "EngineConfig",
    "DEFAULT_CONFIG",
    "GenerationContext",
    "generate_sigil",
    "generate_variations",
    "get_sigil_metadata",
    "analyze_symmetry",
    "bounding_box",
    "complexity_stats",
    "InvalidSigilError",
    "validate_sigil_data",
]
