"""Top-level entry points: generate a sigil, its variations, and its metadata.

``generate_sigil`` never raises for bad input or internal faults. Invalid input gets a
single-segment seed pattern; a generator exception or a validation failure gets the
category's static fallback shape. Either way the caller receives a valid SigilResult.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Iterable
from typing import Any

from sigilforge.engine.analysis import bounding_box, complexity_stats
from sigilforge.engine.assembler import assemble_paths
from sigilforge.engine.config import DEFAULT_CONFIG, EngineConfig
from sigilforge.engine.context import GenerationContext
from sigilforge.engine.fallback import (
    METHOD_CATEGORY_FALLBACK,
    METHOD_INVALID_INPUT,
    category_fallback,
    degenerate_pattern,
)
from sigilforge.engine.intention import process_intention
from sigilforge.engine.optimizer import optimize_paths
from sigilforge.engine.primitives import Path
from sigilforge.engine.registry import Category, Complexity, Style
from sigilforge.engine.validation import find_sigil_issues
from sigilforge.models.sigil import SigilMetadata, SigilResult, paths_to_points

logger = logging.getLogger(__name__)

VARIATION_MARKER_BASE = ord("A")
MARKER_LETTERS = 26
MAX_MARKER_ATTEMPTS = 52


def _build_result(
    intention: str,
    category: Category,
    raw_paths: Iterable[Any],
    method: str,
    has_initials: bool,
    config: EngineConfig,
) -> SigilResult:
    paths = optimize_paths(raw_paths, config)
    return SigilResult(
        intention=intention,
        category=category.value,
        paths=paths_to_points(paths),
        method=method,
        complexity=complexity_stats(paths),
        has_initials=has_initials,
    )


def _fallback_result(intention: str, category: Category, config: EngineConfig) -> SigilResult:
    return _build_result(
        intention,
        category,
        category_fallback(category, config),
        METHOD_CATEGORY_FALLBACK,
        False,
        config,
    )


def generate_sigil(
    intention: Any,
    category: Any = Category.GENERAL,
    complexity: Any = Complexity.HIGH,
    style: Any = Style.SIGIL,
    config: EngineConfig | None = None,
) -> SigilResult:
    """Turn an intention into a validated sigil.

    Deterministic: the same (intention, category, complexity, style) always yields the
    same paths. Only the timestamp differs between calls.
    """
    cfg = config or DEFAULT_CONFIG
    cat = Category.parse(category)
    level = Complexity.parse(complexity)
    profile = Style.parse(style)
    start = time.perf_counter()

    if not isinstance(intention, str) or not intention:
        logger.warning("Invalid intention %r, using seed fallback", intention)
        return _build_result("", cat, degenerate_pattern("a", cfg), METHOD_INVALID_INPUT, False, cfg)

    try:
        ctx = GenerationContext(
            intention=process_intention(intention),
            category=cat,
            style=profile,
            complexity=level,
            config=cfg,
        )
        assembled = assemble_paths(ctx)
        result = _build_result(
            intention,
            cat,
            assembled.all_paths,
            assembled.method,
            len(assembled.initials) > 0,
            cfg,
        )
    except Exception:
        logger.exception("Sigil generation failed for %r (%s), using fallback", intention, cat.value)
        return _fallback_result(intention, cat, cfg)

    issues = find_sigil_issues(result)
    if issues:
        logger.warning("Generated sigil failed validation (%s), using fallback", "; ".join(issues))
        return _fallback_result(intention, cat, cfg)

    elapsed = (time.perf_counter() - start) * 1000
    logger.info(
        "Generated %s/%s sigil: %d generators, %d paths, %d points in %.1fms",
        profile.value,
        cat.value,
        len(assembled.generators_run),
        result.complexity.paths,
        result.complexity.points,
        elapsed,
    )
    return result


def generate_variations(
    intention: str,
    category: Any = Category.GENERAL,
    count: int = 3,
    complexity: Any = Complexity.HIGH,
    style: Any = Style.SIGIL,
    config: EngineConfig | None = None,
) -> list[SigilResult]:
    """``count`` variants seeded with " A", " B", ... but labelled with the original intention.

    A marker whose paths repeat an earlier variant is skipped, so each variant draws
    something new. Markers run A..Z, then A2..Z2 and so on, up to ``MAX_MARKER_ATTEMPTS``
    beyond ``count``; past that a repeat is accepted rather than looping forever.
    """
    count = max(count, 0)
    variations: list[SigilResult] = []
    attempt = 0
    while len(variations) < count:
        marker = variation_marker(attempt)
        attempt += 1
        result = generate_sigil(f"{intention} {marker}", category, complexity, style, config)
        exhausted = attempt > count + MAX_MARKER_ATTEMPTS
        if not exhausted and any(result.paths == seen.paths for seen in variations):
            logger.debug("Variation marker %s repeats an earlier variant, skipping", marker)
            continue
        variations.append(result.model_copy(update={"intention": intention, "variation": len(variations) + 1}))
    return variations


def variation_marker(attempt: int) -> str:
    """``A``..``Z`` for the first 26 attempts, then ``A2``..``Z2``, ``A3``..."""
    letter = chr(VARIATION_MARKER_BASE + attempt % MARKER_LETTERS)
    cycle = attempt // MARKER_LETTERS
    return letter if cycle == 0 else f"{letter}{cycle + 1}"


def get_sigil_metadata(intention: str, paths: Iterable[Path] | Iterable[Any]) -> SigilMetadata:
    """Summary of an intention's reduction and the geometry generated from it."""
    paths = list(paths)
    processed = process_intention(intention)
    return SigilMetadata(
        intention=intention.strip(),
        processed_text=processed.processed_text,
        initials=processed.initials,
        word_count=processed.word_count,
        original_length=len(intention),
        processed_length=len(processed.processed_text),
        initials_count=len(processed.initials),
        complexity=complexity_stats(paths),
        bounding_box=bounding_box(paths),
    )
