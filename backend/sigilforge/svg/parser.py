"""SVG parser — read an exported sigil SVG back into normalized paths.

Only ``<path>`` elements are read; the background rect is ignored. Coordinates are scaled
by the viewBox (or width/height) so a round-tripped sigil lands back in the unit square.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from html import unescape

import numpy as np
from numpy.typing import NDArray
from svgpathtools import Line, parse_path

logger = logging.getLogger(__name__)

_VIEWBOX_RE = re.compile(r'viewBox\s*=\s*"([^"]+)"')
_WIDTH_RE = re.compile(r'<svg[^>]*\swidth\s*=\s*"([^"]*?)"', re.IGNORECASE)
_HEIGHT_RE = re.compile(r'<svg[^>]*\sheight\s*=\s*"([^"]*?)"', re.IGNORECASE)
_PATH_D_RE = re.compile(r'<path[^>]*\sd\s*=\s*"([^"]+)"[^>]*/?\s*>', re.IGNORECASE)
_TEXT_RE = re.compile(r"<text[^>]*>(.*?)</text>", re.IGNORECASE | re.DOTALL)

CURVE_SAMPLES = 10


@dataclass
class ParsedSigil:
    paths: list[NDArray[np.float64]] = field(default_factory=list)
    caption: str = ""
    canvas_width: float = 1.0
    canvas_height: float = 1.0


def _length(value: str) -> float | None:
    """Positive finite length, or None for anything unusable as a canvas dimension."""
    try:
        length = float(value.replace("px", "").replace("pt", ""))
    except ValueError:
        return None
    return length if np.isfinite(length) and length > 0 else None


def _canvas_size(svg_text: str) -> tuple[float, float]:
    vb_match = _VIEWBOX_RE.search(svg_text)
    if vb_match:
        parts = vb_match.group(1).replace(",", " ").split()
        if len(parts) >= 4:
            vb_width, vb_height = _length(parts[2]), _length(parts[3])
            if vb_width and vb_height:
                return vb_width, vb_height
        logger.warning("Unusable viewBox %r, falling back to width/height", vb_match.group(1))

    width = height = None
    w_match = _WIDTH_RE.search(svg_text)
    h_match = _HEIGHT_RE.search(svg_text)
    if w_match:
        width = _length(w_match.group(1))
    if h_match:
        height = _length(h_match.group(1))
    return width or 1.0, height or 1.0


def _path_points(d: str) -> NDArray[np.float64]:
    """Vertices of a path: exact for line segments, sampled for curves."""
    path = parse_path(d)
    points: list[complex] = []
    for seg in path:
        if isinstance(seg, Line):
            if not points or points[-1] != seg.start:
                points.append(seg.start)
            points.append(seg.end)
        else:
            for t in np.linspace(0, 1, CURVE_SAMPLES):
                pt = seg.point(t)
                if not points or points[-1] != pt:
                    points.append(pt)
    return np.array([(p.real, p.imag) for p in points], dtype=np.float64).reshape(-1, 2)


def parse_sigil_svg(svg_text: str) -> ParsedSigil:
    """Parse SVG markup into paths normalized to the unit square plus the caption text."""
    width, height = _canvas_size(svg_text)
    result = ParsedSigil(canvas_width=width, canvas_height=height)

    for match in _PATH_D_RE.finditer(svg_text):
        try:
            points = _path_points(match.group(1))
        except Exception as e:
            logger.warning("Failed to parse path: %s", e)
            continue
        if len(points) == 0:
            continue
        result.paths.append(points / np.array([width, height]))

    text_match = _TEXT_RE.search(svg_text)
    if text_match:
        result.caption = unescape(text_match.group(1)).strip()

    logger.info("Parsed SVG: %d paths, canvas %.0fx%.0f", len(result.paths), width, height)
    return result
