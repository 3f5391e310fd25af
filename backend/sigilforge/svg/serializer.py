"""Write a sigil as a standalone SVG document: background rect, one stroked path per Path, caption."""

from __future__ import annotations

import logging
from html import escape
from typing import Any

from pydantic import BaseModel

from sigilforge.engine.validation import ensure_valid
from sigilforge.utils.geometry import point_coords

logger = logging.getLogger(__name__)

DEFAULT_CANVAS_SIZE = 400


def _fmt(value: float) -> str:
    text = f"{value:.3f}".rstrip("0").rstrip(".")
    return "0" if text == "-0" else text


def path_data(points: list[Any], size: float) -> str:
    """``M x y L x y ...`` for one path scaled to the canvas."""
    commands = []
    for index, point in enumerate(points):
        x, y = point_coords(point)
        commands.append(f"{'M' if index == 0 else 'L'} {_fmt(x * size)} {_fmt(y * size)}")
    return " ".join(commands)


def export_svg(
    sigil: Any,
    canvas_size: int = DEFAULT_CANVAS_SIZE,
    background: str = "#000",
    stroke: str = "#fff",
    stroke_width: float = 2,
    opacity: float = 0.8,
) -> str:
    """Serialize a SigilResult (or its JSON dict) to SVG markup.

    Raises InvalidSigilError when the data is not a structurally valid sigil.
    """
    ensure_valid(sigil)
    record = sigil.model_dump(by_alias=True) if isinstance(sigil, BaseModel) else sigil
    size = canvas_size

    lines = [
        f'<svg width="{size}" height="{size}" viewBox="0 0 {size} {size}" xmlns="http://www.w3.org/2000/svg">',
        f'  <rect width="{size}" height="{size}" fill="{escape(background)}"/>',
    ]
    for points in record["paths"]:
        lines.append(
            f'  <path d="{path_data(points, size)}" stroke="{escape(stroke)}" stroke-width="{stroke_width}"'
            f' fill="none" opacity="{opacity}"/>'
        )
    lines.append(
        f'  <text x="{size / 2:g}" y="{size - 20}" text-anchor="middle" fill="#666" font-size="12">'
        f'{escape(record["intention"])}</text>'
    )
    lines.append("</svg>")

    logger.debug("Exported sigil with %d paths at %dpx", len(record["paths"]), size)
    return "\n".join(lines)
