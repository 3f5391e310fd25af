"""Validator — structural checks a sigil must pass before it leaves the engine."""

from __future__ import annotations

import math
from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel

from sigilforge.utils.geometry import point_coords


class InvalidSigilError(ValueError):
    """Raised at a boundary that refuses malformed sigil data."""

    def __init__(self, issues: list[str]) -> None:
        self.issues = issues
        super().__init__("Invalid sigil data: " + "; ".join(issues))


def _as_mapping(data: Any) -> Mapping[str, Any] | None:
    if isinstance(data, BaseModel):
        return data.model_dump(by_alias=True)
    if isinstance(data, Mapping):
        return data
    return None


def find_sigil_issues(data: Any) -> list[str]:
    """Every structural problem with ``data``; empty when it is valid.

    ``data`` may be a SigilResult or its JSON-shaped dict.
    """
    record = _as_mapping(data)
    if record is None:
        return ["sigil data must be an object"]

    issues: list[str] = []
    if not isinstance(record.get("intention"), str):
        issues.append("intention must be a string")

    paths = record.get("paths")
    if not isinstance(paths, (list, tuple)) or len(paths) == 0:
        issues.append("paths must be a non-empty list")
        return issues

    for index, path in enumerate(paths):
        if not isinstance(path, (list, tuple)) or len(path) == 0:
            issues.append(f"path {index} is empty")
            continue
        for point in path:
            coords = point_coords(point)
            if coords is None:
                issues.append(f"path {index} has a non-numeric point")
                break
            x, y = coords
            if math.isnan(x) or math.isnan(y):
                issues.append(f"path {index} has a NaN coordinate")
                break
            if not (0.0 <= x <= 1.0 and 0.0 <= y <= 1.0):
                issues.append(f"path {index} has a point outside the unit square")
                break
    return issues


def validate_sigil_data(data: Any) -> bool:
    return not find_sigil_issues(data)


def ensure_valid(data: Any) -> None:
    issues = find_sigil_issues(data)
    if issues:
        raise InvalidSigilError(issues)
