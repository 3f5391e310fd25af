"""FastAPI dependency injection."""

from __future__ import annotations

from sigilforge.config import settings


def get_settings():
    return settings
