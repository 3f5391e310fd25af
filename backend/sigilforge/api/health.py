"""Health check + meta endpoints."""

from __future__ import annotations

from fastapi import APIRouter

from sigilforge.engine.registry import Category, Complexity, Style, register_builtin_patterns
from sigilforge.models.responses import CategoriesResponse, HealthResponse

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health() -> HealthResponse:
    return HealthResponse(
        status="ok",
        version="0.1.0",
        patterns_registered=register_builtin_patterns().count,
    )


@router.get("/categories", response_model=CategoriesResponse)
async def categories() -> CategoriesResponse:
    return CategoriesResponse(
        categories=[c.value for c in Category],
        complexities=[c.name.lower() for c in Complexity],
        styles=[s.value for s in Style],
    )
