"""Tarot endpoints — card designs, deck variants and reading spreads."""

from __future__ import annotations

import asyncio
from functools import partial

from fastapi import APIRouter

from sigilforge.engine.tarot import generate_card_design, get_tarot_spread
from sigilforge.engine.tarot_data import TAROT_VARIANTS
from sigilforge.models.requests import TarotCardRequest
from sigilforge.models.tarot import TarotCardDesign, TarotSpread, TarotVariant

router = APIRouter(prefix="/tarot")


@router.post("/card", response_model=TarotCardDesign)
async def card(req: TarotCardRequest) -> TarotCardDesign:
    build = partial(
        generate_card_design,
        req.card,
        intention=req.intention,
        variant=req.variant,
        category=req.category,
        complexity=req.complexity,
    )
    return await asyncio.get_running_loop().run_in_executor(None, build)


@router.get("/variants", response_model=list[TarotVariant])
async def variants() -> list[TarotVariant]:
    return list(TAROT_VARIANTS.values())


@router.get("/spreads/{spread_type}", response_model=TarotSpread)
async def spread(spread_type: str) -> TarotSpread:
    return get_tarot_spread(spread_type)
