"""POST /api/sigils/* — generation, variations, analysis, export and metadata.

Generation is CPU-bound, so it runs in the default executor to keep the event loop free.
"""

from __future__ import annotations

import asyncio
import time
from functools import partial

from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import Response

from sigilforge.config import Settings
from sigilforge.dependencies import get_settings
from sigilforge.engine.analysis import analyze_symmetry, bounding_box, complexity_stats
from sigilforge.engine.generator import generate_sigil, generate_variations, get_sigil_metadata
from sigilforge.engine.validation import find_sigil_issues
from sigilforge.models.requests import (
    AnalyzeRequest,
    ExportRequest,
    GenerateRequest,
    MetadataRequest,
    VariationsRequest,
)
from sigilforge.models.responses import AnalyzeResponse
from sigilforge.models.sigil import SigilMetadata, SigilResult
from sigilforge.svg.parser import parse_sigil_svg
from sigilforge.svg.serializer import export_svg

router = APIRouter(prefix="/sigils")


async def _run(fn, *args):
    return await asyncio.get_running_loop().run_in_executor(None, partial(fn, *args))


@router.post("/generate", response_model=SigilResult)
async def generate(req: GenerateRequest) -> SigilResult:
    return await _run(generate_sigil, req.intention, req.category, req.complexity, req.style)


@router.post("/variations", response_model=list[SigilResult])
async def variations(req: VariationsRequest, settings: Settings = Depends(get_settings)) -> list[SigilResult]:
    count = min(req.count, settings.max_variations)
    return await _run(generate_variations, req.intention, req.category, count, req.complexity)


@router.post("/analyze", response_model=AnalyzeResponse)
async def analyze(req: AnalyzeRequest) -> AnalyzeResponse:
    start = time.perf_counter()

    caption = None
    if req.paths is not None:
        paths = [[(p.x, p.y) for p in path] for path in req.paths]
    elif req.svg is not None:
        parsed = parse_sigil_svg(req.svg)
        paths = [points.tolist() for points in parsed.paths]
        caption = parsed.caption
    else:
        raise HTTPException(status_code=422, detail="Provide either paths or svg")

    issues = find_sigil_issues({"intention": caption or "", "paths": paths})
    elapsed = (time.perf_counter() - start) * 1000

    return AnalyzeResponse(
        complexity=complexity_stats(paths),
        bounding_box=bounding_box(paths),
        symmetry=analyze_symmetry(paths),
        valid=not issues,
        issues=issues,
        caption=caption,
        processing_time_ms=round(elapsed, 1),
    )


@router.post("/export")
async def export(req: ExportRequest, settings: Settings = Depends(get_settings)) -> Response:
    svg = export_svg(
        req.sigil,
        canvas_size=req.canvas_size or settings.export_canvas_size,
        background=req.background,
        stroke=req.stroke,
        stroke_width=req.stroke_width,
    )
    return Response(content=svg, media_type="image/svg+xml")


@router.post("/metadata", response_model=SigilMetadata)
async def metadata(req: MetadataRequest) -> SigilMetadata:
    sigil = await _run(generate_sigil, req.intention, req.category)
    return get_sigil_metadata(req.intention, sigil.path_arrays())
