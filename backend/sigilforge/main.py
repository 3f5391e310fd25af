"""FastAPI app factory."""

from __future__ import annotations

import logging

from dotenv import load_dotenv
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from sigilforge.config import settings
from sigilforge.engine.validation import InvalidSigilError

load_dotenv()

logging.basicConfig(
    level=getattr(logging, settings.sigilforge_log_level.upper(), logging.DEBUG),
    format="%(asctime)s %(name)s %(levelname)s %(message)s",
)


def create_app() -> FastAPI:
    app = FastAPI(
        title="Sigilforge",
        description="Procedural sigil and tarot geometry engine",
        version="0.1.0",
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Import all pattern modules to trigger registration
    _register_patterns()

    app.add_exception_handler(InvalidSigilError, _invalid_sigil_handler)

    from sigilforge.api.router import api_router

    app.include_router(api_router)

    return app


def _register_patterns() -> None:
    """Import all pattern modules so @pattern decorators fire."""
    from sigilforge.engine.registry import register_builtin_patterns

    register_builtin_patterns()


async def _invalid_sigil_handler(request: Request, exc: InvalidSigilError) -> JSONResponse:
    return JSONResponse(status_code=422, content={"detail": exc.issues})


app = create_app()
