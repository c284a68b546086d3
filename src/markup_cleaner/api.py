# -*- coding: utf-8 -*-
"""
FastAPI API for the markup cleaner.

Endpoints are plain functions so the CPU-bound pipeline runs in the
threadpool instead of blocking the event loop.
"""
import logging
import time
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware

from . import __version__
from .config import settings
from .formatter import format_markup, remove_line_breaks, to_plain_text
from .logging_config import setup_logging
from .middleware import RequestContextMiddleware
from .models import (
    FormatRequest,
    HealthResponse,
    MarkupRequest,
    MarkupResponse,
    NormalizeRequest,
    NormalizeResponse,
)
from .pipeline import normalization_pipeline

# Setup structured logging
setup_logging()
logger = logging.getLogger(__name__)


# noinspection PyUnusedLocal
@asynccontextmanager
async def lifespan(_app: FastAPI):
    """Application lifecycle management."""
    logger.info("Starting markup cleaner service", extra={"version": __version__})
    yield
    logger.info("Shutting down markup cleaner service")


app = FastAPI(
    title="Markup Cleaner Service",
    description="Normalizes rich-text editor HTML into minimal semantic markup",
    version=__version__,
    lifespan=lifespan,
    docs_url="/docs" if settings.DOCS_ENABLED else None,
    redoc_url="/redoc" if settings.DOCS_ENABLED else None,
)

# Middleware stack (order matters: last added = first executed)
app.add_middleware(GZipMiddleware, minimum_size=settings.GZIP_MIN_SIZE)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=settings.CORS_ALLOW_CREDENTIALS,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.add_middleware(RequestContextMiddleware)


@app.get("/health", response_model=HealthResponse)
def health_check() -> HealthResponse:
    """Service health endpoint."""
    return HealthResponse(status="healthy", version=__version__)


@app.post("/normalize", response_model=NormalizeResponse)
def normalize_markup(request: NormalizeRequest) -> NormalizeResponse:
    """
    Normalize editor markup into clean semantic HTML.

    - **markup**: raw HTML pasted from an editor
    - **format**: "raw", "beautify" or "minify" rendition for `formatted`
    """
    started = time.perf_counter()
    result = normalization_pipeline.process(request.markup)

    formatted = result.markup
    if request.format != "raw":
        formatted = format_markup(result.markup, request.format)

    duration_ms = int((time.perf_counter() - started) * 1000)
    logger.info(
        "Normalize completed",
        extra={
            "input_length": len(request.markup),
            "output_length": len(result.markup),
            "duration_ms": duration_ms,
            "steps_applied": result.steps_applied,
            "output_format": request.format,
        },
    )

    return NormalizeResponse(
        markup=result.markup,
        formatted=formatted,
        plain_text=to_plain_text(result.markup),
        steps_applied=result.steps_applied,
        duration_ms=duration_ms,
    )


@app.post("/format", response_model=MarkupResponse)
def format_endpoint(request: FormatRequest) -> MarkupResponse:
    """Beautify or minify already-clean markup."""
    return MarkupResponse(markup=format_markup(request.markup, request.mode))


@app.post("/remove-line-breaks", response_model=MarkupResponse)
def remove_line_breaks_endpoint(request: MarkupRequest) -> MarkupResponse:
    """Strip every <br> from the markup."""
    return MarkupResponse(markup=remove_line_breaks(request.markup))
