# -*- coding: utf-8 -*-
"""
Pydantic data models for the API.
"""
from typing import Literal

from pydantic import BaseModel, Field, field_validator

from .config import settings


class MarkupRequest(BaseModel):
    """Request carrying a markup string."""

    markup: str = Field(..., description="HTML fragment or document")

    @field_validator("markup")
    @classmethod
    def check_length(cls, value: str) -> str:
        if len(value) > settings.MAX_MARKUP_LENGTH:
            raise ValueError(
                f"markup exceeds {settings.MAX_MARKUP_LENGTH} characters"
            )
        return value


class NormalizeRequest(MarkupRequest):
    """Normalization request schema."""

    format: Literal["raw", "beautify", "minify"] = Field(
        default="raw",
        description="Display format applied to the normalized markup",
    )


class NormalizeResponse(BaseModel):
    """Normalization response schema."""

    markup: str = ""
    formatted: str = ""
    plain_text: str = ""
    steps_applied: list[str] = Field(default_factory=list)
    duration_ms: int = 0


class FormatRequest(MarkupRequest):
    """Beautify/minify request schema."""

    mode: Literal["beautify", "minify"] = "beautify"


class MarkupResponse(BaseModel):
    """Response carrying a single markup string."""

    markup: str


class HealthResponse(BaseModel):
    """Health check response schema."""

    status: str
    version: str
