"""Request payload models for the HTTP API."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from shadekit.core.theming.models import Block


class ReviewRequest(BaseModel):
    blocks: list[Block] = Field(description="Page blocks in display order")
    theme: str | None = Field(default=None, description="Theme key (informational)")

    model_config = ConfigDict(extra="allow")


class ShadesRequest(BaseModel):
    hex: str = Field(description="Base color")


class ApplyThemeRequest(BaseModel):
    hex: str = Field(description="Base color")
    blocks: list[Block] = Field(description="Blocks to recolor")


__all__ = [
    "ApplyThemeRequest",
    "ReviewRequest",
    "ShadesRequest",
]
