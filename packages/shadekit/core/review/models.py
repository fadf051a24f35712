"""Pydantic models for block review results."""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class ReviewSeverity(str, Enum):
    """Severity level for review issues."""

    INFO = "info"
    WARN = "warn"
    ERROR = "error"


class ReviewTarget(BaseModel):
    """Where an issue applies: a block and optionally one of its fields."""

    block_index: int = Field(alias="blockIndex", description="Index of the block on the page")
    field: str | None = Field(default=None, description="Content field the issue refers to")

    model_config = ConfigDict(frozen=True, populate_by_name=True)


class ReviewIssue(BaseModel):
    """A single accessibility or readability finding."""

    severity: ReviewSeverity = Field(description="Severity level")
    message: str = Field(description="Human-readable message")
    target: ReviewTarget = Field(description="Block (and field) the issue refers to")

    model_config = ConfigDict(frozen=True)

    def to_dict(self) -> dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class ReviewResult(BaseModel):
    """Aggregated review of a page."""

    score: int = Field(description="Score from the configured floor to ceiling")
    issues: list[ReviewIssue] = Field(default_factory=list, description="All issues found")
    suggestions: list[str] = Field(
        default_factory=list,
        description="Issue messages with duplicates removed, first-seen order",
    )

    model_config = ConfigDict(frozen=True)

    def to_dict(self) -> dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


__all__ = [
    "ReviewIssue",
    "ReviewResult",
    "ReviewSeverity",
    "ReviewTarget",
]
