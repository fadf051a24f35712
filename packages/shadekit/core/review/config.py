"""Configuration model for block review thresholds."""

from __future__ import annotations

from typing import Self

from pydantic import BaseModel, Field, field_validator, model_validator

from shadekit.core.review.models import ReviewSeverity


class ReviewConfig(BaseModel):
    """Review thresholds and scoring weights.

    Example:
        >>> config = ReviewConfig(min_contrast_ratio=7.0)
        >>> config.min_padding
        32.0
    """

    # Contrast
    min_contrast_ratio: float = Field(
        default=4.5,
        ge=1.0,
        le=21.0,
        description="Minimum text/background contrast ratio (WCAG AA body text)",
    )

    # Spacing
    min_padding: float = Field(
        default=32.0,
        ge=0.0,
        description="Minimum vertical section padding (first number of the padding value)",
    )

    # Copy length
    cta_text_min: int = Field(default=6, ge=0, description="Minimum CTA button text length")
    cta_text_max: int = Field(default=18, ge=0, description="Maximum CTA button text length")
    max_hero_sentences: int = Field(
        default=2,
        ge=0,
        description="Maximum sentences in a hero subtitle",
    )
    hero_block_types: tuple[str, ...] = Field(
        default=("top-hero-1",),
        description="Block types whose subtitle sentence count is checked",
    )
    sentence_delimiter: str = Field(
        default="。",
        min_length=1,
        description="Sentence delimiter for hero subtitles",
    )

    # Scoring
    severity_weights: dict[ReviewSeverity, float] = Field(
        default_factory=lambda: {
            ReviewSeverity.INFO: 4.0,
            ReviewSeverity.WARN: 12.0,
            ReviewSeverity.ERROR: 25.0,
        },
        description="Score penalty per issue severity",
    )
    score_ceiling: int = Field(default=100, ge=0, description="Score with no issues")
    score_floor: int = Field(default=40, ge=0, description="Lowest possible score")

    model_config = {"frozen": True}

    @field_validator("severity_weights")
    @classmethod
    def _check_weights(cls, value: dict[ReviewSeverity, float]) -> dict[ReviewSeverity, float]:
        negative = sorted(severity.value for severity, weight in value.items() if weight < 0)
        if negative:
            raise ValueError(f"severity weights must be >= 0 (negative: {negative})")
        return value

    @model_validator(mode="after")
    def _check_ranges(self) -> Self:
        if self.cta_text_min > self.cta_text_max:
            raise ValueError(
                f"cta_text_min ({self.cta_text_min}) must not exceed cta_text_max ({self.cta_text_max})"
            )
        if self.score_floor > self.score_ceiling:
            raise ValueError(
                f"score_floor ({self.score_floor}) must not exceed score_ceiling ({self.score_ceiling})"
            )
        return self

    def weight_for(self, severity: ReviewSeverity) -> float:
        return self.severity_weights.get(severity, 0.0)
