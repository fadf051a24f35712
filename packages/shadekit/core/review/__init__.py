"""Block review: accessibility and readability checks with a page score."""

from shadekit.core.review.checks import (
    DEFAULT_CHECKS,
    check_contrast,
    check_cta_text,
    check_hero_subtitle,
    check_padding,
    evaluate_block,
)
from shadekit.core.review.config import ReviewConfig
from shadekit.core.review.contrast import contrast_ratio, relative_luminance
from shadekit.core.review.models import ReviewIssue, ReviewResult, ReviewSeverity, ReviewTarget
from shadekit.core.review.scoring import compute_score, review_blocks

__all__ = [
    "DEFAULT_CHECKS",
    "ReviewConfig",
    "ReviewIssue",
    "ReviewResult",
    "ReviewSeverity",
    "ReviewTarget",
    "check_contrast",
    "check_cta_text",
    "check_hero_subtitle",
    "check_padding",
    "compute_score",
    "contrast_ratio",
    "evaluate_block",
    "relative_luminance",
    "review_blocks",
]
