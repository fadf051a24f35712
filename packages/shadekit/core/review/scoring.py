"""Page-level review: run block checks and aggregate a score."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
import logging

from shadekit.core.color.convert import round_half_up
from shadekit.core.review.checks import evaluate_block
from shadekit.core.review.config import ReviewConfig
from shadekit.core.review.models import ReviewIssue, ReviewResult
from shadekit.core.theming.models import Block

logger = logging.getLogger(__name__)


def compute_score(issues: Iterable[ReviewIssue], config: ReviewConfig | None = None) -> int:
    """Score issues: ceiling minus severity penalties, clamped to [floor, ceiling].

    Example:
        >>> compute_score([])
        100
    """
    if config is None:
        config = ReviewConfig()
    penalty = sum(config.weight_for(issue.severity) for issue in issues)
    score = round_half_up(config.score_ceiling - penalty)
    return max(config.score_floor, min(config.score_ceiling, score))


def unique_messages(issues: Iterable[ReviewIssue]) -> list[str]:
    """Issue messages with duplicates removed, keeping first-seen order."""
    return list(dict.fromkeys(issue.message for issue in issues))


def review_blocks(blocks: Sequence[Block], config: ReviewConfig | None = None) -> ReviewResult:
    """Review every block of a page.

    Args:
        blocks: Page blocks in display order
        config: Thresholds and weights (defaults to ReviewConfig())

    Returns:
        ReviewResult with score, issues and de-duplicated suggestions
    """
    if config is None:
        config = ReviewConfig()

    issues: list[ReviewIssue] = []
    for index, block in enumerate(blocks):
        issues.extend(evaluate_block(block, index, config))

    result = ReviewResult(
        score=compute_score(issues, config),
        issues=issues,
        suggestions=unique_messages(issues),
    )
    logger.info("Reviewed %d blocks: score=%d, issues=%d", len(blocks), result.score, len(issues))
    return result


__all__ = [
    "compute_score",
    "review_blocks",
    "unique_messages",
]
