"""Individual block checks and the evaluate_block orchestrator."""

from __future__ import annotations

from collections.abc import Callable
import logging
import re
from typing import Any

from shadekit.core.review.config import ReviewConfig
from shadekit.core.review.contrast import contrast_ratio
from shadekit.core.review.models import ReviewIssue, ReviewSeverity, ReviewTarget
from shadekit.core.theming.models import Block

logger = logging.getLogger(__name__)

_FIRST_NUMBER_RE = re.compile(r"(\d+(?:\.\d+)?)")

PADDING_MESSAGE = "Section padding is tight, which can make the content harder to scan."
CTA_LENGTH_MESSAGE = "CTA button text performs best between {low} and {high} characters."
HERO_SENTENCES_MESSAGE = "Keep the hero subtitle to {limit} sentences or fewer for readability."

# Check signature: (block, index, config) → issue or None
BlockCheck = Callable[[Block, int, ReviewConfig], ReviewIssue | None]


def _get_string(content: dict[str, Any], key: str) -> str | None:
    value = content.get(key)
    return value if isinstance(value, str) else None


def _issue(severity: ReviewSeverity, message: str, index: int, field: str) -> ReviewIssue:
    return ReviewIssue(
        severity=severity,
        message=message,
        target=ReviewTarget(block_index=index, field=field),
    )


def extract_padding(padding: str | None) -> float | None:
    """Extract the first number from a padding value.

    Example:
        >>> extract_padding("24px 16px")
        24.0
        >>> extract_padding("auto") is None
        True
    """
    if not padding:
        return None
    match = _FIRST_NUMBER_RE.search(padding)
    if not match:
        return None
    return float(match.group(1))


def check_contrast(block: Block, index: int, config: ReviewConfig) -> ReviewIssue | None:
    """Warn when text and background colors are too close.

    Skipped when either color is missing or in an unsupported syntax.
    """
    ratio = contrast_ratio(
        _get_string(block.content, "backgroundColor"),
        _get_string(block.content, "textColor"),
    )
    if ratio is None or ratio >= config.min_contrast_ratio:
        return None
    return _issue(
        ReviewSeverity.WARN,
        f"Low contrast ratio ({ratio:.2f}) may make text hard to read. "
        "Increase the difference between background and text colors.",
        index,
        "textColor",
    )


def check_padding(block: Block, index: int, config: ReviewConfig) -> ReviewIssue | None:
    value = extract_padding(_get_string(block.content, "padding"))
    if value is None or value >= config.min_padding:
        return None
    return _issue(ReviewSeverity.INFO, PADDING_MESSAGE, index, "padding")


def check_cta_text(block: Block, index: int, config: ReviewConfig) -> ReviewIssue | None:
    """Flag CTA button text outside the configured length range.

    Applies to CTA blocks and to any block with button text; a CTA block
    without button text has nothing to measure.
    """
    button_text = _get_string(block.content, "buttonText")
    if not button_text:
        return None

    length = len(button_text.strip())
    if config.cta_text_min <= length <= config.cta_text_max:
        return None
    return _issue(
        ReviewSeverity.INFO,
        CTA_LENGTH_MESSAGE.format(low=config.cta_text_min, high=config.cta_text_max),
        index,
        "buttonText",
    )


def count_sentences(text: str, delimiter: str = "。") -> int:
    """Count non-empty segments when splitting on ``delimiter``.

    Example:
        >>> count_sentences("一文。二文。三文。")
        3
    """
    return sum(1 for segment in text.split(delimiter) if segment)


def check_hero_subtitle(block: Block, index: int, config: ReviewConfig) -> ReviewIssue | None:
    if block.block_type not in config.hero_block_types:
        return None
    subtitle = _get_string(block.content, "subtitle")
    if not subtitle:
        return None
    if count_sentences(subtitle, config.sentence_delimiter) <= config.max_hero_sentences:
        return None
    return _issue(
        ReviewSeverity.INFO,
        HERO_SENTENCES_MESSAGE.format(limit=config.max_hero_sentences),
        index,
        "subtitle",
    )


DEFAULT_CHECKS: tuple[BlockCheck, ...] = (
    check_contrast,
    check_padding,
    check_cta_text,
    check_hero_subtitle,
)


def evaluate_block(
    block: Block,
    index: int,
    config: ReviewConfig | None = None,
    checks: tuple[BlockCheck, ...] = DEFAULT_CHECKS,
) -> list[ReviewIssue]:
    """Run every check on one block.

    Args:
        block: Block to evaluate
        index: Position of the block on the page (used in issue targets)
        config: Thresholds (defaults to ReviewConfig())
        checks: Checks to run, in order

    Returns:
        Issues in check order

    Example:
        >>> block = Block(
        ...     blockType="top-hero-1",
        ...     content={"backgroundColor": "#000000", "textColor": "#111111",
        ...              "subtitle": "一文。二文。三文。"},
        ... )
        >>> [issue.severity.value for issue in evaluate_block(block, 0)]
        ['warn', 'info']
    """
    if config is None:
        config = ReviewConfig()

    issues: list[ReviewIssue] = []
    for check in checks:
        issue = check(block, index, config)
        if issue is not None:
            issues.append(issue)

    if issues:
        logger.debug("Block %d (%s): %d issues", index, block.block_type, len(issues))
    return issues


__all__ = [
    "DEFAULT_CHECKS",
    "BlockCheck",
    "check_contrast",
    "check_cta_text",
    "check_hero_subtitle",
    "check_padding",
    "count_sentences",
    "evaluate_block",
    "extract_padding",
]
