"""Tests for page review scoring."""

from __future__ import annotations

from shadekit.core.review.config import ReviewConfig
from shadekit.core.review.models import ReviewIssue, ReviewSeverity, ReviewTarget
from shadekit.core.review.scoring import compute_score, review_blocks, unique_messages
from shadekit.core.theming.models import Block


def _issue(severity: ReviewSeverity, message: str = "m", index: int = 0) -> ReviewIssue:
    return ReviewIssue(severity=severity, message=message, target=ReviewTarget(block_index=index))


def _worst_block() -> Block:
    """Block that trips every check."""
    return Block(
        blockType="top-hero-1",
        content={
            "backgroundColor": "#000000",
            "textColor": "#111111",
            "padding": "8px",
            "buttonText": "Go",
            "subtitle": "一。二。三。",
        },
    )


class TestComputeScore:
    """Test score arithmetic."""

    def test_no_issues(self):
        """Zero issues score 100."""
        assert compute_score([]) == 100

    def test_weights(self):
        """info=4, warn=12, error=25."""
        assert compute_score([_issue(ReviewSeverity.INFO)]) == 96
        assert compute_score([_issue(ReviewSeverity.WARN)]) == 88
        assert compute_score([_issue(ReviewSeverity.ERROR)]) == 75

    def test_floor(self):
        """Penalties beyond 60 clamp to 40."""
        issues = [_issue(ReviewSeverity.ERROR)] * 3
        assert compute_score(issues) == 40

    def test_custom_weights(self):
        """Weights and bounds come from config."""
        config = ReviewConfig(
            severity_weights={ReviewSeverity.INFO: 1.5},
            score_ceiling=10,
            score_floor=0,
        )
        assert compute_score([_issue(ReviewSeverity.INFO)], config) == 9
        assert compute_score([_issue(ReviewSeverity.WARN)], config) == 10

    def test_never_above_ceiling(self):
        """Scores clamp to the ceiling even for unvalidated weights."""
        config = ReviewConfig.model_construct(
            **{**ReviewConfig().model_dump(), "severity_weights": {ReviewSeverity.INFO: -50.0}}
        )
        assert compute_score([_issue(ReviewSeverity.INFO)], config) == 100


class TestUniqueMessages:
    """Test suggestion de-duplication."""

    def test_first_seen_order(self):
        """Duplicates are dropped and order is kept."""
        issues = [
            _issue(ReviewSeverity.INFO, "b"),
            _issue(ReviewSeverity.WARN, "a"),
            _issue(ReviewSeverity.INFO, "b", index=1),
        ]
        assert unique_messages(issues) == ["b", "a"]


class TestReviewBlocks:
    """Test whole-page review."""

    def test_empty_page(self):
        """No blocks means a perfect score."""
        result = review_blocks([])
        assert result.score == 100
        assert result.issues == []
        assert result.suggestions == []

    def test_hero_scenario(self, hero_block, clean_block):
        """Warn plus info on the hero scores 84."""
        result = review_blocks([clean_block, hero_block])
        assert result.score == 84
        assert [i.target.block_index for i in result.issues] == [1, 1]

    def test_single_worst_block(self):
        """One block tripping every check scores 100 - 12 - 3 * 4."""
        result = review_blocks([_worst_block()])
        assert len(result.issues) == 4
        assert result.score == 76

    def test_worst_page_hits_floor(self):
        """Three worst blocks clamp at the floor."""
        result = review_blocks([_worst_block()] * 3)
        assert len(result.issues) == 12
        assert result.score == 40
        assert len(result.suggestions) == 4

    def test_to_dict_wire_shape(self, hero_block):
        """Serialized result uses wire names and string severities."""
        data = review_blocks([hero_block]).to_dict()
        assert set(data) == {"score", "issues", "suggestions"}
        first = data["issues"][0]
        assert first["severity"] == "warn"
        assert first["target"] == {"blockIndex": 0, "field": "textColor"}
