"""Tests for ReviewConfig validation."""

from __future__ import annotations

from pydantic import ValidationError
import pytest

from shadekit.core.review.config import ReviewConfig
from shadekit.core.review.models import ReviewSeverity


class TestReviewConfig:
    """Test review config defaults and validation."""

    def test_defaults(self):
        """Defaults match the built-in thresholds."""
        config = ReviewConfig()
        assert config.min_contrast_ratio == 4.5
        assert config.min_padding == 32.0
        assert (config.cta_text_min, config.cta_text_max) == (6, 18)
        assert config.max_hero_sentences == 2
        assert config.hero_block_types == ("top-hero-1",)
        assert (config.score_ceiling, config.score_floor) == (100, 40)

    def test_weights_from_strings(self):
        """Severity keys given as strings are coerced."""
        config = ReviewConfig.model_validate({"severity_weights": {"warn": 20}})
        assert config.weight_for(ReviewSeverity.WARN) == 20
        assert config.weight_for(ReviewSeverity.INFO) == 0.0

    def test_negative_weights_rejected(self):
        """Severity weights must not be negative."""
        with pytest.raises(ValidationError):
            ReviewConfig(severity_weights={ReviewSeverity.WARN: -1})

    def test_cta_range_validated(self):
        """Minimum above maximum is rejected."""
        with pytest.raises(ValidationError):
            ReviewConfig(cta_text_min=20, cta_text_max=10)

    def test_score_bounds_validated(self):
        """Floor above ceiling is rejected."""
        with pytest.raises(ValidationError):
            ReviewConfig(score_floor=90, score_ceiling=50)

    def test_contrast_range(self):
        """Contrast threshold must be a possible ratio."""
        with pytest.raises(ValidationError):
            ReviewConfig(min_contrast_ratio=30)

    def test_frozen(self):
        """Configs are immutable."""
        config = ReviewConfig()
        with pytest.raises(ValidationError):
            config.min_padding = 1.0
