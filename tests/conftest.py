"""Shared pytest fixtures for shadekit tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from shadekit.core.color.ramp import ColorShades, generate_shades_from_hex
from shadekit.core.config.loader import clear_app_config_cache
from shadekit.core.theming.models import Block

# ============================================================================
# Path Fixtures
# ============================================================================


@pytest.fixture
def project_root() -> Path:
    """Get project root directory."""
    return Path(__file__).parent.parent


# ============================================================================
# Color Fixtures
# ============================================================================


@pytest.fixture
def red_shades() -> ColorShades:
    """Ramp for the urgent red base (#DC2626)."""
    return generate_shades_from_hex("#DC2626")


@pytest.fixture
def blue_shades() -> ColorShades:
    """Ramp for the power blue base (#1E40AF)."""
    return generate_shades_from_hex("#1E40AF")


# ============================================================================
# Block Fixtures
# ============================================================================


@pytest.fixture
def hero_block() -> Block:
    """Hero block with low contrast and a three-sentence subtitle."""
    return Block(
        blockType="top-hero-1",
        content={
            "title": "Welcome",
            "subtitle": "一文目です。二文目です。三文目です。",
            "backgroundColor": "#000000",
            "textColor": "#111111",
            "buttonText": "今すぐ申し込む",
            "padding": "96px 24px",
        },
    )


@pytest.fixture
def clean_block() -> Block:
    """Block that passes every check."""
    return Block(
        blockType="top-cta-1",
        content={
            "title": "Join today",
            "backgroundColor": "#FFFFFF",
            "textColor": "#111827",
            "buttonText": "Start now",
            "padding": "64px 24px",
        },
    )


@pytest.fixture
def pricing_block() -> Block:
    """Pricing block with one highlighted and one regular plan."""
    return Block(
        blockType="top-pricing-1",
        content={
            "title": "Plans",
            "backgroundColor": "#FFFFFF",
            "textColor": "#000000",
            "plans": [
                {
                    "name": "Pro",
                    "highlighted": True,
                    "backgroundColor": "#000000",
                    "textColor": "#000000",
                    "buttonColor": "#000000",
                    "borderColor": "#000000",
                    "priceColor": "#000000",
                },
                {
                    "name": "Basic",
                    "backgroundColor": "#000000",
                    "textColor": "#000000",
                    "buttonColor": "#000000",
                },
            ],
        },
    )


# ============================================================================
# Config Fixtures
# ============================================================================


@pytest.fixture(autouse=True)
def _reset_app_config_cache(monkeypatch: pytest.MonkeyPatch):
    """Isolate tests from the cached default config and env overrides."""
    monkeypatch.delenv("SHADEKIT_LOG_LEVEL", raising=False)
    clear_app_config_cache()
    yield
    clear_app_config_cache()
