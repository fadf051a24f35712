"""Semantic color roles and block categories.

Roles name the purpose a color serves in a block and map to a fixed ramp
step. Categories are derived from a block's type tag once its origin prefix
is stripped.
"""

from __future__ import annotations

from enum import Enum

_ORIGIN_PREFIXES: tuple[str, ...] = ("top-", "handwritten-")


class ThemeRole(str, Enum):
    """Content keys that receive a ramp color in the generic pass."""

    BACKGROUND = "backgroundColor"
    TEXT = "textColor"
    TITLE = "titleColor"
    DESCRIPTION = "descriptionColor"
    ACCENT = "accentColor"
    BUTTON = "buttonColor"
    SECONDARY_BUTTON = "secondaryButtonColor"
    BUTTON_TEXT = "buttonTextColor"
    SURFACE = "surfaceColor"
    CARD_BACKGROUND = "cardBackgroundColor"
    BORDER = "borderColor"
    ICON = "iconColor"
    BADGE = "badgeColor"
    BADGE_TEXT = "badgeTextColor"
    OVERLAY = "overlayColor"


ROLE_STEPS: dict[ThemeRole, int] = {
    ThemeRole.BACKGROUND: 50,
    ThemeRole.TEXT: 800,
    ThemeRole.TITLE: 900,
    ThemeRole.DESCRIPTION: 800,
    ThemeRole.ACCENT: 600,
    ThemeRole.BUTTON: 500,
    ThemeRole.SECONDARY_BUTTON: 100,
    ThemeRole.BUTTON_TEXT: 50,
    ThemeRole.SURFACE: 100,
    ThemeRole.CARD_BACKGROUND: 100,
    ThemeRole.BORDER: 200,
    ThemeRole.ICON: 600,
    ThemeRole.BADGE: 500,
    ThemeRole.BADGE_TEXT: 50,
    ThemeRole.OVERLAY: 950,
}


class BlockCategory(str, Enum):
    """Block families with category-specific refinement.

    Declaration order is the match order: the first category whose value is
    a prefix of the normalized block type wins.
    """

    HERO = "hero"
    PRICING = "pricing"
    TESTIMONIAL = "testimonial"
    FAQ = "faq"
    FEATURES = "features"
    CTA = "cta"
    TEXT_IMAGE = "text-img"
    STATS = "stats"
    COMPARISON = "comparison"
    BONUS_LIST = "bonus-list"
    GUARANTEE = "guarantee"
    PROBLEM = "problem"
    SPECIAL_PRICE = "special-price"
    BEFORE_AFTER = "before-after"
    AUTHOR_PROFILE = "author-profile"
    SCARCITY = "scarcity"
    URGENCY = "urgency"
    COUNTDOWN = "countdown"


def normalize_block_type(block_type: str) -> str:
    """Strip one leading origin prefix (``top-`` or ``handwritten-``).

    Example:
        >>> normalize_block_type("top-hero-1")
        'hero-1'
        >>> normalize_block_type("sticky-cta-1")
        'sticky-cta-1'
    """
    for prefix in _ORIGIN_PREFIXES:
        if block_type.startswith(prefix):
            return block_type[len(prefix) :]
    return block_type


def resolve_category(block_type: str) -> BlockCategory | None:
    """Resolve the category of a (possibly prefixed) block type.

    Returns:
        Matching BlockCategory, or None for types with no refinement
    """
    normalized = normalize_block_type(block_type)
    for category in BlockCategory:
        if normalized.startswith(category.value):
            return category
    return None


__all__ = [
    "ROLE_STEPS",
    "BlockCategory",
    "ThemeRole",
    "normalize_block_type",
    "resolve_category",
]
