"""Category-specific theme refinement.

Each block category declares a schema: the semantic roles it supports in the
generic pass, the content fields it colors beyond the role table, plus nested collections (plans, testimonials, FAQ
entries...) whose items get their own colors. Refinements are looked up by
category in a registry instead of a chain of prefix checks.

Refinements never add keys: a field is only recolored when the content (or
the collection item) already carries it.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping
import logging
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from shadekit.core.color.ramp import ColorShades
from shadekit.core.theming.roles import ROLE_STEPS, BlockCategory, ThemeRole

logger = logging.getLogger(__name__)

# Refinement signature: (content copy, shades) → refined content
Refinement = Callable[[dict[str, Any], ColorShades], dict[str, Any]]


class CollectionRule(BaseModel):
    """Colors applied to each mapping item of a list-valued content field."""

    key: str = Field(description="Content key holding the list (e.g. 'plans')")
    fields: dict[str, int] = Field(description="Item field → shade step")

    model_config = ConfigDict(frozen=True)


class CategorySchema(BaseModel):
    """Declared color fields for one block category."""

    category: BlockCategory = Field(description="Category this schema applies to")
    roles: frozenset[ThemeRole] = Field(
        default_factory=lambda: frozenset(ThemeRole),
        description="Roles recolored by the generic pass (all roles by default)",
    )
    fields: dict[str, int] = Field(default_factory=dict, description="Content field → shade step")
    collections: tuple[CollectionRule, ...] = Field(
        default=(), description="Nested list rules"
    )

    model_config = ConfigDict(frozen=True)

    def generic_fields(self) -> dict[str, int]:
        """Content key → step for the roles this category supports."""
        return role_fields(self.roles)


def role_fields(roles: Iterable[ThemeRole]) -> dict[str, int]:
    """Map roles to their content keys and steps, in role table order."""
    wanted = set(roles)
    return {role.value: step for role, step in ROLE_STEPS.items() if role in wanted}


def assign_existing(target: dict[str, Any], fields: Mapping[str, int], shades: ColorShades) -> None:
    """Set ``target[field] = shades[step]`` for fields already in ``target``."""
    for field, step in fields.items():
        if field in target:
            target[field] = shades[step]


def _recolor_items(items: Any, fields: Mapping[str, int], shades: ColorShades) -> Any:
    if not isinstance(items, list):
        return items
    recolored: list[Any] = []
    for item in items:
        if isinstance(item, dict):
            item = dict(item)
            assign_existing(item, fields, shades)
        recolored.append(item)
    return recolored


def schema_refinement(schema: CategorySchema) -> Refinement:
    """Build a refinement that applies a category schema.

    Example:
        >>> refine = schema_refinement(CATEGORY_SCHEMAS[BlockCategory.HERO])
        >>> refine({"taglineColor": "#000"}, shades)["taglineColor"] == shades[700]
        True
    """

    def refine(content: dict[str, Any], shades: ColorShades) -> dict[str, Any]:
        assign_existing(content, schema.fields, shades)
        for rule in schema.collections:
            if rule.key in content:
                content[rule.key] = _recolor_items(content[rule.key], rule.fields, shades)
        return content

    return refine


# Plan colors for highlighted vs regular pricing plans
_HIGHLIGHTED_PLAN: dict[str, int] = {"backgroundColor": 600, "textColor": 50, "buttonColor": 500}
_REGULAR_PLAN: dict[str, int] = {"backgroundColor": 100, "textColor": 900, "buttonColor": 600}
_PLAN_SHARED: dict[str, int] = {"borderColor": 200, "priceColor": 500}


def refine_pricing(content: dict[str, Any], shades: ColorShades) -> dict[str, Any]:
    """Pricing refinement: highlighted plans swap foreground and background.

    A highlighted plan is filled with a strong shade and light text; other
    plans sit on a pale card with dark text.
    """
    assign_existing(content, CATEGORY_SCHEMAS[BlockCategory.PRICING].fields, shades)

    plans = content.get("plans")
    if isinstance(plans, list):
        recolored: list[Any] = []
        for plan in plans:
            if isinstance(plan, dict):
                plan = dict(plan)
                role_steps = _HIGHLIGHTED_PLAN if plan.get("highlighted") else _REGULAR_PLAN
                assign_existing(plan, {**role_steps, **_PLAN_SHARED}, shades)
            recolored.append(plan)
        content["plans"] = recolored
    return content


def _schema(
    category: BlockCategory,
    fields: dict[str, int],
    *collections: tuple[str, dict[str, int]],
) -> CategorySchema:
    return CategorySchema(
        category=category,
        fields=fields,
        collections=tuple(CollectionRule(key=key, fields=item) for key, item in collections),
    )


CATEGORY_SCHEMAS: dict[BlockCategory, CategorySchema] = {
    schema.category: schema
    for schema in (
        _schema(
            BlockCategory.HERO,
            {
                "backgroundColor": 50,
                "textColor": 900,
                "buttonColor": 500,
                "accentColor": 600,
                "taglineColor": 700,
            },
        ),
        _schema(
            BlockCategory.PRICING,
            {"backgroundColor": 50, "textColor": 900, "accentColor": 600},
        ),
        _schema(
            BlockCategory.TESTIMONIAL,
            {"backgroundColor": 50, "accentColor": 600, "starColor": 400},
            (
                "testimonials",
                {
                    "nameColor": 900,
                    "textColor": 800,
                    "roleColor": 600,
                    "starColor": 400,
                    "backgroundColor": 100,
                    "borderColor": 200,
                },
            ),
        ),
        _schema(
            BlockCategory.FAQ,
            {"backgroundColor": 50, "titleColor": 900, "borderColor": 200},
            (
                "faqs",
                {
                    "questionColor": 700,
                    "answerColor": 800,
                    "backgroundColor": 100,
                    "accentColor": 500,
                },
            ),
        ),
        _schema(
            BlockCategory.FEATURES,
            {
                "backgroundColor": 50,
                "titleColor": 900,
                "taglineColor": 700,
                "accentColor": 600,
            },
            (
                "features",
                {
                    "titleColor": 900,
                    "descriptionColor": 800,
                    "iconColor": 600,
                    "backgroundColor": 100,
                },
            ),
        ),
        _schema(
            BlockCategory.CTA,
            {
                "backgroundColor": 50,
                "titleColor": 900,
                "subtitleColor": 800,
                "buttonColor": 500,
                "buttonTextColor": 50,
                "accentColor": 600,
                "borderColor": 200,
            },
        ),
        _schema(
            BlockCategory.TEXT_IMAGE,
            {
                "backgroundColor": 50,
                "titleColor": 900,
                "textColor": 800,
                "accentColor": 600,
                "borderColor": 200,
            },
        ),
        _schema(
            BlockCategory.STATS,
            {"backgroundColor": 50, "accentColor": 600},
            ("stats", {"numberColor": 500, "labelColor": 800, "backgroundColor": 100}),
        ),
        _schema(
            BlockCategory.COMPARISON,
            {"backgroundColor": 50, "borderColor": 200},
            (
                "rows",
                {
                    "headerColor": 900,
                    "highlightedColor": 500,
                    "normalColor": 800,
                    "backgroundColor": 100,
                },
            ),
        ),
        _schema(
            BlockCategory.BONUS_LIST,
            {"backgroundColor": 50, "titleColor": 900, "accentColor": 600},
            (
                "bonuses",
                {
                    "titleColor": 900,
                    "descriptionColor": 800,
                    "highlightColor": 500,
                    "checkmarkColor": 600,
                    "backgroundColor": 100,
                },
            ),
        ),
        _schema(
            BlockCategory.GUARANTEE,
            {
                "backgroundColor": 100,
                "titleColor": 900,
                "descriptionColor": 800,
                "badgeColor": 500,
                "accentColor": 600,
                "borderColor": 600,
            },
        ),
        _schema(
            BlockCategory.PROBLEM,
            {"backgroundColor": 50, "titleColor": 900, "accentColor": 600},
            ("items", {"titleColor": 900, "checkColor": 600, "backgroundColor": 100}),
        ),
        _schema(
            BlockCategory.SPECIAL_PRICE,
            {
                "backgroundColor": 950,
                "titleColor": 50,
                "priceColor": 400,
                "originalPriceColor": 500,
                "badgeColor": 500,
                "badgeTextColor": 50,
                "accentColor": 600,
            },
        ),
        _schema(
            BlockCategory.BEFORE_AFTER,
            {
                "backgroundColor": 50,
                "beforeBgColor": 900,
                "beforeTitleColor": 500,
                "beforeTextColor": 200,
                "beforeCheckColor": 500,
                "afterBgColor": 600,
                "afterTitleColor": 400,
                "afterTextColor": 100,
                "afterCheckColor": 300,
                "highlightColor": 400,
            },
        ),
        _schema(
            BlockCategory.AUTHOR_PROFILE,
            {
                "backgroundColor": 950,
                "nameColor": 400,
                "titleColor": 500,
                "bioColor": 200,
                "achievementColor": 400,
                "borderColor": 400,
                "accentColor": 500,
            },
        ),
        _schema(
            BlockCategory.SCARCITY,
            {
                "backgroundColor": 50,
                "titleColor": 900,
                "numberColor": 400,
                "messageColor": 800,
                "progressColor": 500,
                "accentColor": 600,
            },
        ),
        _schema(
            BlockCategory.URGENCY,
            {
                "backgroundColor": 50,
                "titleColor": 900,
                "messageColor": 800,
                "highlightColor": 600,
                "accentColor": 600,
            },
        ),
        _schema(
            BlockCategory.COUNTDOWN,
            {
                "backgroundColor": 50,
                "titleColor": 900,
                "urgencyTextColor": 700,
                "timerColor": 500,
                "labelColor": 800,
                "accentColor": 600,
            },
        ),
    )
}


class RefinementRegistry:
    """Registry of refinements keyed by block category.

    Categories without a registered refinement keep the generic role colors.

    Example:
        >>> registry = build_default_registry()
        >>> registry.get(BlockCategory.PRICING) is refine_pricing
        True
    """

    def __init__(self) -> None:
        self._refinements: dict[BlockCategory, Refinement] = {}
        self._roles: dict[BlockCategory, frozenset[ThemeRole]] = {}

    def register(
        self,
        category: BlockCategory,
        refinement: Refinement,
        roles: Iterable[ThemeRole] | None = None,
    ) -> None:
        """Register (or replace) the refinement for a category.

        Args:
            category: Block category
            refinement: Function refining a content copy in place and returning it
            roles: Roles the generic pass recolors for this category (all if None)
        """
        if category in self._refinements:
            logger.debug("Replacing refinement for category '%s'", category.value)
        self._refinements[category] = refinement
        if roles is None:
            self._roles.pop(category, None)
        else:
            self._roles[category] = frozenset(roles)

    def get(self, category: BlockCategory) -> Refinement | None:
        return self._refinements.get(category)

    def roles_for(self, category: BlockCategory | None) -> frozenset[ThemeRole]:
        """Roles the generic pass applies; every role for unknown categories."""
        if category is None:
            return frozenset(ThemeRole)
        return self._roles.get(category, frozenset(ThemeRole))

    def refine(
        self,
        category: BlockCategory | None,
        content: dict[str, Any],
        shades: ColorShades,
    ) -> dict[str, Any]:
        """Apply the category's refinement, or return ``content`` untouched."""
        if category is None:
            return content
        refinement = self._refinements.get(category)
        if refinement is None:
            return content
        return refinement(content, shades)

    @property
    def categories(self) -> list[BlockCategory]:
        return list(self._refinements)

    def __len__(self) -> int:
        return len(self._refinements)


def build_default_registry() -> RefinementRegistry:
    """Registry with a refinement for every built-in category."""
    registry = RefinementRegistry()
    for category, schema in CATEGORY_SCHEMAS.items():
        registry.register(category, schema_refinement(schema), schema.roles)
    registry.register(
        BlockCategory.PRICING, refine_pricing, CATEGORY_SCHEMAS[BlockCategory.PRICING].roles
    )
    return registry


__all__ = [
    "CATEGORY_SCHEMAS",
    "CategorySchema",
    "CollectionRule",
    "Refinement",
    "RefinementRegistry",
    "assign_existing",
    "build_default_registry",
    "refine_pricing",
    "role_fields",
    "schema_refinement",
]
