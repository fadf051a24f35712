"""Landing page template assembly from a product brief.

Builds an initial block sequence from catalog defaults, applies the product
context to the copy, and attaches the selected named palette. AI copywriting
happens elsewhere; this produces the deterministic starting template.
"""

from __future__ import annotations

import copy
import logging
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from shadekit.core.generation.catalog import BUILTIN_CATALOG, BlockTemplate, TemplateCatalog
from shadekit.core.generation.palettes import resolve_theme
from shadekit.core.theming.models import Block

logger = logging.getLogger(__name__)

DEFAULT_SEQUENCE: tuple[str, ...] = (
    "hero-aurora",
    "features-aurora",
    "problem-1",
    "bonus-list-1",
    "guarantee-1",
    "sticky-cta-1",
)

DEFAULT_OUTCOME = "成果"


class ProductInfo(BaseModel):
    name: str | None = Field(default=None, description="Product name")
    description: str | None = Field(default=None, description="One-line product description")
    key_benefits: list[str] = Field(
        default_factory=list, alias="keyBenefits", description="Headline benefits"
    )

    model_config = ConfigDict(populate_by_name=True, extra="allow")


class AudienceInfo(BaseModel):
    desired_outcome: str | None = Field(
        default=None, alias="desiredOutcome", description="What the reader wants to achieve"
    )
    pain_points: list[str] = Field(
        default_factory=list, alias="painPoints", description="Problems the reader has"
    )

    model_config = ConfigDict(populate_by_name=True, extra="allow")


class GenerationRequest(BaseModel):
    """Brief for generating a landing page template.

    Field names follow the editor payload (camelCase aliases); snake_case is
    accepted too.
    """

    theme: str | None = Field(default=None, description="Named theme key")
    outline: list[str] | None = Field(default=None, description="Section outline override")
    product: ProductInfo = Field(default_factory=ProductInfo, description="Product brief")
    audience: AudienceInfo | None = Field(default=None, description="Target audience")
    goals: list[str] = Field(default_factory=list, description="Page goals")
    required_blocks: list[str] | None = Field(
        default=None, alias="requiredBlocks", description="Explicit block sequence"
    )

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    @field_validator("goals", mode="before")
    @classmethod
    def _goals_as_list(cls, value: Any) -> Any:
        if value is None:
            return []
        if isinstance(value, str):
            return [value]
        return value


class GenerationResult(BaseModel):
    theme: str = Field(description="Resolved theme key")
    palette: dict[str, str] = Field(description="Palette colors for the editor")
    outline: list[str] = Field(description="Section outline")
    blocks: list[Block] = Field(description="Generated blocks")

    model_config = ConfigDict(frozen=True)

    def to_dict(self) -> dict[str, Any]:
        return {
            "theme": self.theme,
            "palette": dict(self.palette),
            "outline": list(self.outline),
            "blocks": [block.to_dict() for block in self.blocks],
        }


def apply_product_context(
    block_type: str, content: dict[str, Any], request: GenerationRequest
) -> dict[str, Any]:
    """Fill template copy from the product brief.

    ``content`` is modified in place and returned. Fields without matching
    brief data keep their template defaults.
    """
    product = request.product
    audience = request.audience
    benefits = product.key_benefits

    if block_type == "hero-aurora":
        if product.name:
            outcome = (audience.desired_outcome if audience else None) or DEFAULT_OUTCOME
            content["title"] = f"{product.name}で、{outcome}を最短で実現"
        if product.description:
            content["subtitle"] = product.description
        if benefits:
            content["highlightText"] = benefits[0]

    elif block_type == "features-aurora":
        features = content.get("features")
        if isinstance(features, list):
            for feature, benefit in zip(features, benefits):
                if isinstance(feature, dict):
                    feature["description"] = benefit

    elif block_type == "problem-1":
        if audience and audience.pain_points:
            content["problems"] = list(audience.pain_points)

    elif block_type == "bonus-list-1":
        bonuses = content.get("bonuses")
        if isinstance(bonuses, list):
            for bonus, benefit in zip(bonuses, benefits):
                if isinstance(bonus, dict):
                    bonus["title"] = benefit

    return content


def _resolve_templates(request: GenerationRequest, catalog: TemplateCatalog) -> list[BlockTemplate]:
    sequence = request.required_blocks if request.required_blocks else list(DEFAULT_SEQUENCE)
    templates: list[BlockTemplate] = []
    for block_type in sequence:
        template = catalog.get(block_type)
        if template is None:
            logger.warning("Skipping unknown block type: %s", block_type)
            continue
        templates.append(template)
    return templates


def generate_landing_page(
    request: GenerationRequest, catalog: TemplateCatalog | None = None
) -> GenerationResult:
    """Assemble a landing page template for a product brief.

    Args:
        request: Product brief, theme and optional block sequence
        catalog: Template lookup (defaults to the built-in catalog)

    Returns:
        GenerationResult with theme key, palette, outline and blocks

    Example:
        >>> result = generate_landing_page(GenerationRequest(theme="power_blue"))
        >>> result.theme, len(result.blocks)
        ('power_blue', 6)
    """
    if catalog is None:
        catalog = BUILTIN_CATALOG

    theme_key, theme = resolve_theme(request.theme)
    templates = _resolve_templates(request, catalog)

    blocks: list[Block] = []
    for template in templates:
        content = apply_product_context(
            template.block_type, copy.deepcopy(template.default_content), request
        )
        blocks.append(
            Block(
                blockType=template.block_type,
                content=content,
                reason=f"Generated from the {template.name} template",
            )
        )

    outline = list(request.outline) if request.outline else [t.name for t in templates]

    logger.info("Generated landing page: theme=%s, blocks=%d", theme_key, len(blocks))
    return GenerationResult(
        theme=theme_key,
        palette=theme.to_palette(),
        outline=outline,
        blocks=blocks,
    )


__all__ = [
    "DEFAULT_SEQUENCE",
    "AudienceInfo",
    "GenerationRequest",
    "GenerationResult",
    "ProductInfo",
    "apply_product_context",
    "generate_landing_page",
]
