"""Distribute a shade ramp across block content.

Re-theming is a bulk operation: every color role the block's category
supports and the block already carries is overwritten with the ramp color,
then the category refinement recolors category fields and nested items.
Manual color tweaks on those fields do not survive a re-theme.
"""

from __future__ import annotations

from collections.abc import Iterable
import logging

from shadekit.core.color.ramp import ColorShades, generate_shades_from_hex
from shadekit.core.theming.models import Block
from shadekit.core.theming.refinements import (
    RefinementRegistry,
    assign_existing,
    build_default_registry,
    role_fields,
)
from shadekit.core.theming.roles import resolve_category

logger = logging.getLogger(__name__)

_default_registry: RefinementRegistry | None = None


def get_default_registry() -> RefinementRegistry:
    """Return the shared built-in refinement registry (created on first use)."""
    global _default_registry
    if _default_registry is None:
        _default_registry = build_default_registry()
    return _default_registry


def apply_theme_shades_to_block(
    block: Block,
    shades: ColorShades,
    registry: RefinementRegistry | None = None,
) -> Block:
    """Apply a shade ramp to one block.

    Args:
        block: Block to theme (left unmodified)
        shades: Ramp from :func:`generate_shades_from_hex`
        registry: Refinement lookup (defaults to the built-in categories)

    Returns:
        New Block with themed content

    Example:
        >>> block = Block(blockType="top-cta-1", content={"buttonColor": "#000", "title": "Go"})
        >>> themed = apply_theme_shades_to_block(block, shades)
        >>> themed.content["buttonColor"] == shades[500]
        True
    """
    if registry is None:
        registry = get_default_registry()

    category = resolve_category(block.block_type)
    content = block.content_copy()

    assign_existing(content, role_fields(registry.roles_for(category)), shades)
    content = registry.refine(category, content, shades)

    logger.debug(
        "Themed block '%s' (category=%s)",
        block.block_type,
        category.value if category else "generic",
    )
    return block.with_content(content)


def apply_theme_shades_to_blocks(
    blocks: Iterable[Block],
    shades: ColorShades,
    registry: RefinementRegistry | None = None,
) -> list[Block]:
    """Apply a shade ramp to every block of a page, preserving order."""
    return [apply_theme_shades_to_block(block, shades, registry) for block in blocks]


def apply_theme_from_hex(
    blocks: Iterable[Block],
    hex_color: str,
    registry: RefinementRegistry | None = None,
) -> tuple[ColorShades, list[Block]]:
    """Generate a ramp from ``hex_color`` and theme every block with it.

    Raises:
        ColorParseError: If ``hex_color`` is not a valid hex color
    """
    shades = generate_shades_from_hex(hex_color)
    themed = apply_theme_shades_to_blocks(blocks, shades, registry)
    logger.info("Applied theme %s to %d blocks", shades[500], len(themed))
    return shades, themed


__all__ = [
    "apply_theme_from_hex",
    "apply_theme_shades_to_block",
    "apply_theme_shades_to_blocks",
    "get_default_registry",
]
