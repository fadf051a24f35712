"""Theme distribution: role table, category refinements and block theming."""

from shadekit.core.theming.applier import (
    apply_theme_from_hex,
    apply_theme_shades_to_block,
    apply_theme_shades_to_blocks,
    get_default_registry,
)
from shadekit.core.theming.models import Block
from shadekit.core.theming.refinements import (
    CATEGORY_SCHEMAS,
    CategorySchema,
    CollectionRule,
    RefinementRegistry,
    build_default_registry,
)
from shadekit.core.theming.roles import (
    ROLE_STEPS,
    BlockCategory,
    ThemeRole,
    normalize_block_type,
    resolve_category,
)

__all__ = [
    "Block",
    "BlockCategory",
    "ThemeRole",
    "ROLE_STEPS",
    "CATEGORY_SCHEMAS",
    "CategorySchema",
    "CollectionRule",
    "RefinementRegistry",
    "build_default_registry",
    "get_default_registry",
    "normalize_block_type",
    "resolve_category",
    "apply_theme_shades_to_block",
    "apply_theme_shades_to_blocks",
    "apply_theme_from_hex",
]
