"""Landing page template generation."""

from shadekit.core.generation.catalog import (
    BUILTIN_CATALOG,
    BlockTemplate,
    InMemoryTemplateCatalog,
    TemplateCatalog,
)
from shadekit.core.generation.generator import (
    DEFAULT_SEQUENCE,
    AudienceInfo,
    GenerationRequest,
    GenerationResult,
    ProductInfo,
    generate_landing_page,
)
from shadekit.core.generation.palettes import COLOR_THEMES, FALLBACK_THEME, ThemeDefinition, resolve_theme

__all__ = [
    "BUILTIN_CATALOG",
    "COLOR_THEMES",
    "DEFAULT_SEQUENCE",
    "FALLBACK_THEME",
    "AudienceInfo",
    "BlockTemplate",
    "GenerationRequest",
    "GenerationResult",
    "InMemoryTemplateCatalog",
    "ProductInfo",
    "TemplateCatalog",
    "ThemeDefinition",
    "generate_landing_page",
    "resolve_theme",
]
