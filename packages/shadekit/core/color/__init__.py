"""Color conversion and shade ramp generation."""

from shadekit.core.color.convert import (
    ColorParseError,
    Hsl,
    Rgb,
    hex_to_rgb,
    hsl_to_rgb,
    parse_css_color,
    rgb_to_hex,
    rgb_to_hsl,
    try_hex_to_rgb,
)
from shadekit.core.color.ramp import (
    SHADE_STEPS,
    ColorShades,
    find_ramp_inversions,
    generate_color_shades,
    generate_shades_from_hex,
    generate_shades_from_rgb,
    lightness_targets,
)
from shadekit.core.color.utils import contrast_text_color, mix_with, parse_theme_color, with_alpha

__all__ = [
    # Conversion
    "ColorParseError",
    "Hsl",
    "Rgb",
    "hex_to_rgb",
    "hsl_to_rgb",
    "parse_css_color",
    "rgb_to_hex",
    "rgb_to_hsl",
    "try_hex_to_rgb",
    # Ramp
    "SHADE_STEPS",
    "ColorShades",
    "find_ramp_inversions",
    "generate_color_shades",
    "generate_shades_from_hex",
    "generate_shades_from_rgb",
    "lightness_targets",
    # Helpers
    "contrast_text_color",
    "mix_with",
    "parse_theme_color",
    "with_alpha",
]
