"""WCAG relative luminance and contrast ratio."""

from __future__ import annotations

from shadekit.core.color.convert import parse_css_color


def _linearize(channel: float) -> float:
    c = channel / 255
    return c / 12.92 if c <= 0.03928 else ((c + 0.055) / 1.055) ** 2.4


def relative_luminance(rgb: tuple[float, float, float]) -> float:
    """Gamma-corrected, channel-weighted luminance of an sRGB color (0-1)."""
    r, g, b = rgb
    return 0.2126 * _linearize(r) + 0.7152 * _linearize(g) + 0.0722 * _linearize(b)


def contrast_ratio(color_a: str | None, color_b: str | None) -> float | None:
    """Contrast ratio between two CSS colors.

    Args:
        color_a: First color (hex or rgb()/rgba())
        color_b: Second color

    Returns:
        Ratio from 1.0 to 21.0, or None if either color is unparseable

    Example:
        >>> round(contrast_ratio("#000000", "#FFFFFF"), 2)
        21.0
        >>> contrast_ratio("red", "#FFFFFF") is None
        True
    """
    a = parse_css_color(color_a)
    b = parse_css_color(color_b)
    if a is None or b is None:
        return None

    lum_a = relative_luminance(a)
    lum_b = relative_luminance(b)
    lighter = max(lum_a, lum_b)
    darker = min(lum_a, lum_b)
    return (lighter + 0.05) / (darker + 0.05)


__all__ = [
    "contrast_ratio",
    "relative_luminance",
]
