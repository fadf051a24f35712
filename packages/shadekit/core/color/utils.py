"""Small color helpers used when rendering themed blocks.

These helpers read colors more strictly than the reviewer does: input is
trimmed, only ``#RGB``/``#RRGGBB`` hex and integer ``rgb()``/``rgba()``
forms are understood, and rgb channels are clamped to 0-255.
"""

from __future__ import annotations

import re

from shadekit.core.color.convert import Rgb, round_half_up

_DARK_TEXT = "#0F172A"
_LIGHT_TEXT = "#F8FAFC"
_DEFAULT_BASE = Rgb(r=15, g=23, b=42)
_WHITE = Rgb(r=255, g=255, b=255)

_HEX_RE = re.compile(r"#([0-9a-fA-F]{3}|[0-9a-fA-F]{6})")
_RGB_RE = re.compile(
    r"rgba?\(\s*(\d{1,3})\s*,\s*(\d{1,3})\s*,\s*(\d{1,3})(?:\s*,\s*(0|0?\.\d+|1(?:\.0+)?))?\s*\)",
    re.ASCII,
)


def _clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))


def _format_number(value: float) -> str:
    return str(int(value)) if float(value).is_integer() else str(value)


def parse_theme_color(color: str | None) -> Rgb | None:
    """Parse a hex or integer ``rgb()`` color for rendering helpers.

    Example:
        >>> parse_theme_color(" rgb(300, 0, 0) ")
        Rgb(r=255, g=0, b=0)
        >>> parse_theme_color("#11223380") is None
        True
    """
    if not isinstance(color, str) or not color:
        return None
    trimmed = color.strip()

    match = _HEX_RE.fullmatch(trimmed)
    if match:
        body = match.group(1)
        if len(body) == 3:
            body = "".join(ch * 2 for ch in body)
        return Rgb(r=int(body[0:2], 16), g=int(body[2:4], 16), b=int(body[4:6], 16))

    match = _RGB_RE.fullmatch(trimmed)
    if match:
        r, g, b = (int(_clamp(int(part), 0, 255)) for part in match.group(1, 2, 3))
        return Rgb(r=r, g=g, b=b)
    return None


def with_alpha(color: str | None, alpha: float, fallback: str = _DARK_TEXT) -> str:
    """Render a color as ``rgba()`` with the given opacity.

    Unparseable colors fall back to ``fallback`` (and then to slate-900).

    Example:
        >>> with_alpha("#FF0000", 0.5)
        'rgba(255, 0, 0, 0.5)'
    """
    base = parse_theme_color(color) or parse_theme_color(fallback) or _DEFAULT_BASE
    return f"rgba({base.r}, {base.g}, {base.b}, {_format_number(_clamp(alpha, 0.0, 1.0))})"


def contrast_text_color(
    color: str | None,
    light: str = _LIGHT_TEXT,
    dark: str = _DARK_TEXT,
) -> str:
    """Pick a readable text color for a background.

    Uses a simple weighted brightness, not WCAG luminance: backgrounds above
    0.6 get ``dark`` text, everything else (including unparseable input) gets
    ``light``.
    """
    rgb = parse_theme_color(color)
    if rgb is None:
        return light
    brightness = (0.2126 * rgb.r + 0.7152 * rgb.g + 0.0722 * rgb.b) / 255
    return dark if brightness > 0.6 else light


def mix_with(color: str | None, mix_color: str, weight: float) -> str:
    """Blend ``color`` toward ``mix_color`` by ``weight`` (0 keeps ``color``).

    Example:
        >>> mix_with("#000000", "#FFFFFF", 0.5)
        'rgb(128, 128, 128)'
    """
    base = parse_theme_color(color) or _DEFAULT_BASE
    mix = parse_theme_color(mix_color) or _WHITE
    w = _clamp(weight, 0.0, 1.0)
    r, g, b = (
        round_half_up(c * (1 - w) + m * w)
        for c, m in zip(base.as_tuple(), mix.as_tuple(), strict=True)
    )
    return f"rgb({r}, {g}, {b})"


__all__ = [
    "contrast_text_color",
    "mix_with",
    "parse_theme_color",
    "with_alpha",
]
