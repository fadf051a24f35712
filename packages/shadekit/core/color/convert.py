"""Color space conversions: hex, RGB and HSL.

Rounding follows half-up semantics so that ramps generated here match the
values the editor produces in the browser.
"""

from __future__ import annotations

import math
import re

from pydantic import BaseModel, ConfigDict, Field

_HEX_BODY_RE = re.compile(r"^#?([0-9A-Fa-f]{3}|[0-9A-Fa-f]{6}|[0-9A-Fa-f]{8})$")
_CSS_HEX_RE = re.compile(r"^#([0-9A-Fa-f]{3}|[0-9A-Fa-f]{6}|[0-9A-Fa-f]{8})$")
_CSS_RGB_RE = re.compile(r"rgba?\(([^)]+)\)", re.IGNORECASE)
_LEADING_NUMBER_RE = re.compile(r"^[+-]?(\d+(\.\d*)?|\.\d+)([eE][+-]?\d+)?")


class ColorParseError(ValueError):
    """Raised when a color string cannot be parsed.

    Attributes:
        value: The rejected input
    """

    def __init__(self, value: object) -> None:
        self.value = value
        super().__init__(f"Unrecognized color: {value!r}")


class Rgb(BaseModel):
    """RGB triple with integer channels (nominally 0-255)."""

    r: int = Field(description="Red channel")
    g: int = Field(description="Green channel")
    b: int = Field(description="Blue channel")

    model_config = ConfigDict(frozen=True)

    def as_tuple(self) -> tuple[int, int, int]:
        return (self.r, self.g, self.b)


class Hsl(BaseModel):
    """HSL triple: hue in degrees, saturation and lightness in percent."""

    h: int = Field(ge=0, le=360, description="Hue in degrees")
    s: int = Field(ge=0, le=100, description="Saturation percentage")
    l: int = Field(ge=0, le=100, description="Lightness percentage")  # noqa: E741

    model_config = ConfigDict(frozen=True)


def round_half_up(value: float) -> int:
    """Round to the nearest integer, ties away from negative infinity.

    Example:
        >>> round_half_up(2.5)
        3
        >>> round(2.5)
        2
    """
    return int(math.floor(value + 0.5))


def _expand_hex(body: str) -> str:
    if len(body) == 3:
        return "".join(ch * 2 for ch in body)
    return body[:6]


def hex_to_rgb(hex_color: str) -> Rgb:
    """Parse a hex color string.

    Accepts 3-, 6- or 8-digit forms with an optional leading ``#``. The alpha
    pair of the 8-digit form is ignored.

    Args:
        hex_color: Color such as ``"#DC2626"``, ``"dc2626"`` or ``"#fff"``

    Returns:
        Parsed Rgb

    Raises:
        ColorParseError: If the string is not a recognized hex color

    Example:
        >>> hex_to_rgb("#0af")
        Rgb(r=0, g=170, b=255)
    """
    if not isinstance(hex_color, str):
        raise ColorParseError(hex_color)
    match = _HEX_BODY_RE.match(hex_color.strip())
    if not match:
        raise ColorParseError(hex_color)

    body = _expand_hex(match.group(1))
    return Rgb(r=int(body[0:2], 16), g=int(body[2:4], 16), b=int(body[4:6], 16))


def try_hex_to_rgb(hex_color: str) -> Rgb | None:
    """Parse a hex color, returning None instead of raising."""
    try:
        return hex_to_rgb(hex_color)
    except ColorParseError:
        return None


def rgb_to_hex(r: int, g: int, b: int) -> str:
    """Format channels as an uppercase ``#RRGGBB`` string.

    Channels are not clamped; callers pass values already in 0-255.
    """
    return f"#{r:02X}{g:02X}{b:02X}"


def rgb_to_hsl(r: int, g: int, b: int) -> Hsl:
    """Convert RGB channels to integer HSL."""
    rf, gf, bf = r / 255, g / 255, b / 255
    high = max(rf, gf, bf)
    low = min(rf, gf, bf)
    lightness = (high + low) / 2
    hue = 0.0
    saturation = 0.0

    if high != low:
        delta = high - low
        saturation = delta / (2 - high - low) if lightness > 0.5 else delta / (high + low)
        if high == rf:
            hue = ((gf - bf) / delta + (6 if gf < bf else 0)) / 6
        elif high == gf:
            hue = ((bf - rf) / delta + 2) / 6
        else:
            hue = ((rf - gf) / delta + 4) / 6

    return Hsl(
        h=round_half_up(hue * 360),
        s=round_half_up(saturation * 100),
        l=round_half_up(lightness * 100),
    )


def _hue_to_channel(p: float, q: float, t: float) -> float:
    if t < 0:
        t += 1
    if t > 1:
        t -= 1
    if t < 1 / 6:
        return p + (q - p) * 6 * t
    if t < 1 / 2:
        return q
    if t < 2 / 3:
        return p + (q - p) * (2 / 3 - t) * 6
    return p


def hsl_to_rgb(h: float, s: float, l: float) -> Rgb:  # noqa: E741
    """Convert HSL (degrees, percent, percent) to integer RGB."""
    hue = h / 360
    sat = s / 100
    light = l / 100

    if sat == 0:
        rf = gf = bf = light
    else:
        q = light * (1 + sat) if light < 0.5 else light + sat - light * sat
        p = 2 * light - q
        rf = _hue_to_channel(p, q, hue + 1 / 3)
        gf = _hue_to_channel(p, q, hue)
        bf = _hue_to_channel(p, q, hue - 1 / 3)

    return Rgb(r=round_half_up(rf * 255), g=round_half_up(gf * 255), b=round_half_up(bf * 255))


def _leading_float(text: str) -> float | None:
    match = _LEADING_NUMBER_RE.match(text.strip())
    if not match:
        return None
    return float(match.group(0))


def parse_css_color(value: object) -> tuple[float, float, float] | None:
    """Leniently parse a CSS color used in block content.

    Understands ``#`` followed by 3, 6 or 8 hex digits, and ``rgb()`` or
    ``rgba()`` with at least three numeric components. Anything else (named
    colors, ``hsl()``, gradients, non-strings) is unparseable.

    Args:
        value: Raw content value

    Returns:
        ``(r, g, b)`` channels, possibly fractional for ``rgb()`` input,
        or None if unparseable
    """
    if not isinstance(value, str) or not value:
        return None

    if value.startswith("#"):
        match = _CSS_HEX_RE.match(value)
        if not match:
            return None
        body = _expand_hex(match.group(1))
        return (float(int(body[0:2], 16)), float(int(body[2:4], 16)), float(int(body[4:6], 16)))

    match = _CSS_RGB_RE.search(value)
    if not match:
        return None
    parts = [_leading_float(part) for part in match.group(1).split(",")]
    if len(parts) < 3:
        return None
    r, g, b = parts[0], parts[1], parts[2]
    if r is None or g is None or b is None:
        return None
    return (r, g, b)


__all__ = [
    "ColorParseError",
    "Hsl",
    "Rgb",
    "hex_to_rgb",
    "hsl_to_rgb",
    "parse_css_color",
    "rgb_to_hex",
    "rgb_to_hsl",
    "round_half_up",
    "try_hex_to_rgb",
]
