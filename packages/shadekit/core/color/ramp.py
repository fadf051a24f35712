"""Eleven-step shade ramp generation.

A single base color becomes a Tailwind-style scale (50 → 950). Hue and
saturation are held fixed; only lightness moves. Step 500 keeps the base
lightness, the light end uses fixed targets and the dark end subtracts fixed
offsets from the base with per-step floors.

The floors mean the ramp is not always monotonic: a base darker than 25%
lightness gets a step 600 lighter than step 500, and a base lighter than 64%
sits above step 400. Both are reproduced as-is; use
:func:`find_ramp_inversions` to detect them.
"""

from __future__ import annotations

from functools import lru_cache
import logging
from typing import Any

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    field_validator,
    model_serializer,
    model_validator,
)

from shadekit.core.color.convert import Rgb, hex_to_rgb, hsl_to_rgb, rgb_to_hex, rgb_to_hsl

logger = logging.getLogger(__name__)

SHADE_STEPS: tuple[int, ...] = (50, 100, 200, 300, 400, 500, 600, 700, 800, 900, 950)

# Fixed lightness targets for the light end and the darkest step
_FIXED_LIGHTNESS: dict[int, int] = {50: 97, 100: 94, 200: 86, 300: 77, 400: 64, 950: 3}

# (offset below base, floor) for the dark end
_DARK_OFFSETS: dict[int, tuple[int, int]] = {
    600: (15, 25),
    700: (28, 18),
    800: (38, 12),
    900: (48, 6),
}


class ColorShades(BaseModel):
    """Eleven hex colors keyed by shade step.

    Accepts either ``{"steps": {...}}`` or the flat step mapping, with int or
    string keys, and serializes back to the flat string-keyed form.

    Example:
        >>> shades = generate_shades_from_hex("#DC2626")
        >>> shades[50]
        '#FDF2F2'
        >>> shades.keys()[:3]
        [50, 100, 200]
    """

    steps: dict[int, str] = Field(description="Shade step → uppercase #RRGGBB")

    model_config = ConfigDict(frozen=True)

    @model_validator(mode="before")
    @classmethod
    def _wrap_flat_mapping(cls, data: Any) -> Any:
        if isinstance(data, dict) and "steps" not in data:
            return {"steps": data}
        return data

    @field_validator("steps", mode="before")
    @classmethod
    def _coerce_keys(cls, value: Any) -> Any:
        if isinstance(value, dict):
            return {int(k): v for k, v in value.items()}
        return value

    @field_validator("steps")
    @classmethod
    def _check_steps(cls, value: dict[int, str]) -> dict[int, str]:
        if set(value) != set(SHADE_STEPS):
            missing = sorted(set(SHADE_STEPS) - set(value))
            extra = sorted(set(value) - set(SHADE_STEPS))
            raise ValueError(f"Shade steps must be exactly {SHADE_STEPS} (missing={missing}, extra={extra})")
        return {step: rgb_to_hex(*hex_to_rgb(value[step]).as_tuple()) for step in SHADE_STEPS}

    @model_serializer
    def _serialize(self) -> dict[str, str]:
        return {str(step): self.steps[step] for step in SHADE_STEPS}

    def __getitem__(self, step: int) -> str:
        return self.steps[step]

    def keys(self) -> list[int]:
        return list(SHADE_STEPS)

    def items(self) -> list[tuple[int, str]]:
        """Return ``(step, hex)`` pairs from lightest to darkest."""
        return [(step, self.steps[step]) for step in SHADE_STEPS]

    def to_css_variables(self, prefix: str = "primary") -> str:
        """Render the ramp as a ``:root`` block of CSS custom properties.

        Example:
            >>> print(shades.to_css_variables().splitlines()[1])
              --primary-50: #FDF2F2;
        """
        lines = [f"  --{prefix}-{step}: {color};" for step, color in self.items()]
        return ":root {\n" + "\n".join(lines) + "\n}"


def lightness_targets(base_lightness: int) -> dict[int, int]:
    """Compute the target lightness (percent) of every step.

    Args:
        base_lightness: Lightness of the base color (0-100)

    Returns:
        Step → target lightness, in step order
    """
    targets: dict[int, int] = {}
    for step in SHADE_STEPS:
        if step == 500:
            targets[step] = base_lightness
        elif step in _DARK_OFFSETS:
            offset, floor = _DARK_OFFSETS[step]
            targets[step] = max(base_lightness - offset, floor)
        else:
            targets[step] = _FIXED_LIGHTNESS[step]
    return targets


def find_ramp_inversions(shades: ColorShades) -> list[tuple[int, int]]:
    """Find adjacent steps where the darker step is actually lighter.

    Args:
        shades: Generated ramp

    Returns:
        ``(step, next_step)`` pairs where ``next_step`` has higher lightness

    Example:
        >>> find_ramp_inversions(generate_shades_from_hex("#3B0A0A"))
        [(500, 600)]
    """
    lightness = [rgb_to_hsl(*hex_to_rgb(shades[step]).as_tuple()).l for step in SHADE_STEPS]
    return [
        (SHADE_STEPS[i], SHADE_STEPS[i + 1])
        for i in range(len(SHADE_STEPS) - 1)
        if lightness[i + 1] > lightness[i]
    ]


@lru_cache(maxsize=512)
def _cached_steps(r: int, g: int, b: int) -> tuple[tuple[int, str], ...]:
    hsl = rgb_to_hsl(r, g, b)
    targets = lightness_targets(hsl.l)

    steps: dict[int, str] = {}
    for step, target in targets.items():
        rgb = hsl_to_rgb(hsl.h, hsl.s, target)
        steps[step] = rgb_to_hex(rgb.r, rgb.g, rgb.b)

    if logger.isEnabledFor(logging.DEBUG):
        inversions = find_ramp_inversions(ColorShades(steps=steps))
        if inversions:
            logger.debug(
                "Shade ramp for %s (L=%d) is not monotonic at %s",
                rgb_to_hex(r, g, b),
                hsl.l,
                inversions,
            )
    return tuple(steps.items())


def generate_color_shades(r: int, g: int, b: int) -> ColorShades:
    """Build the 11-step ramp for an RGB base color.

    Args:
        r: Red channel (0-255)
        g: Green channel (0-255)
        b: Blue channel (0-255)

    Returns:
        ColorShades from step 50 (near white) to 950 (near black)
    """
    # Fresh model per call; the cache only holds immutable step pairs
    return ColorShades(steps=dict(_cached_steps(int(r), int(g), int(b))))


def generate_shades_from_rgb(rgb: Rgb) -> ColorShades:
    return generate_color_shades(rgb.r, rgb.g, rgb.b)


def generate_shades_from_hex(hex_color: str) -> ColorShades:
    """Build the ramp for a hex base color.

    Raises:
        ColorParseError: If ``hex_color`` is not a valid hex color
    """
    return generate_shades_from_rgb(hex_to_rgb(hex_color))


__all__ = [
    "SHADE_STEPS",
    "ColorShades",
    "find_ramp_inversions",
    "generate_color_shades",
    "generate_shades_from_hex",
    "generate_shades_from_rgb",
    "lightness_targets",
]
