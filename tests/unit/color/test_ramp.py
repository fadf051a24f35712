"""Tests for 11-step shade ramp generation."""

from __future__ import annotations

from pydantic import ValidationError
import pytest

from shadekit.core.color.convert import ColorParseError, Rgb, hex_to_rgb, rgb_to_hsl
from shadekit.core.color.ramp import (
    SHADE_STEPS,
    ColorShades,
    find_ramp_inversions,
    generate_color_shades,
    generate_shades_from_hex,
    generate_shades_from_rgb,
    lightness_targets,
)


def _hsl(hex_color: str):
    return rgb_to_hsl(*hex_to_rgb(hex_color).as_tuple())


class TestGenerateShades:
    """Test ramp generation for a mid-lightness base."""

    def test_has_every_step(self, red_shades):
        """Ramp holds exactly the eleven steps in order."""
        assert red_shades.keys() == list(SHADE_STEPS)
        assert [step for step, _ in red_shades.items()] == list(SHADE_STEPS)

    def test_step_500_keeps_base_lightness_and_hue(self, red_shades):
        """Step 500 matches the base within integer-HSL rounding."""
        base = _hsl("#DC2626")
        step_500 = _hsl(red_shades[500])
        assert step_500.l == base.l
        assert step_500.h == base.h

        base_rgb = hex_to_rgb("#DC2626").as_tuple()
        for original, generated in zip(base_rgb, hex_to_rgb(red_shades[500]).as_tuple(), strict=True):
            assert abs(original - generated) <= 3

    def test_light_and_dark_ends(self, red_shades):
        """Step 50 is near white and step 950 near black."""
        assert red_shades[50] == "#FDF2F2"
        assert _hsl(red_shades[50]).l >= 96
        assert _hsl(red_shades[950]).l <= 4

    def test_hue_preserved(self, red_shades):
        """Every chromatic step keeps the base hue."""
        for step in SHADE_STEPS:
            assert _hsl(red_shades[step]).h in (0, 360)

    def test_values_are_uppercase_hex(self, blue_shades):
        """Every value is #RRGGBB uppercase."""
        for _, color in blue_shades.items():
            assert len(color) == 7
            assert color.startswith("#")
            assert color == color.upper()

    def test_entry_points_agree(self):
        """Hex, RGB model and channel entry points give the same ramp."""
        from_hex = generate_shades_from_hex("#1E40AF")
        from_rgb = generate_shades_from_rgb(Rgb(r=30, g=64, b=175))
        from_channels = generate_color_shades(30, 64, 175)
        assert from_hex == from_rgb == from_channels

    def test_invalid_hex_raises(self):
        """Unparseable base colors raise ColorParseError."""
        with pytest.raises(ColorParseError):
            generate_shades_from_hex("not-a-color")

    def test_deterministic(self):
        """Repeated generation yields equal ramps."""
        assert generate_shades_from_hex("#EA580C") == generate_shades_from_hex("#ea580c")

    def test_mutating_a_result_does_not_leak(self):
        """Editing one returned ramp leaves later results untouched."""
        first = generate_shades_from_hex("#123456")
        expected = first[500]
        first.steps[500] = "#000000"
        assert generate_shades_from_hex("#123456")[500] == expected
        assert generate_color_shades(0x12, 0x34, 0x56)[500] == expected


class TestMonotonicity:
    """Test lightness ordering across the ramp."""

    @pytest.mark.parametrize("hex_color", ["#DC2626", "#1E40AF", "#EA580C", "#B45309", "#BE185D"])
    def test_mid_lightness_is_monotonic(self, hex_color):
        """Bases with 25 <= L <= 64 produce a strictly darkening ramp."""
        shades = generate_shades_from_hex(hex_color)
        assert 25 <= _hsl(hex_color).l <= 64
        assert find_ramp_inversions(shades) == []

    def test_dark_base_inverts_500_600(self):
        """A base below 25% lightness gets a lighter step 600."""
        shades = generate_shades_from_hex("#3B0A0A")
        assert _hsl("#3B0A0A").l < 25
        assert find_ramp_inversions(shades) == [(500, 600)]

    def test_light_base_inverts_400_500(self):
        """A base above 64% lightness sits above step 400."""
        shades = generate_shades_from_hex("#FDE68A")
        assert _hsl("#FDE68A").l > 64
        assert find_ramp_inversions(shades) == [(400, 500)]


class TestLightnessTargets:
    """Test the lightness target table."""

    def test_mid_base(self):
        """Offsets apply below 500 and fixed targets above."""
        assert lightness_targets(51) == {
            50: 97,
            100: 94,
            200: 86,
            300: 77,
            400: 64,
            500: 51,
            600: 36,
            700: 23,
            800: 13,
            900: 6,
            950: 3,
        }

    def test_floors_apply_for_dark_base(self):
        """Dark steps never go below their floors."""
        targets = lightness_targets(10)
        assert (targets[600], targets[700], targets[800], targets[900]) == (25, 18, 12, 6)


class TestColorShadesModel:
    """Test the ColorShades container."""

    def test_serializes_flat_string_keys(self, red_shades):
        """model_dump gives a flat mapping keyed by step strings."""
        dumped = red_shades.model_dump()
        assert list(dumped) == [str(step) for step in SHADE_STEPS]
        assert dumped["50"] == red_shades[50]

    def test_accepts_flat_mapping(self, red_shades):
        """A flat string-keyed mapping validates back to the same ramp."""
        assert ColorShades.model_validate(red_shades.model_dump()) == red_shades

    def test_normalizes_case(self, red_shades):
        """Lowercase hex values are uppercased."""
        lowered = {step: color.lower() for step, color in red_shades.items()}
        assert ColorShades(steps=lowered) == red_shades

    def test_short_and_alpha_hex_normalized(self, red_shades):
        """Three- and eight-digit values are stored as #RRGGBB."""
        steps = dict(red_shades.items())
        steps[500] = "#fff"
        steps[600] = "#11223380"
        shades = ColorShades.model_validate({str(k): v for k, v in steps.items()})
        assert shades[500] == "#FFFFFF"
        assert shades[600] == "#112233"

    def test_rejects_missing_steps(self):
        """All eleven steps are required."""
        with pytest.raises(ValidationError):
            ColorShades(steps={50: "#FFFFFF"})

    def test_rejects_bad_color(self, red_shades):
        """Values must be hex colors."""
        steps = dict(red_shades.items())
        steps[500] = "red"
        with pytest.raises(ValidationError):
            ColorShades(steps=steps)

    def test_css_variables(self, red_shades):
        """CSS export lists every step as a custom property."""
        css = red_shades.to_css_variables()
        lines = css.splitlines()
        assert lines[0] == ":root {"
        assert lines[1] == "  --primary-50: #FDF2F2;"
        assert lines[-1] == "}"
        assert len(lines) == len(SHADE_STEPS) + 2
        assert f"--brand-950: {red_shades[950]};" in red_shades.to_css_variables("brand")
