"""Named color themes offered by landing page generation."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

FALLBACK_THEME = "urgent_red"


class ThemeDefinition(BaseModel):
    """A fixed, hand-picked palette."""

    primary: str = Field(description="Primary brand color")
    secondary: str | None = Field(default=None, description="Secondary color")
    accent: str = Field(description="Accent color")
    background: str = Field(description="Page background")
    text: str = Field(description="Body text color")
    name: str = Field(description="Display name")
    description: str = Field(default="", description="Recommended use")

    model_config = ConfigDict(frozen=True)

    def to_palette(self) -> dict[str, str]:
        """Flatten into the palette shape returned to the editor."""
        return {
            "primary": self.primary,
            "accent": self.accent,
            "secondary": self.secondary or self.accent,
            "background": self.background,
            "surface": self.background,
            "text": self.text,
        }


COLOR_THEMES: dict[str, ThemeDefinition] = {
    "power_blue": ThemeDefinition(
        primary="#1E40AF",
        secondary="#3B82F6",
        accent="#60A5FA",
        background="#111827",
        text="#FFFFFF",
        name="Power Blue",
        description="Learning and certification offers",
    ),
    "urgent_red": ThemeDefinition(
        primary="#DC2626",
        secondary="#EF4444",
        accent="#F59E0B",
        background="#111827",
        text="#FFFFFF",
        name="Urgent Red",
        description="Investing, trading and side-business offers",
    ),
    "energy_orange": ThemeDefinition(
        primary="#EA580C",
        secondary="#F59E0B",
        accent="#FBBF24",
        background="#1F2937",
        text="#FFFFFF",
        name="Energy Orange",
        description="Diet and fitness offers",
    ),
    "gold_premium": ThemeDefinition(
        primary="#B45309",
        secondary="#F59E0B",
        accent="#FCD34D",
        background="#0F172A",
        text="#FFFFFF",
        name="Gold Premium",
        description="High-ticket products and consulting",
    ),
    "passion_pink": ThemeDefinition(
        primary="#BE185D",
        secondary="#EC4899",
        accent="#F472B6",
        background="#1F2937",
        text="#FFFFFF",
        name="Passion Pink",
        description="Dating and beauty offers",
    ),
}


def resolve_theme(theme: str | None) -> tuple[str, ThemeDefinition]:
    """Resolve a theme key, falling back to ``urgent_red`` for unknown keys.

    Example:
        >>> resolve_theme("nope")[0]
        'urgent_red'
    """
    key = theme if theme in COLOR_THEMES else FALLBACK_THEME
    return key, COLOR_THEMES[key]


__all__ = [
    "COLOR_THEMES",
    "FALLBACK_THEME",
    "ThemeDefinition",
    "resolve_theme",
]
