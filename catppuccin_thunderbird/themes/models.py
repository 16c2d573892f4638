"""Theme manifest models."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from catppuccin_thunderbird.themes.constants import (
    EXPERIMENT_COLORS,
    EXPERIMENT_STYLESHEET,
    ICON_PATHS,
    MANIFEST_VERSION,
    STRICT_MIN_VERSION,
    THEME_VERSION,
)


class VariantMode(Enum):
    """How the light and dark appearances of a manifest are sourced."""

    MANUAL = "manual"
    AUTO = "auto"
    COMBINED = "combined"


@dataclass(frozen=True, slots=True)
class ThemeAppearance:
    """One color dictionary plus its color scheme tag."""

    colors: dict[str, str]
    color_scheme: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "colors": dict(self.colors),
            "properties": {
                "color_scheme": self.color_scheme,
            },
        }


@dataclass(frozen=True, slots=True)
class ThemeManifest:
    """A complete theme manifest ready to be serialized into manifest.json."""

    name: str
    gecko_id: str
    description: str
    theme: ThemeAppearance
    dark_theme: ThemeAppearance | None = None
    manifest_version: int = MANIFEST_VERSION
    version: str = THEME_VERSION
    strict_min_version: str = STRICT_MIN_VERSION
    icons: dict[str, str] = field(default_factory=lambda: dict(ICON_PATHS))
    experiment_colors: dict[str, str] = field(default_factory=lambda: dict(EXPERIMENT_COLORS))

    def to_dict(self) -> dict[str, Any]:
        """Render the manifest with the key order Thunderbird themes use."""
        data: dict[str, Any] = {
            "manifest_version": self.manifest_version,
            "name": self.name,
            "version": self.version,
            "applications": {
                "gecko": {
                    "id": self.gecko_id,
                    "strict_min_version": self.strict_min_version,
                },
            },
            "description": self.description,
            "icons": dict(self.icons),
            "theme_experiment": {
                "stylesheet": EXPERIMENT_STYLESHEET,
                "colors": dict(self.experiment_colors),
            },
            "theme": self.theme.to_dict(),
        }
        if self.dark_theme is not None:
            data["dark_theme"] = self.dark_theme.to_dict()
        return data
