"""Theme manifest construction."""

from __future__ import annotations

import uuid
from typing import TYPE_CHECKING

from catppuccin_thunderbird.errors import ErrorCode, ThemeBuildError
from catppuccin_thunderbird.themes.constants import (
    ACCENT_ROLE,
    ACCENTS,
    COLOR_ROLE_MAP,
    REFERENCE_LIGHT_FLAVOR,
    UUID_NAMESPACE,
)
from catppuccin_thunderbird.themes.models import ThemeAppearance, ThemeManifest, VariantMode
from catppuccin_thunderbird.themes.palette import accent_label, get_flavor, resolve_role

if TYPE_CHECKING:
    from catppuccin.models import Flavor

_NAMESPACE = uuid.UUID(UUID_NAMESPACE)


def theme_name(identifier: str, accent: str) -> str:
    return f"catppuccin-{identifier}-{accent}"


def theme_gecko_id(name: str) -> str:
    """Return the brace-wrapped, name-seeded UUID used as the add-on id."""
    return f"{{{uuid.uuid5(_NAMESPACE, name)}}}"


def resolve_colors(accent: str, flavor: Flavor) -> dict[str, str]:
    """Resolve every output color key against a flavor palette."""
    if accent not in ACCENTS:
        raise ThemeBuildError(
            ErrorCode.ACCENT_UNKNOWN,
            details={"accent": accent, "flavor": flavor.identifier},
        )
    accent_hex = resolve_role(flavor, accent)
    colors: dict[str, str] = {}
    for key, role in COLOR_ROLE_MAP.items():
        colors[key] = accent_hex if role == ACCENT_ROLE else resolve_role(flavor, role)
    return colors


def make_theme_object(
    identifier: str,
    accent: str,
    flavor: Flavor,
    mode: VariantMode,
) -> ThemeManifest | None:
    """Build the manifest for one flavor/accent/mode combination.

    Returns ``None`` when the mode does not apply to the flavor: auto mode for
    the reference light flavor itself, and combined mode for any light flavor.
    """
    dark_colors = resolve_colors(accent, flavor)

    if mode is VariantMode.MANUAL:
        scheme = "dark" if flavor.dark else "light"
        light = ThemeAppearance(colors=dict(dark_colors), color_scheme=scheme)
        dark = ThemeAppearance(colors=dark_colors, color_scheme=scheme)
    elif mode is VariantMode.AUTO:
        if flavor.identifier == REFERENCE_LIGHT_FLAVOR:
            return None
        light_flavor = get_flavor(REFERENCE_LIGHT_FLAVOR)
        light = ThemeAppearance(colors=resolve_colors(accent, light_flavor), color_scheme="auto")
        dark = ThemeAppearance(colors=dark_colors, color_scheme="auto")
    elif mode is VariantMode.COMBINED:
        if not flavor.dark:
            return None
        light_flavor = get_flavor(REFERENCE_LIGHT_FLAVOR)
        light = ThemeAppearance(colors=resolve_colors(accent, light_flavor), color_scheme="light")
        dark = ThemeAppearance(colors=dark_colors, color_scheme="dark")
    else:
        raise ValueError(f"Unsupported variant mode: {mode!r}")

    name = theme_name(identifier, accent)
    return ThemeManifest(
        name=name,
        gecko_id=theme_gecko_id(name),
        description=(
            f"Soothing pastel theme for Thunderbird - {flavor.name} {accent_label(flavor, accent)}"
        ),
        theme=light,
        dark_theme=dark,
    )
