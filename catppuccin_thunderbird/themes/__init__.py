"""Theme build exports."""

from catppuccin_thunderbird.themes.builder import make_theme_object, resolve_colors
from catppuccin_thunderbird.themes.generator import BuildReport, generate_all, generate_variants
from catppuccin_thunderbird.themes.models import ThemeAppearance, ThemeManifest, VariantMode
from catppuccin_thunderbird.themes.writer import write_theme

__all__ = [
    "BuildReport",
    "ThemeAppearance",
    "ThemeManifest",
    "VariantMode",
    "generate_all",
    "generate_variants",
    "make_theme_object",
    "resolve_colors",
    "write_theme",
]
