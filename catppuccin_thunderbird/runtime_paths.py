"""Runtime path helpers for packaged resources."""

from __future__ import annotations

from pathlib import Path


def package_root() -> Path:
    """Return the root path that contains the `catppuccin_thunderbird` package resources."""
    return Path(__file__).resolve().parent


def assets_root() -> Path:
    """Resolve the bundled icon asset directory."""
    return package_root() / "assets"


def asset_path(*parts: str) -> Path:
    """Resolve a bundled asset path."""
    return assets_root().joinpath(*parts)
