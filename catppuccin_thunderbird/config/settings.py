"""Build settings loaded from an optional YAML file."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Mapping

import yaml

from catppuccin_thunderbird.errors import ErrorCode, ThemeBuildError
from catppuccin_thunderbird.runtime_paths import assets_root
from catppuccin_thunderbird.themes.models import VariantMode

CONFIG_FILENAME = "thunderbird-themes.yaml"

_ALLOWED_KEYS = {
    "output_dir",
    "assets_dir",
    "modes",
    "flavors",
    "max_workers",
    "log_level",
    "log_file",
}


def _default_workers() -> int:
    return min(os.cpu_count() or 4, 4)


@dataclass
class BuildSettings:
    """Where and what the theme build produces."""

    output_dir: Path = Path("themes")
    assets_dir: Path = field(default_factory=assets_root)
    modes: tuple[VariantMode, ...] = tuple(VariantMode)
    # Empty means every palette flavor.
    flavors: tuple[str, ...] = ()
    max_workers: int = field(default_factory=_default_workers)
    log_level: str = "INFO"
    log_file: Path | None = None

    @classmethod
    def load(cls, path: Path | None = None) -> BuildSettings:
        """Load settings from ``path``.

        Without a path, the working directory config file is used when present
        and defaults otherwise. A path the caller names must exist.
        """
        if path is None:
            path = Path.cwd() / CONFIG_FILENAME
            if not path.exists():
                return cls()
        elif not path.is_file():
            raise _invalid(path, "config file not found")
        try:
            data = yaml.safe_load(path.read_text(encoding="utf-8"))
        except (OSError, yaml.YAMLError) as exc:
            raise ThemeBuildError(
                ErrorCode.CONFIG_INVALID,
                path=path,
                details={"original": str(exc)},
            ) from exc
        if data is None:
            return cls()
        if not isinstance(data, Mapping):
            raise ThemeBuildError(
                ErrorCode.CONFIG_INVALID,
                message=f"{path}: expected a mapping at the top level",
                path=path,
            )
        return cls.from_mapping(data, base_dir=path.parent, source=path)

    @classmethod
    def from_mapping(
        cls,
        data: Mapping[str, Any],
        *,
        base_dir: Path | None = None,
        source: Path | None = None,
    ) -> BuildSettings:
        unknown = sorted(str(key) for key in data if key not in _ALLOWED_KEYS)
        if unknown:
            raise _invalid(source, f"unsupported keys found: {', '.join(unknown)}")

        base_dir = base_dir or Path.cwd()
        settings = cls()

        if data.get("output_dir") is not None:
            settings.output_dir = _resolve_path(data["output_dir"], base_dir, "output_dir", source)
        if data.get("assets_dir") is not None:
            settings.assets_dir = _resolve_path(data["assets_dir"], base_dir, "assets_dir", source)
        if data.get("log_file") is not None:
            settings.log_file = _resolve_path(data["log_file"], base_dir, "log_file", source)

        if data.get("modes") is not None:
            settings.modes = tuple(_parse_mode(raw, source) for raw in _string_list(data["modes"], "modes", source))
            if not settings.modes:
                raise _invalid(source, "modes must list at least one mode")
        if data.get("flavors") is not None:
            # Repeated flavors would be built twice into the same paths.
            settings.flavors = tuple(dict.fromkeys(
                raw.strip().lower() for raw in _string_list(data["flavors"], "flavors", source)
            ))

        if data.get("max_workers") is not None:
            workers = data["max_workers"]
            if isinstance(workers, bool) or not isinstance(workers, int) or workers < 1:
                raise _invalid(source, f"max_workers must be a positive integer, got {workers!r}")
            settings.max_workers = workers

        if data.get("log_level") is not None:
            level = str(data["log_level"]).strip().upper()
            if not isinstance(logging.getLevelName(level), int):
                raise _invalid(source, f"unknown log_level {data['log_level']!r}")
            settings.log_level = level

        return settings


def _invalid(source: Path | None, message: str) -> ThemeBuildError:
    prefix = f"{source}: " if source else ""
    return ThemeBuildError(ErrorCode.CONFIG_INVALID, message=f"{prefix}{message}", path=source)


def _resolve_path(raw: object, base_dir: Path, key: str, source: Path | None) -> Path:
    if not isinstance(raw, str) or not raw.strip():
        raise _invalid(source, f"field {key!r} must be a non-empty string")
    path = Path(raw.strip()).expanduser()
    return path if path.is_absolute() else base_dir / path


def _string_list(raw: object, key: str, source: Path | None) -> list[str]:
    if isinstance(raw, str):
        raw = [raw]
    if not isinstance(raw, list) or not all(isinstance(item, str) for item in raw):
        raise _invalid(source, f"field {key!r} must be a list of strings")
    return raw


def _parse_mode(raw: str, source: Path | None) -> VariantMode:
    try:
        return VariantMode(raw.strip().lower())
    except ValueError:
        choices = ", ".join(mode.value for mode in VariantMode)
        raise _invalid(source, f"unknown mode {raw!r}; expected one of {choices}") from None
