"""Theme package serialization and archive writing."""

from __future__ import annotations

import io
import json
import logging
import os
import tempfile
import zipfile
from pathlib import Path
from typing import Any

from catppuccin_thunderbird.errors import ErrorCode, ThemeBuildError, classify_exception
from catppuccin_thunderbird.runtime_paths import assets_root
from catppuccin_thunderbird.themes.constants import ICON_FILES, IMAGES_FOLDER, MANIFEST_FILENAME
from catppuccin_thunderbird.themes.models import ThemeManifest

logger = logging.getLogger(__name__)

# Fixed entry timestamp so rebuilt archives are byte-identical.
_ZIP_EPOCH = (1980, 1, 1, 0, 0, 0)
_FILE_MODE = 0o644 << 16
_DIR_MODE = (0o40755 << 16) | 0x10


def serialize_manifest(manifest: ThemeManifest | dict[str, Any]) -> str:
    """Serialize a manifest to 2-space indented JSON text."""
    data = manifest.to_dict() if isinstance(manifest, ThemeManifest) else manifest
    return json.dumps(data, indent=2, ensure_ascii=False)


def _file_info(name: str) -> zipfile.ZipInfo:
    info = zipfile.ZipInfo(name, date_time=_ZIP_EPOCH)
    info.compress_type = zipfile.ZIP_DEFLATED
    info.external_attr = _FILE_MODE
    return info


def _dir_info(name: str) -> zipfile.ZipInfo:
    info = zipfile.ZipInfo(f"{name.rstrip('/')}/", date_time=_ZIP_EPOCH)
    info.compress_type = zipfile.ZIP_STORED
    info.external_attr = _DIR_MODE
    return info


def _read_icon(assets_dir: Path, filename: str) -> bytes:
    icon_path = assets_dir / filename
    try:
        return icon_path.read_bytes()
    except FileNotFoundError as exc:
        raise ThemeBuildError(
            ErrorCode.ASSET_MISSING,
            path=icon_path,
            details={"original": str(exc)},
        ) from exc
    except OSError as exc:
        raise classify_exception(exc, icon_path, default=ErrorCode.ASSET_MISSING) from exc


def build_package(manifest: ThemeManifest, assets_dir: Path | None = None) -> bytes:
    """Return the bytes of a theme archive: manifest plus the icon images."""
    assets_dir = assets_dir or assets_root()
    icons = [(filename, _read_icon(assets_dir, filename)) for filename in ICON_FILES]

    buffer = io.BytesIO()
    with zipfile.ZipFile(buffer, "w") as archive:
        archive.writestr(_file_info(MANIFEST_FILENAME), serialize_manifest(manifest).encode("utf-8"))
        archive.writestr(_dir_info(IMAGES_FOLDER), b"")
        for filename, data in icons:
            archive.writestr(_file_info(f"{IMAGES_FOLDER}/{filename}"), data)
    return buffer.getvalue()


def write_theme(
    file_name: str,
    manifest: ThemeManifest | None,
    output_dir: Path,
    assets_dir: Path | None = None,
) -> Path | None:
    """Write a theme package to ``output_dir / file_name``.

    A ``None`` manifest is a no-op: nothing is written and no directory is
    created. The archive is written to a temporary sibling first and moved
    into place, so a failed write never leaves a partial package behind.
    """
    if manifest is None:
        return None

    payload = build_package(manifest, assets_dir)

    try:
        output_dir.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise classify_exception(exc, output_dir, default=ErrorCode.OUTPUT_DIR_FAILED) from exc

    destination = output_dir / file_name
    tmp_name = ""
    try:
        with tempfile.NamedTemporaryFile(
            dir=output_dir,
            prefix=f".{file_name}.",
            suffix=".tmp",
            delete=False,
        ) as handle:
            tmp_name = handle.name
            handle.write(payload)
        os.chmod(tmp_name, 0o644)
        os.replace(tmp_name, destination)
    except OSError as exc:
        if tmp_name:
            Path(tmp_name).unlink(missing_ok=True)
        raise classify_exception(
            exc,
            destination,
            default=ErrorCode.ARCHIVE_WRITE_FAILED,
            theme=manifest.name,
        ) from exc

    logger.debug("wrote %s (%d bytes)", destination, len(payload))
    return destination


def read_package_manifest(path: Path) -> dict[str, Any]:
    """Load manifest.json back out of a written theme package."""
    try:
        with zipfile.ZipFile(path) as archive:
            raw = archive.read(MANIFEST_FILENAME)
    except KeyError as exc:
        raise ThemeBuildError(
            ErrorCode.PACKAGE_INVALID,
            message=f"{path}: package has no {MANIFEST_FILENAME}",
            path=path,
        ) from exc
    except (OSError, zipfile.BadZipFile) as exc:
        raise ThemeBuildError(
            ErrorCode.PACKAGE_INVALID,
            path=path,
            details={"original": str(exc)},
        ) from exc

    try:
        data = json.loads(raw.decode("utf-8"))
    except (UnicodeDecodeError, json.JSONDecodeError) as exc:
        raise ThemeBuildError(
            ErrorCode.PACKAGE_INVALID,
            message=f"Invalid JSON in {path}/{MANIFEST_FILENAME}: {exc}",
            path=path,
        ) from exc
    if not isinstance(data, dict):
        raise ThemeBuildError(
            ErrorCode.PACKAGE_INVALID,
            message=f"Expected JSON object in {path}/{MANIFEST_FILENAME}",
            path=path,
        )
    return data
