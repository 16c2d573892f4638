"""Tests for theme package serialization and writing."""

from __future__ import annotations

import errno
import io
import json
import zipfile
from pathlib import Path

import pytest
from catppuccin import PALETTE

from catppuccin_thunderbird.errors import ErrorCode, ThemeBuildError
from catppuccin_thunderbird.runtime_paths import asset_path
from catppuccin_thunderbird.themes.builder import make_theme_object
from catppuccin_thunderbird.themes.constants import EXPERIMENT_COLORS, ICON_PATHS
from catppuccin_thunderbird.themes.models import VariantMode
from catppuccin_thunderbird.themes import writer
from catppuccin_thunderbird.themes.writer import (
    build_package,
    read_package_manifest,
    serialize_manifest,
    write_theme,
)


@pytest.fixture
def mocha_manifest():
    return make_theme_object("mocha", "mauve", PALETTE.mocha, VariantMode.MANUAL)


class TestSerializeManifest:
    def test_top_level_layout(self, mocha_manifest):
        data = json.loads(serialize_manifest(mocha_manifest))
        assert list(data) == [
            "manifest_version",
            "name",
            "version",
            "applications",
            "description",
            "icons",
            "theme_experiment",
            "theme",
            "dark_theme",
        ]
        assert data["manifest_version"] == 2
        assert data["version"] == "1.0.0"
        assert data["applications"]["gecko"]["strict_min_version"] == "60.0"
        assert data["icons"] == ICON_PATHS
        assert data["theme_experiment"] == {"stylesheet": "styles.css", "colors": EXPERIMENT_COLORS}

    def test_two_space_indent(self, mocha_manifest):
        text = serialize_manifest(mocha_manifest)
        assert text.startswith('{\n  "manifest_version": 2,\n  "name": "catppuccin-mocha-mauve",')

    def test_keeps_non_ascii_names(self):
        manifest = make_theme_object("frappe", "red", PALETTE.frappe, VariantMode.MANUAL)
        text = serialize_manifest(manifest)
        assert PALETTE.frappe.name in text

    def test_parse_and_reserialize_is_identical(self, mocha_manifest):
        text = serialize_manifest(mocha_manifest)
        assert serialize_manifest(json.loads(text)) == text


class TestBuildPackage:
    def test_entries(self, mocha_manifest):
        payload = build_package(mocha_manifest)
        with zipfile.ZipFile(io.BytesIO(payload)) as archive:
            names = archive.namelist()
        assert names == [
            "manifest.json",
            "images/",
            "images/icon16.png",
            "images/icon48.png",
            "images/icon128.png",
        ]

    def test_icons_copied_byte_for_byte(self, mocha_manifest, tmp_path: Path):
        target = tmp_path / "theme.xpi"
        target.write_bytes(build_package(mocha_manifest))
        with zipfile.ZipFile(target) as archive:
            for size in ("16", "48", "128"):
                name = f"icon{size}.png"
                assert archive.read(f"images/{name}") == asset_path(name).read_bytes()

    def test_is_reproducible(self, mocha_manifest):
        assert build_package(mocha_manifest) == build_package(mocha_manifest)

    def test_missing_asset_raises(self, mocha_manifest, tmp_path: Path):
        with pytest.raises(ThemeBuildError) as excinfo:
            build_package(mocha_manifest, tmp_path / "no-assets")
        assert excinfo.value.code is ErrorCode.ASSET_MISSING


class TestWriteTheme:
    def test_none_manifest_is_noop(self, tmp_path: Path):
        out_dir = tmp_path / "themes" / "auto" / "latte"
        assert write_theme("latte-red.xpi", None, out_dir) is None
        assert not out_dir.exists()

    def test_writes_archive_and_creates_parents(self, mocha_manifest, tmp_path: Path):
        out_dir = tmp_path / "themes" / "default" / "mocha"
        path = write_theme("mocha-mauve.xpi", mocha_manifest, out_dir)
        assert path == out_dir / "mocha-mauve.xpi"
        assert path.exists()
        assert read_package_manifest(path)["name"] == "catppuccin-mocha-mauve"
        assert [p.name for p in out_dir.iterdir()] == ["mocha-mauve.xpi"]

    def test_rewrite_is_byte_identical(self, mocha_manifest, tmp_path: Path):
        path = write_theme("mocha-mauve.xpi", mocha_manifest, tmp_path)
        first = path.read_bytes()
        write_theme("mocha-mauve.xpi", mocha_manifest, tmp_path)
        assert path.read_bytes() == first

    def test_written_manifest_round_trips(self, mocha_manifest, tmp_path: Path):
        path = write_theme("mocha-mauve.xpi", mocha_manifest, tmp_path)
        with zipfile.ZipFile(path) as archive:
            text = archive.read("manifest.json").decode("utf-8")
        assert serialize_manifest(json.loads(text)) == text

    def test_output_dir_blocked_by_file(self, mocha_manifest, tmp_path: Path):
        blocker = tmp_path / "themes"
        blocker.write_text("not a directory", encoding="utf-8")
        with pytest.raises(ThemeBuildError) as excinfo:
            write_theme("mocha-mauve.xpi", mocha_manifest, blocker / "default")
        assert excinfo.value.code is ErrorCode.OUTPUT_DIR_FAILED


    def test_failed_replace_leaves_no_partial_files(self, mocha_manifest, tmp_path: Path, monkeypatch):
        def _disk_full(src, dst):
            raise OSError(errno.ENOSPC, "No space left on device")

        monkeypatch.setattr(writer.os, "replace", _disk_full)
        out_dir = tmp_path / "themes" / "default" / "mocha"
        with pytest.raises(ThemeBuildError) as excinfo:
            write_theme("mocha-mauve.xpi", mocha_manifest, out_dir)
        assert excinfo.value.code is ErrorCode.DISK_FULL
        assert excinfo.value.path == out_dir / "mocha-mauve.xpi"
        assert excinfo.value.details["theme"] == "catppuccin-mocha-mauve"
        assert list(out_dir.iterdir()) == []

    def test_failed_replace_keeps_previous_package(self, mocha_manifest, tmp_path: Path, monkeypatch):
        path = write_theme("mocha-mauve.xpi", mocha_manifest, tmp_path)
        previous = path.read_bytes()

        def _disk_full(src, dst):
            raise OSError(errno.ENOSPC, "No space left on device")

        monkeypatch.setattr(writer.os, "replace", _disk_full)
        other = make_theme_object("mocha", "red", PALETTE.mocha, VariantMode.MANUAL)
        with pytest.raises(ThemeBuildError):
            write_theme("mocha-mauve.xpi", other, tmp_path)
        assert path.read_bytes() == previous
        assert [p.name for p in tmp_path.iterdir()] == ["mocha-mauve.xpi"]

class TestReadPackageManifest:
    def test_rejects_non_zip(self, tmp_path: Path):
        path = tmp_path / "broken.xpi"
        path.write_bytes(b"not a zip")
        with pytest.raises(ThemeBuildError) as excinfo:
            read_package_manifest(path)
        assert excinfo.value.code is ErrorCode.PACKAGE_INVALID

    def test_rejects_missing_manifest(self, tmp_path: Path):
        path = tmp_path / "empty.xpi"
        with zipfile.ZipFile(path, "w") as archive:
            archive.writestr("images/icon16.png", b"")
        with pytest.raises(ThemeBuildError, match="no manifest.json"):
            read_package_manifest(path)

    def test_rejects_non_object_manifest(self, tmp_path: Path):
        path = tmp_path / "list.xpi"
        with zipfile.ZipFile(path, "w") as archive:
            archive.writestr("manifest.json", "[1, 2]")
        with pytest.raises(ThemeBuildError, match="Expected JSON object"):
            read_package_manifest(path)
