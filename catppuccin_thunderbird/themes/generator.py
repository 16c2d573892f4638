"""Fan the builder and writer out over every flavor, accent and mode."""

from __future__ import annotations

import logging
from concurrent.futures import Future, ThreadPoolExecutor, as_completed
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING

from catppuccin_thunderbird.errors import ThemeBuildError, classify_exception
from catppuccin_thunderbird.themes.builder import make_theme_object
from catppuccin_thunderbird.themes.constants import ACCENTS, PACKAGE_EXTENSION
from catppuccin_thunderbird.themes.models import VariantMode
from catppuccin_thunderbird.themes.palette import get_flavor, iter_flavors
from catppuccin_thunderbird.themes.writer import write_theme

if TYPE_CHECKING:
    from catppuccin.models import Flavor

    from catppuccin_thunderbird.config.settings import BuildSettings

logger = logging.getLogger(__name__)

MODE_OUTPUT_DIRS: dict[VariantMode, str] = {
    VariantMode.MANUAL: "default",
    VariantMode.AUTO: "auto",
    VariantMode.COMBINED: "dark-light",
}


@dataclass
class FlavorReport:
    """Outcome of building every package for a single flavor."""

    identifier: str
    written: list[Path] = field(default_factory=list)
    skipped: int = 0


@dataclass
class BuildReport:
    """Outcome of a full build."""

    flavors: list[FlavorReport] = field(default_factory=list)

    @property
    def written(self) -> list[Path]:
        return [path for report in self.flavors for path in report.written]

    @property
    def total_written(self) -> int:
        return sum(len(report.written) for report in self.flavors)

    @property
    def total_skipped(self) -> int:
        return sum(report.skipped for report in self.flavors)


def package_filename(identifier: str, accent: str) -> str:
    return f"{identifier}-{accent}{PACKAGE_EXTENSION}"


def output_dir_for(root: Path, mode: VariantMode, identifier: str) -> Path:
    return root / MODE_OUTPUT_DIRS[mode] / identifier


def generate_variants(flavor: Flavor, settings: BuildSettings) -> FlavorReport:
    """Build and write every accent/mode package for one flavor."""
    identifier = flavor.identifier
    report = FlavorReport(identifier=identifier)
    for accent in ACCENTS:
        file_name = package_filename(identifier, accent)
        for mode in settings.modes:
            try:
                theme = make_theme_object(identifier, accent, flavor, mode)
            except ThemeBuildError as exc:
                exc.details.setdefault("flavor", identifier)
                exc.details.setdefault("accent", accent)
                exc.details.setdefault("mode", mode.value)
                raise
            if theme is None:
                report.skipped += 1
                logger.debug("skipping %s in %s mode", file_name, mode.value)
                continue
            path = write_theme(
                file_name,
                theme,
                output_dir_for(settings.output_dir, mode, identifier),
                settings.assets_dir,
            )
            if path is not None:
                report.written.append(path)
    logger.info(
        "%s: wrote %d packages, skipped %d",
        identifier,
        len(report.written),
        report.skipped,
    )
    return report


def _selected_flavors(settings: BuildSettings) -> list[Flavor]:
    if not settings.flavors:
        return list(iter_flavors())
    return [get_flavor(identifier) for identifier in dict.fromkeys(settings.flavors)]


def generate_all(settings: BuildSettings) -> BuildReport:
    """Build every selected flavor, one worker task per flavor.

    The first failing flavor aborts the run; its error propagates to the caller.
    """
    flavors = _selected_flavors(settings)
    report = BuildReport()
    if not flavors:
        return report

    by_identifier: dict[str, FlavorReport] = {}
    with ThreadPoolExecutor(max_workers=settings.max_workers) as executor:
        futures: dict[Future[FlavorReport], str] = {
            executor.submit(generate_variants, flavor, settings): flavor.identifier
            for flavor in flavors
        }
        for future in as_completed(futures):
            identifier = futures[future]
            try:
                by_identifier[identifier] = future.result()
            except Exception as exc:
                for pending in futures:
                    pending.cancel()
                error = classify_exception(exc, flavor=identifier)
                if error is exc:
                    error.details.setdefault("flavor", identifier)
                    raise
                raise error from exc

    # Report in palette order regardless of completion order.
    report.flavors = [by_identifier[flavor.identifier] for flavor in flavors]
    return report
