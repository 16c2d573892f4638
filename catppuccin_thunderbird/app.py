"""Theme build bootstrap."""

from __future__ import annotations

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path
import time

from catppuccin_thunderbird.config.settings import BuildSettings
from catppuccin_thunderbird.errors import ThemeBuildError
from catppuccin_thunderbird.themes.generator import generate_all

_LOG_FORMAT = "%(asctime)s %(levelname)s %(message)s"
LOGGER_NAME = "catppuccin_thunderbird"
CONSOLE_HANDLER_NAME = f"{LOGGER_NAME}:console"
FILE_HANDLER_NAME = f"{LOGGER_NAME}:file"


def _configure_build_logger(settings: BuildSettings) -> logging.Logger:
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(settings.log_level)
    formatter = logging.Formatter(_LOG_FORMAT)
    existing = {handler.get_name() for handler in logger.handlers}

    if CONSOLE_HANDLER_NAME not in existing:
        console = logging.StreamHandler()
        console.setFormatter(formatter)
        console.set_name(CONSOLE_HANDLER_NAME)
        logger.addHandler(console)

    if settings.log_file is not None and FILE_HANDLER_NAME not in existing:
        settings.log_file.parent.mkdir(parents=True, exist_ok=True)
        handler = RotatingFileHandler(
            settings.log_file,
            maxBytes=512_000,
            backupCount=3,
            encoding="utf-8",
        )
        handler.setFormatter(formatter)
        handler.set_name(FILE_HANDLER_NAME)
        logger.addHandler(handler)
    logger.propagate = False
    return logger


def run_build(config_path: Path | None = None) -> int:
    """Generate every theme package and return a process exit code."""
    start = time.perf_counter()
    try:
        settings = BuildSettings.load(config_path)
    except ThemeBuildError as exc:
        logging.getLogger(LOGGER_NAME).error("invalid build configuration: %s", exc)
        return 1

    logger = _configure_build_logger(settings)
    logger.info(
        "building themes into %s modes=%s",
        settings.output_dir,
        ",".join(mode.value for mode in settings.modes),
    )

    try:
        report = generate_all(settings)
    except ThemeBuildError as exc:
        logger.error("theme build failed: %s", exc)
        return 1

    elapsed_ms = (time.perf_counter() - start) * 1000
    logger.info(
        "Built %d packages (%d skipped) in %.1f ms",
        report.total_written,
        report.total_skipped,
        elapsed_ms,
    )
    return 0
