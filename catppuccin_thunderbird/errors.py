"""Error codes and error handling utilities for the theme build."""

from __future__ import annotations

import errno
from dataclasses import dataclass, field
from enum import Enum, auto
from pathlib import Path
from typing import Any


class ErrorCode(Enum):
    """Standardized error codes for theme build operations."""

    # Palette data errors
    FLAVOR_UNKNOWN = auto()
    ACCENT_UNKNOWN = auto()
    PALETTE_ROLE_MISSING = auto()

    # File system errors
    ASSET_MISSING = auto()
    FILE_ACCESS_DENIED = auto()
    DISK_FULL = auto()
    OUTPUT_DIR_FAILED = auto()
    ARCHIVE_WRITE_FAILED = auto()

    # Package errors
    PACKAGE_INVALID = auto()

    # Configuration errors
    CONFIG_INVALID = auto()

    # Catch-all
    OPERATION_FAILED = auto()


ERROR_MESSAGES: dict[ErrorCode, str] = {
    ErrorCode.FLAVOR_UNKNOWN: "The requested flavor does not exist in the palette.",
    ErrorCode.ACCENT_UNKNOWN: "The requested accent is not one of the supported accents.",
    ErrorCode.PALETTE_ROLE_MISSING: "A color role is missing from the flavor palette.",

    ErrorCode.ASSET_MISSING: "An icon asset required for the package was not found.",
    ErrorCode.FILE_ACCESS_DENIED: "Access denied. Check permissions on the output directory.",
    ErrorCode.DISK_FULL: "The destination disk is full. Free up space and try again.",
    ErrorCode.OUTPUT_DIR_FAILED: "The output directory could not be created.",
    ErrorCode.ARCHIVE_WRITE_FAILED: "The theme package could not be written.",

    ErrorCode.PACKAGE_INVALID: "The theme package is not a valid archive with a manifest.",

    ErrorCode.CONFIG_INVALID: "The build configuration is invalid.",

    ErrorCode.OPERATION_FAILED: "Operation failed. See details for more information.",
}


# Detail keys that locate a failure within the build matrix.
_CONTEXT_KEYS = ("flavor", "accent", "mode")


@dataclass
class ThemeBuildError(Exception):
    """Base exception for the theme build with error code and context."""

    code: ErrorCode
    message: str = ""
    path: Path | None = None
    details: dict[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if not self.message:
            self.message = ERROR_MESSAGES.get(self.code, "An unexpected error occurred.")

    def context(self) -> str:
        """Return the build coordinates (flavor, accent, mode) this error belongs to."""
        return " ".join(
            f"{key}={self.details[key]}" for key in _CONTEXT_KEYS if key in self.details
        )

    def __str__(self) -> str:
        head = f"[{self.code.name}] {self.message}"
        context = self.context()
        if context:
            head = f"{head} ({context})"
        lines = [head]
        if self.path:
            lines.append(f"path: {self.path}")
        extra = {k: v for k, v in self.details.items() if k not in _CONTEXT_KEYS}
        if extra:
            lines.append("details: " + " | ".join(f"{k}={v}" for k, v in extra.items()))
        return "\n".join(lines)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for logging."""
        return {
            "code": self.code.name,
            "message": self.message,
            "path": str(self.path) if self.path else None,
            "details": self.details,
        }


def classify_exception(
    exc: Exception,
    path: Path | None = None,
    *,
    default: ErrorCode = ErrorCode.OPERATION_FAILED,
    **details: Any,
) -> ThemeBuildError:
    """Classify a generic exception into a ThemeBuildError with appropriate code."""
    if isinstance(exc, ThemeBuildError):
        return exc

    context = {**details, "original": str(exc)}
    if isinstance(exc, PermissionError):
        return ThemeBuildError(ErrorCode.FILE_ACCESS_DENIED, path=path, details=context)
    if isinstance(exc, OSError) and exc.errno == errno.ENOSPC:
        return ThemeBuildError(ErrorCode.DISK_FULL, path=path, details=context)

    message = ""
    if default is ErrorCode.OPERATION_FAILED:
        message = f"{type(exc).__name__}: {exc}"
    return ThemeBuildError(default, message=message, path=path, details=context)
