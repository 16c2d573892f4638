"""Access to the Catppuccin palette flavors."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Iterator

from catppuccin import PALETTE

from catppuccin_thunderbird.errors import ErrorCode, ThemeBuildError

if TYPE_CHECKING:
    from catppuccin.models import Flavor


def iter_flavors() -> Iterator[Flavor]:
    """Yield every palette flavor in palette order."""
    yield from PALETTE


def flavor_identifiers() -> list[str]:
    return [flavor.identifier for flavor in PALETTE]


def get_flavor(identifier: str) -> Flavor:
    """Return the flavor with the given identifier."""
    for flavor in PALETTE:
        if flavor.identifier == identifier:
            return flavor
    raise ThemeBuildError(
        ErrorCode.FLAVOR_UNKNOWN,
        details={"flavor": identifier, "known": ", ".join(flavor_identifiers())},
    )


def _palette_color(flavor: Flavor, role: str) -> Any:
    color = getattr(flavor.colors, role, None)
    if color is None:
        raise ThemeBuildError(
            ErrorCode.PALETTE_ROLE_MISSING,
            message=f"Flavor {flavor.identifier!r} has no color role {role!r}",
            details={"flavor": flavor.identifier, "role": role},
        )
    return color


def resolve_role(flavor: Flavor, role: str) -> str:
    """Return the hex value of a palette role, failing loudly when absent."""
    return _palette_color(flavor, role).hex


def accent_label(flavor: Flavor, accent: str) -> str:
    """Return the display name of an accent color, e.g. ``Mauve``."""
    return _palette_color(flavor, accent).name
