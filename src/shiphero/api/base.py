"""Shared helpers for the resource APIs."""

from typing import TypeVar
from urllib.parse import quote

from shiphero.exceptions import ShipHeroError

T = TypeVar("T")


def build_path(*segments: str) -> str:
    """Join path segments into ``/a/b/c``, percent-encoding each one."""
    return "/" + "/".join(quote(str(segment), safe="") for segment in segments)


def require_result(result: T | None, action: str) -> T:
    """Return ``result``, or raise if the API answered with no entity.

    Args:
        result: The decoded response.
        action: What was attempted, e.g. ``"create order"``.

    Raises:
        ShipHeroError: If ``result`` is None.
    """
    if result is None:
        raise ShipHeroError(f"Failed to {action}: empty response")
    return result
