"""Conversions between protocol response shapes."""

from __future__ import annotations

from typing import Optional

from .models import GotoDefinitionResponse, Location, LocationLink


def goto_definition_response_to_location(
    result: Optional[GotoDefinitionResponse],
) -> Optional[Location]:
    """Collapse a definition response to a single ``Location``.

    The first entry wins when several are present. A ``LocationLink`` is
    reduced to its target, dropping the origin information.
    """

    if result is None:
        return None
    if isinstance(result, Location):
        return result
    if not result:
        return None
    first = result[0]
    if isinstance(first, LocationLink):
        return Location(uri=first.target_uri, range=first.target_range)
    return first


__all__ = ["goto_definition_response_to_location"]
