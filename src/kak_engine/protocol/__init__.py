"""Protocol value types and conversions."""

from .convert import goto_definition_response_to_location
from .models import (
    DocumentSymbol,
    GotoDefinitionResponse,
    Location,
    LocationLink,
    Position,
    Range,
    SymbolInformation,
    SymbolKind,
    TextEdit,
)
from .uri import UriResolutionError, path_to_uri, uri_to_path

__all__ = [
    "Position",
    "Range",
    "TextEdit",
    "Location",
    "LocationLink",
    "SymbolKind",
    "SymbolInformation",
    "DocumentSymbol",
    "GotoDefinitionResponse",
    "goto_definition_response_to_location",
    "UriResolutionError",
    "uri_to_path",
    "path_to_uri",
]
