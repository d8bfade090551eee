"""Protocol-side value types (zero-based, end-exclusive coordinates)."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Optional, Sequence, Union


@dataclass(frozen=True, slots=True, order=True)
class Position:
    """Zero-based line/character pair. Ordered in document order."""

    line: int
    character: int


@dataclass(frozen=True, slots=True)
class Range:
    """Half-open span; ``end`` points one past the last covered character."""

    start: Position
    end: Position

    @property
    def is_empty(self) -> bool:
        return self.start == self.end


@dataclass(frozen=True, slots=True)
class TextEdit:
    range: Range
    new_text: str


@dataclass(frozen=True, slots=True)
class Location:
    uri: str
    range: Range


@dataclass(frozen=True, slots=True)
class LocationLink:
    target_uri: str
    target_range: Range
    target_selection_range: Range
    origin_selection_range: Optional[Range] = None


class SymbolKind(IntEnum):
    FILE = 1
    MODULE = 2
    NAMESPACE = 3
    PACKAGE = 4
    CLASS = 5
    METHOD = 6
    PROPERTY = 7
    FIELD = 8
    CONSTRUCTOR = 9
    ENUM = 10
    INTERFACE = 11
    FUNCTION = 12
    VARIABLE = 13
    CONSTANT = 14
    STRING = 15
    NUMBER = 16
    BOOLEAN = 17
    ARRAY = 18
    OBJECT = 19
    KEY = 20
    NULL = 21
    ENUM_MEMBER = 22
    STRUCT = 23
    EVENT = 24
    OPERATOR = 25
    TYPE_PARAMETER = 26

    @property
    def label(self) -> str:
        """PascalCase name, e.g. ``EnumMember``."""

        return "".join(part.capitalize() for part in self.name.split("_"))


@dataclass(frozen=True, slots=True)
class SymbolInformation:
    name: str
    kind: SymbolKind
    location: Location
    container_name: Optional[str] = None
    deprecated: bool = False


@dataclass(frozen=True, slots=True)
class DocumentSymbol:
    name: str
    kind: SymbolKind
    range: Range
    selection_range: Range
    detail: Optional[str] = None
    children: tuple["DocumentSymbol", ...] = ()


GotoDefinitionResponse = Union[Location, Sequence[Location], Sequence[LocationLink]]


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
]
