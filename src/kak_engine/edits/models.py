"""Editor-side edit records (one-based, end-inclusive coordinates)."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Tuple

# Column meaning "through the end of the line". Must stay strictly greater
# than any column the editor can address; adjacency checks compare against it.
END_OF_LINE = 1_000_000


class ApplicationKind(Enum):
    """How an edit is applied to its selection."""

    INSERT_BEFORE = "insert_before"
    INSERT_AFTER = "insert_after"
    REPLACE = "replace"


@dataclass(frozen=True, slots=True)
class NativePosition:
    line: int
    column: int

    @property
    def at_end_of_line(self) -> bool:
        return self.column == END_OF_LINE


@dataclass(frozen=True, slots=True)
class NativeRange:
    """Inclusive selection; ``start`` never follows ``end`` in editor order."""

    start: NativePosition
    end: NativePosition

    @property
    def sort_key(self) -> Tuple[int, int, int, int]:
        return (self.start.line, self.start.column, self.end.line, self.end.column)


@dataclass(frozen=True, slots=True)
class NativeEdit:
    range: NativeRange
    new_text: str
    kind: ApplicationKind


__all__ = [
    "END_OF_LINE",
    "ApplicationKind",
    "NativePosition",
    "NativeRange",
    "NativeEdit",
]
