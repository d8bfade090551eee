"""Ordering of editor edits and detection of adjoining selections."""

from __future__ import annotations

from typing import FrozenSet, Iterable, List, Sequence

from .models import END_OF_LINE, NativeEdit, NativeRange


def sort_edits(edits: Iterable[NativeEdit]) -> List[NativeEdit]:
    """Order edits left to right.

    The protocol does not promise any order, but selection bookkeeping relies
    on it. The sort is stable so several inserts at one point keep their
    input order.
    """

    return sorted(edits, key=lambda edit: edit.range.sort_key)


def is_adjoining(first: NativeRange, second: NativeRange) -> bool:
    end = first.end
    start = second.start
    if end.line == start.line and end.column + 1 == start.column:
        return True
    return (
        end.column == END_OF_LINE
        and end.line + 1 == start.line
        and start.column == 1
    )


def find_adjoining(edits: Sequence[NativeEdit]) -> FrozenSet[int]:
    """Indices ``i`` such that edit ``i`` touches edit ``i + 1``."""

    return frozenset(
        index
        for index, (current, following) in enumerate(zip(edits, edits[1:]))
        if is_adjoining(current.range, following.range)
    )


__all__ = ["sort_edits", "is_adjoining", "find_adjoining"]
