"""Range conversion between protocol and editor coordinates.

Protocol ranges are zero-based and end-exclusive; the editor's are one-based
and end-inclusive. A protocol range that includes a line break ends at
column 0 of the following line, which the editor expresses as a selection
running to the end of the previous line.
"""

from __future__ import annotations

from kak_engine.protocol.models import Position, Range

from .models import END_OF_LINE, NativePosition, NativeRange


def lsp_range_to_kakoune(range_: Range) -> NativeRange:
    start_line = range_.start.line
    start_column = range_.start.character
    end_line = range_.end.line
    end_column = range_.end.character

    # Some servers emit zero-length ranges; widen them to one character so
    # the selection is never degenerate.
    if range_.is_empty:
        end_column += 1

    # A positive exclusive end column is already the inclusive one-based
    # column; only the line needs rebasing.
    if end_column > 0:
        end_line += 1
    else:
        end_column = END_OF_LINE

    return NativeRange(
        start=NativePosition(start_line + 1, start_column + 1),
        end=NativePosition(end_line, end_column),
    )


def kakoune_range_to_lsp(native: NativeRange) -> Range:
    """Inverse of ``lsp_range_to_kakoune`` for non-empty protocol ranges."""

    start = Position(native.start.line - 1, native.start.column - 1)
    if native.end.at_end_of_line:
        end = Position(native.end.line, 0)
    else:
        end = Position(native.end.line - 1, native.end.column)
    return Range(start=start, end=end)


def format_range(native: NativeRange) -> str:
    start, end = native.start, native.end
    return f"{start.line}.{start.column},{end.line}.{end.column}"


def lsp_range_to_kakoune_text(range_: Range) -> str:
    return format_range(lsp_range_to_kakoune(range_))


__all__ = [
    "lsp_range_to_kakoune",
    "kakoune_range_to_lsp",
    "format_range",
    "lsp_range_to_kakoune_text",
]
