"""Classification of protocol edits into editor edit records."""

from __future__ import annotations

from dataclasses import replace

from kak_engine.protocol.models import TextEdit

from .coordinates import lsp_range_to_kakoune
from .models import ApplicationKind, NativeEdit, NativePosition


def lsp_text_edit_to_kakoune(text_edit: TextEdit) -> NativeEdit:
    """Convert one protocol edit and tag it with how it must be applied.

    An insertion at the beginning of a line selects the first character of
    that line and inserts before it. Selecting the end of the previous line
    and inserting after it breaks delete-then-insert pairs such as
    ``(5,0)-(6,0) -> ""`` followed by ``(6,0)-(6,0) -> "text\\n"``.
    """

    abstract = text_edit.range
    insert = abstract.is_empty
    bol_insert = insert and abstract.end.character == 0

    native = lsp_range_to_kakoune(abstract)

    if bol_insert:
        native = replace(native, end=NativePosition(native.start.line, 1))
        kind = ApplicationKind.INSERT_BEFORE
    elif insert:
        if native.end.column > 0:
            native = replace(
                native, start=NativePosition(native.start.line, native.end.column)
            )
        kind = ApplicationKind.INSERT_AFTER
    else:
        kind = ApplicationKind.REPLACE

    return NativeEdit(range=native, new_text=text_edit.new_text, kind=kind)


__all__ = ["lsp_text_edit_to_kakoune"]
