from kak_engine.edits import (
    END_OF_LINE,
    ApplicationKind,
    NativePosition,
    lsp_text_edit_to_kakoune,
)
from kak_engine.protocol import Position, Range, TextEdit


def make_edit(
    start_line: int, start_char: int, end_line: int, end_char: int, text: str = ""
) -> TextEdit:
    return TextEdit(
        range=Range(Position(start_line, start_char), Position(end_line, end_char)),
        new_text=text,
    )


def test_insert_in_middle_of_line_is_insert_after() -> None:
    edit = lsp_text_edit_to_kakoune(make_edit(4, 2, 4, 2, "x"))

    assert edit.kind is ApplicationKind.INSERT_AFTER
    assert edit.range.start == NativePosition(5, 3)
    assert edit.range.end == NativePosition(5, 3)
    assert edit.new_text == "x"


def test_insert_anchor_collapses_to_single_column() -> None:
    for line, column in [(0, 1), (3, 8), (12, 40)]:
        edit = lsp_text_edit_to_kakoune(make_edit(line, column, line, column, "y"))

        assert edit.range.start == edit.range.end
        assert edit.range.start == NativePosition(line + 1, column + 1)


def test_insert_at_line_start_is_insert_before() -> None:
    edit = lsp_text_edit_to_kakoune(make_edit(6, 0, 6, 0, "\tfmt.Println()\n"))

    assert edit.kind is ApplicationKind.INSERT_BEFORE
    assert edit.range.start == NativePosition(7, 1)
    assert edit.range.end == NativePosition(7, 1)


def test_non_empty_range_is_replace() -> None:
    edit = lsp_text_edit_to_kakoune(make_edit(0, 0, 0, 3, "foo"))

    assert edit.kind is ApplicationKind.REPLACE
    assert edit.range.start == NativePosition(1, 1)
    assert edit.range.end == NativePosition(1, 3)


def test_line_deletion_is_replace_to_end_of_line() -> None:
    edit = lsp_text_edit_to_kakoune(make_edit(5, 0, 6, 0, ""))

    assert edit.kind is ApplicationKind.REPLACE
    assert edit.range.start == NativePosition(6, 1)
    assert edit.range.end == NativePosition(6, END_OF_LINE)
