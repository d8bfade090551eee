from kak_engine.edits import (
    END_OF_LINE,
    NativeEdit,
    NativePosition,
    NativeRange,
    find_adjoining,
    is_adjoining,
    lsp_text_edit_to_kakoune,
    sort_edits,
)
from kak_engine.protocol import Position, Range, TextEdit


def make_native(
    start_line: int, start_char: int, end_line: int, end_char: int, text: str = ""
) -> NativeEdit:
    return lsp_text_edit_to_kakoune(
        TextEdit(
            range=Range(
                Position(start_line, start_char), Position(end_line, end_char)
            ),
            new_text=text,
        )
    )


def native_range(
    start_line: int, start_col: int, end_line: int, end_col: int
) -> NativeRange:
    return NativeRange(
        NativePosition(start_line, start_col), NativePosition(end_line, end_col)
    )


def test_sort_orders_left_to_right() -> None:
    edits = [
        make_native(3, 0, 3, 4, "c"),
        make_native(0, 2, 0, 5, "a"),
        make_native(1, 0, 1, 1, "b"),
    ]

    ordered = sort_edits(edits)

    assert [edit.new_text for edit in ordered] == ["a", "b", "c"]


def test_sort_is_stable_for_same_point_inserts() -> None:
    edits = [
        make_native(2, 3, 2, 3, "first"),
        make_native(0, 0, 0, 1, "other"),
        make_native(2, 3, 2, 3, "second"),
        make_native(2, 3, 2, 3, "third"),
    ]

    ordered = sort_edits(edits)

    assert [edit.new_text for edit in ordered] == [
        "other",
        "first",
        "second",
        "third",
    ]


def test_sort_breaks_ties_on_end_position() -> None:
    edits = [make_native(0, 0, 0, 5, "long"), make_native(0, 0, 0, 2, "short")]

    ordered = sort_edits(edits)

    assert [edit.new_text for edit in ordered] == ["short", "long"]


def test_same_line_adjacency() -> None:
    assert is_adjoining(native_range(1, 1, 1, 3), native_range(1, 4, 1, 6))
    assert not is_adjoining(native_range(1, 1, 1, 3), native_range(1, 5, 1, 6))
    assert not is_adjoining(native_range(1, 1, 1, 3), native_range(2, 4, 2, 6))


def test_cross_line_adjacency_requires_sentinel_and_line_start() -> None:
    eol = native_range(3, 1, 3, END_OF_LINE)

    assert is_adjoining(eol, native_range(4, 1, 4, 1))
    assert not is_adjoining(eol, native_range(4, 2, 4, 3))
    assert not is_adjoining(eol, native_range(5, 1, 5, 1))
    assert not is_adjoining(native_range(3, 1, 3, 80), native_range(4, 1, 4, 1))


def test_find_adjoining_reports_pair_indices() -> None:
    edits = sort_edits(
        [
            make_native(0, 0, 0, 2),
            make_native(0, 2, 0, 4),
            make_native(0, 10, 0, 12),
            make_native(2, 0, 3, 0),
            make_native(3, 0, 3, 0, "line\n"),
        ]
    )

    assert find_adjoining(edits) == frozenset({0, 3})


def test_adjoining_pairs_leave_no_gap() -> None:
    edits = sort_edits(
        [make_native(1, 0, 1, 3), make_native(1, 3, 1, 7), make_native(1, 9, 1, 12)]
    )

    for index in find_adjoining(edits):
        first, second = edits[index].range, edits[index + 1].range
        assert second.start.column - first.end.column == 1


def test_find_adjoining_does_not_modify_edits() -> None:
    edits = sort_edits([make_native(0, 0, 0, 2), make_native(0, 2, 0, 4)])
    before = list(edits)

    find_adjoining(edits)

    assert edits == before


def test_find_adjoining_handles_short_batches() -> None:
    assert find_adjoining([]) == frozenset()
    assert find_adjoining([make_native(0, 0, 0, 1)]) == frozenset()
