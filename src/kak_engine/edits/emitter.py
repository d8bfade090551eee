"""Build the editor command that applies a batch of protocol edits."""

from __future__ import annotations

from dataclasses import dataclass
from itertools import accumulate
from typing import AbstractSet, Mapping, Optional, Sequence, Tuple

from kak_engine.kakoune import commands
from kak_engine.kakoune.quoting import editor_quote
from kak_engine.protocol.models import TextEdit
from kak_engine.protocol.uri import uri_to_path
from kak_engine.runtime.telemetry import span

from .classify import lsp_text_edit_to_kakoune
from .coordinates import format_range
from .models import ApplicationKind, NativeEdit
from .ordering import find_adjoining, sort_edits

_PRIMITIVES: Mapping[ApplicationKind, str] = {
    ApplicationKind.INSERT_BEFORE: commands.INSERT_BEFORE_SELECTION,
    ApplicationKind.INSERT_AFTER: commands.INSERT_AFTER_SELECTION,
    ApplicationKind.REPLACE: commands.REPLACE_SELECTION,
}


@dataclass(frozen=True, slots=True)
class Emission:
    """Apply commands for a batch and the selection index after the last one."""

    fragments: Tuple[str, ...] = ()
    selection_index: int = 0


def _apply_command(selection_index: int, edit: NativeEdit) -> str:
    return "\n".join(
        [
            commands.restore_selection(selection_index),
            f"{_PRIMITIVES[edit.kind]} {editor_quote(edit.new_text)}",
        ]
    )


def _selection_step(index: int, edit: NativeEdit, adjoining: AbstractSet[int]) -> int:
    # Emptying a selection that touches the next one merges them, so the
    # next selection is reached without rotating any further.
    return 0 if index in adjoining and not edit.new_text else 1


def emit_apply_commands(
    edits: Sequence[NativeEdit], adjoining: AbstractSet[int]
) -> Emission:
    """Emit one apply command per sorted edit, threading the selection index.

    ``selections[i]`` is the running sum of the steps before edit ``i``; the
    final entry is the index after the whole batch.
    """

    steps = (
        _selection_step(index, edit, adjoining) for index, edit in enumerate(edits)
    )
    selections = list(accumulate(steps, initial=0))
    return Emission(
        fragments=tuple(
            _apply_command(selection, edit)
            for selection, edit in zip(selections, edits)
        ),
        selection_index=selections[-1],
    )


def build_edit_block(
    edits: Sequence[NativeEdit], adjoining: Optional[AbstractSet[int]] = None
) -> str:
    """Draft block selecting every range of ``edits`` and applying each one.

    ``edits`` must already be sorted.
    """

    if adjoining is None:
        adjoining = find_adjoining(edits)
    emission = emit_apply_commands(edits, adjoining)
    body = "\n".join(
        [
            commands.select([format_range(edit.range) for edit in edits]),
            "exec -save-regs '' Z",
            *emission.fragments,
        ]
    )
    return commands.draft_block(body)


def apply_text_edits(
    text_edits: Sequence[TextEdit],
    uri: Optional[str] = None,
    *,
    active_buffile: Optional[str] = None,
) -> str:
    """Translate protocol edits into one editor command string.

    When ``uri`` names a document other than ``active_buffile`` the block is
    routed to that file first. An empty batch yields ``nop``: ``select``
    refuses an empty argument list, and the editor may be waiting for a reply.
    """

    if not text_edits:
        return commands.NOP

    with span(
        "edits::apply",
        component="edits",
        metadata={"count": len(text_edits)},
    ) as handle:
        edits = sort_edits(lsp_text_edit_to_kakoune(edit) for edit in text_edits)
        adjoining = find_adjoining(edits)
        handle.add_metadata("adjoining", len(adjoining))
        command = build_edit_block(edits, adjoining)

        if uri is None:
            return command

        buffile = str(uri_to_path(uri))
        if buffile == active_buffile:
            return command
        handle.add_metadata("buffile", buffile)
        return commands.apply_to_file(buffile, command)


__all__ = [
    "Emission",
    "emit_apply_commands",
    "build_edit_block",
    "apply_text_edits",
]
