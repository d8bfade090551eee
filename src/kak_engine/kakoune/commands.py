"""Editor command names and the block wrappers built around them."""

from __future__ import annotations

from .quoting import editor_quote

# Sent when there is nothing to do; the editor may be blocked on a reply.
NOP = "nop"

INSERT_BEFORE_SELECTION = "lsp-insert-before-selection"
INSERT_AFTER_SELECTION = "lsp-insert-after-selection"
REPLACE_SELECTION = "lsp-replace-selection"
APPLY_EDITS_TO_FILE = "lsp-apply-edits-to-file"


def select(ranges: list[str]) -> str:
    return " ".join(["select", *ranges])


def restore_selection(selection_index: int) -> str:
    """Restore the saved selections and keep the ``selection_index``-th one."""

    rotate = f"{selection_index})" if selection_index > 0 else ""
    return f"exec 'z{rotate}<space>'"


def draft_block(body: str) -> str:
    """Run ``body`` in a draft context that preserves the caret register."""

    return f"eval -draft -save-regs '^' {editor_quote(body)}"


def apply_to_file(path: str, body: str) -> str:
    return f"{APPLY_EDITS_TO_FILE} {editor_quote(path)} {editor_quote(body)}"


__all__ = [
    "NOP",
    "INSERT_BEFORE_SELECTION",
    "INSERT_AFTER_SELECTION",
    "REPLACE_SELECTION",
    "APPLY_EDITS_TO_FILE",
    "select",
    "restore_selection",
    "draft_block",
    "apply_to_file",
]
