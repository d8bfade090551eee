"""Editor command-language helpers."""

from .commands import (
    APPLY_EDITS_TO_FILE,
    INSERT_AFTER_SELECTION,
    INSERT_BEFORE_SELECTION,
    NOP,
    REPLACE_SELECTION,
    apply_to_file,
    draft_block,
    restore_selection,
    select,
)
from .quoting import editor_escape, editor_quote

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
    "editor_escape",
    "editor_quote",
]
