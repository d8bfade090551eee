"""Translation of protocol text edits into editor commands."""

from .classify import lsp_text_edit_to_kakoune
from .coordinates import (
    format_range,
    kakoune_range_to_lsp,
    lsp_range_to_kakoune,
    lsp_range_to_kakoune_text,
)
from .emitter import Emission, apply_text_edits, build_edit_block, emit_apply_commands
from .models import (
    END_OF_LINE,
    ApplicationKind,
    NativeEdit,
    NativePosition,
    NativeRange,
)
from .ordering import find_adjoining, is_adjoining, sort_edits

__all__ = [
    "END_OF_LINE",
    "ApplicationKind",
    "NativePosition",
    "NativeRange",
    "NativeEdit",
    "lsp_range_to_kakoune",
    "kakoune_range_to_lsp",
    "format_range",
    "lsp_range_to_kakoune_text",
    "lsp_text_edit_to_kakoune",
    "sort_edits",
    "is_adjoining",
    "find_adjoining",
    "Emission",
    "emit_apply_commands",
    "build_edit_block",
    "apply_text_edits",
]
