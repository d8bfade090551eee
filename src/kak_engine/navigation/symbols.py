"""Render symbol lists as grep-style buffer content.

Each symbol becomes ``file:line:column:Kind name`` with one-based line and
column. Paths under the project root are shown relative to it.
"""

from __future__ import annotations

from pathlib import Path
from typing import Iterable

from kak_engine.protocol.models import (
    DocumentSymbol,
    Position,
    SymbolInformation,
    SymbolKind,
)
from kak_engine.protocol.uri import uri_to_path
from kak_engine.runtime.context import Context, EditorMeta


def _relative_to_root(path: Path, root_path: str) -> str:
    try:
        return str(path.relative_to(root_path))
    except ValueError:
        return str(path)


def _grep_line(filename: str, position: Position, kind: SymbolKind, name: str) -> str:
    line = position.line + 1
    column = position.character + 1
    return f"{filename}:{line}:{column}:{kind.label} {name}"


def format_symbol_information(items: Iterable[SymbolInformation], ctx: Context) -> str:
    lines = []
    for symbol in items:
        filename = _relative_to_root(uri_to_path(symbol.location.uri), ctx.root_path)
        lines.append(
            _grep_line(filename, symbol.location.range.start, symbol.kind, symbol.name)
        )
    return "\n".join(lines)


def format_document_symbol(
    items: Iterable[DocumentSymbol], meta: EditorMeta, ctx: Context
) -> str:
    filename = _relative_to_root(Path(meta.buffile), ctx.root_path)
    return "\n".join(
        _grep_line(filename, symbol.range.start, symbol.kind, symbol.name)
        for symbol in items
    )


__all__ = ["format_symbol_information", "format_document_symbol"]
