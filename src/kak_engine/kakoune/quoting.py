"""Quoting for strings passed through the editor's command language."""

from __future__ import annotations


def editor_escape(text: str) -> str:
    """Escape ``text`` for use inside a single-quoted editor string."""

    return text.replace("'", "''")


def editor_quote(text: str) -> str:
    return f"'{editor_escape(text)}'"


__all__ = ["editor_escape", "editor_quote"]
