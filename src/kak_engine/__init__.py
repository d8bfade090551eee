"""Translate language-server text edits into Kakoune commands."""

__all__ = [
    "edits",
    "kakoune",
    "navigation",
    "protocol",
    "runtime",
]

__version__ = "0.1.0"
