"""Navigation buffer formatting."""

from .symbols import format_document_symbol, format_symbol_information

__all__ = ["format_symbol_information", "format_document_symbol"]
