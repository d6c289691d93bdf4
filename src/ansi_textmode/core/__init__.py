"""Core data structures for text-mode documents."""

from ansi_textmode.core.cell import Cell
from ansi_textmode.core.document import Document, current_date, new_document

__all__ = ["Cell", "Document", "current_date", "new_document"]
