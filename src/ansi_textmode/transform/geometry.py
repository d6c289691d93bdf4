"""Resize, flip and rotate a document's grid.

Every function returns a new :class:`Document` with a freshly built grid;
the input document and its cells are left untouched.
"""

import logging

from ansi_textmode.core.cell import Cell
from ansi_textmode.core.document import Document, blank_grid
from ansi_textmode.transform.glyphs import flip_code_x, flip_code_y, rotate_code

logger = logging.getLogger(__name__)


def resize(doc: Document, columns: int, rows: int) -> Document:
    """
    Change the grid size, keeping the top-left corner.

    Cells outside the old grid are blank; cells outside the new grid
    are dropped.
    """
    data = blank_grid(columns, rows)
    for y in range(min(doc.rows, rows)):
        for x in range(min(doc.columns, columns)):
            data[y * columns + x] = doc.data[y * doc.columns + x].copy()
    logger.debug("Resized %dx%d -> %dx%d", doc.columns, doc.rows, columns, rows)
    return doc.with_grid(columns, rows, data)


def flip_x(doc: Document) -> Document:
    """Mirror left to right."""
    data: list[Cell] = []
    for row in doc.iter_rows():
        data.extend(cell.with_code(flip_code_x(cell.code)) for cell in reversed(row))
    return doc.with_grid(doc.columns, doc.rows, data)


def flip_y(doc: Document) -> Document:
    """Mirror top to bottom."""
    data: list[Cell] = []
    for row in reversed(list(doc.iter_rows())):
        data.extend(cell.with_code(flip_code_y(cell.code)) for cell in row)
    return doc.with_grid(doc.columns, doc.rows, data)


def rotate(doc: Document) -> Document:
    """
    Rotate a quarter turn clockwise.

    The result is ``doc.rows`` columns wide and ``doc.columns`` rows high.
    The new cell at ``(x, y)`` comes from ``(y, doc.rows - 1 - x)``.
    """
    columns, rows = doc.rows, doc.columns
    data: list[Cell] = []
    for y in range(rows):
        for x in range(columns):
            cell = doc.data[(columns - 1 - x) * doc.columns + y]
            data.append(cell.with_code(rotate_code(cell.code)))
    logger.debug("Rotated %dx%d -> %dx%d", doc.columns, doc.rows, columns, rows)
    return doc.with_grid(columns, rows, data)
