"""Packed two-bytes-per-cell bodies (BinaryText ``.bin``)."""

from ansi_textmode.core.cell import Cell


def bytes_to_cells(data: bytes, columns: int, rows: int) -> list[Cell]:
    """
    Decode ``columns * rows`` cells from glyph/attribute byte pairs.

    The attribute byte carries the background in its high nibble. Cells
    past the end of ``data`` are left blank.
    """
    cells: list[Cell] = []
    for i in range(columns * rows):
        if 2 * i + 1 >= len(data):
            cells.append(Cell())
            continue
        attribute = data[2 * i + 1]
        cells.append(Cell(code=data[2 * i], fg=attribute & 0x0F, bg=attribute >> 4))
    return cells


def cells_to_bytes(cells: list[Cell]) -> bytes:
    """Encode cells as glyph/attribute byte pairs."""
    result = bytearray()
    for cell in cells:
        result.append(cell.code & 0xFF)
        result.append(cell.attribute)
    return bytes(result)
