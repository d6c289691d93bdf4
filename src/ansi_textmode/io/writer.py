"""Save text-mode art files."""

import logging
from pathlib import Path
from typing import TYPE_CHECKING

from ansi_textmode.codec.binary import cells_to_bytes
from ansi_textmode.sauce.writer import add_sauce_for_bin

if TYPE_CHECKING:
    from ansi_textmode.core.document import Document

logger = logging.getLogger(__name__)


def save_bin(
    doc: "Document",
    path: str | Path,
    include_sauce: bool = True,
) -> None:
    """
    Save a document as BinaryText (``.bin``).

    BinaryText stores half the width in one SAUCE byte, so documents with
    an odd or over-wide column count lose their width on reload.
    """
    path = Path(path)
    data = cells_to_bytes(doc.data)
    if include_sauce:
        if doc.columns % 2 or doc.columns > 510:
            logger.warning(
                "%d columns cannot be stored exactly in a BinaryText SAUCE record",
                doc.columns,
            )
        data = add_sauce_for_bin(doc, data)

    with open(path, 'wb') as f:
        f.write(data)
