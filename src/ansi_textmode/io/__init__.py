"""File I/O for text-mode art files."""

from ansi_textmode.io.reader import Textmode, load_bin, read_file
from ansi_textmode.io.writer import save_bin

__all__ = ["Textmode", "read_file", "load_bin", "save_bin"]
