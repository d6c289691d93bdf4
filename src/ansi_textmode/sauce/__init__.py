"""SAUCE metadata handling."""

from ansi_textmode.sauce.record import DataType, FileType, SauceRecord
from ansi_textmode.sauce.reader import parse_sauce, parse_sauce_file
from ansi_textmode.sauce.writer import (
    add_sauce_bytes,
    add_sauce_for_ans,
    add_sauce_for_bin,
    add_sauce_for_xbin,
)

__all__ = [
    "DataType",
    "FileType",
    "SauceRecord",
    "parse_sauce",
    "parse_sauce_file",
    "add_sauce_bytes",
    "add_sauce_for_ans",
    "add_sauce_for_bin",
    "add_sauce_for_xbin",
]
