"""Importer library public API.

Reads address and polling place CSV files into string-typed DataFrames.
"""

from vip_merge.lib.importer.parser import detect_delimiter, detect_encoding, read_table

__all__ = [
    "detect_delimiter",
    "detect_encoding",
    "read_table",
]
