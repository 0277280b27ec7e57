"""ARB documents: model, JSON reader and writer, ordered key renames.

Public API:
    parse_arb - ARB JSON text to ArbDocument
    read_arb_file - Read and parse one .arb file
    serialize_arb - ArbDocument to ARB JSON text
    rename_key - Rename an entry in place
    infer_locale_from_filename - 'app_en_US' -> 'en_US'

Python 3.13+.
"""

from .document import (
    ArbDocument,
    ArbEntry,
    ArbMetadata,
    ArbPlaceholder,
    infer_locale_from_filename,
    rename_key,
)
from .reader import parse_arb, read_arb_file
from .writer import serialize_arb

__all__ = [
    "ArbDocument",
    "ArbEntry",
    "ArbMetadata",
    "ArbPlaceholder",
    "infer_locale_from_filename",
    "parse_arb",
    "read_arb_file",
    "rename_key",
    "serialize_arb",
]
