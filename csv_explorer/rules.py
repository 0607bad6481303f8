"""
Fixed parsing, typing and export rules.

This file exists to keep the pipeline's heuristics explicit and in one place.
"""

BOM = "\ufeff"

DELIMITER_CANDIDATES = (",", ";", "\t", "|")  # order breaks ties
DEFAULT_DELIMITER = ","

HEADER_PLACEHOLDER = "Column {}"

TYPE_SAMPLE_SIZE = 500
TYPE_THRESHOLD = 0.8

DEFAULT_PAGE_SIZE = 50

ELLIPSIS = "…"
EN_DASH = "–"

EXPORT_DELIMITER = ","
EXPORT_LINE_TERMINATOR = "\r\n"
EXPORT_MEDIA_TYPE = "text/csv; charset=utf-8"

SUPPORTED_EXTENSIONS = (".csv", ".tsv", ".txt")
