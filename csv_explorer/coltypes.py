"""
Column type inference.

Types are metadata only: cell values stay strings. Detection runs once per
load over a bounded prefix of the data.
"""

from __future__ import annotations

import logging
import math
import re
from datetime import datetime, timezone
from enum import Enum
from typing import Dict, Optional, Sequence

from dateutil import parser as date_parser

from .parser import Row
from .rules import TYPE_SAMPLE_SIZE, TYPE_THRESHOLD
from .table import cell

logger = logging.getLogger(__name__)


class ColumnType(str, Enum):
    NUMBER = "number"
    DATE = "date"
    STRING = "string"


ColumnTypeMap = Dict[int, ColumnType]

# Whole-string numeric literal, the grammar browsers accept for Number(text).
_NUMBER_LITERAL = re.compile(
    r"""
    [+-]?(?:Infinity|(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)
    | 0[xX][0-9a-fA-F]+
    | 0[oO][0-7]+
    | 0[bB][01]+
    """,
    re.VERBOSE | re.ASCII,
)

# Longest numeric prefix, the grammar of parseFloat(text).
_FLOAT_PREFIX = re.compile(
    r"[+-]?(?:Infinity|(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)",
    re.ASCII,
)

_HAS_DIGIT = re.compile(r"\d", re.ASCII)

# two distinct fill-in dates (leap years) for parts a value leaves out
_DEFAULT_A = datetime(2000, 1, 1)
_DEFAULT_B = datetime(2004, 2, 2)


def strip_thousands(value: str) -> str:
    return value.replace(",", "")


def is_number(value: str) -> bool:
    """
    True when the whole (already trimmed) value is a numeric literal once
    thousands separators are removed. A value made only of separators reads as
    zero and therefore counts.
    """
    stripped = strip_thousands(value).strip()
    if stripped == "":
        return True
    return _NUMBER_LITERAL.fullmatch(stripped) is not None


def leading_float(value: str) -> float:
    """Parse the longest float prefix; NaN when there is none."""
    match = _FLOAT_PREFIX.match(strip_thousands(value).lstrip())
    if match is None:
        return math.nan
    literal = match.group(0)
    if literal.lstrip("+-") == "Infinity":
        return -math.inf if literal.startswith("-") else math.inf
    return float(literal)


def parse_date(value: str) -> Optional[datetime]:
    """
    Best-effort calendar date parse. Values without a digit are rejected so
    bare words such as month names or weekdays stay strings.

    dateutil fills missing parts from a default date. The value is parsed
    against two defaults: when neither year nor month came from the value
    (times such as "10:30", ordinals such as "5th") it is not a date.
    Missing parts are then taken from the first default, never from today.
    """
    if not value or not _HAS_DIGIT.search(value):
        return None
    try:
        parsed = date_parser.parse(value, default=_DEFAULT_A)
        check = date_parser.parse(value, default=_DEFAULT_B)
    except (ValueError, OverflowError):
        return None
    if parsed.year != check.year and parsed.month != check.month:
        return None
    return parsed


def date_timestamp(value: str) -> float:
    """Seconds since the epoch, NaN when the value is not a date."""
    parsed = parse_date(value)
    if parsed is None:
        return math.nan
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    try:
        return parsed.timestamp()
    except (OverflowError, OSError, ValueError):
        return math.nan


def detect_column_types(headers: Sequence[str], data: Sequence[Row]) -> ColumnTypeMap:
    """
    Classify every column as number, date or string.

    Rules:
    - Only the first TYPE_SAMPLE_SIZE rows are inspected.
    - Empty (after trimming) values are ignored.
    - The numeric test wins over the date test for the same value.
    - A share of at least TYPE_THRESHOLD decides the type.
    """
    sample = data[:TYPE_SAMPLE_SIZE]
    types: ColumnTypeMap = {}

    for c in range(len(headers)):
        num_ok = date_ok = total = 0

        for row in sample:
            value = cell(row, c).strip()
            if value == "":
                continue
            total += 1

            if is_number(value):
                num_ok += 1
            elif parse_date(value) is not None:
                date_ok += 1

        if total == 0:
            types[c] = ColumnType.STRING
        elif num_ok / total >= TYPE_THRESHOLD:
            types[c] = ColumnType.NUMBER
        elif date_ok / total >= TYPE_THRESHOLD:
            types[c] = ColumnType.DATE
        else:
            types[c] = ColumnType.STRING

    logger.debug("Detected column types over %d sampled rows: %s", len(sample), types)
    return types
