"""Interpret the text of date predicate entries as `datetime.date` values.

The parser keeps date values as the literal token text; this helper is for
consumers that need real dates to build range or comparison filters.
"""

from __future__ import annotations

import re
from datetime import date

from dateutil import parser as dt_parser

from QuerySieve.core.models import PredicateEntry
from QuerySieve.core.patterns import RANGE_CONNECTIVE

_RE_RANGE_SPLIT = re.compile(rf"\s+{RANGE_CONNECTIVE}\s+")
_RE_COMPARISON_PREFIX = re.compile(r"^[<>]=?\s*")
_RE_YEAR_FIRST = re.compile(r"^\d{4}")


def parse_date_text(text: str) -> date:
    """Parse one date in any recognized notation.

    Args:
        text: Date text such as `01/15/2009`, `2009/01/15`, `20090115` or
            `2009-01-15`.

    Returns:
        Parsed date.

    Raises:
        ValueError: If the text is not a valid calendar date.
    """
    t = text.strip()
    year_first = _RE_YEAR_FIRST.match(t) is not None
    try:
        return dt_parser.parse(t, yearfirst=year_first, dayfirst=False).date()
    except (ValueError, OverflowError) as e:
        raise ValueError(f"Invalid date: {text}") from e


def parse_date_values(entry: PredicateEntry) -> tuple[date, ...]:
    """Return the dates referenced by a date predicate.

    Args:
        entry: Entry with one of the date operators.

    Returns:
        Two dates for `between_dates`, one date otherwise.

    Raises:
        ValueError: If the entry is not a date predicate, or a date is invalid.
    """
    if not entry.is_date:
        raise ValueError(f"Not a date predicate: {entry.operator}")

    text = _RE_COMPARISON_PREFIX.sub("", entry.value.strip())
    parts = _RE_RANGE_SPLIT.split(text)
    return tuple(parse_date_text(part) for part in parts)
