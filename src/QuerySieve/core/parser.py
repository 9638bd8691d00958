"""Public entry point: compile a free-text query into predicate entries.

Example
- `-draft "new york" >=2009-01-01` compiles to
  `("draft", not)`, `("new york", like)`,
  `(">=2009-01-01", greater_than_or_equal_to_date)`.
"""

from __future__ import annotations

from typing import Final, Optional

from QuerySieve.core.classifier import build_conditions
from QuerySieve.core.lexer import tokenize
from QuerySieve.core.models import PredicateEntry
from QuerySieve.utils.log import log

MAX_QUERY_LENGTH: Final = 300


def truncate_query(query: str) -> str:
    """Cut a query to `MAX_QUERY_LENGTH` characters; may split a token."""
    if len(query) > MAX_QUERY_LENGTH:
        log.debug("Query truncated from %d to %d characters", len(query), MAX_QUERY_LENGTH)
        return query[:MAX_QUERY_LENGTH]
    return query


def parse_query(query: Optional[str] = None) -> list[PredicateEntry]:
    """Parse a query string into ordered predicate entries.

    Args:
        query: Raw query text. `None` means "no constraints" and yields an
            empty list without any further processing.

    Returns:
        One entry per literal token, in order of appearance.

    Raises:
        TypeError: If `query` is neither a string nor `None`.
    """
    if query is None:
        return []
    if not isinstance(query, str):
        raise TypeError(f"query must be a string or None, got {type(query).__name__}")

    tokens = tokenize(truncate_query(query))
    entries = build_conditions(tokens)
    log.debug("Parsed %d tokens into %d predicates", len(tokens), len(entries))
    return entries


class QueryParser:
    """Class-style facade over `parse_query`.

    Holds no state; every call starts from scratch.
    """

    @classmethod
    def parse(cls, query: Optional[str] = None) -> list[PredicateEntry]:
        return cls().parse_query(query)

    def parse_query(self, query: Optional[str] = None) -> list[PredicateEntry]:
        return parse_query(query)
