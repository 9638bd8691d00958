"""Build the ordered list of predicate entries from lexer tokens.

Negation folding is a two-state machine:

    CLEAR            --NEGATE-->   PENDING_NEGATION
    any state        --literal-->  CLEAR   (fallback literal: like / not)
    any state        --date/OR-->  unchanged

Date and OR tokens neither read nor consume a pending negation; only the next
plain literal does.
"""

from __future__ import annotations

from typing import Final, Iterable, Optional

from QuerySieve.core.models import LIKE, NOT, NegationMarker, PredicateEntry, Token
from QuerySieve.core.patterns import classify

CLEAR: Final = "clear"
PENDING_NEGATION: Final = "pending_negation"


def step(state: str, token: Token) -> tuple[str, Optional[PredicateEntry]]:
    """Advance the negation state machine by one token.

    Args:
        state: `CLEAR` or `PENDING_NEGATION`.
        token: Cleaned token text or a negation marker.

    Returns:
        The next state and the entry emitted for the token, if any.
    """
    if isinstance(token, NegationMarker):
        return PENDING_NEGATION, None

    operator = classify(token)
    if operator is not None:
        return state, PredicateEntry(token, operator)

    operator = NOT if state == PENDING_NEGATION else LIKE
    return CLEAR, PredicateEntry(token, operator)


def build_conditions(tokens: Iterable[Token]) -> list[PredicateEntry]:
    """Classify tokens into predicate entries, preserving order."""
    state = CLEAR
    entries: list[PredicateEntry] = []
    for token in tokens:
        state, entry = step(state, token)
        if entry is not None:
            entries.append(entry)
    return entries
