"""Query lexer.

Splits a raw query into cleaned token strings plus `NEGATE` markers using the
combined alternation from `QuerySieve.core.patterns`. Characters no category
covers (stray punctuation, unbalanced quotes) are skipped.
"""

from __future__ import annotations

import re

from QuerySieve.core.models import NEGATE, Token
from QuerySieve.core.patterns import combined_pattern

_RE_QUOTE = re.compile(r'"')
# Only the hyphen goes; a space before it stays, so `"a -b"` cleans to `a b`.
_RE_NEGATION_DASH = re.compile(r"^-|(?<= )-")
_RE_SPACE_RUN = re.compile(r"[ ]{2,}")


def clean_token(raw: str) -> str:
    """Strip quoting and negation syntax from a raw match.

    Removes double quotes, removes a hyphen at the start of the token or right
    after a space, then collapses runs of spaces into one.

    Args:
        raw: Raw matched text.

    Returns:
        Cleaned token, possibly empty.
    """
    token = _RE_QUOTE.sub("", raw)
    token = _RE_NEGATION_DASH.sub("", token)
    return _RE_SPACE_RUN.sub(" ", token)


def tokenize(query: str) -> list[Token]:
    """Tokenize a query string.

    Args:
        query: Query text, already length-bounded by the caller.

    Returns:
        Tokens in order of appearance. A raw match starting with `-` is
        preceded by a `NEGATE` marker; empty cleaned tokens are dropped, but
        their marker is still emitted.
    """
    tokens: list[Token] = []
    for match in combined_pattern().finditer(query):
        raw = match.group(match.lastgroup) if match.lastgroup else ""
        if not raw:
            continue
        if raw.startswith("-"):
            tokens.append(NEGATE)
        cleaned = clean_token(raw)
        if cleaned:
            tokens.append(cleaned)
    return tokens
