"""Pattern registry for the query language.

Each recognizable lexical shape is a `PatternCategory`. The registry is an
ordered tuple: the lexer joins every category into one alternation, and the
regex engine tries alternatives left to right at each position, so an earlier
category wins over a later one at the same offset regardless of match length.

Recognized shapes, highest priority first:

- `01/15/2009 TO 02/15/2009`   -> between_dates (same notation on both sides)
- `>=2009-01-15`, `>= 2009-01-15` -> greater_than_or_equal_to_date
- `<=20090115`                 -> less_than_or_equal_to_date
- `>2009/01/15`                -> greater_than_date
- `<1/5/2009`                  -> less_than_date
- `2009-01-15`                 -> as_of_date
- `red OR "dark blue"`         -> or (case-sensitive `OR`)
- `word`, `-word`              -> like / not
- `"a phrase"`, `-"a phrase"`  -> like / not

Date notations (shared by every date category):

- month first: `MM/DD/YYYY` (one or two digit month and day)
- year first:  `YYYY/MM/DD` or compact `YYYYMMDD`
- database:    `YYYY-MM-DD`
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Callable, Final, Optional

from QuerySieve.core.models import (
    AS_OF_DATE,
    BETWEEN_DATES,
    GREATER_THAN_DATE,
    GREATER_THAN_OR_EQUAL_TO_DATE,
    LESS_THAN_DATE,
    LESS_THAN_OR_EQUAL_TO_DATE,
    OR,
)

DATE_MMDDYYYY: Final = r"\b\d{1,2}/\d{1,2}/\d{4}\b"
DATE_YYYYMMDD: Final = r"\b\d{4}(?:/\d{1,2}/\d{1,2}|\d{4})\b"
DATE_DATABASE: Final = r"\b\d{4}-\d{1,2}-\d{1,2}\b"

DATE_NOTATIONS: Final[tuple[str, ...]] = (DATE_MMDDYYYY, DATE_YYYYMMDD, DATE_DATABASE)

RANGE_CONNECTIVE: Final = "TO"
OR_CONNECTIVE: Final = "OR"

WORD: Final = r"\w+(?:[-.'@]\w+)*"
QUOTED: Final = r'"[^"]*"'

_OR_TERM = rf'(?:"[^"]+"|{WORD})'


def _each_notation(build: Callable[[str], str]) -> str:
    """Expand a date template once per notation into a non-capturing alternation."""
    return "(?:" + "|".join(build(date) for date in DATE_NOTATIONS) + ")"


@dataclass(frozen=True, slots=True)
class PatternCategory:
    """A named lexical category.

    Attributes:
        name: Category name, also used as the capture group name when lexing.
        operator: Operator assigned when a token's full text has this shape.
            `None` for the generic word/phrase categories.
        pattern: Regex body without capturing groups.
        shape: Anchored regex used to re-derive the category of a cleaned token.

    `lexeme` wraps `pattern` into the named branch used by the combined
    lexing alternation.
    """

    name: str
    operator: Optional[str]
    pattern: str
    shape: re.Pattern[str]

    @property
    def lexeme(self) -> str:
        """Branch of the combined lexing alternation for this category."""
        return rf"\s*(?P<{self.name}>{self.pattern})"

    def matches(self, text: str) -> bool:
        return self.shape.fullmatch(text) is not None


def _category(name: str, operator: Optional[str], pattern: str, shape: Optional[str] = None) -> PatternCategory:
    return PatternCategory(
        name=name,
        operator=operator,
        pattern=pattern,
        shape=re.compile(shape if shape is not None else pattern, re.DOTALL),
    )


BETWEEN = _category(
    "between_dates",
    BETWEEN_DATES,
    _each_notation(lambda d: rf"{d}\s+{RANGE_CONNECTIVE}\s+{d}"),
)
GREATER_OR_EQUAL = _category(
    "greater_or_equal_date",
    GREATER_THAN_OR_EQUAL_TO_DATE,
    _each_notation(lambda d: rf">=\s*{d}"),
)
LESS_OR_EQUAL = _category(
    "less_or_equal_date",
    LESS_THAN_OR_EQUAL_TO_DATE,
    _each_notation(lambda d: rf"<=\s*{d}"),
)
GREATER = _category(
    "greater_date",
    GREATER_THAN_DATE,
    _each_notation(lambda d: rf">\s*{d}"),
)
LESS = _category(
    "less_date",
    LESS_THAN_DATE,
    _each_notation(lambda d: rf"<\s*{d}"),
)
AS_OF = _category("as_of_date", AS_OF_DATE, _each_notation(lambda d: d))
# Quotes are already stripped from tokens at classification time, so the
# OR shape only asks for non-empty text on both sides of the connective.
OR_PAIR = _category(
    "or_pair",
    OR,
    rf"{_OR_TERM}\s+{OR_CONNECTIVE}\s+{_OR_TERM}",
    shape=rf".+ {OR_CONNECTIVE} .+",
)
NEGATABLE_WORD = _category("word", None, rf"-?{WORD}")
NEGATABLE_STRING = _category("string", None, rf"-?{QUOTED}")

REGISTRY: Final[tuple[PatternCategory, ...]] = (
    BETWEEN,
    GREATER_OR_EQUAL,
    LESS_OR_EQUAL,
    GREATER,
    LESS,
    AS_OF,
    OR_PAIR,
    NEGATABLE_WORD,
    NEGATABLE_STRING,
)

CLASSIFICATION_ORDER: Final[tuple[PatternCategory, ...]] = (
    OR_PAIR,
    BETWEEN,
    GREATER_OR_EQUAL,
    LESS_OR_EQUAL,
    GREATER,
    LESS,
    AS_OF,
)

_COMBINED = re.compile("|".join(category.lexeme for category in REGISTRY))


def combined_pattern() -> re.Pattern[str]:
    """Return the compiled alternation of every category in registry order."""
    return _COMBINED


def classify(text: str) -> Optional[str]:
    """Return the operator of the first category whose shape matches `text`.

    Args:
        text: A cleaned token.

    Returns:
        Operator string, or `None` when the token is a plain word or phrase.
    """
    for category in CLASSIFICATION_ORDER:
        if category.matches(text):
            return category.operator
    return None
