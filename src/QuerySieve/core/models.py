from __future__ import annotations

from dataclasses import dataclass
from typing import Final, Union

LIKE: Final = "like"
NOT: Final = "not"
OR: Final = "or"
BETWEEN_DATES: Final = "between_dates"
GREATER_THAN_DATE: Final = "greater_than_date"
LESS_THAN_DATE: Final = "less_than_date"
GREATER_THAN_OR_EQUAL_TO_DATE: Final = "greater_than_or_equal_to_date"
LESS_THAN_OR_EQUAL_TO_DATE: Final = "less_than_or_equal_to_date"
AS_OF_DATE: Final = "as_of_date"

DATE_OPERATORS: Final[frozenset[str]] = frozenset(
    {
        BETWEEN_DATES,
        GREATER_THAN_DATE,
        LESS_THAN_DATE,
        GREATER_THAN_OR_EQUAL_TO_DATE,
        LESS_THAN_OR_EQUAL_TO_DATE,
        AS_OF_DATE,
    }
)
OPERATORS: Final[frozenset[str]] = frozenset({LIKE, NOT, OR}) | DATE_OPERATORS


@dataclass(frozen=True, slots=True)
class NegationMarker:
    """Zero-payload token: the next literal token is matched in the negated sense."""

    def __repr__(self) -> str:
        return "NEGATE"


NEGATE: Final = NegationMarker()

Token = Union[str, NegationMarker]


@dataclass(frozen=True, slots=True)
class PredicateEntry:
    """One filter condition extracted from a query.

    The entry carries no field information: mapping a value onto concrete
    columns is left to whoever consumes the entries.

    Attributes:
        value: Cleaned token text.
        operator: One of `OPERATORS`.
    """

    value: str
    operator: str

    def __post_init__(self) -> None:
        if self.operator not in OPERATORS:
            raise ValueError(f"Unknown operator: {self.operator}")

    @property
    def negated(self) -> bool:
        return self.operator == NOT

    @property
    def is_date(self) -> bool:
        return self.operator in DATE_OPERATORS

    def as_pair(self) -> tuple[str, str]:
        """Return the entry as a plain `(value, operator)` tuple."""
        return (self.value, self.operator)
