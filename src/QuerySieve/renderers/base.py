"""Base classes for output writers.

Separates the parse command's control flow from how results are shown.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Sequence

from QuerySieve.core.models import PredicateEntry


@dataclass(frozen=True, slots=True)
class ParseResult:
    """A query and the predicates compiled from it."""

    query: str
    predicates: tuple[PredicateEntry, ...]


class OutputWriter(ABC):
    """Abstract base class for command output writers."""

    @abstractmethod
    def write_result(self, result: ParseResult) -> None:
        """Write the result of parsing a single query."""

    @abstractmethod
    def finalize(self, action: str) -> None:
        """Finalize output (e.g., write accumulated results to file).

        Args:
            action: The CLI command name (e.g., 'parse').
        """


@dataclass(slots=True)
class MultiOutputWriter(OutputWriter):
    """Delegate output to multiple writers."""

    writers: Sequence[OutputWriter]

    def write_result(self, result: ParseResult) -> None:
        for writer in self.writers:
            writer.write_result(result)

    def finalize(self, action: str) -> None:
        for writer in self.writers:
            writer.finalize(action)
