"""Console text output.

Renders predicates as a numbered listing and emits it through the logger.
"""

from __future__ import annotations

from typing import Iterable

from QuerySieve.core.models import PredicateEntry
from QuerySieve.renderers.base import OutputWriter, ParseResult
from QuerySieve.utils.log import log


def render_text(predicates: Iterable[PredicateEntry]) -> str:
    """Render predicates into a human-readable text block.

    Args:
        predicates: Entries in query order.

    Returns:
        One `N. value  [operator]` line per entry, or `(no constraints)`.
    """
    lines = [f"{idx}. {entry.value}  [{entry.operator}]" for idx, entry in enumerate(predicates, start=1)]
    if not lines:
        return "(no constraints)"
    return "\n".join(lines)


class ConsoleOutputWriter(OutputWriter):
    """Log each result as soon as it is written."""

    def write_result(self, result: ParseResult) -> None:
        log.info("query=%r", result.query)
        for line in render_text(result.predicates).splitlines():
            log.info("  %s", line)

    def finalize(self, action: str) -> None:
        """Nothing is buffered for console output."""
        del action
