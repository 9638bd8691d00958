"""Command implementations for the QuerySieve CLI.

Keeps the parse loop separate from click parameter handling and from output
formatting.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from QuerySieve.core.parser import parse_query
from QuerySieve.renderers import OutputWriter, ParseResult
from QuerySieve.utils.log import log


@dataclass(slots=True)
class ParseCommand:
    """Parse each query and hand the predicates to the output writer."""

    queries: Sequence[str]
    output_writer: OutputWriter

    def execute(self) -> list[ParseResult]:
        """Run the parser over every query, in order.

        Returns:
            One result per query.
        """
        results: list[ParseResult] = []
        multiple = len(self.queries) > 1
        for idx, query in enumerate(self.queries, start=1):
            if multiple:
                log.info("=== Query %d/%d ===", idx, len(self.queries))
            predicates = tuple(parse_query(query))
            log.debug("Query %d produced %d predicates", idx, len(predicates))
            result = ParseResult(query=query, predicates=predicates)
            self.output_writer.write_result(result)
            results.append(result)
        return results
