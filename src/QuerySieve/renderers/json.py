"""JSON output.

Renders parse results into JSON-serializable objects and provides a writer
that saves every result of a run into one file on finalize.
"""

from __future__ import annotations

import json
from datetime import datetime
from pathlib import Path
from typing import Iterable

from QuerySieve.core.dates import parse_date_values
from QuerySieve.core.models import PredicateEntry
from QuerySieve.renderers.base import OutputWriter, ParseResult
from QuerySieve.utils.log import log


def _iso_dates(entry: PredicateEntry) -> list[str] | None:
    """Return ISO dates for a date predicate, or None if a date is not on the calendar."""
    try:
        return [d.isoformat() for d in parse_date_values(entry)]
    except ValueError as e:
        log.warning("Unreadable date in %r: %s", entry.value, e)
        return None


def render_json(predicates: Iterable[PredicateEntry]) -> list[dict]:
    """Render predicates into JSON-serializable dicts, preserving order.

    Every item has `value` and `operator`; date predicates also carry `dates`,
    the ISO dates they refer to (two for `between_dates`), or null when the
    text has a date shape but is not a real calendar date.
    """
    out: list[dict] = []
    for entry in predicates:
        item: dict = {"value": entry.value, "operator": entry.operator}
        if entry.is_date:
            item["dates"] = _iso_dates(entry)
        out.append(item)
    return out


def load_predicates(data: list[dict]) -> list[PredicateEntry]:
    """Rebuild predicates from `render_json` output."""
    return [PredicateEntry(value=item["value"], operator=item["operator"]) for item in data]


class JsonFileWriter(OutputWriter):
    """Accumulate results and write them to a JSON file on finalize."""

    def __init__(self, base_dir: str) -> None:
        """Initialize JSON writer.

        Args:
            base_dir: Base output directory; files go under `<base_dir>/json`.
        """
        self.output_dir = Path(base_dir) / "json"
        self.all_results: list[dict] = []
        self.output_path: Path | None = None

    def write_result(self, result: ParseResult) -> None:
        self.all_results.append(
            {
                "query": result.query,
                "predicates": render_json(result.predicates),
            }
        )

    def finalize(self, action: str) -> None:
        """Write accumulated results to `<action>_<timestamp>.json`."""
        payload = json.dumps(self.all_results, ensure_ascii=False, indent=2)
        self.output_dir.mkdir(parents=True, exist_ok=True)
        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        self.output_path = self.output_dir / f"{action}_{timestamp}.json"
        self.output_path.write_text(payload, encoding="utf-8")
        log.info("JSON saved to %s", self.output_path)
