"""Console presentation sink."""

import json
from typing import Any, Callable

from bank_sim.sinks.serialization import to_dict


class ConsoleSink:
    """Show operation feedback and JSON records on the console."""

    def __init__(
        self,
        pretty: bool = True,
        max_records: int | None = None,
        output: Callable[[str], None] = print,
    ) -> None:
        """Initialize console sink.

        Parameters
        ----------
        pretty : bool
            Pretty-print JSON output.
        max_records : int | None
            Maximum records to print per batch (None for all).
        output : Callable[[str], None]
            Line writer, ``print`` by default.
        """
        self.pretty = pretty
        self.max_records = max_records
        self._output = output
        self._counts: dict[str, int] = {}

    def show(self, feedback: Any) -> None:
        """Display a feedback message or an ``OperationResult``."""
        self._output(str(feedback))
        success = getattr(feedback, "success", None)
        if success is not None:
            outcome = "succeeded" if success else "failed"
            self._counts[outcome] = self._counts.get(outcome, 0) + 1

    def write_batch(self, entity_type: str, records: list[Any]) -> None:
        """Write a batch of records as JSON."""
        self._output(f"\n{'=' * 60}")
        self._output(f"Entity: {entity_type} ({len(records)} records)")
        self._output("=" * 60)

        display_records = records[: self.max_records] if self.max_records else records

        for record in display_records:
            data = to_dict(record)
            if self.pretty:
                self._output(json.dumps(data, indent=2, ensure_ascii=False, default=str))
            else:
                self._output(json.dumps(data, ensure_ascii=False, default=str))

        if self.max_records and len(records) > self.max_records:
            self._output(f"... and {len(records) - self.max_records} more records")

        self._counts[entity_type] = self._counts.get(entity_type, 0) + len(records)

    def close(self) -> None:
        """Print summary and close."""
        if not self._counts:
            return
        self._output(f"\n{'=' * 60}")
        self._output("Session Summary")
        self._output("=" * 60)
        for key, count in self._counts.items():
            self._output(f"  {key}: {count}")
