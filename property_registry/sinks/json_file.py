"""JSON file sink for exporting records and events to files."""

import json
from pathlib import Path
from typing import Any

from property_registry.exceptions import SinkError
from property_registry.models.base import Event
from property_registry.sinks.serialization import to_dict


class JsonFileSink:
    """Output record batches to JSON files and events to a JSON Lines file."""

    EVENTS_FILENAME = "events.jsonl"

    def __init__(self, output_dir: str | Path, pretty: bool = False) -> None:
        """Initialize JSON file sink.

        Parameters
        ----------
        output_dir : str | Path
            Directory to write JSON files.
        pretty : bool
            Pretty-print JSON batch output (events are always one per line).
        """
        self.output_dir = Path(output_dir)
        self.output_dir.mkdir(parents=True, exist_ok=True)
        self.pretty = pretty
        self._counts: dict[str, int] = {}

    @property
    def events_path(self) -> Path:
        return self.output_dir / self.EVENTS_FILENAME

    def write_batch(self, entity_type: str, records: list[Any]) -> None:
        """Write a batch of records to a JSON file."""
        file_path = self.output_dir / f"{entity_type}.json"

        data = [to_dict(record) for record in records]

        try:
            with open(file_path, "w", encoding="utf-8") as f:
                if self.pretty:
                    json.dump(data, f, indent=2, ensure_ascii=False, default=str)
                else:
                    json.dump(data, f, ensure_ascii=False, default=str)
        except OSError as exc:
            raise SinkError(f"Failed to write {file_path}: {exc}") from exc

        self._counts[entity_type] = len(records)

    def write_event(self, event: Event) -> None:
        """Append a single event to the events JSON Lines file."""
        line = json.dumps(to_dict(event), ensure_ascii=False, default=str)
        try:
            with open(self.events_path, "a", encoding="utf-8") as f:
                f.write(line + "\n")
        except OSError as exc:
            raise SinkError(f"Failed to append to {self.events_path}: {exc}") from exc

        self._counts["events"] = self._counts.get("events", 0) + 1

    def close(self) -> None:
        """Print summary."""
        print(f"JSON files written to: {self.output_dir}")
        for entity_type, count in self._counts.items():
            print(f"  {entity_type}: {count} records")
