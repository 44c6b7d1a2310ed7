"""Tests for sinks."""

import json
from datetime import datetime, timezone
from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest

from property_registry.config import KafkaConfig
from property_registry.exceptions import SinkError
from property_registry.models import Event, PropertyRecord, PropertyStatus
from property_registry.sinks.console import ConsoleSink
from property_registry.sinks.json_file import JsonFileSink


@pytest.fixture
def event() -> Event:
    return Event(
        event_id="evt-001",
        event_type="property.status_changed",
        event_time=datetime(2024, 5, 1, 12, 0, tzinfo=timezone.utc),
        source="property-registry",
        subject="1 Main St",
        data={"location": "1 Main St", "status": "Rented"},
    )


@pytest.fixture
def snapshot():
    record = PropertyRecord(
        "1 Main St", "bob", 0, "Cottage", 80, "Deed 1",
        status=PropertyStatus.RENTED, ownership_history=["alice"],
    )
    return record.snapshot()


class TestConsoleSink:
    """Tests for ConsoleSink."""

    def test_init_default(self) -> None:
        sink = ConsoleSink()

        assert sink.pretty is True
        assert sink.max_records is None
        assert sink._counts == {}

    def test_write_batch_snapshots(self, capsys: pytest.CaptureFixture, snapshot) -> None:
        sink = ConsoleSink(pretty=False)

        sink.write_batch("properties", [snapshot])
        captured = capsys.readouterr()

        assert "properties (1 records)" in captured.out
        assert '"status": "Rented"' in captured.out
        assert '"ownership_history": ["alice"]' in captured.out

    def test_write_batch_with_max_records(self, capsys: pytest.CaptureFixture) -> None:
        sink = ConsoleSink(max_records=2)

        sink.write_batch("test_entity", [{"id": i} for i in range(10)])
        captured = capsys.readouterr()

        assert "10 records" in captured.out
        assert "and 8 more records" in captured.out
        assert sink._counts["test_entity"] == 10

    def test_write_event(self, capsys: pytest.CaptureFixture, event: Event) -> None:
        sink = ConsoleSink(pretty=False)

        sink.write_event(event)
        sink.write_event(event)
        captured = capsys.readouterr()

        assert '"event_type": "property.status_changed"' in captured.out
        assert sink._counts["events"] == 2

    def test_close_prints_summary(self, capsys: pytest.CaptureFixture, event: Event) -> None:
        sink = ConsoleSink()
        sink.write_event(event)

        sink.close()
        captured = capsys.readouterr()

        assert "Console Sink Summary" in captured.out
        assert "events: 1 records" in captured.out


class TestJsonFileSink:
    """Tests for JsonFileSink."""

    def test_creates_directory(self, tmp_path: Path) -> None:
        out = tmp_path / "nested" / "out"

        JsonFileSink(out)

        assert out.is_dir()

    def test_write_batch(self, tmp_path: Path, snapshot) -> None:
        sink = JsonFileSink(tmp_path, pretty=True)

        sink.write_batch("properties", [snapshot])

        data = json.loads((tmp_path / "properties.json").read_text(encoding="utf-8"))
        assert data[0]["location"] == "1 Main St"
        assert data[0]["status"] == "Rented"
        assert sink._counts["properties"] == 1

    def test_write_event_appends_lines(self, tmp_path: Path, event: Event) -> None:
        sink = JsonFileSink(tmp_path)

        sink.write_event(event)
        sink.write_event(event)

        lines = sink.events_path.read_text(encoding="utf-8").splitlines()
        assert len(lines) == 2
        parsed = json.loads(lines[0])
        assert parsed["subject"] == "1 Main St"
        assert parsed["event_time"] == "2024-05-01T12:00:00+00:00"

    def test_write_failure_raises_sink_error(self, tmp_path: Path, event: Event) -> None:
        sink = JsonFileSink(tmp_path)
        sink.events_path.mkdir()

        with pytest.raises(SinkError):
            sink.write_event(event)

    def test_close(self, tmp_path: Path, capsys: pytest.CaptureFixture) -> None:
        sink = JsonFileSink(tmp_path)
        sink.write_batch("events", [])

        sink.close()

        assert "events: 0 records" in capsys.readouterr().out


class TestKafkaSinkMocked:
    """Tests for KafkaSink using mocks (no actual Kafka connection)."""

    def test_producer_stats(self) -> None:
        from property_registry.sinks.kafka import ProducerStats

        stats = ProducerStats(sent=100, delivered=90, failed=10, start_time=0.0, end_time=10.0)

        assert stats.success_rate == 0.9
        assert stats.throughput == 10.0
        assert ProducerStats().success_rate == 0.0
        assert ProducerStats(sent=5).throughput == 0.0

    @patch("property_registry.sinks.kafka.Producer")
    def test_init_with_string(self, mock_producer_class: MagicMock) -> None:
        from property_registry.sinks.kafka import KafkaSink

        sink = KafkaSink("kafka:9092")

        assert sink.config.bootstrap_servers == "kafka:9092"
        mock_producer_class.assert_called_once_with(KafkaConfig(bootstrap_servers="kafka:9092").to_dict())

    @patch("property_registry.sinks.kafka.Producer")
    def test_write_event_keyed_by_location(
        self, mock_producer_class: MagicMock, event: Event
    ) -> None:
        from property_registry.sinks.kafka import KafkaSink

        mock_producer = MagicMock()
        mock_producer_class.return_value = mock_producer
        sink = KafkaSink(KafkaConfig(topic="test.events"))

        sink.write_event(event)

        kwargs = mock_producer.produce.call_args[1]
        assert kwargs["topic"] == "test.events"
        assert kwargs["key"] == b"1 Main St"
        assert json.loads(kwargs["value"])["event_id"] == "evt-001"
        assert sink.stats.sent == 1

    @patch("property_registry.sinks.kafka.Producer")
    def test_send_without_key(self, mock_producer_class: MagicMock) -> None:
        from property_registry.sinks.kafka import KafkaSink

        mock_producer = MagicMock()
        mock_producer_class.return_value = mock_producer
        sink = KafkaSink("localhost:9092")

        sink.send("topic", {"id": 1})

        assert mock_producer.produce.call_args[1]["key"] is None

    @patch("property_registry.sinks.kafka.Producer")
    def test_write_batch(self, mock_producer_class: MagicMock, snapshot) -> None:
        from property_registry.sinks.kafka import KafkaSink

        mock_producer = MagicMock()
        mock_producer_class.return_value = mock_producer
        sink = KafkaSink(KafkaConfig(topic="reg"))

        sink.write_batch("properties", [snapshot, snapshot])

        assert mock_producer.produce.call_count == 2
        kwargs = mock_producer.produce.call_args[1]
        assert kwargs["topic"] == "reg.properties"
        assert kwargs["key"] == b"1 Main St"
        mock_producer.flush.assert_called_once()

    @patch("property_registry.sinks.kafka.Producer")
    def test_delivery_callback(self, mock_producer_class: MagicMock) -> None:
        from property_registry.sinks.kafka import KafkaSink

        sink = KafkaSink("localhost:9092")
        msg = MagicMock()
        msg.topic.return_value = "t"
        msg.partition.return_value = 0
        msg.offset.return_value = 1

        sink._delivery_callback(None, msg)
        sink._delivery_callback("broker down", msg)

        assert sink.stats.delivered == 1
        assert sink.stats.failed == 1

    @patch("property_registry.sinks.kafka.Producer")
    def test_close_flushes(self, mock_producer_class: MagicMock) -> None:
        from property_registry.sinks.kafka import KafkaSink

        mock_producer = MagicMock()
        mock_producer_class.return_value = mock_producer
        sink = KafkaSink("localhost:9092")

        sink.close()

        mock_producer.flush.assert_called_once_with(30.0)
        assert sink.stats.end_time is not None

    @patch("property_registry.sinks.kafka.Producer")
    def test_close_logs_delivery_stats(
        self, mock_producer_class: MagicMock, event: Event, caplog: pytest.LogCaptureFixture
    ) -> None:
        from property_registry.sinks.kafka import KafkaSink

        sink = KafkaSink("localhost:9092")
        sink.write_event(event)
        msg = MagicMock()
        msg.topic.return_value = "registry.property-events"
        msg.partition.return_value = 0
        msg.offset.return_value = 7
        sink._delivery_callback(None, msg)

        with caplog.at_level("INFO", logger="property_registry.sinks.kafka"):
            sink.close()

        assert "sent=1, delivered=1, failed=0, success=100.0%" in caplog.text
