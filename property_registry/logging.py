"""Structured logging configuration for property-registry."""

import json
import logging
import sys
from datetime import datetime, timezone
from typing import Any

# Attributes registry code attaches through ``extra``
REGISTRY_FIELDS = ("location", "principal", "kind", "event_id")


def setup_logging(
    level: str = "INFO",
    format_type: str = "standard",
    source: str = "property-registry",
) -> None:
    """Configure logging for property-registry.

    Parameters
    ----------
    level : str
        Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
    format_type : str
        Format type: "standard" or "json".
    source : str
        Registry instance name stamped on every JSON line; normally the
        configured event source.
    """
    log_level = getattr(logging, level.upper(), logging.INFO)

    if format_type == "json":
        formatter: logging.Formatter = JsonFormatter(source=source)
    else:
        # Operations arrive from concurrent callers, so show the thread
        formatter = logging.Formatter(
            fmt="%(asctime)s | %(levelname)-8s | %(threadName)s | %(name)s | %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)

    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(log_level)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    logging.getLogger("property_registry").setLevel(log_level)

    logging.getLogger("confluent_kafka").setLevel(logging.WARNING)
    logging.getLogger("faker").setLevel(logging.WARNING)


class JsonFormatter(logging.Formatter):
    """One JSON object per line, tagged with the registry instance.

    Every line carries ``source`` and ``thread``. The registry fields
    (location, principal, failure kind, event id) appear only when the
    logging call supplied them.
    """

    def __init__(self, source: str = "property-registry") -> None:
        super().__init__()
        self.source = source

    def format(self, record: logging.LogRecord) -> str:
        log_data: dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            "level": record.levelname,
            "source": self.source,
            "logger": record.name,
            "thread": record.threadName,
            "message": record.getMessage(),
        }

        for key in REGISTRY_FIELDS:
            if hasattr(record, key):
                log_data[key] = getattr(record, key)

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_data, default=str)
