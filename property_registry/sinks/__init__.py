"""Output sinks for registry events and record snapshots."""

from property_registry.sinks.console import ConsoleSink
from property_registry.sinks.json_file import JsonFileSink
from property_registry.sinks.kafka import KafkaSink

__all__ = ["ConsoleSink", "JsonFileSink", "KafkaSink"]
