"""Configuration management for property-registry."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from property_registry.exceptions import ConfigurationError

LOG_FORMATS = ("standard", "json")


@dataclass
class KafkaConfig:
    """Kafka producer configuration for the event sink."""

    bootstrap_servers: str = "localhost:9092"
    topic: str = "registry.property-events"
    acks: str = "all"
    batch_size: int = 16384
    linger_ms: int = 5
    compression: str = "snappy"
    retries: int = 3

    def to_dict(self) -> dict[str, Any]:
        """Convert to confluent-kafka config dict."""
        return {
            "bootstrap.servers": self.bootstrap_servers,
            "acks": self.acks,
            "batch.size": self.batch_size,
            "linger.ms": self.linger_ms,
            "compression.type": self.compression,
            "retries": self.retries,
        }


@dataclass
class OutputConfig:
    """Output configuration for file sinks."""

    output_dir: Path = field(default_factory=lambda: Path("output"))
    pretty_json: bool = False


@dataclass
class RegistryConfig:
    """Main configuration for a property registry."""

    admin: str = "admin"
    gate_ancillary_reads: bool = True
    event_source: str = "property-registry"
    kafka: KafkaConfig = field(default_factory=KafkaConfig)
    output: OutputConfig = field(default_factory=OutputConfig)
    seed: int | None = None
    log_level: str = "INFO"
    log_format: str = "standard"

    def __post_init__(self) -> None:
        if not self.admin:
            raise ConfigurationError("Registry admin principal must not be empty")
        if self.log_format not in LOG_FORMATS:
            raise ConfigurationError(
                f"Unknown log format {self.log_format!r}, expected one of {LOG_FORMATS}"
            )

    @classmethod
    def from_env(cls) -> "RegistryConfig":
        """Create config from environment variables."""
        import os

        kafka = KafkaConfig(
            bootstrap_servers=os.getenv("KAFKA_BOOTSTRAP_SERVERS", "localhost:9092"),
            topic=os.getenv("KAFKA_TOPIC", "registry.property-events"),
            acks=os.getenv("KAFKA_ACKS", "all"),
        )

        output = OutputConfig(
            output_dir=Path(os.getenv("OUTPUT_DIR", "output")),
            pretty_json=os.getenv("PRETTY_JSON", "false").lower() == "true",
        )

        seed_str = os.getenv("SEED")
        try:
            seed = int(seed_str) if seed_str else None
        except ValueError as exc:
            raise ConfigurationError(f"SEED must be an integer, got {seed_str!r}") from exc

        return cls(
            admin=os.getenv("REGISTRY_ADMIN", "admin"),
            gate_ancillary_reads=os.getenv("GATE_ANCILLARY_READS", "true").lower() == "true",
            event_source=os.getenv("EVENT_SOURCE", "property-registry"),
            kafka=kafka,
            output=output,
            seed=seed,
            log_level=os.getenv("LOG_LEVEL", "INFO"),
            log_format=os.getenv("LOG_FORMAT", "standard"),
        )
