#!/usr/bin/env python3
"""Generate a sample property registry and export it.

This script populates a registry with synthetic properties, agents and
owners, then writes record snapshots and the event log to a sink:
- console: pretty JSON on stdout
- json: properties.json / events.json in the output directory
- kafka: one topic per batch under the configured topic prefix

Settings not given on the command line come from the environment
(see ``RegistryConfig.from_env``).
"""

import argparse
import logging
import sys
import time
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from property_registry.config import RegistryConfig
from property_registry.logging import setup_logging
from property_registry.scenarios import PortfolioScenario
from property_registry.sinks import ConsoleSink, JsonFileSink, KafkaSink

logger = logging.getLogger(__name__)


def build_sink(kind: str, config: RegistryConfig):
    """Create the sink selected on the command line."""
    if kind == "console":
        return ConsoleSink(pretty=config.output.pretty_json, max_records=10)
    if kind == "json":
        return JsonFileSink(config.output.output_dir, pretty=config.output.pretty_json)
    return KafkaSink(config.kafka)


def main() -> None:
    """Main entry point."""
    parser = argparse.ArgumentParser(
        description="Generate a sample property registry and export snapshots and events"
    )
    parser.add_argument(
        "--properties",
        type=int,
        default=50,
        help="Number of properties to register (default: 50)",
    )
    parser.add_argument(
        "--agents",
        type=int,
        default=5,
        help="Number of authorized agents (default: 5)",
    )
    parser.add_argument(
        "--owners",
        type=int,
        default=25,
        help="Number of private owners (default: 25)",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Random seed (default: SEED env var)",
    )
    parser.add_argument(
        "--sink",
        choices=["console", "json", "kafka"],
        default="json",
        help="Where to export (default: json)",
    )
    parser.add_argument(
        "--output-dir",
        type=Path,
        default=None,
        help="Output directory for the json sink (default: OUTPUT_DIR env var)",
    )
    args = parser.parse_args()

    config = RegistryConfig.from_env()
    if args.output_dir is not None:
        config.output.output_dir = args.output_dir
    setup_logging(config.log_level, config.log_format, source=config.event_source)

    start = time.perf_counter()
    scenario = PortfolioScenario(
        num_properties=args.properties,
        num_agents=args.agents,
        num_owners=args.owners,
        seed=args.seed,
        config=config,
    )
    registry = scenario.generate()

    sink = build_sink(args.sink, config)
    try:
        scenario.export([sink])
    finally:
        sink.close()

    logger.info("Summary: %s", registry.summary())
    logger.info("Done in %.2fs", time.perf_counter() - start)


if __name__ == "__main__":
    main()
