# ============================================================================
# REPLICA HEALTHCHECK AGENT - MAIN ENTRY POINT
# ============================================================================
# STATUS: Core - Process entry point
# PURPOSE: Parse flags, load replicas, run the listener fleet
# CREATED: 19 OCT 2026
# ============================================================================
"""
Replica Healthcheck Agent

Starts one HTTP healthcheck listener per replica listed in the replicas
file and runs until SIGINT/SIGTERM.

Usage:
    python main.py --config /etc/mysql-replica-healthcheck-agent/replicas.yml
    python main.py --version

Environment Variables:
    HEALTHCHECK_CONFIG: Replicas file (default for --config)
    HEALTHCHECK_LISTEN_HOST: Listen address for every listener (0.0.0.0)
    HEALTHCHECK_READ_TIMEOUT: Per-request timeout in seconds (10)
    HEALTHCHECK_SHUTDOWN_GRACE: Drain time on shutdown in seconds (5)
    LOG_LEVEL: DEBUG, INFO, WARNING, ERROR
    LOG_FORMAT: "json" for structured output

Exit codes:
    0 - clean shutdown
    1 - a listener failed
    2 - configuration error
"""

import argparse
import asyncio
import os
import sys
from typing import List, Optional

from __version__ import __version__, BUILD_DATE
from core.config import get_defaults, load_config
from core.errors import ConfigError
from core.logging import configure_logging, get_logger
from fleet import EXIT_CONFIG_ERROR, FleetManager

logger = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    defaults = get_defaults()
    parser = argparse.ArgumentParser(
        description="Expose one HTTP healthcheck per MySQL replica",
    )
    parser.add_argument(
        "--config", "-c",
        default=defaults.config_path,
        help=f"config file path (default: {defaults.config_path})",
    )
    parser.add_argument(
        "--version", "-v",
        action="store_true",
        help="show version",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Run the agent and return the process exit code."""
    args = build_parser().parse_args(argv)

    if args.version:
        print(f"version {__version__}")
        return 0

    configure_logging(
        level=os.environ.get("LOG_LEVEL", "INFO"),
        json_output=os.environ.get("LOG_FORMAT", "").lower() == "json",
    )

    logger.info(f"Replica healthcheck agent v{__version__} (Build {BUILD_DATE})")

    try:
        settings = load_config(args.config)
    except ConfigError as e:
        logger.error(f"failed to read config: {e}")
        return EXIT_CONFIG_ERROR

    manager = FleetManager(settings, get_defaults())
    return asyncio.run(manager.run())


def run() -> None:
    """Synchronous entry point."""
    sys.exit(main())


if __name__ == "__main__":
    run()
