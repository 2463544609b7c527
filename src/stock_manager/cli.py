"""Command-line interface for the Stock Manager backend.

This module provides the main entry point for the CLI application.
"""

from __future__ import annotations

import argparse
import asyncio
import sys

import structlog

from stock_manager import __version__
from stock_manager.config import get_settings
from stock_manager.db import ConnectionConfig, initialize, verify_connectivity
from stock_manager.exceptions import ConfigurationError
from stock_manager.log import configure_logging

logger = structlog.get_logger()


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="stock-manager", description="Stock Manager backend")
    subparsers = parser.add_subparsers(dest="command", required=True)

    db_parser = subparsers.add_parser("db", help="Database maintenance commands")
    db_sub = db_parser.add_subparsers(dest="db_command", required=True)
    db_sub.add_parser("check", help="Check that the configured database is reachable")

    return parser


async def _cmd_db_check(args: argparse.Namespace) -> int:
    settings = get_settings()
    config = ConnectionConfig.from_settings(settings)
    engine = initialize(config)
    try:
        result = await verify_connectivity(engine)
    finally:
        await engine.dispose()

    target = f"{config.database}@{config.host}"
    if result.ok:
        print(f"Connected to {target}")
        return 0

    print(f"Unable to connect to {target}: {result.cause}", file=sys.stderr)
    return 1


def main(args: list[str] | None = None) -> int:
    """Main entry point for the Stock Manager CLI.

    Args:
        args: Command-line arguments. If None, uses sys.argv.

    Returns:
        Exit code (0 for success, 1 if the database is unreachable,
        2 for bad configuration or usage).
    """
    if args is None:
        args = sys.argv[1:]

    parser = _build_parser()
    parsed = parser.parse_args(args)

    try:
        settings = get_settings()
    except ConfigurationError as e:
        print(str(e), file=sys.stderr)
        return 2

    configure_logging(settings.log_level)
    logger.info("stock_manager_started", version=__version__)

    if parsed.command == "db" and parsed.db_command == "check":
        return asyncio.run(_cmd_db_check(parsed))

    logger.error("unknown_command", command=parsed.command)
    return 2


if __name__ == "__main__":
    sys.exit(main())
