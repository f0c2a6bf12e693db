"""Command line entry point.

Usage:
    node-discover addrs provider=aws tag_key=consul tag_value=server
    node-discover help [aws|digitalocean]
"""

from __future__ import annotations

import argparse
import asyncio
import os
from collections.abc import Sequence

from loguru import logger
from rich.console import Console

from node_discover.constants import LOG_LEVEL_ENV
from node_discover.discover import get_addresses
from node_discover.errors import DiscoverError
from node_discover.help import help_text
from node_discover.logging import LogConfig, LogLevel, setup_logging, teardown_logging

_VERBOSITY: tuple[LogLevel, ...] = ("WARNING", "INFO", "DEBUG")


def _log_level(verbose: int) -> LogLevel:
    if verbose:
        return _VERBOSITY[min(verbose, len(_VERBOSITY) - 1)]
    match os.environ.get(LOG_LEVEL_ENV, "").upper():
        case "TRACE" | "DEBUG" | "INFO" | "WARNING" | "ERROR" as level:
            return level
        case _:
            return "WARNING"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="node-discover",
        description="Discover IP addresses of cluster nodes from a cloud provider.",
    )
    parser.add_argument("-v", "--verbose", action="count", default=0, help="Increase log verbosity")
    parser.add_argument("command", nargs="?", help='"addrs" or "help"')
    parser.add_argument("args", nargs=argparse.REMAINDER, help="key=value arguments, or a provider name for help")
    return parser


def addrs(args: Sequence[str], console: Console) -> int:
    try:
        found = asyncio.run(get_addresses(" ".join(args)))
    except DiscoverError as e:
        logger.error("Unable to retrieve addresses. Received error: {error}", error=e)
        return 1
    console.print_json(data=found)
    return 0


def main(argv: Sequence[str] | None = None, console: Console | None = None) -> int:
    console = console or Console()
    ns = build_parser().parse_args(argv)

    match ns.command:
        case None:
            console.print(help_text(), markup=False, highlight=False, soft_wrap=True)
            return 0
        case "addrs":
            handler_ids = setup_logging(LogConfig(level=_log_level(ns.verbose)))
            try:
                return addrs(ns.args, console)
            finally:
                teardown_logging(handler_ids)
        case _:
            provider = ns.args[0] if ns.args else None
            console.print(help_text(provider), markup=False, highlight=False, soft_wrap=True)
            return 0


def cli() -> None:
    raise SystemExit(main())


if __name__ == "__main__":
    cli()
