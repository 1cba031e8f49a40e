"""`cmdsmith history` command implementation."""

import argparse
import sys

from cmdsmith.cli.shared import configure_logging
from cmdsmith.errors import PersistenceError
from cmdsmith.history import format_timestamp, list_history


def build_parser() -> argparse.ArgumentParser:
    """Build parser for the history command."""
    parser = argparse.ArgumentParser(
        prog="cmdsmith history",
        description="List past queries and the commands they produced",
    )
    parser.add_argument("-d", "--debug", action="store_true", help="Enable debug logging")
    return parser


def run(argv: list[str]) -> int:
    """Execute the history command."""
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.debug)

    try:
        entries = list_history()
    except PersistenceError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if not entries:
        print("No history found")
        return 0

    for index, entry in enumerate(entries):
        print(f"Index: {index}")
        print(f"Query: {entry.query}")
        print(f"Response: {entry.response}")
        print(f"Timestamp: {format_timestamp(entry.timestamp)}")
        print("")
    return 0
