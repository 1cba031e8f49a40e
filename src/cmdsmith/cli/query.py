"""`cmdsmith query` command implementation."""

import argparse
import logging
import sys

from cmdsmith.cli.shared import configure_logging, format_suggested_command
from cmdsmith.cmdsmith import run as run_pipeline
from cmdsmith.config import API_KEY_ENV, config_from_env, load_config
from cmdsmith.errors import (
    InvalidConfigError,
    NotConfiguredError,
    PersistenceError,
    TransportError,
    UpstreamError,
)
from cmdsmith.history import append_history

log = logging.getLogger(__name__)

SETUP_HINT = "Please run `cmdsmith setup` to create one."


def build_parser() -> argparse.ArgumentParser:
    """Build parser for query mode."""
    parser = argparse.ArgumentParser(
        prog="cmdsmith query",
        description="Generate a shell command from a natural-language request",
    )
    parser.add_argument("-d", "--debug", action="store_true", help="Enable debug logging")
    parser.add_argument(
        "--env",
        action="store_true",
        help=f"Read the API key from {API_KEY_ENV} instead of the config file",
    )
    parser.add_argument(
        "words",
        nargs="+",
        metavar="query",
        help="What you want the command to do",
    )
    return parser


def run(argv: list[str]) -> int:
    """Execute query mode."""
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.debug)

    if args.env:
        try:
            config = config_from_env()
        except NotConfiguredError as e:
            print(f"Error: {e}", file=sys.stderr)
            return 1
    else:
        try:
            config = load_config()
        except NotConfiguredError:
            print(f"Config file not found. {SETUP_HINT}")
            return 0
        except InvalidConfigError as e:
            log.debug("%s", e)
            print(f"Error: could not parse config file. {SETUP_HINT}")
            return 0

    query = " ".join(args.words)
    try:
        command = run_pipeline(args.words, config)
    except TransportError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except UpstreamError as e:
        print(f"Error: {e}", file=sys.stderr)
        print(f"Hint: {e.hint}", file=sys.stderr)
        return 1
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(f"\n{format_suggested_command(command)}\n")

    try:
        append_history(query.strip(), command)
    except PersistenceError as e:
        print(f"Warning: could not save history: {e}", file=sys.stderr)

    return 0
