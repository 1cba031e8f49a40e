"""Top-level CLI router."""

import sys

from cmdsmith import __version__

from . import history as history_cmd
from . import query as query_cmd
from . import setup as setup_cmd

COMMANDS = {
    "query": query_cmd.run,
    "setup": setup_cmd.run,
    "history": history_cmd.run,
}

USAGE = """\
usage: cmdsmith <command> [options]

Turn a plain-English request into a shell command.

commands:
  query WORDS...   generate a shell command for the request
  setup            save your API key and model
  history          list past queries and their commands
"""


def main(argv: list[str] | None = None) -> int:
    """Route to the query, setup or history command."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        print(USAGE)
        print("No command provided")
        return 0
    if args[0] in ("-V", "--version"):
        print(f"cmdsmith {__version__}")
        return 0
    if args[0] in ("-h", "--help"):
        print(USAGE)
        return 0

    handler = COMMANDS.get(args[0])
    if handler is None:
        print(f"Error: unknown command {args[0]!r}", file=sys.stderr)
        print(USAGE, file=sys.stderr)
        return 2
    return handler(args[1:])


def entrypoint() -> None:
    """Console script entrypoint."""
    raise SystemExit(main())
