"""Shared CLI presentation helpers."""

import logging
import os
import sys

from cmdsmith.constants import BOLD, CYAN, RESET


def configure_logging(debug: bool) -> None:
    """Set up root logging for a CLI command."""
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.WARNING,
        format="%(name)s %(levelname)s: %(message)s",
    )


def supports_color() -> bool:
    """Return whether ANSI color output should be used."""
    if os.getenv("NO_COLOR") is not None:
        return False
    if os.getenv("TERM", "").lower() == "dumb":
        return False
    return sys.stdout.isatty()


def format_suggested_command(command: str) -> str:
    """Return shell-like prompt lines for the suggested command."""
    lines = command.splitlines() or [""]
    if supports_color():
        return "\n".join(f"  {BOLD}{CYAN}$ {line}{RESET}" for line in lines)
    return "\n".join(f"  $ {line}" for line in lines)


def mask_secret(secret: str) -> str:
    """Show only the last four characters of a secret."""
    if len(secret) <= 4:
        return "*" * len(secret)
    return "*" * (len(secret) - 4) + secret[-4:]
