"""Command-line interface for cmdsmith."""

from cmdsmith.cli.app import entrypoint, main

__all__ = ["entrypoint", "main"]
