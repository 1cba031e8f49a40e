"""ANSI styling constants shared by the CLI."""

BOLD = "\033[1m"
CYAN = "\033[36m"
RESET = "\033[0m"
