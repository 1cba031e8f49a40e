"""`cmdsmith setup` command implementation."""

import argparse
import getpass
import sys

from cmdsmith.cli.shared import configure_logging, mask_secret
from cmdsmith.config import save_config
from cmdsmith.errors import PersistenceError
from cmdsmith.models import DEFAULT_MODEL, CmdsmithConfig

API_KEY_CLI_WARNING = (
    "Warning: --api-key may leak secrets via shell history and process lists. "
    "Prefer the interactive `cmdsmith setup` prompt."
)


def build_parser() -> argparse.ArgumentParser:
    """Build parser for the setup command."""
    parser = argparse.ArgumentParser(
        prog="cmdsmith setup",
        description="Save the API key and model cmdsmith uses",
    )
    parser.add_argument("-d", "--debug", action="store_true", help="Enable debug logging")
    parser.add_argument(
        "--api-key",
        help="API key to store (not recommended; may leak via shell history/process list)",
    )
    parser.add_argument("--model", help=f"Model name (default: {DEFAULT_MODEL})")
    return parser


def _prompt_api_key() -> str:
    return getpass.getpass("Please enter your OpenAI API key: ")


def _prompt_model() -> str:
    value = input(f"Please enter the model name [{DEFAULT_MODEL}]: ")
    return value.strip() or DEFAULT_MODEL


def run(argv: list[str]) -> int:
    """Execute the setup command."""
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.debug)

    if args.api_key is not None:
        print(API_KEY_CLI_WARNING, file=sys.stderr)

    try:
        api_key = args.api_key if args.api_key is not None else _prompt_api_key()
        model = args.model if args.model is not None else _prompt_model()
    except (KeyboardInterrupt, EOFError):
        print("\nSetup cancelled.", file=sys.stderr)
        return 1

    api_key, model = api_key.strip(), model.strip()
    if not api_key or not model:
        print("Error: API key or model name cannot be empty", file=sys.stderr)
        return 1

    try:
        path = save_config(CmdsmithConfig(api_key=api_key, model=model))
    except PersistenceError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(f"\nConfiguration saved to {path}")
    print(f"  api_key: {mask_secret(api_key)}")
    print(f"  model: {model}")
    print("")
    return 0
