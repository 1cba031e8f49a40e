"""Configuration loading and saving for cmdsmith."""

import logging
import os
from collections.abc import Mapping
from pathlib import Path

from pydantic import ValidationError

from cmdsmith.errors import InvalidConfigError, NotConfiguredError, PersistenceError
from cmdsmith.models import DEFAULT_MODEL, CmdsmithConfig
from cmdsmith.paths import StorageLocation, resolve_location, write_private_file

log = logging.getLogger(__name__)

API_KEY_ENV = "OPENAI_API_KEY"
MODEL_ENV = "CMDSMITH_MODEL"


def needs_setup(location: StorageLocation | None = None) -> bool:
    """Return True when no config file has been written yet."""
    return not resolve_location(location).config_file.exists()


def load_config(location: StorageLocation | None = None) -> CmdsmithConfig:
    """Load the saved config, raising when it is missing or unusable."""
    path = resolve_location(location).config_file
    if not path.exists():
        raise NotConfiguredError(f"no config file at {path}")

    try:
        data = path.read_bytes()
    except OSError as e:
        raise InvalidConfigError(f"could not read {path}: {e}") from e

    try:
        config = CmdsmithConfig.model_validate_json(data)
    except ValidationError as e:
        raise InvalidConfigError(f"could not parse {path}: {e}") from e

    log.debug("loaded config from %s (model=%s)", path, config.model)
    return config


def save_config(config: CmdsmithConfig, location: StorageLocation | None = None) -> Path:
    """Write the whole config, replacing any previous one. Returns the path."""
    path = resolve_location(location).config_file
    try:
        write_private_file(path, config.model_dump_json(indent=2))
    except OSError as e:
        raise PersistenceError(f"could not write {path}: {e}") from e
    log.debug("saved config to %s", path)
    return path


def config_from_env(environ: Mapping[str, str] | None = None) -> CmdsmithConfig:
    """Build a config from environment variables, bypassing the config file."""
    env = os.environ if environ is None else environ
    api_key = env.get(API_KEY_ENV, "").strip()
    if not api_key:
        raise NotConfiguredError(f"{API_KEY_ENV} is not set")
    model = env.get(MODEL_ENV, "").strip() or DEFAULT_MODEL
    return CmdsmithConfig(api_key=api_key, model=model)
