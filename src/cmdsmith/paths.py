"""Where cmdsmith keeps its config and history files."""

import os
import sys
from dataclasses import dataclass
from pathlib import Path

APP_DIR_NAME = ".cmdsmith"
CONFIG_FILE_NAME = "config.json"
HISTORY_FILE_NAME = "history.json"


@dataclass(frozen=True)
class StorageLocation:
    """Directory holding the config and history files."""

    root: Path

    @property
    def config_file(self) -> Path:
        return self.root / CONFIG_FILE_NAME

    @property
    def history_file(self) -> Path:
        return self.root / HISTORY_FILE_NAME


def user_config_dir() -> Path:
    """Return the per-user configuration directory for this platform."""
    if sys.platform == "win32":
        appdata = os.environ.get("APPDATA")
        return Path(appdata) if appdata else Path.home() / "AppData" / "Roaming"
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support"
    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg and os.path.isabs(xdg):
        return Path(xdg)
    return Path.home() / ".config"


def default_location() -> StorageLocation:
    """Resolve the storage location; recomputed on every call."""
    override = os.environ.get("CMDSMITH_CONFIG_DIR")
    if override:
        return StorageLocation(Path(override).expanduser())
    return StorageLocation(user_config_dir() / APP_DIR_NAME)


def resolve_location(location: StorageLocation | None) -> StorageLocation:
    return location if location is not None else default_location()


def write_private_file(path: Path, text: str) -> None:
    """Atomically replace `path` with `text`, readable only by the owner.

    Raises OSError on failure; the previous content is left untouched.
    """
    os.makedirs(path.parent, mode=0o700, exist_ok=True)
    temp_file = path.with_name(f".{path.name}.{os.getpid()}.tmp")
    fd = os.open(temp_file, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, 0o600)
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            f.write(text)
            f.flush()
            os.fsync(f.fileno())
        os.replace(temp_file, path)
    except OSError:
        temp_file.unlink(missing_ok=True)
        raise
