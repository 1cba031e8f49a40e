"""Append-only log of past queries and the commands they produced.

The log is a JSON array rewritten in full on every append. There is no file
locking: two cmdsmith processes appending at the same moment can lose one of
the entries.
"""

import logging
from datetime import datetime, timezone

from pydantic import ValidationError

from cmdsmith.errors import PersistenceError
from cmdsmith.models import HistoryEntry, HistoryLog
from cmdsmith.paths import StorageLocation, resolve_location, write_private_file

log = logging.getLogger(__name__)

TIMESTAMP_DISPLAY_FORMAT = "%b %d, %Y %I:%M %p"


def _parse(data: bytes, source: object) -> list[HistoryEntry]:
    try:
        return HistoryLog.validate_json(data)
    except ValidationError as e:
        raise PersistenceError(f"history file {source} is malformed: {e}") from e


def list_history(location: StorageLocation | None = None) -> list[HistoryEntry]:
    """Return every saved entry, oldest first.

    A missing or unreadable file is an empty history; only content that does
    not parse raises.
    """
    path = resolve_location(location).history_file
    try:
        data = path.read_bytes()
    except FileNotFoundError:
        return []
    except OSError as e:
        log.warning("could not read %s: %s", path, e)
        return []
    return _parse(data, path)


def append_history(
    query: str, response: str, location: StorageLocation | None = None
) -> HistoryEntry:
    """Add one entry to the end of the log and return it."""
    path = resolve_location(location).history_file
    try:
        data = path.read_bytes()
    except FileNotFoundError:
        data = b"[]"
    except OSError as e:
        log.warning("could not read %s, starting a new history: %s", path, e)
        data = b"[]"

    entries = _parse(data, path)
    entry = HistoryEntry(
        query=query,
        response=response,
        timestamp=datetime.now(timezone.utc).isoformat(),
    )
    entries.append(entry)

    try:
        write_private_file(path, HistoryLog.dump_json(entries, indent=2).decode("utf-8"))
    except OSError as e:
        raise PersistenceError(f"could not write {path}: {e}") from e
    log.info("history saved at %s", path)
    return entry


def format_timestamp(timestamp: str) -> str:
    """Render an RFC3339 timestamp for people, e.g. 'Mar 04, 2024 09:15 AM'."""
    try:
        parsed = datetime.fromisoformat(timestamp)
    except ValueError:
        return timestamp
    return parsed.strftime(TIMESTAMP_DISPLAY_FORMAT)
