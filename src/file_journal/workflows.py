"""Shared workflow layer between the CLI and the journal store.

Each function resolves the journal root, runs one store operation,
and returns plain data for the caller to display.
"""

import json
import logging
from datetime import datetime
from pathlib import Path

from .adapters.file_journal import FileJournalStore
from .config import Config, resolve_journal_root
from .core.query import build_query
from .ports.journal_store import JournalStore

logger = logging.getLogger(__name__)

OUTPUT_FORMATS = ("paths", "content", "json")


def get_journal(
    config: Config | None,
    explicit_path: Path | str | None = None,
    fallback: Path | None = None,
) -> FileJournalStore:
    """Resolve the journal directory and open a store on it."""
    return FileJournalStore(resolve_journal_root(explicit_path, config, fallback))


def create_entry(
    title: str,
    note: str | None,
    config: Config | None,
    explicit_path: Path | str | None = None,
    now: datetime | None = None,
) -> Path:
    """Create an entry. Falls back to the working directory when nothing is configured."""
    journal: JournalStore = get_journal(config, explicit_path, fallback=Path.cwd())
    return journal.write(title, note or "", now=now)


def get_entries(
    config: Config | None,
    explicit_path: Path | str | None = None,
    day: int | None = None,
    month: int | None = None,
    year: int | None = None,
    week: bool = False,
    now: datetime | None = None,
) -> list[Path]:
    """Find entries for a date filter or the current week."""
    journal: JournalStore = get_journal(config, explicit_path)
    query = build_query(day=day, month=month, year=year, week=week, now=now)
    return journal.find(query)


def format_paths(entries: list[Path]) -> str:
    return "\n".join(str(p) for p in entries)


def format_json(entries: list[Path]) -> str:
    return json.dumps([str(p) for p in entries])


def iter_contents(entries: list[Path]):
    """Yield (path, text, error) for each entry; error is set when unreadable."""
    for path in entries:
        try:
            yield path, path.read_text(), None
        except (OSError, UnicodeDecodeError) as e:
            logger.debug(f"Failed to read {path}: {e}")
            yield path, None, e
