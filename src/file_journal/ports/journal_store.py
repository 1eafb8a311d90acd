"""Journal storage interface."""

from datetime import datetime
from pathlib import Path
from typing import Protocol

from file_journal.core.query import Query


class JournalStore(Protocol):
    """Interface for creating and finding journal entries."""

    def write(self, title: str, note: str = "", now: datetime | None = None) -> Path:
        """Create a new entry. Returns the path of the created file."""
        ...

    def find(self, query: Query) -> list[Path]:
        """Return entry paths matching a query, sorted by path."""
        ...
