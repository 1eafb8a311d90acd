"""File-based journal storage adapter."""

import logging
import os
import stat
from datetime import datetime
from pathlib import Path

from file_journal.core.entry import render_entry, strip_title
from file_journal.core.errors import (
    DirectoryCreateError,
    DuplicateEntryError,
    FilesystemError,
    InvalidStructureError,
)
from file_journal.core.paths import (
    day_prefix,
    entry_filename,
    is_entry_filename,
    is_valid_month_folder_name,
    is_valid_year_folder_name,
    month_dir,
    target_dir,
)
from file_journal.core.query import ByDay, ByMonth, ByWeek, ByYear, Query, week_days
from file_journal.core.slug import slugify

logger = logging.getLogger(__name__)


def _stat(path: Path) -> os.stat_result | None:
    """Stat `path`, or None if it does not exist. Other failures are reported."""
    try:
        return path.stat()
    except (FileNotFoundError, NotADirectoryError):
        return None
    except OSError as e:
        raise FilesystemError(path, e) from e


class FileJournalStore:
    """
    File-based journal storage.

    Implements JournalStore protocol. Entries live in
    ``journal_dir/YYYY/MM/DD-HHMMSS-<slug>.md``. Nothing is cached;
    every call reads the tree fresh.
    """

    def __init__(self, journal_dir: Path | str):
        self.journal_dir = Path(journal_dir).expanduser()

    # ============== Directories ==============

    def resolve_directory(self, when: datetime) -> Path:
        """Ensure the year/month directory for `when` exists and is well-formed."""
        target = target_dir(self.journal_dir, when)

        if _stat(target) is None:
            logger.debug(f"Creating {target}")
            try:
                target.mkdir(parents=True, exist_ok=True)
            except OSError as e:
                raise DirectoryCreateError(target, e) from e

        # Checked on every call, including when the directory already existed
        if not is_valid_month_folder_name(target.name):
            raise InvalidStructureError(target.name, "month")
        if not is_valid_year_folder_name(target.parent.name):
            raise InvalidStructureError(target.parent.name, "year")

        return target

    # ============== Writing ==============

    def write(self, title: str, note: str = "", now: datetime | None = None) -> Path:
        """Create a new entry and return its path."""
        now = now or datetime.now()
        bare_title = strip_title(title)

        try:
            directory = self.resolve_directory(now)
        except (DirectoryCreateError, InvalidStructureError) as e:
            raise FilesystemError(target_dir(self.journal_dir, now), e) from e

        slug = slugify(bare_title)
        if not slug:
            logger.warning(f"Title '{title}' produced an empty slug")

        path = directory / entry_filename(now, slug)
        if _stat(path) is not None:
            raise DuplicateEntryError(path)

        content = render_entry(bare_title, now.date(), note)
        try:
            with path.open("x") as f:
                f.write(content)
        except FileExistsError:
            raise DuplicateEntryError(path)
        except OSError as e:
            raise FilesystemError(path, e) from e

        logger.debug(f"Wrote entry {path}")
        return path

    # ============== Queries ==============

    def _list_entries(self, directory: Path, prefix: str = "") -> list[Path]:
        """Entry files in one month directory. A missing directory has none."""
        info = _stat(directory)
        if info is None or not stat.S_ISDIR(info.st_mode):
            return []
        try:
            names = [p.name for p in directory.iterdir()]
        except OSError as e:
            raise FilesystemError(directory, e) from e
        return [
            directory / name
            for name in names
            if name.startswith(prefix) and is_entry_filename(name)
        ]

    def find_by_criteria(
        self,
        day: int | None = None,
        month: int | None = None,
        year: int | None = None,
        now: datetime | None = None,
    ) -> list[Path]:
        """Find entries for a day, month or year. Unset fields default to `now`."""
        now = now or datetime.now()
        target_year = year if year is not None else now.year
        target_month = month if month is not None else now.month

        if day is not None:
            entries = self._list_entries(
                month_dir(self.journal_dir, target_year, target_month), day_prefix(day)
            )
        elif month is not None:
            entries = self._list_entries(month_dir(self.journal_dir, target_year, target_month))
        elif year is not None:
            entries = []
            for m in range(1, 13):
                entries.extend(self._list_entries(month_dir(self.journal_dir, target_year, m)))
        else:
            entries = self._list_entries(
                month_dir(self.journal_dir, now.year, now.month), day_prefix(now.day)
            )

        return sorted(entries)

    def find_by_week(self, now: datetime | None = None) -> list[Path]:
        """Find entries from Monday through Sunday of the week containing `now`."""
        now = now or datetime.now()
        entries = []
        for year, month, day in week_days(now.date()):
            entries.extend(
                self._list_entries(month_dir(self.journal_dir, year, month), day_prefix(day))
            )
        return sorted(entries)

    def find(self, query: Query) -> list[Path]:
        """Resolve a query into sorted entry paths."""
        logger.debug(f"Resolving {query} under {self.journal_dir}")
        match query:
            case ByDay(day=day, month=month, year=year):
                return self.find_by_criteria(day=day, month=month, year=year)
            case ByMonth(month=month, year=year):
                return self.find_by_criteria(month=month, year=year)
            case ByYear(year=year):
                return self.find_by_criteria(year=year)
            case ByWeek(anchor=anchor):
                return self.find_by_week(datetime.combine(anchor, datetime.min.time()))
        raise TypeError(f"Unknown query: {query!r}")
