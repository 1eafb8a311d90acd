"""Mapping between calendar dates and the year/month directory tree.

Layout: ``root/YYYY/MM/DD-HHMMSS-<slug>.md``
"""

from datetime import datetime
from pathlib import Path

ENTRY_SUFFIX = ".md"


def month_dir(root: Path, year: int, month: int) -> Path:
    """Directory holding the entries for a given year and month."""
    return Path(root) / f"{year:04d}" / f"{month:02d}"


def target_dir(root: Path, when: datetime) -> Path:
    """Directory a new entry created at `when` belongs in."""
    return month_dir(root, when.year, when.month)


def is_valid_year_folder_name(name: str) -> bool:
    """True for exactly four decimal digits."""
    return len(name) == 4 and name.isascii() and name.isdigit()


def is_valid_month_folder_name(name: str) -> bool:
    """True for exactly two decimal digits in 01..12."""
    if len(name) != 2 or not (name.isascii() and name.isdigit()):
        return False
    return 1 <= int(name) <= 12


def day_prefix(day: int) -> str:
    return f"{day:02d}"


def entry_filename(when: datetime, slug: str) -> str:
    """Filename for an entry: DD-HHMMSS-<slug>.md, sorts chronologically within a month."""
    return (
        f"{when.day:02d}-{when.hour:02d}{when.minute:02d}{when.second:02d}"
        f"-{slug}{ENTRY_SUFFIX}"
    )


def is_entry_filename(name: str) -> bool:
    return name.endswith(ENTRY_SUFFIX)
