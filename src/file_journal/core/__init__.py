"""Functional core - pure journal logic with no I/O."""

from .errors import (
    JournalError,
    UserError,
    InvalidTitleError,
    DuplicateEntryError,
    NoJournalRootError,
    StorageError,
    DirectoryCreateError,
    InvalidStructureError,
    FilesystemError,
)
from .paths import (
    target_dir,
    month_dir,
    entry_filename,
    is_valid_year_folder_name,
    is_valid_month_folder_name,
)
from .slug import slugify
from .entry import render_entry, strip_title
from .query import ByDay, ByMonth, ByYear, ByWeek, Query, build_query, week_days

__all__ = [
    # Errors
    "JournalError",
    "UserError",
    "InvalidTitleError",
    "DuplicateEntryError",
    "NoJournalRootError",
    "StorageError",
    "DirectoryCreateError",
    "InvalidStructureError",
    "FilesystemError",
    # Paths
    "target_dir",
    "month_dir",
    "entry_filename",
    "is_valid_year_folder_name",
    "is_valid_month_folder_name",
    # Entries
    "slugify",
    "render_entry",
    "strip_title",
    # Queries
    "ByDay",
    "ByMonth",
    "ByYear",
    "ByWeek",
    "Query",
    "build_query",
    "week_days",
]
