"""Tests for date-to-path mapping."""

from datetime import datetime
from pathlib import Path

import pytest

from file_journal.core.paths import (
    day_prefix,
    entry_filename,
    is_entry_filename,
    is_valid_month_folder_name,
    is_valid_year_folder_name,
    month_dir,
    target_dir,
)


class TestFolderNames:
    @pytest.mark.parametrize("name", ["01", "06", "12"])
    def test_valid_months(self, name):
        assert is_valid_month_folder_name(name)

    @pytest.mark.parametrize("name", ["00", "13", "1", "001", "ab", "", "+1", "1 "])
    def test_invalid_months(self, name):
        assert not is_valid_month_folder_name(name)

    @pytest.mark.parametrize("name", ["2024", "2026", "1999", "0001"])
    def test_valid_years(self, name):
        assert is_valid_year_folder_name(name)

    @pytest.mark.parametrize("name", ["202", "20245", "abcd", "", "2a24", "-202"])
    def test_invalid_years(self, name):
        assert not is_valid_year_folder_name(name)


class TestTargetDir:
    def test_year_and_month_are_padded(self):
        root = Path("/journal")
        assert target_dir(root, datetime(2026, 2, 17, 8, 15, 3)) == Path("/journal/2026/02")

    def test_month_dir_from_numbers(self):
        assert month_dir(Path("j"), 987, 3) == Path("j/0987/03")


class TestEntryFilename:
    def test_format(self):
        when = datetime(2026, 2, 17, 8, 15, 3)
        assert entry_filename(when, "niet-lekker-geslapen") == "17-081503-niet-lekker-geslapen.md"

    def test_single_digit_day(self):
        when = datetime(2026, 3, 1, 23, 59, 59)
        assert entry_filename(when, "x") == "01-235959-x.md"

    def test_empty_slug(self):
        assert entry_filename(datetime(2026, 3, 1, 0, 0, 0), "") == "01-000000-.md"

    def test_day_prefix(self):
        assert day_prefix(7) == "07"
        assert day_prefix(17) == "17"

    def test_is_entry_filename(self):
        assert is_entry_filename("17-081503-note.md")
        assert not is_entry_filename("17-081503-note.txt")
