"""Entry title handling and file template."""

from datetime import date

from .errors import InvalidTitleError
from .paths import ENTRY_SUFFIX


def strip_title(title: str) -> str:
    """Validate a title and return it without its .md suffix."""
    if not title.endswith(ENTRY_SUFFIX):
        raise InvalidTitleError(title)
    return title.removesuffix(ENTRY_SUFFIX)


def render_entry(title: str, when: date, note: str = "") -> str:
    """Render the markdown written to a new entry file."""
    return f"# {title}\n\nDate: {when.day:02d}-{when.month:02d}-{when.year}\n\n{note}\n"
