"""Error taxonomy for journal operations."""

from pathlib import Path


class JournalError(Exception):
    """Base class for all journal errors."""

    pass


# ============== User errors ==============


class UserError(JournalError):
    """Caller input or environment the caller can correct."""

    pass


class InvalidTitleError(UserError):
    """Raised when an entry title does not end with .md."""

    def __init__(self, title: str):
        self.title = title
        super().__init__(f"Title must end with .md (got '{title}')")


class DuplicateEntryError(UserError):
    """Raised when the entry file for this second already exists."""

    def __init__(self, path: Path):
        self.path = path
        super().__init__(f"File '{path.name}' already exists")


class NoJournalRootError(UserError):
    """Raised when no journal path was given and none is configured."""

    def __init__(self):
        super().__init__("No journal path specified. Use --path or set up config with 'init'")


# ============== Storage errors ==============


class StorageError(JournalError):
    """Filesystem or on-disk structure failures."""

    pass


class DirectoryCreateError(StorageError):
    """Raised when the year/month directories cannot be created."""

    def __init__(self, path: Path, cause: OSError):
        self.path = path
        self.cause = cause
        super().__init__(f"Failed to create directories {path}: {cause}")


class InvalidStructureError(StorageError):
    """Raised when a resolved year or month folder has an invalid name."""

    def __init__(self, folder_name: str, kind: str = "folder"):
        self.folder_name = folder_name
        self.kind = kind
        super().__init__(f"Invalid {kind} folder: '{folder_name}'")


class FilesystemError(StorageError):
    """Raised on read/write/permission failures."""

    def __init__(self, path: Path, cause: Exception):
        self.path = path
        self.cause = cause
        super().__init__(f"{path}: {cause}")
