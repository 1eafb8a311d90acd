"""Configuration management for file-journal."""

import logging
import os
import tomllib
from dataclasses import dataclass
from pathlib import Path

from .core.errors import NoJournalRootError

logger = logging.getLogger(__name__)

LOCAL_CONFIG_FILE = Path(".file-journal.toml")
HOME_CONFIG_FILE = Path(
    os.environ.get(
        "FILE_JOURNAL_CONFIG",
        Path.home() / ".config" / "file-journal" / "config.toml",
    )
)


@dataclass
class Config:
    """file-journal configuration."""

    default_path: str = ""


def _read_config(path: Path) -> Config | None:
    try:
        data = tomllib.loads(path.read_text())
    except (OSError, tomllib.TOMLDecodeError) as e:
        logger.warning(f"Ignoring config {path}: {e}")
        return None

    default_path = data.get("default_path", "")
    if not isinstance(default_path, str):
        logger.warning(f"Ignoring non-string default_path in {path}")
        default_path = ""
    return Config(default_path=default_path)


def find_config_file(config_path: Path | str | None = None) -> Path | None:
    """
    Locate the config file.

    An explicit path is used as-is (None if missing). Otherwise
    ./.file-journal.toml, then the home config.
    """
    if config_path is not None:
        path = Path(config_path).expanduser()
        return path if path.exists() else None

    for candidate in (LOCAL_CONFIG_FILE, HOME_CONFIG_FILE):
        if candidate.exists():
            return candidate
    return None


def load_config(config_path: Path | str | None = None) -> Config | None:
    """Load configuration, or None if no usable config file is found."""
    path = find_config_file(config_path)
    if path is None:
        return None
    logger.debug(f"Loading config from {path}")
    return _read_config(path)


def _toml_string(value: str) -> str:
    escaped = value.replace("\\", "\\\\").replace('"', '\\"')
    for char, code in (("\n", "\\n"), ("\r", "\\r"), ("\t", "\\t")):
        escaped = escaped.replace(char, code)
    # Remaining control characters are not allowed raw in basic strings
    escaped = "".join(
        f"\\u{ord(c):04X}" if ord(c) < 0x20 or ord(c) == 0x7F else c for c in escaped
    )
    return f'"{escaped}"'


def save_config(config: Config, config_path: Path | str | None = None) -> Path:
    """Write configuration as TOML. Returns the file written."""
    path = Path(config_path).expanduser() if config_path else HOME_CONFIG_FILE
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(f"default_path = {_toml_string(config.default_path)}\n")
    return path


def resolve_journal_root(
    explicit: Path | str | None,
    config: Config | None,
    fallback: Path | None = None,
) -> Path:
    """Pick the journal root: explicit path, then config, then `fallback`."""
    if explicit:
        return Path(explicit).expanduser()
    if config and config.default_path:
        return Path(config.default_path).expanduser()
    if fallback is not None:
        return fallback
    raise NoJournalRootError()
