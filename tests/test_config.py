"""Tests for config discovery, loading and journal root precedence."""

from pathlib import Path

import pytest

from file_journal import config as config_module
from file_journal.config import (
    Config,
    find_config_file,
    load_config,
    resolve_journal_root,
    save_config,
)
from file_journal.core.errors import NoJournalRootError


@pytest.fixture
def isolated(tmp_path, monkeypatch):
    """Run with an empty cwd and a home config location inside tmp_path."""
    cwd = tmp_path / "cwd"
    cwd.mkdir()
    monkeypatch.chdir(cwd)
    home_config = tmp_path / "home" / "config.toml"
    monkeypatch.setattr(config_module, "HOME_CONFIG_FILE", home_config)
    return cwd, home_config


class TestFindConfigFile:
    def test_nothing_found(self, isolated):
        assert find_config_file() is None

    def test_explicit_missing_does_not_fall_through(self, isolated, tmp_path):
        cwd, home_config = isolated
        home_config.parent.mkdir(parents=True)
        home_config.write_text('default_path = "/home"\n')
        assert find_config_file(tmp_path / "nope.toml") is None

    def test_local_before_home(self, isolated):
        cwd, home_config = isolated
        home_config.parent.mkdir(parents=True)
        home_config.write_text('default_path = "/home"\n')
        (cwd / ".file-journal.toml").write_text('default_path = "/local"\n')
        assert load_config().default_path == "/local"

    def test_home_config(self, isolated):
        _, home_config = isolated
        home_config.parent.mkdir(parents=True)
        home_config.write_text('default_path = "/home"\n')
        assert load_config().default_path == "/home"


class TestLoadConfig:
    def test_explicit_file(self, isolated, tmp_path):
        path = tmp_path / "custom.toml"
        path.write_text('default_path = "/Users/t/journal"\n')
        assert load_config(path) == Config(default_path="/Users/t/journal")

    def test_missing_key(self, isolated, tmp_path):
        path = tmp_path / "empty.toml"
        path.write_text("")
        assert load_config(path) == Config()

    def test_malformed_file_is_ignored(self, isolated, tmp_path, caplog):
        path = tmp_path / "bad.toml"
        path.write_text("default_path = \n")
        assert load_config(path) is None
        assert "Ignoring config" in caplog.text

    def test_wrong_type(self, isolated, tmp_path):
        path = tmp_path / "typed.toml"
        path.write_text("default_path = 42\n")
        assert load_config(path) == Config()


class TestSaveConfig:
    def test_control_characters_reload(self, tmp_path):
        path = tmp_path / "config.toml"
        value = "/j\x00\x01\x1b\x7f\tend"
        save_config(Config(default_path=value), path)
        assert "\\u001B" in path.read_text()
        assert load_config(path).default_path == value

    def test_writes_and_reloads(self, tmp_path):
        path = tmp_path / "nested" / "config.toml"
        written = save_config(Config(default_path='C:\\notes\\"mine"'), path)
        assert written == path
        assert load_config(path).default_path == 'C:\\notes\\"mine"'

    def test_defaults_to_home_config(self, isolated):
        _, home_config = isolated
        assert save_config(Config(default_path="/j")) == home_config
        assert home_config.read_text() == 'default_path = "/j"\n'


class TestResolveJournalRoot:
    def test_explicit_wins(self):
        root = resolve_journal_root("/explicit", Config(default_path="/config"), Path("/cwd"))
        assert root == Path("/explicit")

    def test_config_over_fallback(self):
        root = resolve_journal_root(None, Config(default_path="/config"), Path("/cwd"))
        assert root == Path("/config")

    def test_fallback(self):
        assert resolve_journal_root(None, None, Path("/cwd")) == Path("/cwd")

    def test_empty_config_uses_fallback(self):
        assert resolve_journal_root(None, Config(), Path("/cwd")) == Path("/cwd")

    def test_no_root(self):
        with pytest.raises(NoJournalRootError):
            resolve_journal_root(None, Config())

    def test_expands_user(self):
        root = resolve_journal_root(None, Config(default_path="~/journal"))
        assert root == Path.home() / "journal"
