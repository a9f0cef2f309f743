"""Tests for atm/config/store.py - the atm.json file."""

import json

import pytest

from atm.config.store import DEFAULT_COMMIT_MESSAGE, AtmConfig, ConfigStore
from atm.exceptions import ConfigurationError, NotInitializedError


class TestAtmConfig:
    """Tests for the AtmConfig model."""

    def test_accepts_alias_and_field_name(self):
        """Should populate from the JSON key or the Python name."""
        assert AtmConfig.model_validate({"defaultCommitMessage": "x"}).default_commit_message == "x"
        assert AtmConfig(default_commit_message="y").default_commit_message == "y"

    def test_missing_message_is_none(self):
        assert AtmConfig.model_validate({}).default_commit_message is None


class TestConfigStore:
    """Tests for reading and writing atm.json."""

    def test_exists(self, tmp_path):
        store = ConfigStore(tmp_path)

        assert store.exists() is False
        (tmp_path / "atm.json").write_text("{}")
        assert store.exists() is True

    def test_directory_named_like_config_does_not_count(self, tmp_path):
        """Should only treat a regular file as the configuration."""
        (tmp_path / "atm.json").mkdir()

        assert ConfigStore(tmp_path).exists() is False

    def test_write_format(self, tmp_path):
        """Should write 2-space indented JSON with a trailing newline."""
        ConfigStore(tmp_path).write(AtmConfig(default_commit_message=DEFAULT_COMMIT_MESSAGE))

        assert (tmp_path / "atm.json").read_text() == '{\n  "defaultCommitMessage": "save"\n}\n'

    def test_write_then_read(self, tmp_path):
        store = ConfigStore(tmp_path)
        store.write(AtmConfig(default_commit_message="checkpoint"))

        assert store.read().default_commit_message == "checkpoint"

    def test_unknown_keys_ignored(self, tmp_path):
        """Should tolerate keys it does not know about."""
        (tmp_path / "atm.json").write_text(json.dumps({"defaultCommitMessage": "wip", "theme": "dark"}))

        assert ConfigStore(tmp_path).read().default_commit_message == "wip"

    def test_missing_file(self, tmp_path):
        with pytest.raises(NotInitializedError):
            ConfigStore(tmp_path).read()

    def test_invalid_json(self, tmp_path):
        (tmp_path / "atm.json").write_text('{"defaultCommitMessage": ')

        with pytest.raises(ConfigurationError, match="Invalid JSON"):
            ConfigStore(tmp_path).read()

    @pytest.mark.parametrize("content", ["[]", '"save"', "null"])
    def test_not_an_object(self, tmp_path, content):
        (tmp_path / "atm.json").write_text(content)

        with pytest.raises(ConfigurationError, match="must contain a JSON object"):
            ConfigStore(tmp_path).read()

    def test_non_string_message(self, tmp_path):
        (tmp_path / "atm.json").write_text(json.dumps({"defaultCommitMessage": ["a", "b"]}))

        with pytest.raises(ConfigurationError, match="Invalid configuration"):
            ConfigStore(tmp_path).read()

    def test_custom_filename(self, tmp_path):
        store = ConfigStore(tmp_path, ".atm.json")
        store.write(AtmConfig(default_commit_message="x"))

        assert store.path == tmp_path / ".atm.json"
        assert not (tmp_path / "atm.json").exists()
