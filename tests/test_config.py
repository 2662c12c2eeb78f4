"""Tests for notelink configuration and the exception hierarchy."""

from unittest.mock import patch

import pytest

from notelink.config import settings
from notelink.config.settings import (
    get_db_path,
    get_env_var,
    get_log_level,
    get_snippet_words,
    validate_all_env_vars,
    validate_env_var,
)
from notelink.exceptions import (
    ConfigurationError,
    DatabaseConnectionError,
    EntityNotFoundError,
    InvalidEntityKindError,
    NotelinkError,
    ValidationError,
)


class TestDbPath:
    """Test database path resolution."""

    def test_env_override(self, monkeypatch, tmp_path):
        monkeypatch.setenv("NOTELINK_DB", str(tmp_path / "custom.db"))
        assert get_db_path() == tmp_path / "custom.db"

    def test_default_creates_config_dir(self, monkeypatch, tmp_path):
        """Without NOTELINK_DB the database lives in the config directory."""
        monkeypatch.delenv("NOTELINK_DB")
        config_dir = tmp_path / ".config" / "notelink"
        with patch.object(settings, "NOTELINK_CONFIG_DIR", config_dir):
            db_path = get_db_path()

        assert db_path == config_dir / "notelink.db"
        assert config_dir.is_dir()


class TestEnvValidation:
    """Test environment variable validation."""

    def test_unknown_and_unset_are_valid(self):
        assert validate_env_var("SOMETHING_ELSE", "x") == (True, None)
        assert validate_env_var("NOTELINK_SNIPPET_WORDS", None) == (True, None)

    @pytest.mark.parametrize("value", ["0", "3", "25"])
    def test_snippet_words_accepts_non_negative_ints(self, value):
        assert validate_env_var("NOTELINK_SNIPPET_WORDS", value)[0]

    @pytest.mark.parametrize("value", ["-1", "ten", "2.5", ""])
    def test_snippet_words_rejects_bad_values(self, value):
        is_valid, error = validate_env_var("NOTELINK_SNIPPET_WORDS", value)
        assert not is_valid
        assert "NOTELINK_SNIPPET_WORDS" in error

    def test_log_level_is_case_insensitive(self):
        assert validate_env_var("NOTELINK_LOG_LEVEL", "debug")[0]
        assert not validate_env_var("NOTELINK_LOG_LEVEL", "chatty")[0]

    def test_validate_all_collects_errors(self, monkeypatch):
        monkeypatch.setenv("NOTELINK_SNIPPET_WORDS", "lots")
        monkeypatch.setenv("NOTELINK_LOG_LEVEL", "loud")
        assert len(validate_all_env_vars()) == 2

    def test_get_env_var_raises_configuration_error(self, monkeypatch):
        monkeypatch.setenv("NOTELINK_LOG_LEVEL", "loud")
        with pytest.raises(ConfigurationError) as excinfo:
            get_env_var("NOTELINK_LOG_LEVEL")
        assert excinfo.value.context["setting"] == "NOTELINK_LOG_LEVEL"

    def test_get_env_var_without_validation(self, monkeypatch):
        monkeypatch.setenv("NOTELINK_LOG_LEVEL", "loud")
        assert get_env_var("NOTELINK_LOG_LEVEL", validate=False) == "loud"

    def test_get_env_var_default(self):
        assert get_env_var("NOTELINK_LOG_LEVEL") == "WARNING"
        assert get_env_var("NOT_A_NOTELINK_VAR") is None


class TestTypedSettings:
    """Test the typed accessors built on get_env_var."""

    def test_snippet_words_default(self):
        assert get_snippet_words() == 10

    def test_snippet_words_from_env(self, monkeypatch):
        monkeypatch.setenv("NOTELINK_SNIPPET_WORDS", "4")
        assert get_snippet_words() == 4

    def test_snippet_words_invalid(self, monkeypatch):
        monkeypatch.setenv("NOTELINK_SNIPPET_WORDS", "-3")
        with pytest.raises(ConfigurationError):
            get_snippet_words()

    def test_log_level_upper_cased(self, monkeypatch):
        monkeypatch.setenv("NOTELINK_LOG_LEVEL", "info")
        assert get_log_level() == "INFO"


class TestExceptions:
    """Test exception messages and context."""

    def test_context_is_appended_to_message(self):
        error = NotelinkError("Something broke", entity_id="abc")
        assert str(error) == "Something broke (entity_id='abc')"
        assert not error.retryable

    def test_entity_not_found(self):
        error = EntityNotFoundError("abc")
        assert error.entity_id == "abc"
        assert str(error) == "Entity not found (entity_id='abc')"

    def test_invalid_kind_is_a_validation_error(self):
        error = InvalidEntityKindError("artifact", ["person", "place"])
        assert isinstance(error, ValidationError)
        assert str(error) == "Invalid entity kind: artifact. Valid kinds: person, place"

    def test_connection_error_records_path(self):
        error = DatabaseConnectionError(path="/tmp/x.db")
        assert error.context == {"path": "/tmp/x.db"}
        assert str(error).startswith("Database connection failed")

    def test_configuration_error_setting(self):
        error = ConfigurationError(setting="NOTELINK_DB")
        assert error.context == {"setting": "NOTELINK_DB"}

    def test_all_derive_from_base(self):
        for cls in (ConfigurationError, DatabaseConnectionError, ValidationError):
            assert issubclass(cls, NotelinkError)
