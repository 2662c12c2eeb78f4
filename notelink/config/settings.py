"""Configuration utilities for notelink."""

import os
from pathlib import Path
from typing import List, Optional, Tuple

from ..exceptions import ConfigurationError
from .constants import (
    DEFAULT_DB_FILENAME,
    DEFAULT_SNIPPET_WORDS,
    ENV_VAR_DEFINITIONS,
    NOTELINK_CONFIG_DIR,
)


def get_db_path() -> Path:
    """Get the database path, respecting the NOTELINK_DB environment variable.

    Tests point NOTELINK_DB at a temp file so they never touch the real
    database.
    """
    override = os.environ.get("NOTELINK_DB")
    if override:
        return Path(override)

    NOTELINK_CONFIG_DIR.mkdir(parents=True, exist_ok=True)
    return NOTELINK_CONFIG_DIR / DEFAULT_DB_FILENAME


def validate_env_var(name: str, value: Optional[str]) -> Tuple[bool, Optional[str]]:
    """Validate a single environment variable value.

    Args:
        name: The environment variable name.
        value: The current value (or None if not set).

    Returns:
        Tuple of (is_valid, error_message).
    """
    if name not in ENV_VAR_DEFINITIONS:
        return True, None  # Unknown vars are always valid

    if value is None:
        return True, None

    definition = ENV_VAR_DEFINITIONS[name]

    if definition.get("integer"):
        try:
            number = int(value)
        except ValueError:
            return False, f"Invalid value '{value}' for {name}. Expected an integer"
        if number < 0:
            return False, f"Invalid value '{value}' for {name}. Must not be negative"
        return True, None

    valid_values = definition.get("valid_values")
    if valid_values is None:
        return True, None

    if value.lower() not in [v.lower() for v in valid_values]:
        return False, f"Invalid value '{value}' for {name}. Valid values: {valid_values}"

    return True, None


def validate_all_env_vars() -> List[str]:
    """Validate all notelink environment variables.

    Returns:
        List of error messages (empty if all valid).
    """
    errors = []
    for name in ENV_VAR_DEFINITIONS:
        is_valid, error = validate_env_var(name, os.environ.get(name))
        if not is_valid:
            errors.append(error)
    return errors


def get_env_var(name: str, validate: bool = True) -> Optional[str]:
    """Get an environment variable with optional validation.

    Args:
        name: The environment variable name.
        validate: Whether to validate the value against known definitions.

    Returns:
        The environment variable value, its default, or None.

    Raises:
        ConfigurationError: If validate=True and the value is invalid.
    """
    value = os.environ.get(name)

    if validate and value is not None:
        is_valid, error = validate_env_var(name, value)
        if not is_valid:
            raise ConfigurationError(error or "Invalid value", setting=name)

    if value is None and name in ENV_VAR_DEFINITIONS:
        return ENV_VAR_DEFINITIONS[name].get("default")

    return value


def get_snippet_words() -> int:
    """Words of context kept on each side of a mention."""
    value = get_env_var("NOTELINK_SNIPPET_WORDS")
    return int(value) if value is not None else DEFAULT_SNIPPET_WORDS


def get_log_level() -> str:
    """Configured log level name, upper-cased."""
    return (get_env_var("NOTELINK_LOG_LEVEL") or "WARNING").upper()

