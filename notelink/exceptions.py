"""Custom exception hierarchy for notelink.

Most bad input to the mention engine is a policy outcome, not an error: an
id mention that resolves to nothing or a note mentioning itself is simply
left out of the result. The exceptions below cover the remaining cases.

Exception Hierarchy:
    NotelinkError (base)
    ├── DatabaseError - SQLite/database operations
    │   └── DatabaseConnectionError
    ├── EntityNotFoundError
    ├── ValidationError - rejected at the store boundary
    │   └── InvalidEntityKindError
    └── ConfigurationError - environment/settings issues

Usage:
    from notelink.exceptions import EntityNotFoundError

    try:
        reconciler.reconcile(entity_id, content)
    except EntityNotFoundError as e:
        console.print(f"[red]{e}[/red]")
"""

from typing import Any, Optional


class NotelinkError(Exception):
    """Base exception for all notelink errors.

    Attributes:
        message: Human-readable error description
        context: Additional context about the error (e.g., IDs, paths)
        retryable: Whether this error might succeed on retry
    """

    def __init__(
        self,
        message: str,
        *,
        retryable: bool = False,
        **context: Any,
    ) -> None:
        self.message = message
        self.context = context
        self.retryable = retryable
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format the error message with context."""
        if self.context:
            context_str = ", ".join(f"{k}={v!r}" for k, v in self.context.items())
            return f"{self.message} ({context_str})"
        return self.message


# =============================================================================
# Database Errors
# =============================================================================


class DatabaseError(NotelinkError):
    """Base exception for database operations."""

    pass


class DatabaseConnectionError(DatabaseError):
    """Failed to connect to or access the database."""

    def __init__(
        self,
        message: str = "Database connection failed",
        *,
        path: Optional[str] = None,
        **context: Any,
    ) -> None:
        if path:
            context["path"] = path
        super().__init__(message, **context)


# =============================================================================
# Entity Errors
# =============================================================================


class EntityNotFoundError(NotelinkError):
    """Raised when an entity that must exist is missing."""

    def __init__(self, entity_id: str, **context: Any) -> None:
        self.entity_id = entity_id
        super().__init__("Entity not found", entity_id=entity_id, **context)


class ValidationError(NotelinkError):
    """Input rejected at the store boundary."""

    pass


class InvalidEntityKindError(ValidationError):
    """An entity kind outside the known set was given."""

    def __init__(self, kind: str, valid_kinds: Optional[list[str]] = None) -> None:
        self.kind = kind
        self.valid_kinds = valid_kinds or []
        message = f"Invalid entity kind: {kind}"
        if self.valid_kinds:
            message += f". Valid kinds: {', '.join(self.valid_kinds)}"
        super().__init__(message)


# =============================================================================
# Configuration Errors
# =============================================================================


class ConfigurationError(NotelinkError):
    """Invalid or missing configuration."""

    def __init__(
        self,
        message: str = "Invalid configuration",
        *,
        setting: Optional[str] = None,
        **context: Any,
    ) -> None:
        if setting:
            context["setting"] = setting
        super().__init__(message, **context)
