"""Database migration system for notelink."""

import logging
import sqlite3
from typing import Callable

from ..models import EntityKind

logger = logging.getLogger(__name__)


def get_schema_version(conn: sqlite3.Connection) -> int:
    """Get the current schema version."""
    cursor = conn.cursor()
    cursor.execute(
        """
        CREATE TABLE IF NOT EXISTS schema_version (
            version INTEGER PRIMARY KEY,
            applied_at DATETIME DEFAULT CURRENT_TIMESTAMP
        )
    """
    )

    cursor.execute("SELECT MAX(version) FROM schema_version")
    result = cursor.fetchone()
    # -1 for a fresh database so migration 0 runs
    return result[0] if result[0] is not None else -1


def set_schema_version(conn: sqlite3.Connection, version: int):
    """Set the schema version."""
    conn.execute("INSERT INTO schema_version (version) VALUES (?)", (version,))


def migration_000_create_entities_table(conn: sqlite3.Connection):
    """Create the entities table.

    ``title_key`` holds the lower-cased title so case-insensitive lookups
    use the same folding as the mention parser and can be indexed.
    """
    kinds = ", ".join(f"'{kind.value}'" for kind in EntityKind)
    conn.execute(
        f"""
        CREATE TABLE IF NOT EXISTS entities (
            id TEXT PRIMARY KEY,
            scope_id TEXT NOT NULL,
            title TEXT NOT NULL,
            title_key TEXT NOT NULL,
            kind TEXT NOT NULL CHECK (kind IN ({kinds})),
            canvas_x REAL NOT NULL DEFAULT 0,
            canvas_y REAL NOT NULL DEFAULT 0,
            created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
        )
    """
    )
    conn.execute(
        "CREATE INDEX IF NOT EXISTS idx_entities_scope_title ON entities(scope_id, title_key)"
    )


def migration_001_create_entity_links_table(conn: sqlite3.Connection):
    """Create the entity_links table for mention links."""
    conn.execute(
        """
        CREATE TABLE IF NOT EXISTS entity_links (
            source_entity_id TEXT NOT NULL,
            target_entity_id TEXT NOT NULL,
            snippet TEXT,
            created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP,
            PRIMARY KEY (source_entity_id, target_entity_id),
            CHECK (source_entity_id != target_entity_id),
            FOREIGN KEY (source_entity_id) REFERENCES entities (id) ON DELETE CASCADE,
            FOREIGN KEY (target_entity_id) REFERENCES entities (id) ON DELETE CASCADE
        )
    """
    )
    conn.execute(
        "CREATE INDEX IF NOT EXISTS idx_entity_links_target ON entity_links(target_entity_id)"
    )


MIGRATIONS: list[tuple[int, str, Callable]] = [
    (0, "Create entities table", migration_000_create_entities_table),
    (1, "Create entity links table", migration_001_create_entity_links_table),
]


def run_migrations(conn: sqlite3.Connection) -> int:
    """Run all pending migrations on ``conn``. Returns the schema version."""
    current_version = get_schema_version(conn)

    for version, description, migration_func in MIGRATIONS:
        if version > current_version:
            logger.info("Running migration %d: %s", version, description)
            migration_func(conn)
            set_schema_version(conn, version)
            current_version = version

    return current_version
