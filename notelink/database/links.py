"""CRUD operations for the entity_links table.

Links are directional (source mentions target). Rows are only written by
the link reconciler; the read helpers here back the CLI and backlink views.
"""

from __future__ import annotations

import sqlite3
from typing import cast

from ..models import Link
from ..services.stores import LinkStore
from .connection import DatabaseConnection
from .types import LinkDetail


def _row_to_link(row: sqlite3.Row) -> Link:
    return Link(
        source_entity_id=row["source_entity_id"],
        target_entity_id=row["target_entity_id"],
        snippet=row["snippet"],
        created_at=row["created_at"],
    )


class SQLiteLinkStore(LinkStore):
    """Mention links in the ``entity_links`` table."""

    def __init__(self, db: DatabaseConnection):
        self.db = db

    def list_outgoing(self, source_entity_id: str) -> list[Link]:
        with self.db.get_connection() as conn:
            cursor = conn.execute(
                "SELECT source_entity_id, target_entity_id, snippet, created_at "
                "FROM entity_links WHERE source_entity_id = ? "
                "ORDER BY created_at, rowid",
                (source_entity_id,),
            )
            return [_row_to_link(row) for row in cursor.fetchall()]

    def list_incoming(self, target_entity_id: str) -> list[Link]:
        """Backlinks: every link pointing at ``target_entity_id``."""
        with self.db.get_connection() as conn:
            cursor = conn.execute(
                "SELECT source_entity_id, target_entity_id, snippet, created_at "
                "FROM entity_links WHERE target_entity_id = ? "
                "ORDER BY created_at, rowid",
                (target_entity_id,),
            )
            return [_row_to_link(row) for row in cursor.fetchall()]

    def upsert(self, source_entity_id: str, target_entity_id: str, snippet: str | None) -> None:
        """Insert the link or refresh its snippet; ``created_at`` is kept."""
        with self.db.get_connection() as conn:
            conn.execute(
                "INSERT INTO entity_links (source_entity_id, target_entity_id, snippet) "
                "VALUES (?, ?, ?) "
                "ON CONFLICT (source_entity_id, target_entity_id) "
                "DO UPDATE SET snippet = excluded.snippet",
                (source_entity_id, target_entity_id, snippet),
            )

    def delete_if_exists(self, source_entity_id: str, target_entity_id: str) -> bool:
        with self.db.get_connection() as conn:
            cursor = conn.execute(
                "DELETE FROM entity_links WHERE source_entity_id = ? AND target_entity_id = ?",
                (source_entity_id, target_entity_id),
            )
            return cursor.rowcount > 0

    def get_link_details(self, entity_id: str) -> list[LinkDetail]:
        """Links in both directions for an entity, with endpoint titles."""
        with self.db.get_connection() as conn:
            cursor = conn.execute(
                "SELECT l.source_entity_id, s.title AS source_title, "
                "l.target_entity_id, t.title AS target_title, "
                "l.snippet, l.created_at "
                "FROM entity_links l "
                "JOIN entities s ON l.source_entity_id = s.id "
                "JOIN entities t ON l.target_entity_id = t.id "
                "WHERE l.source_entity_id = ? OR l.target_entity_id = ? "
                "ORDER BY l.created_at, l.rowid",
                (entity_id, entity_id),
            )
            return [cast(LinkDetail, dict(row)) for row in cursor.fetchall()]
