"""SQLite-backed entity store."""

from __future__ import annotations

import logging
import sqlite3
import uuid

from ..config.constants import DEFAULT_LIST_LIMIT
from ..exceptions import ValidationError
from ..models import Entity, EntityKind, Position
from ..services.stores import EntityStore
from .connection import DatabaseConnection

logger = logging.getLogger(__name__)

_ENTITY_COLUMNS = "id, scope_id, title, kind, canvas_x, canvas_y, created_at"


def _row_to_entity(row: sqlite3.Row) -> Entity:
    return Entity(
        id=row["id"],
        title=row["title"],
        kind=EntityKind(row["kind"]),
        scope_id=row["scope_id"],
        position=Position(row["canvas_x"], row["canvas_y"]),
        created_at=row["created_at"],
    )


class SQLiteEntityStore(EntityStore):
    """Entities in the ``entities`` table, one row per canvas item."""

    def __init__(self, db: DatabaseConnection):
        self.db = db

    def get(self, entity_id: str) -> Entity | None:
        with self.db.get_connection() as conn:
            row = conn.execute(
                f"SELECT {_ENTITY_COLUMNS} FROM entities WHERE id = ?",
                (entity_id,),
            ).fetchone()
        return _row_to_entity(row) if row else None

    def find_by_id(self, scope_id: str, entity_id: str) -> Entity | None:
        with self.db.get_connection() as conn:
            row = conn.execute(
                f"SELECT {_ENTITY_COLUMNS} FROM entities WHERE id = ? AND scope_id = ?",
                (entity_id, scope_id),
            ).fetchone()
        return _row_to_entity(row) if row else None

    def find_by_title_ci(self, scope_id: str, title: str) -> Entity | None:
        """Case-insensitive title lookup; the oldest entity wins on ties."""
        with self.db.get_connection() as conn:
            row = conn.execute(
                f"SELECT {_ENTITY_COLUMNS} FROM entities "
                "WHERE scope_id = ? AND title_key = ? "
                "ORDER BY created_at, rowid LIMIT 1",
                (scope_id, title.lower()),
            ).fetchone()
        return _row_to_entity(row) if row else None

    def create(
        self,
        scope_id: str,
        title: str,
        kind: EntityKind | str,
        position: Position = Position(),
    ) -> Entity:
        """Insert a new entity.

        Raises:
            ValidationError: If the title is blank or the scope is empty.
            InvalidEntityKindError: If ``kind`` is not an EntityKind.
        """
        kind = EntityKind.parse(kind)
        title = title.strip()
        if not title:
            raise ValidationError("Entity title must not be empty", scope_id=scope_id)
        if not scope_id:
            raise ValidationError("Entity scope must not be empty", title=title)

        entity_id = str(uuid.uuid4())
        with self.db.get_connection() as conn:
            conn.execute(
                "INSERT INTO entities "
                "(id, scope_id, title, title_key, kind, canvas_x, canvas_y) "
                "VALUES (?, ?, ?, ?, ?, ?, ?)",
                (
                    entity_id,
                    scope_id,
                    title,
                    title.lower(),
                    kind.value,
                    float(position.x),
                    float(position.y),
                ),
            )
            row = conn.execute(
                f"SELECT {_ENTITY_COLUMNS} FROM entities WHERE id = ?",
                (entity_id,),
            ).fetchone()

        logger.debug("Created entity %s %r in scope %s", entity_id, title, scope_id)
        return _row_to_entity(row)

    def delete(self, entity_id: str) -> bool:
        """Delete an entity; its links go with it. Returns True if deleted."""
        with self.db.get_connection() as conn:
            cursor = conn.execute("DELETE FROM entities WHERE id = ?", (entity_id,))
            return cursor.rowcount > 0

    def list_entities(
        self,
        scope_id: str | None = None,
        limit: int = DEFAULT_LIST_LIMIT,
    ) -> list[Entity]:
        """List entities, oldest first, optionally limited to one scope."""
        with self.db.get_connection() as conn:
            if scope_id is not None:
                cursor = conn.execute(
                    f"SELECT {_ENTITY_COLUMNS} FROM entities WHERE scope_id = ? "
                    "ORDER BY created_at, rowid LIMIT ?",
                    (scope_id, limit),
                )
            else:
                cursor = conn.execute(
                    f"SELECT {_ENTITY_COLUMNS} FROM entities ORDER BY created_at, rowid LIMIT ?",
                    (limit,),
                )
            return [_row_to_entity(row) for row in cursor.fetchall()]
