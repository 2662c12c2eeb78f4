"""
notelink database package

- connection: connection and transaction management
- migrations: schema migrations
- entities: SQLite entity store
- links: SQLite link store
"""

from __future__ import annotations

from ..config.settings import get_snippet_words
from ..services.link_reconciler import LinkReconciler
from .connection import DatabaseConnection
from .entities import SQLiteEntityStore
from .links import SQLiteLinkStore


def build_reconciler(db: DatabaseConnection | None = None) -> LinkReconciler:
    """Wire a reconciler to SQLite stores sharing one database.

    The schema is brought up to date first. Each reconcile pass runs in a
    single ``BEGIN IMMEDIATE`` transaction on ``db``.
    """
    db = db or DatabaseConnection()
    db.ensure_schema()
    return LinkReconciler(
        SQLiteEntityStore(db),
        SQLiteLinkStore(db),
        snippet_words=get_snippet_words(),
        transaction=db.transaction,
    )


__all__ = [
    "DatabaseConnection",
    "SQLiteEntityStore",
    "SQLiteLinkStore",
    "build_reconciler",
]
