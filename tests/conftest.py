"""Shared pytest fixtures for notelink tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from notelink.database import DatabaseConnection, SQLiteEntityStore, SQLiteLinkStore
from notelink.models import Entity, EntityKind, Position
from notelink.services.link_reconciler import LinkReconciler


@pytest.fixture(autouse=True)
def isolate_test_database(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point NOTELINK_DB at a per-test file so nothing touches ~/.config."""
    db_path = tmp_path / "notelink-test.db"
    monkeypatch.setenv("NOTELINK_DB", str(db_path))
    monkeypatch.delenv("NOTELINK_SNIPPET_WORDS", raising=False)
    monkeypatch.delenv("NOTELINK_LOG_LEVEL", raising=False)
    return db_path


@pytest.fixture
def database(isolate_test_database: Path) -> DatabaseConnection:
    db = DatabaseConnection(isolate_test_database)
    db.ensure_schema()
    return db


@pytest.fixture
def entity_store(database: DatabaseConnection) -> SQLiteEntityStore:
    return SQLiteEntityStore(database)


@pytest.fixture
def link_store(database: DatabaseConnection) -> SQLiteLinkStore:
    return SQLiteLinkStore(database)


@pytest.fixture
def reconciler(
    database: DatabaseConnection,
    entity_store: SQLiteEntityStore,
    link_store: SQLiteLinkStore,
) -> LinkReconciler:
    return LinkReconciler(entity_store, link_store, transaction=database.transaction)


@pytest.fixture
def make_entity(entity_store: SQLiteEntityStore):
    """Factory creating entities in the default test scope."""

    def _make(
        title: str,
        scope_id: str = "canvas-1",
        kind: EntityKind | str = EntityKind.PERSON,
        position: Position = Position(),
    ) -> Entity:
        return entity_store.create(scope_id, title, kind, position)

    return _make
