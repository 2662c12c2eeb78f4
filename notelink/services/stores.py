"""Storage interfaces the mention engine depends on.

The engine never talks to a database directly. Callers hand it an
EntityStore and a LinkStore; notelink.database provides SQLite versions.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Sequence

from ..models import Entity, EntityKind, Link, Position


class EntityStore(ABC):
    """Lookup and creation of canonical entities, scoped to a workspace."""

    @abstractmethod
    def get(self, entity_id: str) -> Entity | None:
        """Fetch an entity by id regardless of scope."""
        pass

    @abstractmethod
    def find_by_id(self, scope_id: str, entity_id: str) -> Entity | None:
        """Fetch an entity by id, only if it belongs to ``scope_id``."""
        pass

    @abstractmethod
    def find_by_title_ci(self, scope_id: str, title: str) -> Entity | None:
        """Find an entity in ``scope_id`` whose title matches ignoring case."""
        pass

    @abstractmethod
    def create(
        self,
        scope_id: str,
        title: str,
        kind: EntityKind | str,
        position: Position,
    ) -> Entity:
        """Create a new entity and return it."""
        pass


class LinkStore(ABC):
    """Persisted directed edges between entities."""

    @abstractmethod
    def list_outgoing(self, source_entity_id: str) -> Sequence[Link]:
        """All links whose source is ``source_entity_id``."""
        pass

    @abstractmethod
    def upsert(self, source_entity_id: str, target_entity_id: str, snippet: str | None) -> None:
        """Insert the link, or refresh its snippet if the pair already exists."""
        pass

    @abstractmethod
    def delete_if_exists(self, source_entity_id: str, target_entity_id: str) -> bool:
        """Delete the link if present. Returns True if a row was removed."""
        pass
