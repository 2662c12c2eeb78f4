"""Entity and link records shared by the stores and the services."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum

from ..exceptions import InvalidEntityKindError


class EntityKind(str, Enum):
    """Categories an entity on a canvas can belong to."""

    PERSON = "person"
    PLACE = "place"
    THING = "thing"
    SESSION = "session"
    EVENT = "event"

    @classmethod
    def parse(cls, value: str | EntityKind) -> EntityKind:
        """Coerce a string to a kind, rejecting anything outside the enum."""
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            raise InvalidEntityKindError(str(value), [k.value for k in cls]) from None


# Kind given to entities auto-created from an unknown title mention
DEFAULT_STUB_KIND = EntityKind.PERSON


@dataclass(frozen=True)
class Position:
    """Canvas coordinates."""

    x: float = 0.0
    y: float = 0.0


@dataclass(frozen=True)
class Entity:
    """A canonical, addressable thing that notes can mention."""

    id: str
    title: str
    kind: EntityKind
    scope_id: str
    position: Position = Position()
    created_at: datetime | None = None


@dataclass(frozen=True)
class Link:
    """A directed edge from the entity whose notes mention to the mentioned one."""

    source_entity_id: str
    target_entity_id: str
    snippet: str | None = None
    created_at: datetime | None = None
