"""Data models for notelink.

- entities: Entity, Link, Position and the EntityKind enumeration
"""

from .entities import DEFAULT_STUB_KIND, Entity, EntityKind, Link, Position

__all__ = ["DEFAULT_STUB_KIND", "Entity", "EntityKind", "Link", "Position"]
