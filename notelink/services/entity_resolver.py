"""Resolve parsed mentions to canonical entities.

Id mentions must point at an existing entity in the same scope. Title
mentions match case-insensitively and fall back to creating a stub entity
with the mentioned title.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from ..config.constants import STUB_OFFSET_STEP, STUB_OFFSET_X, STUB_OFFSET_Y
from ..models import DEFAULT_STUB_KIND, Position
from .mention_parser import Mention, MentionKind
from .stores import EntityStore

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ResolutionResult:
    """The entity a mention points at."""

    target_entity_id: str
    title: str
    created: bool

    def is_self(self, source_entity_id: str) -> bool:
        return self.target_entity_id == source_entity_id


def stub_position(base: Position, ordinal: int) -> Position:
    """Place the ``ordinal``-th stub from one note beside its source entity."""
    step = STUB_OFFSET_STEP * ordinal
    return Position(base.x + STUB_OFFSET_X + step, base.y + STUB_OFFSET_Y + step)


class EntityResolver:
    """Maps mentions to entity ids within a single scope."""

    def __init__(self, entity_store: EntityStore):
        self.entity_store = entity_store

    def resolve(
        self,
        mention: Mention,
        scope_id: str,
        source_entity_id: str,
        position_hint: Position,
    ) -> ResolutionResult | None:
        """Resolve ``mention`` inside ``scope_id``.

        Args:
            mention: The parsed mention.
            scope_id: Scope of the note being processed; nothing outside it
                is ever returned or created.
            source_entity_id: The entity whose note contains the mention.
                Only used for logging here; callers drop self-resolutions.
            position_hint: Where to place a stub if one has to be created.

        Returns:
            A ResolutionResult, or None when an id mention matches nothing in scope.
        """
        if mention.kind is MentionKind.BY_ID:
            entity = self.entity_store.find_by_id(scope_id, mention.value)
            if entity is None:
                logger.debug(
                    "Id mention %r from %s matches nothing in scope %s",
                    mention.value,
                    source_entity_id,
                    scope_id,
                )
                return None
            return ResolutionResult(entity.id, entity.title, created=False)

        entity = self.entity_store.find_by_title_ci(scope_id, mention.value)
        if entity is not None:
            return ResolutionResult(entity.id, entity.title, created=False)

        entity = self.entity_store.create(scope_id, mention.value, DEFAULT_STUB_KIND, position_hint)
        logger.info(
            "Created stub %s %r in scope %s (mentioned by %s)",
            entity.kind.value,
            entity.title,
            scope_id,
            source_entity_id,
        )
        return ResolutionResult(entity.id, entity.title, created=True)
