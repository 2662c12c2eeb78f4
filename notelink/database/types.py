"""TypedDict definitions for the database layer."""

from __future__ import annotations

from datetime import datetime
from typing import TypedDict


class LinkDetail(TypedDict):
    """A link joined with the titles of both endpoints."""

    source_entity_id: str
    source_title: str
    target_entity_id: str
    target_title: str
    snippet: str | None
    created_at: datetime | None
