"""Service modules for notelink."""

from .entity_resolver import EntityResolver, ResolutionResult, stub_position
from .link_reconciler import LinkReconciler, ReconcileStats
from .mention_parser import (
    Mention,
    MentionKind,
    PositionedMention,
    first_occurrences,
    parse_mentions,
    parse_mentions_with_positions,
)
from .snippet import extract_snippet
from .stores import EntityStore, LinkStore

__all__ = [
    "EntityResolver",
    "EntityStore",
    "LinkReconciler",
    "LinkStore",
    "Mention",
    "MentionKind",
    "PositionedMention",
    "ReconcileStats",
    "ResolutionResult",
    "extract_snippet",
    "first_occurrences",
    "parse_mentions",
    "parse_mentions_with_positions",
    "stub_position",
]
