"""
notelink - @mention resolution and link reconciliation for canvas notes
"""

from .services import (
    EntityResolver,
    EntityStore,
    LinkReconciler,
    LinkStore,
    Mention,
    MentionKind,
    PositionedMention,
    ResolutionResult,
    extract_snippet,
    parse_mentions,
    parse_mentions_with_positions,
)

__version__ = "0.1.0"

__all__ = [
    "EntityResolver",
    "EntityStore",
    "LinkReconciler",
    "LinkStore",
    "Mention",
    "MentionKind",
    "PositionedMention",
    "ResolutionResult",
    "__version__",
    "extract_snippet",
    "parse_mentions",
    "parse_mentions_with_positions",
]
