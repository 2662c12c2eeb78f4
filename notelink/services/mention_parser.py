"""@mention parsing for note content.

Three forms are recognised, tried in this order at each position so the
more specific one wins:

    @{entity-id}          explicit id reference
    @[Multi Word Title]   bracketed title
    @SingleWord           bare title (word characters and hyphens)

Titles compare case-insensitively, ids compare exactly.
"""

from __future__ import annotations

import re
from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum


class MentionKind(str, Enum):
    """How a mention names its target."""

    BY_ID = "id"
    BY_TITLE = "title"


@dataclass(frozen=True)
class Mention:
    """A reference to another entity found in text."""

    kind: MentionKind
    value: str

    @property
    def key(self) -> tuple[MentionKind, str]:
        """Identity used to collapse repeated mentions of the same target."""
        if self.kind is MentionKind.BY_TITLE:
            return (self.kind, self.value.lower())
        return (self.kind, self.value)


@dataclass(frozen=True)
class PositionedMention(Mention):
    """A mention plus the half-open span it occupies in the source text."""

    start_index: int = 0
    end_index: int = 0

    def bare(self) -> Mention:
        return Mention(self.kind, self.value)


_MENTION_RE = re.compile(
    r"@\{(?P<id>[^}]+)\}"
    r"|@\[(?P<bracketed>[^\]]+)\]"
    r"|@(?P<word>[\w-]+)"
)


def _scan(text: str) -> Iterable[PositionedMention]:
    for match in _MENTION_RE.finditer(text):
        entity_id = match.group("id")
        if entity_id is not None:
            kind = MentionKind.BY_ID
            value = entity_id.strip()
        else:
            kind = MentionKind.BY_TITLE
            value = (match.group("bracketed") or match.group("word") or "").strip()

        # "@{ }" and "@[ ]" carry nothing to resolve
        if not value:
            continue

        yield PositionedMention(kind, value, match.start(), match.end())


def parse_mentions_with_positions(text: str) -> list[PositionedMention]:
    """Every mention occurrence in text order, repeats included."""
    return list(_scan(text))


def parse_mentions(text: str) -> list[Mention]:
    """Distinct mentions in first-occurrence order, without positions."""
    return [m.bare() for m in first_occurrences(_scan(text))]


def first_occurrences(mentions: Iterable[PositionedMention]) -> list[PositionedMention]:
    """Keep the earliest occurrence of each distinct mention, with its span."""
    seen: set[tuple[MentionKind, str]] = set()
    result: list[PositionedMention] = []
    for mention in mentions:
        if mention.key in seen:
            continue
        seen.add(mention.key)
        result.append(mention)
    return result
