"""Keep an entity's outgoing links in step with the mentions in its note.

Each reconcile pass parses the current content, resolves every distinct
mention, upserts one link per resolved target and then deletes any stored
link whose target is no longer mentioned. Running it twice on the same
content leaves the link set unchanged.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable, Iterable
from contextlib import AbstractContextManager, nullcontext
from dataclasses import dataclass

from ..config.constants import DEFAULT_SNIPPET_WORDS
from ..exceptions import EntityNotFoundError
from ..models import Position
from .entity_resolver import EntityResolver, ResolutionResult, stub_position
from .mention_parser import first_occurrences, parse_mentions_with_positions
from .snippet import extract_snippet
from .stores import EntityStore, LinkStore

logger = logging.getLogger(__name__)

TransactionFactory = Callable[[], AbstractContextManager]


@dataclass
class ReconcileStats:
    """Counts from the most recent pass, for logging and the CLI."""

    mentions: int = 0
    links_written: int = 0
    stale_removed: int = 0
    stubs_created: int = 0


class LinkReconciler:
    """Makes the stored outgoing links of an entity match its note content.

    Passes in the same scope are serialized with a per-scope lock, and each
    pass runs inside ``transaction()`` when one is supplied, so the
    insert and stale-delete phases are applied together.
    """

    def __init__(
        self,
        entity_store: EntityStore,
        link_store: LinkStore,
        *,
        snippet_words: int = DEFAULT_SNIPPET_WORDS,
        transaction: TransactionFactory | None = None,
    ):
        self.entity_store = entity_store
        self.link_store = link_store
        self.resolver = EntityResolver(entity_store)
        self.snippet_words = snippet_words
        self._transaction = transaction or nullcontext
        self._scope_locks: dict[str, threading.Lock] = {}
        self._locks_guard = threading.Lock()
        self.last_stats = ReconcileStats()

    def _scope_lock(self, scope_id: str) -> threading.Lock:
        with self._locks_guard:
            lock = self._scope_locks.get(scope_id)
            if lock is None:
                lock = self._scope_locks[scope_id] = threading.Lock()
            return lock

    def reconcile(self, source_entity_id: str, content: str) -> list[ResolutionResult]:
        """Sync the outgoing links of ``source_entity_id`` with ``content``.

        Returns one result per distinct resolved mention, in the order the
        mentions first appear. Self-mentions and id mentions that match
        nothing are left out. Store errors propagate unchanged.

        Raises:
            EntityNotFoundError: If the source entity does not exist.
        """
        source = self.entity_store.get(source_entity_id)
        if source is None:
            raise EntityNotFoundError(source_entity_id)

        with self._scope_lock(source.scope_id), self._transaction():
            # Scope and stub base must come from the same snapshot as the writes
            source = self.entity_store.get(source_entity_id)
            if source is None:
                raise EntityNotFoundError(source_entity_id)
            return self._reconcile(source.id, source.scope_id, source.position, content)

    def _reconcile(
        self, source_id: str, scope_id: str, base_position: Position, content: str
    ) -> list[ResolutionResult]:
        stats = ReconcileStats()
        mentions = first_occurrences(parse_mentions_with_positions(content))
        stats.mentions = len(mentions)

        results: list[ResolutionResult] = []
        current_targets: set[str] = set()

        for ordinal, mention in enumerate(mentions):
            resolved = self.resolver.resolve(
                mention,
                scope_id,
                source_id,
                stub_position(base_position, ordinal),
            )
            if resolved is None:
                continue
            if resolved.created:
                stats.stubs_created += 1
            if resolved.is_self(source_id):
                logger.debug("Skipping self-mention %r in %s", mention.value, source_id)
                continue
            if resolved.target_entity_id in current_targets:
                # Another mention form already linked this target in this pass
                continue

            snippet = extract_snippet(
                content, mention.start_index, mention.end_index, self.snippet_words
            )
            self.link_store.upsert(source_id, resolved.target_entity_id, snippet)
            current_targets.add(resolved.target_entity_id)
            results.append(resolved)
            stats.links_written += 1

        for link in self.link_store.list_outgoing(source_id):
            if link.target_entity_id not in current_targets:
                if self.link_store.delete_if_exists(source_id, link.target_entity_id):
                    stats.stale_removed += 1

        self.last_stats = stats
        logger.info(
            "Reconciled %s: %d mention(s), %d link(s) written, %d stale removed, %d stub(s) created",
            source_id,
            stats.mentions,
            stats.links_written,
            stats.stale_removed,
            stats.stubs_created,
        )
        return results

    def reconcile_many(self, items: Iterable[tuple[str, str]]) -> dict[str, list[ResolutionResult]]:
        """Reconcile several ``(source_entity_id, content)`` pairs in order."""
        return {source_id: self.reconcile(source_id, content) for source_id, content in items}
