"""Knowledge base snapshot used as the fallback answer source."""

import asyncio
import logging
from typing import Callable, Iterable

from chat_engine.models import KnowledgeEntry

logger = logging.getLogger(__name__)

KnowledgeFetcher = Callable[[], Iterable[dict]]


class KnowledgeStore:
    """Fill-once cache around a blocking fetcher.

    The first ``load()`` fetches every entry; afterwards the cached snapshot is
    returned as is, including the empty snapshot left behind by a failed first
    fetch. ``refresh()`` is the only way to fetch again.
    """

    def __init__(self, fetch: KnowledgeFetcher):
        self._fetch = fetch
        self._entries: tuple[KnowledgeEntry, ...] = ()
        self._loaded = False

    @property
    def loaded(self) -> bool:
        return self._loaded

    async def load(self) -> tuple[KnowledgeEntry, ...]:
        if not self._loaded:
            # Concurrent first loads may both fetch; the snapshots are identical.
            self._entries = await self._fetch_entries() or ()
            self._loaded = True
        return self._entries

    async def refresh(self) -> tuple[KnowledgeEntry, ...]:
        """Fetch a new snapshot, keeping the current one if the fetch fails."""
        entries = await self._fetch_entries()
        if entries is None:
            logger.warning("Knowledge refresh failed; keeping %d cached entries", len(self._entries))
        else:
            self._entries = entries
            self._loaded = True
        return self._entries

    async def _fetch_entries(self) -> tuple[KnowledgeEntry, ...] | None:
        try:
            rows = await asyncio.to_thread(lambda: list(self._fetch() or []))
        except Exception as e:
            logger.exception("Failed to fetch knowledge entries: %s", e)
            return None
        entries = tuple(KnowledgeEntry.from_row(row) for row in rows)
        logger.info("Loaded %d knowledge entries", len(entries))
        return entries
