"""Short-lived memo of resolved model lists, keyed per credential."""
from __future__ import annotations

import hashlib
import logging
import threading
import time
from collections.abc import Sequence
from typing import Callable

from model_catalog.types.enums import ProviderId, Tier
from model_catalog.types.models import CacheEntry, Model

logger = logging.getLogger(__name__)

CacheKey = tuple[str, str]


def fingerprint(credential: str) -> str:
    """Return a non-reversible fingerprint of *credential*.

    Raw credentials are never stored as cache keys.
    """
    return hashlib.sha256(credential.strip().encode("utf-8")).hexdigest()[:16]


class ResultCache:
    """TTL cache of :class:`CacheEntry` objects.

    Entries are evaluated for expiry lazily on read; an expired entry is
    dropped and reported as absent. Writes replace entries wholesale and
    never move a key's ``fetched_at`` backwards.
    """

    def __init__(
        self,
        ttl: float = 5 * 60,
        *,
        clock: Callable[[], float] = time.time,
    ) -> None:
        self._ttl = ttl
        self._clock = clock
        self._entries: dict[CacheKey, CacheEntry] = {}
        self._lock = threading.Lock()

    @staticmethod
    def key(provider: ProviderId, credential: str) -> CacheKey:
        return (str(provider), fingerprint(credential))

    def get(self, provider: ProviderId, credential: str) -> CacheEntry | None:
        key = self.key(provider, credential)
        entry = self._entries.get(key)
        if entry is None:
            return None
        if self._clock() - entry.fetched_at >= self._ttl:
            with self._lock:
                if self._entries.get(key) is entry:
                    del self._entries[key]
            return None
        logger.debug("Result cache hit for %s", provider)
        return entry

    def put(
        self,
        provider: ProviderId,
        credential: str,
        models: Sequence[Model],
        tier: Tier,
        error: str | None = None,
    ) -> CacheEntry:
        """Store a resolution result and return the entry now in effect."""
        key = self.key(provider, credential)
        entry = CacheEntry(
            models=tuple(models),
            fetched_at=self._clock(),
            tier=tier,
            error=error,
        )
        with self._lock:
            current = self._entries.get(key)
            if current is not None and current.fetched_at > entry.fetched_at:
                return current
            self._entries[key] = entry
        return entry

    def invalidate(self, provider: ProviderId | None = None) -> int:
        """Drop entries for *provider*, or all entries. Returns the count removed."""
        with self._lock:
            if provider is None:
                removed = len(self._entries)
                self._entries.clear()
                return removed
            keys = [k for k in self._entries if k[0] == str(provider)]
            for k in keys:
                del self._entries[k]
            return len(keys)

    def __len__(self) -> int:
        return len(self._entries)
