"""Process-wide holder for the universal model catalog (models.dev)."""
from __future__ import annotations

import dataclasses
import logging
import threading
import time
from collections.abc import Mapping
from types import MappingProxyType
from typing import Any, Callable

import httpx

from model_catalog._http import HttpClient
from model_catalog.catalog.filters import catalog_models
from model_catalog.defaults import CATALOG_NAMESPACES
from model_catalog.errors import CatalogError
from model_catalog.types.config import MODELS_DEV_URL
from model_catalog.types.enums import ProviderId
from model_catalog.types.models import CatalogEntry, CatalogSnapshot, Model, ProviderCatalog

logger = logging.getLogger(__name__)


def parse_snapshot(
    body: Any,
    *,
    fetched_at: float,
    etag: str | None = None,
) -> CatalogSnapshot:
    """Build a snapshot from a models.dev ``api.json`` document.

    Malformed model records are skipped. Raises ``ValueError`` if the
    document itself is not a JSON object.
    """
    if not isinstance(body, Mapping):
        raise ValueError("catalog document is not a JSON object")

    data: dict[str, ProviderCatalog] = {}
    for namespace, raw_provider in body.items():
        if not isinstance(raw_provider, Mapping):
            continue
        raw_models = raw_provider.get("models")
        if not isinstance(raw_models, Mapping):
            raw_models = {}

        entries: dict[str, CatalogEntry] = {}
        for model_id, raw_model in raw_models.items():
            try:
                entries[model_id] = CatalogEntry.from_dict(model_id, raw_model)
            except ValueError as exc:
                logger.debug("Skipping catalog entry %s/%s: %s", namespace, model_id, exc)

        data[namespace] = ProviderCatalog(
            namespace=namespace,
            name=str(raw_provider.get("name") or namespace),
            models=MappingProxyType(entries),
        )

    return CatalogSnapshot(
        data=MappingProxyType(data),
        fetched_at=fetched_at,
        etag=etag,
        loaded=True,
    )


class CatalogStore:
    """Lazily refreshed, conditionally fetched catalog snapshot.

    The snapshot is only ever replaced as a whole, so readers holding a
    reference never see a partially updated catalog. Fetch failures keep
    the previous snapshot.
    """

    def __init__(
        self,
        url: str = MODELS_DEV_URL,
        ttl: float = 60 * 60,
        timeout: float = 15.0,
        *,
        clock: Callable[[], float] = time.time,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self._url = url
        self._ttl = ttl
        self._clock = clock
        self._http = HttpClient("", timeout=timeout, provider="models.dev", transport=transport)
        self._snapshot = CatalogSnapshot.empty()
        self._lock = threading.Lock()

    @property
    def snapshot(self) -> CatalogSnapshot:
        return self._snapshot

    def is_fresh(self) -> bool:
        snapshot = self._snapshot
        return snapshot.loaded and self._clock() - snapshot.fetched_at < self._ttl

    def ensure_fresh(self) -> bool:
        """Refresh the snapshot if it is older than the TTL.

        Sends the last entity tag so an unchanged catalog costs a ``304``.
        Never raises. Returns whether a loaded snapshot is available.
        """
        if self.is_fresh():
            return True

        snapshot = self._snapshot
        headers = {"If-None-Match": snapshot.etag} if snapshot.etag else {}
        try:
            resp = self._http.get(self._url, extra_headers=headers, accept=(304,))
        except CatalogError as exc:
            logger.warning("Failed to fetch model catalog: %s", exc)
            return self._snapshot.loaded

        if resp.status_code == 304:
            self._touch(snapshot)
            return self._snapshot.loaded

        try:
            fresh = parse_snapshot(
                resp.body,
                fetched_at=self._clock(),
                etag=resp.headers.get("etag"),
            )
        except ValueError as exc:
            logger.warning("Ignoring unparseable model catalog: %s", exc)
            return self._snapshot.loaded

        with self._lock:
            self._snapshot = fresh
        logger.info("Model catalog loaded: %d providers", len(fresh.data))
        return True

    def _touch(self, seen: CatalogSnapshot) -> None:
        # 304: same content, extend freshness only.
        with self._lock:
            current = self._snapshot
            if not current.loaded or current.etag != seen.etag:
                return
            self._snapshot = dataclasses.replace(
                current, fetched_at=max(current.fetched_at, self._clock())
            )

    def provider_catalog(self, provider: ProviderId) -> ProviderCatalog | None:
        namespace = CATALOG_NAMESPACES.get(provider)
        if not namespace:
            return None
        return self._snapshot.provider(namespace)

    def provider_models(self, provider: ProviderId) -> list[Model]:
        """Eligible catalog models for *provider*, sorted by display name."""
        return catalog_models(self.provider_catalog(provider), provider)

    def close(self) -> None:
        self._http.close()
