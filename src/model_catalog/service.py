"""Three-tier model resolution: provider API, universal catalog, static list."""
from __future__ import annotations

import logging
import time
from collections.abc import Mapping, Sequence
from concurrent.futures import ThreadPoolExecutor
from typing import Callable

import httpx

from model_catalog.cache import ResultCache
from model_catalog.catalog.store import CatalogStore
from model_catalog.defaults import (
    CATALOG_NAMESPACES,
    PROVIDER_CONFIGS,
    SELF_PRICED_PROVIDERS,
    parse_provider,
    static_models,
)
from model_catalog.enrich import merge
from model_catalog.errors import (
    CatalogUnavailableError,
    CredentialMissingError,
    EmptyResultError,
    FetchError,
    ResponseParseError,
    UnsupportedEndpointError,
)
from model_catalog.providers import FETCHERS, ModelFetcher, get_fetcher
from model_catalog.types.config import CatalogConfig
from model_catalog.types.enums import ProviderId, Tier
from model_catalog.types.models import Model
from model_catalog.types.request import FetchOptions, ResolveRequest, ResolveResult

logger = logging.getLogger(__name__)


class ModelCatalogService:
    """Resolve the usable models for a provider and credential.

    Resolution order:

    1. A fresh result-cache entry for ``(provider, fingerprint(credential))``.
    2. The provider's own listing API, enriched with catalog pricing.
    3. The universal catalog's models for the provider.
    4. The static built-in list.

    ``resolve`` never raises. A result with ``success=True`` and an
    ``error`` is usable but degraded; ``success=False`` only happens when
    every tier came up empty.
    """

    def __init__(
        self,
        config: CatalogConfig | None = None,
        *,
        store: CatalogStore | None = None,
        cache: ResultCache | None = None,
        fetchers: Mapping[ProviderId, ModelFetcher] | None = None,
        clock: Callable[[], float] = time.time,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self._config = config if config is not None else CatalogConfig()
        self._store = store if store is not None else CatalogStore(
            self._config.catalog_url,
            ttl=self._config.catalog_ttl,
            timeout=self._config.catalog_timeout,
            clock=clock,
            transport=transport,
        )
        self._cache = (
            cache if cache is not None else ResultCache(ttl=self._config.result_ttl, clock=clock)
        )
        if fetchers is None:
            fetchers = {p: get_fetcher(p, self._config, transport) for p in FETCHERS}
        self._fetchers = dict(fetchers)

    @classmethod
    def from_env(cls) -> ModelCatalogService:
        return cls(CatalogConfig.from_env())

    @property
    def store(self) -> CatalogStore:
        return self._store

    @property
    def cache(self) -> ResultCache:
        return self._cache

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def resolve(
        self,
        provider: str | ProviderId,
        credential: str = "",
        options: FetchOptions | None = None,
    ) -> ResolveResult:
        prov = parse_provider(provider)
        if prov is None:
            return ResolveResult(
                success=False,
                models=(),
                tier=Tier.STATIC,
                error=f"Unknown provider: {provider}",
            )

        try:
            if not credential or not credential.strip():
                return self._resolve_without_credential(prov)
            return self._resolve_with_credential(prov, credential, options or FetchOptions())
        except Exception as exc:
            logger.exception("Failed to fetch models for %s", prov)
            return self._static_result(prov, str(exc) or "Failed to fetch models")

    def resolve_request(self, request: ResolveRequest) -> ResolveResult:
        return self.resolve(request.provider, request.credential, request.options)

    def clear_cache(self, provider: str | ProviderId | None = None) -> int:
        """Invalidate cached results for *provider*, or for every provider."""
        if provider is None:
            return self._cache.invalidate()
        prov = parse_provider(provider)
        if prov is None:
            return 0
        return self._cache.invalidate(prov)

    def close(self) -> None:
        self._store.close()

    def __enter__(self) -> ModelCatalogService:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    # ------------------------------------------------------------------
    # Tiers
    # ------------------------------------------------------------------

    def _resolve_without_credential(self, provider: ProviderId) -> ResolveResult:
        self._store.ensure_fresh()
        models = self._store.provider_models(provider)
        if models:
            return ResolveResult(success=True, models=tuple(models), tier=Tier.CATALOG)
        missing = CredentialMissingError(
            f"API key is required to list {PROVIDER_CONFIGS[provider].display_name} models"
        )
        return self._static_result(provider, str(missing))

    def _resolve_with_credential(
        self,
        provider: ProviderId,
        credential: str,
        options: FetchOptions,
    ) -> ResolveResult:
        if not options.force_refresh:
            entry = self._cache.get(provider, credential)
            if entry is not None:
                return ResolveResult(
                    success=bool(entry.models),
                    models=entry.models,
                    tier=entry.tier,
                    error=entry.error,
                    cached_at=entry.fetched_at,
                )

        failure: FetchError | None = None
        models: list[Model] = []
        # The catalog refresh overlaps the provider call and is always
        # joined before anything reads the snapshot.
        with ThreadPoolExecutor(max_workers=1) as pool:
            refresh = None
            if provider in CATALOG_NAMESPACES and not self._store.is_fresh():
                refresh = pool.submit(self._store.ensure_fresh)
            try:
                models = self._fetch(provider, credential, options)
            except FetchError as exc:
                failure = exc
            if refresh is not None:
                refresh.result()

        if failure is None:
            if provider not in SELF_PRICED_PROVIDERS:
                models = merge(models, self._store.provider_catalog(provider), provider)
            tier, error = Tier.API, None
        else:
            models, tier, error = self._fallback(provider, failure)

        entry = self._cache.put(provider, credential, models, tier, error)
        return ResolveResult(
            success=bool(entry.models),
            models=entry.models,
            tier=entry.tier,
            error=entry.error,
        )

    def _fetch(
        self,
        provider: ProviderId,
        credential: str,
        options: FetchOptions,
    ) -> list[Model]:
        fetcher = self._fetchers.get(provider)
        if fetcher is None:
            raise FetchError(f"No model listing available for {provider}", provider=provider)
        try:
            models = fetcher.fetch(credential, options)
        except FetchError:
            raise
        except Exception as exc:
            # A listing in an unexpected shape is a parse failure of this tier.
            raise ResponseParseError(
                f"unexpected {provider} listing: {exc}", provider=provider, cause=exc
            ) from exc
        if not models:
            raise EmptyResultError(
                f"{PROVIDER_CONFIGS[provider].display_name} returned no usable models",
                provider=provider,
            )
        return models

    def _fallback(
        self,
        provider: ProviderId,
        failure: FetchError,
    ) -> tuple[Sequence[Model], Tier, str]:
        if isinstance(failure, UnsupportedEndpointError):
            logger.info("Provider listing unavailable for %s: %s", provider, failure)
        else:
            logger.warning(
                "Provider API failed for %s: %s. Falling back to models.dev", provider, failure
            )

        message = f"{PROVIDER_CONFIGS[provider].display_name} model listing failed: {failure}"
        models = self._store.provider_models(provider)
        if models:
            return models, Tier.CATALOG, message

        if provider in CATALOG_NAMESPACES and not self._store.snapshot.loaded:
            message = f"{message}; {CatalogUnavailableError('model catalog unavailable')}"
        return static_models(provider), Tier.STATIC, message

    def _static_result(self, provider: ProviderId, error: str) -> ResolveResult:
        models = static_models(provider)
        if not models:
            error = f"{error}; no built-in models for {provider}"
        return ResolveResult(
            success=bool(models),
            models=tuple(models),
            tier=Tier.STATIC,
            error=error,
        )
