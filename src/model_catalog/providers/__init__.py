"""Provider-native model listing.

Each provider has one fetcher class exposing ``fetch(credential, options)``.
Fetchers are independent of one another and are selected through the
:data:`FETCHERS` table.
"""
from __future__ import annotations

from collections.abc import Callable, Mapping
from types import MappingProxyType
from typing import Protocol, runtime_checkable

import httpx

from model_catalog.providers.anthropic import AnthropicFetcher
from model_catalog.providers.azure import AzureOpenAIFetcher
from model_catalog.providers.gemini import GeminiFetcher
from model_catalog.providers.openai import OpenAIFetcher
from model_catalog.providers.openrouter import OpenRouterFetcher
from model_catalog.types.config import CatalogConfig
from model_catalog.types.enums import ProviderId
from model_catalog.types.models import Model
from model_catalog.types.request import FetchOptions


@runtime_checkable
class ModelFetcher(Protocol):
    """Protocol that every provider fetcher must satisfy."""

    provider: ProviderId

    def fetch(self, credential: str, options: FetchOptions | None = None) -> list[Model]:
        """Return the provider's usable models.

        Raises :class:`~model_catalog.errors.FetchError` on any failure.
        """
        ...


FetcherFactory = Callable[[CatalogConfig, httpx.BaseTransport | None], ModelFetcher]

FETCHERS: Mapping[ProviderId, FetcherFactory] = MappingProxyType({
    ProviderId.OPENAI: lambda cfg, transport: OpenAIFetcher(
        timeout=cfg.fetch_timeout, transport=transport
    ),
    ProviderId.GEMINI: lambda cfg, transport: GeminiFetcher(
        timeout=cfg.fetch_timeout, transport=transport
    ),
    ProviderId.ANTHROPIC: lambda cfg, transport: AnthropicFetcher(
        timeout=cfg.fetch_timeout, transport=transport
    ),
    ProviderId.AZURE_OPENAI: lambda cfg, transport: AzureOpenAIFetcher(
        timeout=cfg.fetch_timeout,
        api_version=cfg.azure_api_version,
        transport=transport,
    ),
    ProviderId.OPENROUTER: lambda cfg, transport: OpenRouterFetcher(
        timeout=cfg.fetch_timeout, transport=transport
    ),
})


def get_fetcher(
    provider: ProviderId,
    config: CatalogConfig | None = None,
    transport: httpx.BaseTransport | None = None,
) -> ModelFetcher:
    """Build the fetcher for *provider*. Raises ``KeyError`` if none exists."""
    return FETCHERS[provider](config or CatalogConfig(), transport)


__all__ = [
    "FETCHERS",
    "AnthropicFetcher",
    "AzureOpenAIFetcher",
    "GeminiFetcher",
    "ModelFetcher",
    "OpenAIFetcher",
    "OpenRouterFetcher",
    "get_fetcher",
]
