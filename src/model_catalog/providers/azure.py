"""Azure OpenAI model listing.

The ``/openai/models`` listing is not available on every Azure resource, so
failure here is routine: every error is reported as
:class:`~model_catalog.errors.UnsupportedEndpointError` and the caller falls
back to the universal catalog.
"""
from __future__ import annotations

import logging
from typing import Any

import httpx

from model_catalog._http import HttpClient
from model_catalog.errors import ConfigurationError, FetchError, UnsupportedEndpointError
from model_catalog.providers._payload import by_id, records
from model_catalog.providers.openai import has_vision
from model_catalog.types.config import DEFAULT_AZURE_API_VERSION
from model_catalog.types.enums import ProviderId
from model_catalog.types.models import CapabilitySet, Model
from model_catalog.types.request import FetchOptions

logger = logging.getLogger(__name__)


def _capabilities(item: dict[str, Any]) -> dict[str, Any]:
    caps = item.get("capabilities")
    return caps if isinstance(caps, dict) else {}


def _is_usable(item: dict[str, Any]) -> bool:
    caps = _capabilities(item)
    return bool(
        caps.get("chat_completion")
        or caps.get("inference")
        or item.get("status") == "succeeded"
    )


class AzureOpenAIFetcher:
    """Lists chat deployments of an Azure OpenAI resource. Sorted by id.

    Requires ``options.endpoint``; ``options.api_version`` defaults to the
    configured API version.
    """

    provider = ProviderId.AZURE_OPENAI

    def __init__(
        self,
        timeout: float = 15.0,
        api_version: str = DEFAULT_AZURE_API_VERSION,
        *,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self._timeout = timeout
        self._api_version = api_version
        self._transport = transport

    def fetch(self, credential: str, options: FetchOptions | None = None) -> list[Model]:
        options = options or FetchOptions()
        if not options.endpoint or not options.endpoint.strip():
            raise ConfigurationError(
                "Azure OpenAI requires an endpoint URL", provider=self.provider
            )

        endpoint = options.endpoint.strip().rstrip("/")
        version = options.api_version or self._api_version
        try:
            with HttpClient(
                endpoint,
                headers={"api-key": credential},
                timeout=self._timeout,
                provider=self.provider,
                transport=self._transport,
            ) as http:
                resp = http.get("/openai/models", params={"api-version": version})
            items = records(resp.body, "data", self.provider)
        except FetchError as exc:
            logger.info("Azure models list endpoint not available: %s", exc)
            raise UnsupportedEndpointError(
                f"Azure models list not available ({exc}), falling back to catalog",
                provider=self.provider,
                cause=exc,
            ) from exc

        models = [
            Model(
                id=item["id"],
                display_name=item["id"],
                provider=self.provider,
                capabilities=CapabilitySet(
                    chat=bool(_capabilities(item).get("chat_completion")),
                    vision=has_vision(item["id"]),
                ),
            )
            for item in items
            if _is_usable(item)
        ]
        if not models:
            raise UnsupportedEndpointError(
                "Azure models list returned no chat models, falling back to catalog",
                provider=self.provider,
            )
        return by_id(models)
