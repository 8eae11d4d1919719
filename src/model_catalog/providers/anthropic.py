"""Anthropic model listing."""
from __future__ import annotations

from typing import Any

import httpx

from model_catalog._http import HttpClient
from model_catalog.providers._payload import by_display_name, records
from model_catalog.types.enums import ProviderId
from model_catalog.types.models import CapabilitySet, Model
from model_catalog.types.request import FetchOptions

MAX_PAGES = 20


class AnthropicFetcher:
    """Lists models from ``GET /v1/models``. Sorted by display name."""

    provider = ProviderId.ANTHROPIC

    ANTHROPIC_VERSION = "2023-06-01"
    PAGE_LIMIT = 1000

    def __init__(
        self,
        base_url: str = "https://api.anthropic.com",
        timeout: float = 15.0,
        *,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._transport = transport

    def fetch(self, credential: str, options: FetchOptions | None = None) -> list[Model]:
        items: list[dict[str, Any]] = []
        with HttpClient(
            self._base_url,
            headers={
                "x-api-key": credential,
                "anthropic-version": self.ANTHROPIC_VERSION,
            },
            timeout=self._timeout,
            provider=self.provider,
            transport=self._transport,
        ) as http:
            params: dict[str, Any] = {"limit": self.PAGE_LIMIT}
            for _ in range(MAX_PAGES):
                resp = http.get("/v1/models", params=params)
                items.extend(records(resp.body, "data", self.provider))
                last_id = resp.body.get("last_id")
                if not resp.body.get("has_more") or not last_id:
                    break
                params = {"limit": self.PAGE_LIMIT, "after_id": last_id}

        models = [
            Model(
                id=item["id"],
                display_name=item.get("display_name") or item["id"],
                provider=self.provider,
                capabilities=CapabilitySet(chat=True),
            )
            for item in items
        ]
        return by_display_name(models)
