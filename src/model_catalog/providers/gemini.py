"""Gemini (Google Generative Language API) model listing."""
from __future__ import annotations

from typing import Any

import httpx

from model_catalog._http import HttpClient
from model_catalog.providers._payload import by_display_name, records
from model_catalog.types.enums import ProviderId
from model_catalog.types.models import CapabilitySet, Model
from model_catalog.types.request import FetchOptions

PAGE_SIZE = 1000
MAX_PAGES = 20


def _to_model(item: dict[str, Any]) -> Model:
    name = item["name"]
    model_id = name.removeprefix("models/")
    context = item.get("inputTokenLimit")
    return Model(
        id=model_id,
        display_name=item.get("displayName") or model_id,
        provider=ProviderId.GEMINI,
        context_length=context if isinstance(context, int) else None,
        capabilities=CapabilitySet(chat=True, vision="pro" in name or "flash" in name),
    )


def _generates_content(item: dict[str, Any]) -> bool:
    methods = item.get("supportedGenerationMethods") or ()
    return "generateContent" in methods and "gemini" in item["name"]


class GeminiFetcher:
    """Lists ``generateContent`` Gemini models. Sorted by display name.

    Follows ``nextPageToken`` so long listings are read in full.
    """

    provider = ProviderId.GEMINI

    def __init__(
        self,
        base_url: str = "https://generativelanguage.googleapis.com",
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
            # Header auth keeps the key out of URLs and error messages.
            headers={"x-goog-api-key": credential},
            timeout=self._timeout,
            provider=self.provider,
            transport=self._transport,
        ) as http:
            params: dict[str, Any] = {"pageSize": PAGE_SIZE}
            for _ in range(MAX_PAGES):
                resp = http.get("/v1beta/models", params=params)
                items.extend(records(resp.body, "models", self.provider, id_field="name"))
                token = resp.body.get("nextPageToken")
                if not token:
                    break
                params = {"pageSize": PAGE_SIZE, "pageToken": token}

        return by_display_name([_to_model(item) for item in items if _generates_content(item)])
