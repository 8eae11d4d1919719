"""OpenRouter model listing.

OpenRouter publishes its own prices, so its models are never enriched from
the universal catalog.
"""
from __future__ import annotations

from typing import Any

import httpx

from model_catalog._http import HttpClient
from model_catalog.providers._payload import by_display_name, records
from model_catalog.types.enums import ProviderId
from model_catalog.types.models import CapabilitySet, Model, Pricing
from model_catalog.types.request import FetchOptions

EXCLUDED_MARKERS = ("embedding", "tts", "whisper", "dall-e")
TOKENS_PER_MILLION = 1_000_000


def _per_million(value: Any) -> float | None:
    # OpenRouter quotes USD per token as strings; negative means "variable".
    if value is None:
        return None
    try:
        price = float(value)
    except (TypeError, ValueError):
        return None
    if price < 0:
        return None
    return price * TOKENS_PER_MILLION


def parse_pricing(raw: Any) -> Pricing | None:
    """Convert an OpenRouter ``pricing`` object to per-million pricing.

    Missing prompt or completion prices mean unknown pricing, not free.
    """
    if not isinstance(raw, dict):
        return None
    prompt = _per_million(raw.get("prompt"))
    completion = _per_million(raw.get("completion"))
    if prompt is None or completion is None:
        return None
    return Pricing(
        input_per_million=prompt,
        output_per_million=completion,
        cache_read_per_million=_per_million(raw.get("input_cache_read")),
        cache_write_per_million=_per_million(raw.get("input_cache_write")),
    )


def _to_model(item: dict[str, Any]) -> Model:
    context = item.get("context_length")
    architecture = item.get("architecture")
    modalities = architecture.get("input_modalities") if isinstance(architecture, dict) else None
    modalities = modalities if isinstance(modalities, list) else ()
    return Model(
        id=item["id"],
        display_name=item.get("name") or item["id"],
        provider=ProviderId.OPENROUTER,
        pricing=parse_pricing(item.get("pricing")),
        context_length=context if isinstance(context, int) and context > 0 else None,
        capabilities=CapabilitySet(
            chat=True,
            vision="image" in modalities,
            audio="audio" in modalities,
        ),
    )


class OpenRouterFetcher:
    """Lists models from ``GET /api/v1/models``. Sorted by display name."""

    provider = ProviderId.OPENROUTER

    def __init__(
        self,
        base_url: str = "https://openrouter.ai",
        timeout: float = 15.0,
        *,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._transport = transport

    def fetch(self, credential: str, options: FetchOptions | None = None) -> list[Model]:
        with HttpClient(
            self._base_url,
            headers={"authorization": f"Bearer {credential}"},
            timeout=self._timeout,
            provider=self.provider,
            transport=self._transport,
        ) as http:
            resp = http.get("/api/v1/models")

        models = [
            _to_model(item)
            for item in records(resp.body, "data", self.provider)
            if not any(marker in item["id"] for marker in EXCLUDED_MARKERS)
        ]
        return by_display_name(models)
