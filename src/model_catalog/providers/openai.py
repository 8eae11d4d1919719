"""OpenAI model listing."""
from __future__ import annotations

import httpx

from model_catalog._http import HttpClient
from model_catalog.providers._payload import by_id, records
from model_catalog.types.enums import ProviderId
from model_catalog.types.models import CapabilitySet, Model
from model_catalog.types.request import FetchOptions

CHAT_PREFIXES = ("gpt-4", "gpt-3.5", "gpt-5", "o1", "o3", "o4", "chatgpt-")
EXCLUDED_PREFIXES = (
    "text-embedding-",
    "whisper-",
    "tts-",
    "dall-e-",
    "omni-moderation-",
    "text-moderation-",
)


def is_chat_model(model_id: str) -> bool:
    lowered = model_id.lower()
    if lowered.startswith(EXCLUDED_PREFIXES):
        return False
    return lowered.startswith(CHAT_PREFIXES)


def has_vision(model_id: str) -> bool:
    return "4o" in model_id or "gpt-4" in model_id or "gpt-5" in model_id


class OpenAIFetcher:
    """Lists chat-capable models from ``GET /v1/models``. Sorted by id."""

    provider = ProviderId.OPENAI

    def __init__(
        self,
        base_url: str = "https://api.openai.com",
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
            resp = http.get("/v1/models")

        models = [
            Model(
                id=item["id"],
                display_name=item["id"],
                provider=self.provider,
                capabilities=CapabilitySet(chat=True, vision=has_vision(item["id"])),
            )
            for item in records(resp.body, "data", self.provider)
            if is_chat_model(item["id"])
        ]
        return by_id(models)
