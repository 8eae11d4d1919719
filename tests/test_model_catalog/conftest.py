from __future__ import annotations

import json
from typing import Any, Callable

import httpx
import pytest

from model_catalog.service import ModelCatalogService

CATALOG_HOST = "models.dev"

Handler = Callable[[httpx.Request], httpx.Response]


class FakeClock:
    """Controllable replacement for ``time.time``."""

    def __init__(self, now: float = 1_700_000_000.0) -> None:
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class Router:
    """Mock transport that dispatches by host and records every request."""

    def __init__(self) -> None:
        self.routes: dict[str, Handler] = {}
        self.requests: list[httpx.Request] = []

    def add(self, host: str, handler: Handler) -> None:
        self.routes[host] = handler

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        handler = self.routes.get(request.url.host)
        if handler is None:
            raise httpx.ConnectError(f"no route to {request.url.host}", request=request)
        return handler(request)

    def count(self, host: str) -> int:
        return sum(1 for r in self.requests if r.url.host == host)

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self)


def catalog_model(
    model_id: str,
    name: str | None = None,
    *,
    cost: dict[str, Any] | None = None,
    context: int = 128_000,
    output: int = 16_384,
    inputs: tuple[str, ...] = ("text",),
    status: str | None = None,
) -> dict[str, Any]:
    record: dict[str, Any] = {
        "id": model_id,
        "name": name or model_id,
        "cost": cost if cost is not None else {"input": 1.0, "output": 2.0},
        "limit": {"context": context, "output": output},
        "modalities": {"input": list(inputs), "output": ["text"]},
    }
    if status is not None:
        record["status"] = status
    return record


def catalog_document() -> dict[str, Any]:
    return {
        "openai": {
            "id": "openai",
            "name": "OpenAI",
            "models": {
                "gpt-4o": catalog_model(
                    "gpt-4o",
                    "GPT-4o",
                    cost={"input": 2.5, "output": 10.0, "cache_read": 1.25},
                    inputs=("text", "image"),
                ),
                "gpt-4o-mini": catalog_model(
                    "gpt-4o-mini",
                    "GPT-4o mini",
                    cost={"input": 0.15, "output": 0.6},
                    inputs=("text", "image"),
                ),
                "o3": catalog_model("o3", "o3", cost={"input": 2.0, "output": 8.0}),
                "text-embedding-3-small": catalog_model(
                    "text-embedding-3-small",
                    cost={"input": 0.02, "output": 0},
                    output=0,
                ),
                "gpt-3.5-turbo": catalog_model("gpt-3.5-turbo", status="deprecated"),
                "tts-1": catalog_model("tts-1", cost={"input": 15.0, "output": 0}),
            },
        },
        "google": {
            "id": "google",
            "name": "Google",
            "models": {
                "gemini-2.5-pro": catalog_model("gemini-2.5-pro", "Gemini 2.5 Pro"),
                "gemini-2.5-flash": catalog_model("gemini-2.5-flash", "Gemini 2.5 Flash"),
            },
        },
        "anthropic": {
            "id": "anthropic",
            "name": "Anthropic",
            "models": {
                "claude-sonnet-4-5": catalog_model(
                    "claude-sonnet-4-5",
                    "Claude Sonnet 4.5",
                    cost={"input": 3.0, "output": 15.0},
                    inputs=("text", "image"),
                ),
            },
        },
        "azure": {
            "id": "azure",
            "name": "Azure",
            "models": {
                "gpt-4o": catalog_model("gpt-4o", "GPT-4o"),
                "gpt-4.1": catalog_model("gpt-4.1", "GPT-4.1"),
            },
        },
    }


def json_response(body: Any, status_code: int = 200, headers: dict[str, str] | None = None) -> httpx.Response:
    return httpx.Response(
        status_code=status_code,
        content=json.dumps(body).encode(),
        headers={"content-type": "application/json", **(headers or {})},
    )


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def router() -> Router:
    return Router()


@pytest.fixture
def catalog_doc() -> dict[str, Any]:
    return catalog_document()


@pytest.fixture
def serve_catalog(router: Router, catalog_doc: dict[str, Any]) -> Router:
    """Serve *catalog_doc* from models.dev with an ETag."""

    def handler(request: httpx.Request) -> httpx.Response:
        if request.headers.get("if-none-match") == '"v1"':
            return httpx.Response(304, headers={"etag": '"v1"'})
        return json_response(catalog_doc, headers={"etag": '"v1"'})

    router.add(CATALOG_HOST, handler)
    return router


@pytest.fixture
def service(router: Router, clock: FakeClock):
    svc = ModelCatalogService(clock=clock, transport=router.transport)
    yield svc
    svc.close()
