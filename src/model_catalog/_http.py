"""HTTP client wrapper around httpx."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import httpx

from model_catalog.errors import (
    RequestTimeoutError,
    ResponseParseError,
    TransportError,
    error_from_status_code,
)


@dataclass(frozen=True)
class HttpResponse:
    """Parsed HTTP response."""

    status_code: int
    body: Any
    headers: dict[str, str]
    raw_text: str = ""


class HttpClient:
    """Thin wrapper around :mod:`httpx` that maps errors into model_catalog exceptions."""

    def __init__(
        self,
        base_url: str,
        headers: dict[str, str] | None = None,
        timeout: float = 15.0,
        *,
        provider: str = "",
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self._provider = provider
        self._client = httpx.Client(
            base_url=base_url,
            headers=headers or {},
            timeout=httpx.Timeout(timeout),
            transport=transport,
        )

    def get(
        self,
        path: str,
        params: dict[str, Any] | None = None,
        extra_headers: dict[str, str] | None = None,
        *,
        accept: tuple[int, ...] = (),
    ) -> HttpResponse:
        """Send a GET request and return the parsed response.

        Status codes listed in *accept* (e.g. ``304``) are returned with an
        empty body instead of raising. Any other non-2xx status raises a
        :class:`~model_catalog.errors.ProviderError`; transport failures raise
        :class:`~model_catalog.errors.TransportError`.
        """
        try:
            resp = self._client.get(path, params=params, headers=extra_headers or {})
        except httpx.TimeoutException as exc:
            raise RequestTimeoutError(
                str(exc) or "request timed out", provider=self._provider, cause=exc
            ) from exc
        except httpx.TransportError as exc:
            raise TransportError(
                str(exc) or type(exc).__name__, provider=self._provider, cause=exc
            ) from exc

        raw_text = resp.text
        hdrs = dict(resp.headers)

        if resp.status_code in accept:
            return HttpResponse(
                status_code=resp.status_code, body={}, headers=hdrs, raw_text=raw_text
            )

        if resp.status_code >= 300:
            try:
                body = resp.json()
            except ValueError:
                body = {}
            msg = raw_text
            if isinstance(body, dict) and isinstance(body.get("error"), dict):
                msg = body["error"].get("message", raw_text)
            raise error_from_status_code(
                resp.status_code,
                msg or f"HTTP {resp.status_code}",
                provider=self._provider,
                raw=body if isinstance(body, dict) else None,
            )

        try:
            body = resp.json()
        except ValueError as exc:
            raise ResponseParseError(
                f"response is not valid JSON: {exc}", provider=self._provider, cause=exc
            ) from exc

        return HttpResponse(
            status_code=resp.status_code,
            body=body,
            headers=hdrs,
            raw_text=raw_text,
        )

    def close(self) -> None:
        """Close the underlying httpx client."""
        self._client.close()

    def __enter__(self) -> HttpClient:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()
