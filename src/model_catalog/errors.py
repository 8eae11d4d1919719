"""Error hierarchy for model catalog resolution."""
from __future__ import annotations

from typing import Any


class CatalogError(Exception):
    """Base error for all model_catalog errors."""

    def __init__(self, message: str, *, cause: Exception | None = None) -> None:
        super().__init__(message)
        self.cause = cause


# ---------------------------------------------------------------------------
# Provider-tier failures
# ---------------------------------------------------------------------------


class FetchError(CatalogError):
    """A provider's model listing could not be used."""

    def __init__(
        self,
        message: str,
        *,
        provider: str = "",
        cause: Exception | None = None,
    ) -> None:
        super().__init__(message, cause=cause)
        self.provider = provider


class TransportError(FetchError):
    """A network-level error occurred."""


class RequestTimeoutError(TransportError):
    """A request timed out."""


class ResponseParseError(FetchError):
    """The response body was not in the expected shape."""


class ConfigurationError(FetchError):
    """A required provider option (such as an endpoint) is missing."""


class UnsupportedEndpointError(FetchError):
    """The provider's listing endpoint is not available for this deployment.

    This is an expected condition and routes straight to the next tier.
    """


class EmptyResultError(FetchError):
    """A tier returned zero usable models."""


class ProviderError(FetchError):
    """Error status returned by a provider API."""

    def __init__(
        self,
        message: str,
        *,
        provider: str = "",
        status_code: int | None = None,
        raw: dict[str, Any] | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(message, provider=provider, cause=cause)
        self.status_code = status_code
        self.raw = raw


class AuthenticationError(ProviderError):
    """Authentication failed (e.g. invalid API key)."""


class AccessDeniedError(ProviderError):
    """Access denied (e.g. insufficient permissions)."""


class NotFoundError(ProviderError):
    """The listing endpoint does not exist."""


class RateLimitError(ProviderError):
    """Rate limit exceeded."""


class ServerError(ProviderError):
    """Server-side error from the provider."""


# ---------------------------------------------------------------------------
# Non-provider conditions
# ---------------------------------------------------------------------------


class CredentialMissingError(CatalogError):
    """No credential was supplied, so only catalog data could be used."""


class CatalogUnavailableError(CatalogError):
    """The universal catalog has never loaded successfully."""


# ---------------------------------------------------------------------------
# Helper
# ---------------------------------------------------------------------------


def error_from_status_code(
    status_code: int,
    message: str,
    *,
    provider: str = "",
    raw: dict[str, Any] | None = None,
) -> ProviderError:
    """Map HTTP status code to the appropriate error type."""
    common = dict(provider=provider, status_code=status_code, raw=raw)

    if status_code == 401:
        return AuthenticationError(message, **common)
    if status_code == 403:
        return AccessDeniedError(message, **common)
    if status_code == 404:
        return NotFoundError(message, **common)
    if status_code == 429:
        return RateLimitError(message, **common)
    if 500 <= status_code <= 599:
        return ServerError(message, **common)
    return ProviderError(message, **common)
