"""Inbound request and outbound result types."""
from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from model_catalog.types.enums import Tier
from model_catalog.types.models import Model


@dataclass(frozen=True)
class FetchOptions:
    """Per-call options for a resolution."""

    endpoint: str | None = None
    api_version: str | None = None
    force_refresh: bool = False


@dataclass(frozen=True)
class ResolveRequest:
    """A request to list the models available for a provider."""

    provider: str
    credential: str = ""
    endpoint: str | None = None
    api_version: str | None = None
    force_refresh: bool = False

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> ResolveRequest:
        """Build a request from a JSON object.

        Accepts camelCase (``apiKey``, ``apiVersion``, ``forceRefresh``) as
        well as snake_case keys. Raises ``ValueError`` when ``provider`` is
        missing or ``forceRefresh`` is not a boolean.
        """
        provider = data.get("provider")
        if not isinstance(provider, str) or not provider:
            raise ValueError("provider is required")
        credential = _first(data, "credential", "apiKey", "api_key") or ""
        force_refresh = _first(data, "forceRefresh", "force_refresh")
        if force_refresh is not None and not isinstance(force_refresh, bool):
            raise ValueError("forceRefresh must be a boolean")
        return cls(
            provider=provider,
            credential=str(credential),
            endpoint=_first(data, "endpoint"),
            api_version=_first(data, "apiVersion", "api_version"),
            force_refresh=bool(force_refresh),
        )

    @property
    def options(self) -> FetchOptions:
        return FetchOptions(
            endpoint=self.endpoint,
            api_version=self.api_version,
            force_refresh=self.force_refresh,
        )


@dataclass(frozen=True)
class ResolveResult:
    """Outcome of a resolution.

    A non-``None`` ``error`` together with ``success=True`` means the models
    are usable but came from a fallback tier.
    """

    success: bool
    models: tuple[Model, ...]
    tier: Tier
    error: str | None = None
    cached_at: float | None = None

    @property
    def source(self) -> str:
        return self.tier.source

    @property
    def degraded(self) -> bool:
        return self.success and self.error is not None

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "success": self.success,
            "models": [m.to_dict() for m in self.models],
            "source": self.source,
        }
        if self.error is not None:
            data["error"] = self.error
        if self.cached_at is not None:
            data["cachedAt"] = self.cached_at
        return data


@dataclass(frozen=True)
class SanitizeRequest:
    """A request to validate a chosen model id."""

    chosen_id: str
    provider: str
    category: str
    dynamic_allow_list: tuple[str, ...] | None = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> SanitizeRequest:
        """Build a request from a JSON object. Raises ``ValueError`` on missing fields."""
        missing = [
            key
            for key, names in (
                ("chosenId", ("chosenId", "chosen_id", "model")),
                ("provider", ("provider",)),
                ("category", ("category",)),
            )
            if _first(data, *names) is None
        ]
        if missing:
            raise ValueError(f"missing field(s): {', '.join(missing)}")
        allow = _first(data, "dynamicAllowList", "dynamic_allow_list")
        if allow is not None and not isinstance(allow, (list, tuple)):
            raise ValueError("dynamicAllowList must be a list of model ids")
        return cls(
            chosen_id=str(_first(data, "chosenId", "chosen_id", "model")),
            provider=str(data["provider"]),
            category=str(data["category"]),
            dynamic_allow_list=tuple(str(a) for a in allow) if allow is not None else None,
        )


def _first(data: Mapping[str, Any], *keys: str) -> Any:
    for key in keys:
        if data.get(key) is not None:
            return data[key]
    return None
