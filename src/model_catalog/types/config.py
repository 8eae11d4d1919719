"""Configuration types."""
from __future__ import annotations

import os
from dataclasses import dataclass

MODELS_DEV_URL = "https://models.dev/api.json"
DEFAULT_AZURE_API_VERSION = "2025-01-01-preview"


@dataclass(frozen=True)
class CatalogConfig:
    """TTL, timeout and endpoint settings for catalog resolution.

    All durations are in seconds.
    """

    catalog_url: str = MODELS_DEV_URL
    catalog_ttl: float = 60 * 60
    result_ttl: float = 5 * 60
    catalog_timeout: float = 15.0
    fetch_timeout: float = 15.0
    azure_api_version: str = DEFAULT_AZURE_API_VERSION

    @classmethod
    def from_env(cls) -> CatalogConfig:
        """Build a config from ``MODEL_CATALOG_*`` environment variables.

        Unset variables keep their defaults. Raises ``ValueError`` when a
        numeric variable cannot be parsed.
        """
        defaults = cls()
        return cls(
            catalog_url=os.environ.get("MODEL_CATALOG_URL", defaults.catalog_url),
            catalog_ttl=_env_float("MODEL_CATALOG_TTL", defaults.catalog_ttl),
            result_ttl=_env_float("MODEL_CATALOG_RESULT_TTL", defaults.result_ttl),
            catalog_timeout=_env_float("MODEL_CATALOG_TIMEOUT", defaults.catalog_timeout),
            fetch_timeout=_env_float("MODEL_CATALOG_FETCH_TIMEOUT", defaults.fetch_timeout),
            azure_api_version=os.environ.get(
                "AZURE_OPENAI_API_VERSION", defaults.azure_api_version
            ),
        )


def _env_float(name: str, default: float) -> float:
    raw = os.environ.get(name)
    if raw is None or not raw.strip():
        return default
    try:
        return float(raw)
    except ValueError as exc:
        raise ValueError(f"{name} must be a number of seconds, got {raw!r}") from exc
