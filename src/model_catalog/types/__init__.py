"""Core types for the model catalog."""
from __future__ import annotations

from model_catalog.types.config import CatalogConfig
from model_catalog.types.enums import ModelCategory, ProviderId, Tier
from model_catalog.types.models import (
    CacheEntry,
    CapabilitySet,
    CatalogEntry,
    CatalogSnapshot,
    Model,
    Pricing,
    ProviderCatalog,
)
from model_catalog.types.request import (
    FetchOptions,
    ResolveRequest,
    ResolveResult,
    SanitizeRequest,
)

__all__ = [
    "CacheEntry",
    "CapabilitySet",
    "CatalogConfig",
    "CatalogEntry",
    "CatalogSnapshot",
    "FetchOptions",
    "Model",
    "ModelCategory",
    "Pricing",
    "ProviderCatalog",
    "ProviderId",
    "ResolveRequest",
    "ResolveResult",
    "SanitizeRequest",
    "Tier",
]
