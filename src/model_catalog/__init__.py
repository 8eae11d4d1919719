"""Model catalog: resolve usable AI models per provider with pricing metadata."""
from __future__ import annotations

__version__ = "0.1.0"

# Types
from model_catalog.types.enums import ModelCategory, ProviderId, Tier
from model_catalog.types.config import CatalogConfig
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

# Errors
from model_catalog.errors import (
    CatalogError,
    FetchError,
    TransportError,
    RequestTimeoutError,
    ResponseParseError,
    ConfigurationError,
    UnsupportedEndpointError,
    EmptyResultError,
    ProviderError,
    AuthenticationError,
    AccessDeniedError,
    NotFoundError,
    RateLimitError,
    ServerError,
    CredentialMissingError,
    CatalogUnavailableError,
)

# Core
from model_catalog.cache import ResultCache, fingerprint
from model_catalog.catalog import CatalogStore
from model_catalog.enrich import merge
from model_catalog.sanitize import sanitize_model_selection, sanitize_request
from model_catalog.service import ModelCatalogService

# Static tables
from model_catalog.defaults import (
    ALLOWED_MODELS,
    DEFAULT_MODELS,
    DEFAULT_PROVIDER,
    MODEL_CATEGORIES,
    PROVIDER_CONFIGS,
    static_models,
)

# Request parameters
from model_catalog.params import get_model_params, get_token_limit_param

__all__ = [
    "__version__",
    # Enums
    "ModelCategory",
    "ProviderId",
    "Tier",
    # Types
    "CacheEntry",
    "CapabilitySet",
    "CatalogConfig",
    "CatalogEntry",
    "CatalogSnapshot",
    "FetchOptions",
    "Model",
    "Pricing",
    "ProviderCatalog",
    "ResolveRequest",
    "ResolveResult",
    "SanitizeRequest",
    # Errors
    "CatalogError",
    "FetchError",
    "TransportError",
    "RequestTimeoutError",
    "ResponseParseError",
    "ConfigurationError",
    "UnsupportedEndpointError",
    "EmptyResultError",
    "ProviderError",
    "AuthenticationError",
    "AccessDeniedError",
    "NotFoundError",
    "RateLimitError",
    "ServerError",
    "CredentialMissingError",
    "CatalogUnavailableError",
    # Core
    "CatalogStore",
    "ModelCatalogService",
    "ResultCache",
    "fingerprint",
    "merge",
    "sanitize_model_selection",
    "sanitize_request",
    # Static tables
    "ALLOWED_MODELS",
    "DEFAULT_MODELS",
    "DEFAULT_PROVIDER",
    "MODEL_CATEGORIES",
    "PROVIDER_CONFIGS",
    "static_models",
    # Request parameters
    "get_model_params",
    "get_token_limit_param",
]
