"""Model selection validation."""
from __future__ import annotations

import logging
from collections.abc import Sequence

from model_catalog.defaults import (
    ALLOWED_MODELS,
    DEFAULT_MODELS,
    DEFAULT_PROVIDER,
    OPEN_ENDED_PROVIDERS,
    parse_category,
    parse_provider,
)
from model_catalog.types.enums import ModelCategory, ProviderId
from model_catalog.types.request import SanitizeRequest

logger = logging.getLogger(__name__)


def sanitize_model_selection(
    chosen_id: str,
    provider: str | ProviderId,
    category: str | ModelCategory,
    dynamic_allow_list: Sequence[str] | None = None,
) -> str:
    """Return *chosen_id* if it is valid for *provider*, else the category default.

    A non-empty *dynamic_allow_list* (typically the ids of the last resolved
    model list) is checked first. Open-ended providers accept any non-blank
    id. Otherwise the id must appear in the provider's static allow-list.

    An unknown *provider* is treated as ``DEFAULT_PROVIDER``. Raises
    ``ValueError`` for an unknown *category*.
    """
    cat = parse_category(category)
    if cat is None:
        raise ValueError(f"Unknown model category: {category!r}")

    prov = parse_provider(provider)
    if prov is None:
        logger.warning("Unknown provider %r, using %s", provider, DEFAULT_PROVIDER)
        prov = DEFAULT_PROVIDER

    if dynamic_allow_list and chosen_id in dynamic_allow_list:
        return chosen_id

    if prov in OPEN_ENDED_PROVIDERS and chosen_id and chosen_id.strip():
        return chosen_id

    if chosen_id in ALLOWED_MODELS.get(prov, ()):
        return chosen_id

    fallback = DEFAULT_MODELS[prov].for_category(cat)
    logger.warning(
        "Invalid %s model specified for %s: %r. Using default model: %s",
        prov,
        cat,
        chosen_id,
        fallback,
    )
    return fallback


def sanitize_request(request: SanitizeRequest) -> str:
    """Apply :func:`sanitize_model_selection` to an inbound request."""
    return sanitize_model_selection(
        request.chosen_id,
        request.provider,
        request.category,
        request.dynamic_allow_list,
    )
