"""Merge provider-native model lists with universal-catalog metadata."""
from __future__ import annotations

import dataclasses
from collections.abc import Sequence

from model_catalog.catalog.filters import catalog_models
from model_catalog.types.enums import ProviderId
from model_catalog.types.models import (
    CapabilitySet,
    CatalogEntry,
    Model,
    Pricing,
    ProviderCatalog,
)


def merge(
    api_models: Sequence[Model],
    catalog: ProviderCatalog | None,
    provider: ProviderId | None = None,
) -> list[Model]:
    """Enrich *api_models* from *catalog* and append catalog-only models.

    Catalog data only fills gaps: an API-provided price or context length is
    never replaced, and capability flags can only be switched on. The result
    is the enriched API models in their original order followed by the
    eligible catalog models (display-name order) whose ids the API did not
    return. ``merge`` is pure and idempotent.

    *provider* labels the appended models; it defaults to the provider of
    the first API model.
    """
    if catalog is None:
        return list(api_models)

    enriched = [_enrich(model, catalog.models.get(model.id)) for model in api_models]
    if provider is None:
        if not api_models:
            return enriched
        provider = api_models[0].provider

    seen = {model.id for model in api_models}
    extra = [m for m in catalog_models(catalog, provider) if m.id not in seen]
    return enriched + extra


def _enrich(model: Model, entry: CatalogEntry | None) -> Model:
    if entry is None:
        return model

    caps = model.capabilities or CapabilitySet()
    caps = caps.union(
        CapabilitySet(
            vision="image" in entry.input_modalities,
            audio="audio" in entry.input_modalities,
        )
    )
    return dataclasses.replace(
        model,
        pricing=_fill_pricing(model.pricing, entry.cost),
        context_length=model.context_length or entry.context_limit,
        capabilities=caps,
    )


def _fill_pricing(current: Pricing | None, catalog: Pricing | None) -> Pricing | None:
    if current is None:
        return catalog
    if catalog is None:
        return current
    return dataclasses.replace(
        current,
        cache_read_per_million=(
            current.cache_read_per_million
            if current.cache_read_per_million is not None
            else catalog.cache_read_per_million
        ),
        cache_write_per_million=(
            current.cache_write_per_million
            if current.cache_write_per_million is not None
            else catalog.cache_write_per_million
        ),
    )
