"""Eligibility rules and conversion for universal-catalog entries."""
from __future__ import annotations

from model_catalog.types.enums import ProviderId
from model_catalog.types.models import CapabilitySet, CatalogEntry, Model, ProviderCatalog

# Id fragments of embedding, speech-to-text and text-to-speech models.
EXCLUDED_ID_MARKERS = ("embedding", "tts", "whisper", "transcribe")


def is_eligible(entry: CatalogEntry) -> bool:
    """Return whether a catalog entry describes a usable generative model."""
    if entry.status == "deprecated":
        return False
    model_id = entry.id.lower()
    if any(marker in model_id for marker in EXCLUDED_ID_MARKERS):
        return False
    # Zero output limit and zero output cost marks a non-generative model.
    if (
        entry.output_limit == 0
        and entry.cost is not None
        and entry.cost.output_per_million == 0
    ):
        return False
    return True


def entry_capabilities(entry: CatalogEntry) -> CapabilitySet:
    return CapabilitySet(
        chat=True,
        vision="image" in entry.input_modalities,
        audio="audio" in entry.input_modalities,
        embedding="embedding" in entry.id,
    )


def entry_to_model(entry: CatalogEntry, provider: ProviderId) -> Model:
    return Model(
        id=entry.id,
        display_name=entry.name or entry.id,
        provider=provider,
        pricing=entry.cost,
        context_length=entry.context_limit,
        capabilities=entry_capabilities(entry),
    )


def catalog_models(catalog: ProviderCatalog | None, provider: ProviderId) -> list[Model]:
    """Eligible models of *catalog*, sorted by display name (case-insensitive)."""
    if catalog is None:
        return []
    models = [
        entry_to_model(entry, provider)
        for entry in catalog.models.values()
        if is_eligible(entry)
    ]
    models.sort(key=lambda m: m.display_name.lower())
    return models
