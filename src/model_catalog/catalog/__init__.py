"""Universal model catalog: snapshot store and eligibility rules."""
from __future__ import annotations

from model_catalog.catalog.filters import catalog_models, entry_to_model, is_eligible
from model_catalog.catalog.store import CatalogStore, parse_snapshot

__all__ = [
    "CatalogStore",
    "catalog_models",
    "entry_to_model",
    "is_eligible",
    "parse_snapshot",
]
