"""Model, pricing and catalog record types."""
from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any

from model_catalog.types.enums import ProviderId, Tier


@dataclass(frozen=True)
class Pricing:
    """Token pricing in USD per million tokens.

    A model whose ``pricing`` is ``None`` has unknown pricing. A ``Pricing``
    with zero input and output cost is free, which is a distinct state.
    """

    input_per_million: float
    output_per_million: float
    cache_read_per_million: float | None = None
    cache_write_per_million: float | None = None

    @property
    def is_free(self) -> bool:
        return self.input_per_million == 0 and self.output_per_million == 0

    def to_dict(self) -> dict[str, float]:
        data = {
            "inputPerMillionTokens": self.input_per_million,
            "outputPerMillionTokens": self.output_per_million,
        }
        if self.cache_read_per_million is not None:
            data["cacheReadPerMillionTokens"] = self.cache_read_per_million
        if self.cache_write_per_million is not None:
            data["cacheWritePerMillionTokens"] = self.cache_write_per_million
        return data


@dataclass(frozen=True)
class CapabilitySet:
    """What a model can do. Unknown capabilities read as ``False``."""

    chat: bool = False
    vision: bool = False
    audio: bool = False
    embedding: bool = False

    def union(self, other: CapabilitySet) -> CapabilitySet:
        """Return the flag-wise OR of two capability sets."""
        return CapabilitySet(
            chat=self.chat or other.chat,
            vision=self.vision or other.vision,
            audio=self.audio or other.audio,
            embedding=self.embedding or other.embedding,
        )

    def to_dict(self) -> dict[str, bool]:
        return {
            "chat": self.chat,
            "vision": self.vision,
            "audio": self.audio,
            "embedding": self.embedding,
        }


@dataclass(frozen=True)
class Model:
    """A usable model as returned to callers.

    ``id`` is unique within a provider's namespace only.
    """

    id: str
    display_name: str
    provider: ProviderId
    pricing: Pricing | None = None
    context_length: int | None = None
    capabilities: CapabilitySet | None = None

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "id": self.id,
            "displayName": self.display_name,
            "provider": str(self.provider),
        }
        if self.pricing is not None:
            data["pricing"] = self.pricing.to_dict()
        if self.context_length is not None:
            data["contextLength"] = self.context_length
        if self.capabilities is not None:
            data["capabilities"] = self.capabilities.to_dict()
        return data


@dataclass(frozen=True)
class CatalogEntry:
    """One model record from the universal catalog (models.dev)."""

    id: str
    name: str
    family: str | None = None
    status: str | None = None
    cost: Pricing | None = None
    context_limit: int | None = None
    output_limit: int | None = None
    input_modalities: tuple[str, ...] = ()
    output_modalities: tuple[str, ...] = ()
    attachment: bool = False
    reasoning: bool = False
    tool_call: bool = False

    @classmethod
    def from_dict(cls, model_id: str, raw: Any) -> CatalogEntry:
        """Parse a models.dev model record.

        Raises ``ValueError`` if the record is not an object or carries
        non-numeric cost or limit values.
        """
        if not isinstance(raw, Mapping):
            raise ValueError(f"catalog entry {model_id!r} is not an object")

        entry_id = raw.get("id") or model_id
        if not isinstance(entry_id, str):
            raise ValueError(f"catalog entry {model_id!r} has a non-string id")

        limit = raw.get("limit") if isinstance(raw.get("limit"), Mapping) else {}
        modalities = raw.get("modalities") if isinstance(raw.get("modalities"), Mapping) else {}

        return cls(
            id=entry_id,
            name=str(raw.get("name") or entry_id),
            family=raw.get("family"),
            status=raw.get("status"),
            cost=_parse_cost(model_id, raw.get("cost")),
            context_limit=_optional_int(model_id, limit.get("context")),
            output_limit=_optional_int(model_id, limit.get("output")),
            input_modalities=tuple(modalities.get("input") or ()),
            output_modalities=tuple(modalities.get("output") or ()),
            attachment=bool(raw.get("attachment", False)),
            reasoning=bool(raw.get("reasoning", False)),
            tool_call=bool(raw.get("tool_call", False)),
        )


def _parse_cost(model_id: str, raw: Any) -> Pricing | None:
    # Missing cost, or cost without both input and output, is unknown pricing.
    if not isinstance(raw, Mapping):
        return None
    if raw.get("input") is None or raw.get("output") is None:
        return None
    try:
        return Pricing(
            input_per_million=float(raw["input"]),
            output_per_million=float(raw["output"]),
            cache_read_per_million=_optional_float(raw.get("cache_read")),
            cache_write_per_million=_optional_float(raw.get("cache_write")),
        )
    except (TypeError, ValueError) as exc:
        raise ValueError(f"catalog entry {model_id!r} has invalid cost: {exc}") from exc


def _optional_float(value: Any) -> float | None:
    return None if value is None else float(value)


def _optional_int(model_id: str, value: Any) -> int | None:
    if value is None:
        return None
    try:
        return int(value)
    except (TypeError, ValueError) as exc:
        raise ValueError(f"catalog entry {model_id!r} has invalid limit: {exc}") from exc


@dataclass(frozen=True)
class ProviderCatalog:
    """All catalog entries for one provider namespace."""

    namespace: str
    name: str
    models: Mapping[str, CatalogEntry] = field(default_factory=dict)


@dataclass(frozen=True)
class CatalogSnapshot:
    """Immutable view of the whole universal catalog.

    Snapshots are replaced wholesale, never mutated.
    """

    data: Mapping[str, ProviderCatalog]
    fetched_at: float = 0.0
    etag: str | None = None
    loaded: bool = False

    @classmethod
    def empty(cls) -> CatalogSnapshot:
        """The snapshot in effect before the first successful load."""
        return cls(data=MappingProxyType({}))

    def provider(self, namespace: str) -> ProviderCatalog | None:
        return self.data.get(namespace)


@dataclass(frozen=True)
class CacheEntry:
    """A memoized resolution result for one (provider, credential) pair."""

    models: tuple[Model, ...]
    fetched_at: float
    tier: Tier
    error: str | None = None
