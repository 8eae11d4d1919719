"""Helpers for reading provider listing payloads."""
from __future__ import annotations

from typing import Any

from model_catalog.errors import ResponseParseError
from model_catalog.types.models import Model


def records(
    body: Any,
    key: str,
    provider: str,
    id_field: str = "id",
) -> list[dict[str, Any]]:
    """Return the object records under *key* in a JSON body.

    A missing key reads as an empty list; any other shape raises
    ``ResponseParseError``. Records without a string *id_field* are dropped.
    """
    if not isinstance(body, dict):
        raise ResponseParseError(f"unexpected {provider} response shape", provider=provider)
    value = body.get(key)
    if value is None:
        return []
    if not isinstance(value, list):
        raise ResponseParseError(
            f"{provider} response field {key!r} is not a list", provider=provider
        )
    return [
        item
        for item in value
        if isinstance(item, dict) and isinstance(item.get(id_field), str)
    ]


def by_display_name(models: list[Model]) -> list[Model]:
    return sorted(models, key=lambda m: m.display_name.lower())


def by_id(models: list[Model]) -> list[Model]:
    return sorted(models, key=lambda m: m.id)
