"""Enumeration types for the model catalog."""
from __future__ import annotations

from enum import StrEnum


class ProviderId(StrEnum):
    """Supported AI providers."""

    OPENAI = "openai"
    GEMINI = "gemini"
    ANTHROPIC = "anthropic"
    AZURE_OPENAI = "azure-openai"
    OPENROUTER = "openrouter"


class ModelCategory(StrEnum):
    """Functional slot a model is selected for."""

    EXTRACTION = "extractionModel"
    SOLUTION = "solutionModel"
    DEBUGGING = "debuggingModel"
    ANSWER = "answerModel"


class Tier(StrEnum):
    """Resolution stage that produced a model list."""

    API = "api"
    CATALOG = "catalog"
    STATIC = "static"

    @property
    def source(self) -> str:
        """Outbound source label shown to callers."""
        return _SOURCE_LABELS[self]


_SOURCE_LABELS = {
    Tier.API: "api",
    Tier.CATALOG: "models.dev",
    Tier.STATIC: "static",
}
