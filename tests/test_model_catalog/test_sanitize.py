"""Tests for model selection validation."""
from __future__ import annotations

import logging

import pytest

from model_catalog.defaults import ALLOWED_MODELS, DEFAULT_MODELS
from model_catalog.sanitize import sanitize_model_selection, sanitize_request
from model_catalog.types.enums import ModelCategory, ProviderId
from model_catalog.types.request import SanitizeRequest


class TestStaticAllowList:
    def test_allowed_id_is_kept(self) -> None:
        assert sanitize_model_selection("gpt-4o-mini", "openai", "solutionModel") == "gpt-4o-mini"

    def test_unknown_id_falls_back_to_category_default(self) -> None:
        assert sanitize_model_selection("bogus-id", "openai", "solutionModel") == "gpt-4o"

    def test_answer_category_default(self) -> None:
        assert sanitize_model_selection("bogus-id", "openai", "answerModel") == "gpt-4o-mini"

    def test_fallback_is_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.WARNING, logger="model_catalog.sanitize"):
            sanitize_model_selection("bogus-id", "anthropic", "debuggingModel")
        assert "bogus-id" in caplog.text

    @pytest.mark.parametrize("provider", list(ProviderId))
    @pytest.mark.parametrize("category", list(ModelCategory))
    def test_idempotent(self, provider: ProviderId, category: ModelCategory) -> None:
        once = sanitize_model_selection("not-a-model", provider, category)
        assert sanitize_model_selection(once, provider, category) == once

    @pytest.mark.parametrize("provider", [ProviderId.OPENAI, ProviderId.GEMINI, ProviderId.ANTHROPIC])
    def test_defaults_are_allowed(self, provider: ProviderId) -> None:
        defaults = DEFAULT_MODELS[provider]
        for category in ModelCategory:
            assert defaults.for_category(category) in ALLOWED_MODELS[provider]


class TestDynamicAllowList:
    def test_dynamic_id_is_kept(self) -> None:
        result = sanitize_model_selection("o3", "openai", "solutionModel", ["gpt-4o", "o3"])
        assert result == "o3"

    def test_id_outside_dynamic_list_uses_static_rules(self) -> None:
        result = sanitize_model_selection("gpt-4o-mini", "openai", "solutionModel", ["o3"])
        assert result == "gpt-4o-mini"

    def test_empty_dynamic_list_is_ignored(self) -> None:
        assert sanitize_model_selection("o3", "openai", "solutionModel", []) == "gpt-4o"


class TestOpenEndedProviders:
    def test_azure_accepts_any_deployment_name(self) -> None:
        assert sanitize_model_selection("my-deployment", "azure-openai", "solutionModel") == "my-deployment"

    def test_openrouter_accepts_any_id(self) -> None:
        result = sanitize_model_selection("meta-llama/llama-3-70b", "openrouter", "answerModel")
        assert result == "meta-llama/llama-3-70b"

    def test_blank_id_falls_back(self) -> None:
        assert sanitize_model_selection("  ", "openrouter", "solutionModel") == "openai/gpt-4o"


class TestUnknownInputs:
    def test_unknown_provider_uses_default_provider(self) -> None:
        result = sanitize_model_selection("bogus", "mistral", "solutionModel")
        assert result == DEFAULT_MODELS[ProviderId.GEMINI].solution

    def test_unknown_category_raises(self) -> None:
        with pytest.raises(ValueError, match="category"):
            sanitize_model_selection("gpt-4o", "openai", "summaryModel")


def test_sanitize_request() -> None:
    req = SanitizeRequest(chosen_id="bogus", provider="gemini", category="extractionModel")
    assert sanitize_request(req) == "gemini-3-flash-preview"
