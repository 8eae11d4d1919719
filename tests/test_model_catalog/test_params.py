"""Tests for request-parameter conventions."""
from __future__ import annotations

import pytest

from model_catalog.params import get_model_params, get_token_limit_param, is_newer_model


@pytest.mark.parametrize(
    ("model", "newer"),
    [
        ("gpt-5", True),
        ("o1-mini", True),
        ("o3", True),
        ("o4-mini", True),
        ("gpt-4.1-nano", True),
        ("codex-mini-latest", True),
        ("openai/o3-mini", True),
        ("gpt-4o", False),
        ("gpt-4", False),
        ("claude-3-7-sonnet-20250219", False),
    ],
)
def test_is_newer_model(model: str, newer: bool) -> None:
    assert is_newer_model(model) is newer


def test_token_limit_param() -> None:
    assert get_token_limit_param("o3", 1000) == {"max_completion_tokens": 1000}
    assert get_token_limit_param("gpt-4o", 1000) == {"max_tokens": 1000}


def test_model_params_drop_temperature_for_newer_models() -> None:
    assert get_model_params("gpt-5", 2000, temperature=0.2) == {"max_completion_tokens": 2000}


def test_model_params_keep_temperature_for_older_models() -> None:
    assert get_model_params("gpt-4o", 2000, temperature=0.2) == {
        "max_tokens": 2000,
        "temperature": 0.2,
    }


def test_model_params_without_temperature() -> None:
    assert get_model_params("gpt-4o", 500) == {"max_tokens": 500}
