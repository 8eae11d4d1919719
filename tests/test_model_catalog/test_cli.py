"""Tests for the model-catalog CLI."""
from __future__ import annotations

import json

import pytest
from click.testing import CliRunner

from model_catalog import __version__
from model_catalog.cli.main import cli
from model_catalog.service import ModelCatalogService

from tests.test_model_catalog.conftest import FakeClock, Router, json_response


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


@pytest.fixture(autouse=True)
def _no_provider_keys(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in (
        "OPENAI_API_KEY",
        "GEMINI_API_KEY",
        "ANTHROPIC_API_KEY",
        "AZURE_OPENAI_API_KEY",
        "AZURE_OPENAI_ENDPOINT",
        "OPENROUTER_API_KEY",
    ):
        monkeypatch.delenv(name, raising=False)


def test_version(runner: CliRunner) -> None:
    result = runner.invoke(cli, ["--version"])
    assert result.exit_code == 0
    assert __version__ in result.output


def test_help_lists_commands(runner: CliRunner) -> None:
    result = runner.invoke(cli, ["--help"])
    assert result.exit_code == 0
    for command in ("resolve", "sanitize", "providers", "serve"):
        assert command in result.output


class TestResolveCommand:
    def test_catalog_table(
        self, runner: CliRunner, service: ModelCatalogService, serve_catalog: Router
    ) -> None:
        result = runner.invoke(cli, ["resolve", "openai"], obj={"service": service})
        assert result.exit_code == 0
        assert "OpenAI: 3 model(s) from models.dev" in result.output
        assert "gpt-4o-mini" in result.output
        assert "$2.5/$10" in result.output

    def test_json_output_with_env_key(
        self,
        runner: CliRunner,
        service: ModelCatalogService,
        serve_catalog: Router,
        monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        monkeypatch.setenv("OPENAI_API_KEY", "sk-env")
        serve_catalog.add(
            "api.openai.com",
            lambda request: json_response({"data": [{"id": "gpt-4o"}]}),
        )

        result = runner.invoke(cli, ["resolve", "openai", "--json"], obj={"service": service})

        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["success"] is True
        assert data["source"] == "api"
        assert data["models"][0]["id"] == "gpt-4o"
        assert data["models"][0]["pricing"]["inputPerMillionTokens"] == 2.5
        openai_request = next(r for r in serve_catalog.requests if r.url.host == "api.openai.com")
        assert openai_request.headers["authorization"] == "Bearer sk-env"

    def test_degraded_result_prints_note(
        self, runner: CliRunner, service: ModelCatalogService, router: Router
    ) -> None:
        result = runner.invoke(cli, ["resolve", "gemini"], obj={"service": service})
        assert result.exit_code == 0
        assert "from static" in result.output
        assert "Note: API key is required to list Gemini models" in result.output

    def test_env_service_is_closed(
        self,
        runner: CliRunner,
        serve_catalog: Router,
        clock: FakeClock,
        monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        closed: list[bool] = []

        class RecordingService(ModelCatalogService):
            @classmethod
            def from_env(cls) -> ModelCatalogService:
                return cls(clock=clock, transport=serve_catalog.transport)

            def close(self) -> None:
                closed.append(True)
                super().close()

        monkeypatch.setattr("model_catalog.cli.resolve.ModelCatalogService", RecordingService)

        result = runner.invoke(cli, ["resolve", "openai"])

        assert result.exit_code == 0
        assert "OpenAI: 3 model(s) from models.dev" in result.output
        assert closed == [True]

    def test_unknown_provider_is_rejected(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["resolve", "mistral"])
        assert result.exit_code == 2


class TestSanitizeCommand:
    def test_valid_model(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["sanitize", "gpt-4o-mini", "openai", "solutionModel"])
        assert result.exit_code == 0
        assert result.output.strip() == "gpt-4o-mini"

    def test_falls_back_to_default(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["sanitize", "bogus-id", "openai", "solutionModel"])
        assert result.output.strip() == "gpt-4o"

    def test_dynamic_allow_list(self, runner: CliRunner) -> None:
        result = runner.invoke(
            cli, ["sanitize", "o3", "openai", "solutionModel", "--allow", "o3", "--allow", "gpt-5"]
        )
        assert result.output.strip() == "o3"

    def test_unknown_category_is_rejected(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["sanitize", "gpt-4o", "openai", "summaryModel"])
        assert result.exit_code == 2


def test_providers_command(runner: CliRunner) -> None:
    result = runner.invoke(cli, ["providers"])
    assert result.exit_code == 0
    assert "azure-openai" in result.output
    assert "requires:  endpoint, api version" in result.output
    assert "OPENROUTER_API_KEY" in result.output
