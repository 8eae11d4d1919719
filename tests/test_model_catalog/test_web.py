from __future__ import annotations

import pytest

from model_catalog.service import ModelCatalogService
from model_catalog.web.app import create_app

from tests.test_model_catalog.conftest import Router, json_response


@pytest.fixture
def app(service: ModelCatalogService):
    """Create a Flask app backed by the mock-transport service."""
    application = create_app(service=service)
    application.config["TESTING"] = True
    return application


@pytest.fixture
def client(app):
    return app.test_client()


class TestResolveAPI:
    def test_catalog_without_key(self, client, serve_catalog: Router):
        response = client.post("/api/models", json={"provider": "openai"})
        assert response.status_code == 200
        data = response.get_json()
        assert data["success"] is True
        assert data["source"] == "models.dev"
        assert [m["id"] for m in data["models"]] == ["gpt-4o", "gpt-4o-mini", "o3"]
        assert data["models"][0]["displayName"] == "GPT-4o"
        assert "error" not in data

    def test_api_tier_and_cached_at(self, client, serve_catalog: Router):
        serve_catalog.add("api.openai.com", lambda request: json_response({"data": [{"id": "gpt-4o"}]}))

        first = client.post("/api/models", json={"provider": "openai", "apiKey": "sk-key"}).get_json()
        second = client.post("/api/models", json={"provider": "openai", "apiKey": "sk-key"}).get_json()

        assert first["source"] == "api"
        assert "cachedAt" not in first
        assert second["cachedAt"] > 0
        assert serve_catalog.count("api.openai.com") == 1

    def test_degraded_result_carries_error(self, client, router: Router):
        response = client.post("/api/models", json={"provider": "anthropic", "apiKey": "sk-ant-key"})
        data = response.get_json()
        assert response.status_code == 200
        assert data["success"] is True
        assert data["source"] == "static"
        assert data["error"].startswith("Claude model listing failed")

    def test_unknown_provider(self, client, router: Router):
        data = client.post("/api/models", json={"provider": "mistral"}).get_json()
        assert data["success"] is False
        assert data["models"] == []

    def test_missing_provider_is_bad_request(self, client):
        response = client.post("/api/models", json={"apiKey": "k"})
        assert response.status_code == 400
        assert "provider" in response.get_json()["error"]

    def test_string_force_refresh_is_bad_request(self, client, router: Router):
        response = client.post("/api/models", json={"provider": "openai", "forceRefresh": "false"})
        assert response.status_code == 400
        assert "forceRefresh" in response.get_json()["error"]
        assert router.requests == []

    def test_non_json_body_is_bad_request(self, client):
        response = client.post("/api/models", data="not json", content_type="text/plain")
        assert response.status_code == 400


class TestSanitizeAPI:
    def test_fallback(self, client):
        response = client.post(
            "/api/models/sanitize",
            json={"chosenId": "bogus-id", "provider": "openai", "category": "solutionModel"},
        )
        assert response.status_code == 200
        assert response.get_json() == {"model": "gpt-4o"}

    def test_dynamic_allow_list(self, client):
        response = client.post(
            "/api/models/sanitize",
            json={
                "chosenId": "o3",
                "provider": "openai",
                "category": "answerModel",
                "dynamicAllowList": ["o3"],
            },
        )
        assert response.get_json() == {"model": "o3"}

    def test_unknown_category_is_bad_request(self, client):
        response = client.post(
            "/api/models/sanitize",
            json={"chosenId": "gpt-4o", "provider": "openai", "category": "summaryModel"},
        )
        assert response.status_code == 400

    def test_missing_fields_are_bad_request(self, client):
        response = client.post("/api/models/sanitize", json={"provider": "openai"})
        assert response.status_code == 400


class TestCacheAPI:
    def test_clear_one_provider(self, client, serve_catalog: Router):
        serve_catalog.add("api.openai.com", lambda request: json_response({"data": [{"id": "gpt-4o"}]}))
        client.post("/api/models", json={"provider": "openai", "apiKey": "sk-key"})

        response = client.delete("/api/models/cache?provider=openai")
        assert response.get_json() == {"removed": 1}

        client.post("/api/models", json={"provider": "openai", "apiKey": "sk-key"})
        assert serve_catalog.count("api.openai.com") == 2

    def test_clear_all(self, client):
        response = client.delete("/api/models/cache")
        assert response.get_json() == {"removed": 0}


class TestProvidersAPI:
    def test_lists_every_provider(self, client):
        data = client.get("/api/providers").get_json()
        ids = [p["id"] for p in data["providers"]]
        assert ids == ["openai", "gemini", "anthropic", "azure-openai", "openrouter"]
        azure = data["providers"][3]
        assert azure["requiresEndpoint"] is True
        assert azure["defaults"]["answerModel"] == "gpt-4o-mini"
        assert "gpt-35-turbo" in azure["staticModels"]
