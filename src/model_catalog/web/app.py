from __future__ import annotations

from flask import Flask

from model_catalog.service import ModelCatalogService


def create_app(
    service: ModelCatalogService | None = None,
    config: dict | None = None,
) -> Flask:
    """Create and configure the Flask app."""
    app = Flask(__name__)
    app.config.update(config or {})

    # Store the service on app for access in routes
    app.extensions["model_catalog"] = service or ModelCatalogService()

    from model_catalog.web.routes import api_bp

    app.register_blueprint(api_bp, url_prefix="/api")

    return app
