from __future__ import annotations

from flask import Blueprint, current_app, jsonify, request

from model_catalog.defaults import ALLOWED_MODELS, DEFAULT_MODELS, PROVIDER_CONFIGS
from model_catalog.sanitize import sanitize_request
from model_catalog.types.enums import ProviderId
from model_catalog.types.request import ResolveRequest, SanitizeRequest

api_bp = Blueprint("api", __name__)


def _service():
    return current_app.extensions["model_catalog"]


@api_bp.route("/models", methods=["POST"])
def resolve_models():
    """Resolve the models available for a provider and credential."""
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        return jsonify({"error": "JSON object required"}), 400
    try:
        resolve_request = ResolveRequest.from_dict(data)
    except ValueError as exc:
        return jsonify({"error": str(exc)}), 400

    result = _service().resolve_request(resolve_request)
    return jsonify(result.to_dict())


@api_bp.route("/models/sanitize", methods=["POST"])
def sanitize_model():
    """Validate a chosen model id, falling back to the category default."""
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        return jsonify({"error": "JSON object required"}), 400
    try:
        model = sanitize_request(SanitizeRequest.from_dict(data))
    except ValueError as exc:
        return jsonify({"error": str(exc)}), 400
    return jsonify({"model": model})


@api_bp.route("/models/cache", methods=["DELETE"])
def clear_cache():
    """Drop cached resolutions, optionally for one provider."""
    removed = _service().clear_cache(request.args.get("provider"))
    return jsonify({"removed": removed})


@api_bp.route("/providers")
def list_providers():
    """Return provider metadata, defaults and built-in model lists."""
    providers = []
    for provider in ProviderId:
        config = PROVIDER_CONFIGS[provider]
        defaults = DEFAULT_MODELS[provider]
        providers.append({
            "id": str(provider),
            "displayName": config.display_name,
            "description": config.description,
            "requiresEndpoint": config.requires_endpoint,
            "requiresApiVersion": config.requires_api_version,
            "apiKeyPlaceholder": config.api_key_placeholder,
            "apiKeyHelpUrl": config.api_key_help_url,
            "supportsModelFetch": config.supports_model_fetch,
            "defaults": {
                "extractionModel": defaults.extraction,
                "solutionModel": defaults.solution,
                "debuggingModel": defaults.debugging,
                "answerModel": defaults.answer,
            },
            "staticModels": list(ALLOWED_MODELS[provider]),
        })
    return jsonify({"providers": providers})
