"""Request-parameter conventions for OpenAI-compatible model ids."""
from __future__ import annotations

# Model families that take ``max_completion_tokens`` and reject a custom
# temperature.
NEWER_MODEL_PREFIXES = (
    "gpt-5",
    "o1",
    "o3",
    "o4",
    "gpt-4.1",
    "codex",
)


def is_newer_model(model: str) -> bool:
    """Return whether *model* uses the newer parameter conventions.

    A vendor prefix such as ``openai/`` is ignored.
    """
    name = model.lower().rsplit("/", 1)[-1]
    return name.startswith(NEWER_MODEL_PREFIXES)


def get_token_limit_param(model: str, limit: int) -> dict[str, int]:
    if is_newer_model(model):
        return {"max_completion_tokens": limit}
    return {"max_tokens": limit}


def get_model_params(
    model: str,
    max_tokens: int,
    temperature: float | None = None,
) -> dict[str, float]:
    """Return the token-limit and temperature parameters for *model*.

    Newer models only accept the default temperature, so it is omitted.
    """
    params: dict[str, float] = dict(get_token_limit_param(model, max_tokens))
    if temperature is not None and not is_newer_model(model):
        params["temperature"] = temperature
    return params
