"""Static provider, category and default-model tables.

These tables are the single source of truth for supported providers, the
static fallback model lists, and per-category defaults. They are plain
immutable data; validation lives in :mod:`model_catalog.sanitize`.
"""
from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping

from model_catalog.types.enums import ModelCategory, ProviderId
from model_catalog.types.models import Model

P = ProviderId
C = ModelCategory


@dataclass(frozen=True)
class ProviderConfig:
    """Display and capability metadata for one provider."""

    display_name: str
    description: str
    requires_endpoint: bool
    requires_api_version: bool
    api_key_placeholder: str
    api_key_help_url: str
    api_key_help_steps: tuple[str, ...]
    supports_model_fetch: bool
    supports_speech_recognition: bool
    uses_openai_sdk: bool
    api_key_env: str
    api_key_prefix: str | None = None


@dataclass(frozen=True)
class ModelOption:
    """A curated model choice shown for a category."""

    id: str
    name: str
    description: str


@dataclass(frozen=True)
class CategoryDefinition:
    key: ModelCategory
    title: str
    description: str
    models_by_provider: Mapping[ProviderId, tuple[ModelOption, ...]]


@dataclass(frozen=True)
class ProviderDefaults:
    """Default model per category, plus an optional speech model."""

    extraction: str
    solution: str
    debugging: str
    answer: str
    speech_recognition: str | None = None

    def for_category(self, category: ModelCategory) -> str:
        return {
            C.EXTRACTION: self.extraction,
            C.SOLUTION: self.solution,
            C.DEBUGGING: self.debugging,
            C.ANSWER: self.answer,
        }[category]


PROVIDER_CONFIGS: Mapping[ProviderId, ProviderConfig] = MappingProxyType({
    P.OPENAI: ProviderConfig(
        display_name="OpenAI",
        description="GPT-4o models",
        requires_endpoint=False,
        requires_api_version=False,
        api_key_placeholder="sk-...",
        api_key_prefix="sk-",
        api_key_help_url="https://platform.openai.com/api-keys",
        api_key_help_steps=(
            "Create an account at OpenAI (https://platform.openai.com/signup)",
            "Go to API Keys section (https://platform.openai.com/api-keys)",
            "Create a new secret key and paste it here",
        ),
        supports_model_fetch=True,
        supports_speech_recognition=True,
        uses_openai_sdk=True,
        api_key_env="OPENAI_API_KEY",
    ),
    P.GEMINI: ProviderConfig(
        display_name="Gemini",
        description="Gemini 3 models",
        requires_endpoint=False,
        requires_api_version=False,
        api_key_placeholder="Enter your Gemini API key",
        api_key_help_url="https://aistudio.google.com/app/apikey",
        api_key_help_steps=(
            "Create an account at Google AI Studio (https://aistudio.google.com/)",
            "Go to the API Keys section (https://aistudio.google.com/app/apikey)",
            "Create a new API key and paste it here",
        ),
        supports_model_fetch=True,
        supports_speech_recognition=True,
        uses_openai_sdk=False,
        api_key_env="GEMINI_API_KEY",
    ),
    P.ANTHROPIC: ProviderConfig(
        display_name="Claude",
        description="Claude models",
        requires_endpoint=False,
        requires_api_version=False,
        api_key_placeholder="sk-ant-...",
        api_key_prefix="sk-ant-",
        api_key_help_url="https://console.anthropic.com/settings/keys",
        api_key_help_steps=(
            "Create an account at Anthropic (https://console.anthropic.com/signup)",
            "Go to the API Keys section (https://console.anthropic.com/settings/keys)",
            "Create a new API key and paste it here",
        ),
        supports_model_fetch=True,
        supports_speech_recognition=False,
        uses_openai_sdk=False,
        api_key_env="ANTHROPIC_API_KEY",
    ),
    P.AZURE_OPENAI: ProviderConfig(
        display_name="Azure OpenAI",
        description="Azure-hosted models",
        requires_endpoint=True,
        requires_api_version=True,
        api_key_placeholder="Enter your Azure API key",
        api_key_help_url=(
            "https://portal.azure.com/#view/Microsoft_Azure_ProjectOxford/"
            "CognitiveServicesHub/~/OpenAI"
        ),
        api_key_help_steps=(
            "Create an Azure OpenAI resource in Azure Portal",
            "Go to Keys and Endpoint in your resource",
            "Copy Key 1 or Key 2 and paste it here",
        ),
        supports_model_fetch=True,
        supports_speech_recognition=True,
        uses_openai_sdk=True,
        api_key_env="AZURE_OPENAI_API_KEY",
    ),
    P.OPENROUTER: ProviderConfig(
        display_name="OpenRouter",
        description="Multi-provider access",
        requires_endpoint=False,
        requires_api_version=False,
        api_key_placeholder="sk-or-...",
        api_key_prefix="sk-or-",
        api_key_help_url="https://openrouter.ai/keys",
        api_key_help_steps=(
            "Create an account at OpenRouter (https://openrouter.ai)",
            "Go to Keys (https://openrouter.ai/keys)",
            "Create a new API key and paste it here",
        ),
        supports_model_fetch=True,
        supports_speech_recognition=False,
        uses_openai_sdk=True,
        api_key_env="OPENROUTER_API_KEY",
    ),
})

DEFAULT_PROVIDER = P.GEMINI

DEFAULT_MODELS: Mapping[ProviderId, ProviderDefaults] = MappingProxyType({
    P.OPENAI: ProviderDefaults(
        extraction="gpt-4o",
        solution="gpt-4o",
        debugging="gpt-4o",
        answer="gpt-4o-mini",
        speech_recognition="whisper-1",
    ),
    P.GEMINI: ProviderDefaults(
        extraction="gemini-3-flash-preview",
        solution="gemini-3-flash-preview",
        debugging="gemini-3-flash-preview",
        answer="gemini-3-flash-preview",
        speech_recognition="gemini-3-flash-preview",
    ),
    P.ANTHROPIC: ProviderDefaults(
        extraction="claude-3-7-sonnet-20250219",
        solution="claude-3-7-sonnet-20250219",
        debugging="claude-3-7-sonnet-20250219",
        answer="claude-3-7-sonnet-20250219",
    ),
    P.AZURE_OPENAI: ProviderDefaults(
        extraction="gpt-4o",
        solution="gpt-4o",
        debugging="gpt-4o",
        answer="gpt-4o-mini",
        speech_recognition="whisper-1",
    ),
    P.OPENROUTER: ProviderDefaults(
        extraction="openai/gpt-4o",
        solution="openai/gpt-4o",
        debugging="openai/gpt-4o",
        answer="openai/gpt-4o-mini",
    ),
})

DEFAULT_ANSWER_MODELS: Mapping[ProviderId, str] = MappingProxyType(
    {provider: defaults.answer for provider, defaults in DEFAULT_MODELS.items()}
)

# Static fallbacks, used when neither the provider API nor the catalog answers.
ALLOWED_MODELS: Mapping[ProviderId, tuple[str, ...]] = MappingProxyType({
    P.OPENAI: (
        "gpt-4o",
        "gpt-4o-mini",
    ),
    P.GEMINI: (
        "gemini-3-pro-preview",
        "gemini-3-flash-preview",
        "gemini-3-pro-image-preview",
        "gemini-1.5-pro",
        "gemini-1.5-flash",
        "gemini-2.0-flash-exp",
    ),
    P.ANTHROPIC: (
        "claude-3-7-sonnet-20250219",
        "claude-3-5-sonnet-20241022",
        "claude-3-opus-20240229",
    ),
    P.AZURE_OPENAI: (
        "gpt-4o",
        "gpt-4o-mini",
        "gpt-4",
        "gpt-35-turbo",
    ),
    P.OPENROUTER: (
        "openai/gpt-4o",
        "openai/gpt-4o-mini",
        "anthropic/claude-3.5-sonnet",
        "anthropic/claude-3-7-sonnet",
        "google/gemini-pro-1.5",
        "google/gemini-flash-1.5",
    ),
})

# Providers whose model space is operator-defined (deployments) or a full
# third-party catalog, so any non-empty id may be valid.
OPEN_ENDED_PROVIDERS = frozenset({P.AZURE_OPENAI, P.OPENROUTER})

# Providers whose listing already carries pricing; never enriched.
SELF_PRICED_PROVIDERS = frozenset({P.OPENROUTER})

# models.dev namespace per provider. OpenRouter has none.
CATALOG_NAMESPACES: Mapping[ProviderId, str] = MappingProxyType({
    P.OPENAI: "openai",
    P.GEMINI: "google",
    P.ANTHROPIC: "anthropic",
    P.AZURE_OPENAI: "azure",
})


def _options(*rows: tuple[str, str, str]) -> tuple[ModelOption, ...]:
    return tuple(ModelOption(id=i, name=n, description=d) for i, n, d in rows)


_LEGACY_PRO = ("gemini-1.5-pro", "Gemini 1.5 Pro", "Legacy model - use Gemini 3 for best results")
_LEGACY_FLASH = (
    "gemini-1.5-flash",
    "Gemini 1.5 Flash",
    "Legacy model - use Gemini 3 Flash for best results",
)
_OPUS = (
    "claude-3-opus-20240229",
    "Claude 3 Opus",
    "Top-level intelligence, fluency, and understanding",
)
_SONNET_35 = ("claude-3-5-sonnet-20241022", "Claude 3.5 Sonnet", "Balanced performance and speed")
_GEMINI_3_LATEST = (
    ("gemini-3-flash-latest", "Gemini 3 Flash (Latest)", "Faster, more cost-effective - latest version"),
    ("gemini-3-pro", "Gemini 3 Pro", "Stable version"),
    ("gemini-3-flash", "Gemini 3 Flash", "Stable version"),
    _LEGACY_PRO,
)

MODEL_CATEGORIES: tuple[CategoryDefinition, ...] = (
    CategoryDefinition(
        key=C.EXTRACTION,
        title="Problem Extraction",
        description="Model used to analyze screenshots and extract problem details",
        models_by_provider=MappingProxyType({
            P.OPENAI: _options(
                ("gpt-4o", "gpt-4o", "Best overall performance for problem extraction"),
                ("gpt-4o-mini", "gpt-4o-mini", "Faster, more cost-effective option"),
            ),
            P.GEMINI: _options(
                (
                    "gemini-3-pro-preview",
                    "Gemini 3 Pro (Preview)",
                    "Best overall performance for complex tasks requiring advanced reasoning",
                ),
                (
                    "gemini-3-flash-preview",
                    "Gemini 3 Flash (Preview)",
                    "Pro-level intelligence at Flash speed and pricing",
                ),
                _LEGACY_PRO,
                _LEGACY_FLASH,
            ),
            P.ANTHROPIC: _options(
                (
                    "claude-3-7-sonnet-20250219",
                    "Claude 3.7 Sonnet",
                    "Best overall performance for problem extraction",
                ),
                _SONNET_35,
                _OPUS,
            ),
            P.AZURE_OPENAI: _options(
                ("gpt-4o", "GPT-4o", "Best overall performance (Azure deployment)"),
                ("gpt-4o-mini", "GPT-4o Mini", "Faster, more cost-effective (Azure deployment)"),
            ),
            P.OPENROUTER: _options(
                ("openai/gpt-4o", "OpenAI GPT-4o", "Best overall performance via OpenRouter"),
                ("openai/gpt-4o-mini", "OpenAI GPT-4o Mini", "Fast and cost-effective via OpenRouter"),
                ("anthropic/claude-3.5-sonnet", "Claude 3.5 Sonnet", "Balanced performance via OpenRouter"),
                ("google/gemini-pro-1.5", "Gemini 1.5 Pro", "Google's flagship via OpenRouter"),
            ),
        }),
    ),
    CategoryDefinition(
        key=C.SOLUTION,
        title="Solution Generation",
        description="Model used to generate coding solutions",
        models_by_provider=MappingProxyType({
            P.OPENAI: _options(
                ("gpt-4o", "gpt-4o", "Strong overall performance for coding tasks"),
                ("gpt-4o-mini", "gpt-4o-mini", "Faster, more cost-effective option"),
            ),
            P.GEMINI: _options(
                (
                    "gemini-3-pro-latest",
                    "Gemini 3 Pro (Latest)",
                    "Strong overall performance - latest version",
                ),
                *_GEMINI_3_LATEST,
            ),
            P.ANTHROPIC: _options(
                (
                    "claude-3-7-sonnet-20250219",
                    "Claude 3.7 Sonnet",
                    "Strong overall performance for coding tasks",
                ),
                _SONNET_35,
                _OPUS,
            ),
            P.AZURE_OPENAI: _options(
                ("gpt-4o", "GPT-4o", "Strong coding performance (Azure deployment)"),
                ("gpt-4o-mini", "GPT-4o Mini", "Faster, more cost-effective (Azure deployment)"),
            ),
            P.OPENROUTER: _options(
                ("openai/gpt-4o", "OpenAI GPT-4o", "Strong coding performance via OpenRouter"),
                ("openai/gpt-4o-mini", "OpenAI GPT-4o Mini", "Fast and cost-effective via OpenRouter"),
                ("anthropic/claude-3.5-sonnet", "Claude 3.5 Sonnet", "Strong coding via OpenRouter"),
                ("google/gemini-pro-1.5", "Gemini 1.5 Pro", "Google's flagship via OpenRouter"),
            ),
        }),
    ),
    CategoryDefinition(
        key=C.DEBUGGING,
        title="Debugging",
        description="Model used to debug and improve solutions",
        models_by_provider=MappingProxyType({
            P.OPENAI: _options(
                ("gpt-4o", "gpt-4o", "Best for analyzing code and error messages"),
                ("gpt-4o-mini", "gpt-4o-mini", "Faster, more cost-effective option"),
            ),
            P.GEMINI: _options(
                (
                    "gemini-3-pro-latest",
                    "Gemini 3 Pro (Latest)",
                    "Best for analyzing code and error messages - latest version",
                ),
                *_GEMINI_3_LATEST,
            ),
            P.ANTHROPIC: _options(
                (
                    "claude-3-7-sonnet-20250219",
                    "Claude 3.7 Sonnet",
                    "Best for analyzing code and error messages",
                ),
                _SONNET_35,
                _OPUS,
            ),
            P.AZURE_OPENAI: _options(
                ("gpt-4o", "GPT-4o", "Best for debugging (Azure deployment)"),
                ("gpt-4o-mini", "GPT-4o Mini", "Faster debugging (Azure deployment)"),
            ),
            P.OPENROUTER: _options(
                ("openai/gpt-4o", "OpenAI GPT-4o", "Best for debugging via OpenRouter"),
                ("openai/gpt-4o-mini", "OpenAI GPT-4o Mini", "Fast debugging via OpenRouter"),
                ("anthropic/claude-3.5-sonnet", "Claude 3.5 Sonnet", "Strong debugging via OpenRouter"),
                ("google/gemini-pro-1.5", "Gemini 1.5 Pro", "Google's flagship via OpenRouter"),
            ),
        }),
    ),
    CategoryDefinition(
        key=C.ANSWER,
        title="Answer Suggestions",
        description="Model used to generate AI answer suggestions for conversation questions",
        models_by_provider=MappingProxyType({
            P.OPENAI: _options(
                ("gpt-4o-mini", "gpt-4o-mini", "Fast and cost-effective for conversation suggestions"),
                ("gpt-4o", "gpt-4o", "Best overall performance for answer suggestions"),
            ),
            P.GEMINI: _options(
                (
                    "gemini-3-flash-preview",
                    "Gemini 3 Flash (Preview)",
                    "Fast and efficient for conversation suggestions",
                ),
                (
                    "gemini-3-pro-preview",
                    "Gemini 3 Pro (Preview)",
                    "Best performance for complex conversation contexts",
                ),
                _LEGACY_PRO,
                _LEGACY_FLASH,
            ),
            P.ANTHROPIC: _options(
                (
                    "claude-3-7-sonnet-20250219",
                    "Claude 3.7 Sonnet",
                    "Best overall performance for answer suggestions",
                ),
                _SONNET_35,
                _OPUS,
            ),
            P.AZURE_OPENAI: _options(
                ("gpt-4o-mini", "GPT-4o Mini", "Fast and cost-effective (Azure deployment)"),
                ("gpt-4o", "GPT-4o", "Best performance (Azure deployment)"),
            ),
            P.OPENROUTER: _options(
                ("openai/gpt-4o-mini", "OpenAI GPT-4o Mini", "Fast and cost-effective via OpenRouter"),
                ("openai/gpt-4o", "OpenAI GPT-4o", "Best performance via OpenRouter"),
                ("anthropic/claude-3.5-sonnet", "Claude 3.5 Sonnet", "Balanced via OpenRouter"),
            ),
        }),
    ),
)


def parse_provider(value: str | ProviderId) -> ProviderId | None:
    """Return the ``ProviderId`` for *value*, or ``None`` if unknown."""
    try:
        return ProviderId(value)
    except ValueError:
        return None


def parse_category(value: str | ModelCategory) -> ModelCategory | None:
    """Return the ``ModelCategory`` for *value*, or ``None`` if unknown."""
    try:
        return ModelCategory(value)
    except ValueError:
        return None


def static_models(provider: ProviderId) -> list[Model]:
    """Return the static fallback list for *provider* as ``Model`` objects."""
    return [
        Model(id=model_id, display_name=model_id, provider=provider)
        for model_id in ALLOWED_MODELS.get(provider, ())
    ]


def get_category(key: ModelCategory) -> CategoryDefinition:
    for category in MODEL_CATEGORIES:
        if category.key == key:
            return category
    raise KeyError(key)


def validate_api_key_format(provider: ProviderId, api_key: str) -> bool:
    """Check *api_key* against the provider's known key prefix.

    Providers without a known prefix accept any non-blank key.
    """
    key = api_key.strip()
    if not key:
        return False
    prefix = PROVIDER_CONFIGS[provider].api_key_prefix
    return prefix is None or key.startswith(prefix)
