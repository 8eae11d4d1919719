"""CLI commands: model-catalog sanitize / providers."""

from __future__ import annotations

import click

from model_catalog.defaults import ALLOWED_MODELS, DEFAULT_MODELS, PROVIDER_CONFIGS
from model_catalog.sanitize import sanitize_model_selection
from model_catalog.types.enums import ModelCategory, ProviderId


@click.command()
@click.argument("model")
@click.argument("provider")
@click.argument("category", type=click.Choice([c.value for c in ModelCategory]))
@click.option(
    "--allow",
    "allow",
    multiple=True,
    help="Model id from a dynamically fetched list (repeatable)",
)
def sanitize(model: str, provider: str, category: str, allow: tuple[str, ...]) -> None:
    """Print MODEL if it is valid for PROVIDER, else the CATEGORY default."""
    click.echo(sanitize_model_selection(model, provider, category, list(allow) or None))


@click.command()
def providers() -> None:
    """List supported providers with their defaults and built-in models."""
    for provider in ProviderId:
        config = PROVIDER_CONFIGS[provider]
        defaults = DEFAULT_MODELS[provider]
        click.echo(f"{provider}  ({config.display_name}: {config.description})")
        click.echo(f"  key env:   {config.api_key_env}")
        if config.requires_endpoint:
            click.echo("  requires:  endpoint, api version")
        click.echo(f"  default:   {defaults.solution}")
        click.echo(f"  built-in:  {', '.join(ALLOWED_MODELS[provider])}")
