"""CLI command: model-catalog resolve -- list the models available for a provider."""

from __future__ import annotations

import json
import os
import sys

import click

from model_catalog.defaults import PROVIDER_CONFIGS
from model_catalog.service import ModelCatalogService
from model_catalog.types.enums import ProviderId
from model_catalog.types.models import Model
from model_catalog.types.request import FetchOptions


def _price(model: Model) -> str:
    if model.pricing is None:
        return "-"
    return f"${model.pricing.input_per_million:g}/${model.pricing.output_per_million:g}"


@click.command()
@click.argument("provider", type=click.Choice([p.value for p in ProviderId]))
@click.option("--api-key", default=None, help="Provider API key (defaults to the provider's env var)")
@click.option("--endpoint", default=None, help="Azure OpenAI endpoint URL")
@click.option("--api-version", default=None, help="Azure OpenAI API version")
@click.option("--refresh", is_flag=True, help="Bypass the result cache")
@click.option("--json", "as_json", is_flag=True, help="Print the raw result as JSON")
@click.pass_context
def resolve(
    ctx: click.Context,
    provider: str,
    api_key: str | None,
    endpoint: str | None,
    api_version: str | None,
    refresh: bool,
    as_json: bool,
) -> None:
    """Resolve the models usable with PROVIDER.

    Tries the provider's own listing first, then the models.dev catalog, then
    the built-in list. Exits with code 1 only if no models could be found.
    """
    prov = ProviderId(provider)
    config = PROVIDER_CONFIGS[prov]
    if api_key is None:
        api_key = os.environ.get(config.api_key_env, "")
    if prov is ProviderId.AZURE_OPENAI:
        endpoint = endpoint or os.environ.get("AZURE_OPENAI_ENDPOINT")
        api_version = api_version or os.environ.get("AZURE_OPENAI_API_VERSION")

    options = FetchOptions(endpoint=endpoint, api_version=api_version, force_refresh=refresh)
    service = ctx.obj.get("service") if ctx.obj else None
    if service is None:
        with ModelCatalogService.from_env() as owned:
            result = owned.resolve(prov, api_key, options)
    else:
        result = service.resolve(prov, api_key, options)

    if as_json:
        click.echo(json.dumps(result.to_dict(), indent=2))
    else:
        click.echo(f"{config.display_name}: {len(result.models)} model(s) from {result.source}")
        for model in result.models:
            ctx_len = f"{model.context_length:,}" if model.context_length else "-"
            click.echo(f"  {model.id:<40} {_price(model):<16} ctx={ctx_len}  {model.display_name}")

    if result.error:
        click.echo(f"Note: {result.error}", err=True)
    if not result.success:
        sys.exit(1)
