"""model-catalog CLI entry point: Click group with subcommands."""
from __future__ import annotations

import logging

import click

from model_catalog import __version__


@click.group()
@click.version_option(version=__version__, prog_name="model-catalog")
@click.option("-v", "--verbose", count=True, help="Log progress (-vv for debug output)")
@click.pass_context
def cli(ctx: click.Context, verbose: int) -> None:
    """model-catalog - list usable AI models with pricing for a provider."""
    ctx.ensure_object(dict)
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG if verbose > 1 else logging.INFO,
            format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        )


@cli.command()
@click.option("--host", default="127.0.0.1", help="Host to bind to")
@click.option("--port", default=5000, type=int, help="Port to bind to")
@click.option("--debug/--no-debug", default=False, help="Enable debug mode")
def serve(host: str, port: int, debug: bool) -> None:
    """Start the model catalog HTTP API."""
    from model_catalog.service import ModelCatalogService
    from model_catalog.web.app import create_app

    app = create_app(service=ModelCatalogService.from_env())
    click.echo(f"Starting model catalog API on {host}:{port}")
    app.run(host=host, port=port, debug=debug)


# Import and register subcommands
from model_catalog.cli.resolve import resolve  # noqa: E402
from model_catalog.cli.sanitize import providers, sanitize  # noqa: E402

cli.add_command(resolve)
cli.add_command(sanitize)
cli.add_command(providers)
