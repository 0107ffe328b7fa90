"""CLI entry point for nextjs-to-openapi."""

import logging
from pathlib import Path

import click

from nextjs_openapi.config import DEFAULT_MODEL, DEFAULT_OLLAMA_URL, DEFAULT_TIMEOUT, GeneratorConfig
from nextjs_openapi.errors import DiscoveryFailure
from nextjs_openapi.generator.pipeline import RouteResult, SpecGenerator
from nextjs_openapi.generator.writer import write_spec
from nextjs_openapi.llm import create_client
from nextjs_openapi.scanner.base import RouteUnit
from nextjs_openapi.scanner.discover import discover_routes

ENV_PREFIX = "NEXTJS_OPENAPI_"
PREVIEW_CHARS = 50


def _scan(api_dir: str) -> list[RouteUnit]:
    try:
        return discover_routes(api_dir)
    except DiscoveryFailure as e:
        raise click.ClickException(str(e)) from e


def _report(index: int, total: int, result: RouteResult) -> None:
    click.echo(f"Processing route {index}/{total}: {result.route.file_path}")
    if not result.ok:
        click.echo(f"  Error documenting {result.route.file_path} [{result.error.kind}]: {result.error}", err=True)


def _api_dir_option(f):
    return click.option(
        "-d", "--api-dir", default="./api", envvar=f"{ENV_PREFIX}API_DIR", show_default=True,
        help="Directory containing Next.js API routes.",
    )(f)


@click.group()
def main():
    """Next.js to OpenAPI — document App Router API routes with a local LLM."""
    pass


@main.command()
@_api_dir_option
def scan(api_dir: str):
    """List the route files that would be documented."""
    routes = _scan(api_dir)
    click.echo(f"Found {len(routes)} routes.")
    for i, route in enumerate(routes, start=1):
        click.echo(f"{i}. File: {route.file_path}")
        click.echo(f"   Type: {route.file_type}")
        click.echo(f"   Content preview (first {PREVIEW_CHARS} chars): {route.content[:PREVIEW_CHARS]}...")


@main.command()
@_api_dir_option
@click.option("-o", "--output", default="openapi.json", envvar=f"{ENV_PREFIX}OUTPUT", show_default=True, help="Output file (.json, .yaml or .yml).")
@click.option("-m", "--model", default=DEFAULT_MODEL, envvar=f"{ENV_PREFIX}MODEL", show_default=True, help="Model used to document routes.")
@click.option("-w", "--workers", default=1, type=click.IntRange(min=1), envvar=f"{ENV_PREFIX}WORKERS", show_default=True,
              help="Routes documented in parallel. With more than one worker, a path produced by two routes keeps the route that finished last.")
@click.option("--ollama-url", default=DEFAULT_OLLAMA_URL, envvar=f"{ENV_PREFIX}OLLAMA_URL", show_default=True, help="Ollama server URL.")
@click.option("--timeout", default=DEFAULT_TIMEOUT, type=click.FloatRange(min=0, min_open=True), envvar=f"{ENV_PREFIX}TIMEOUT", show_default=True,
              help="Per-request timeout in seconds.")
@click.option("--provider", default="ollama", type=click.Choice(["ollama", "litellm"]), envvar=f"{ENV_PREFIX}PROVIDER", show_default=True,
              help="Generation backend.")
@click.option("-v", "--verbose", is_flag=True, help="Log raw and cleaned model replies.")
@click.pass_context
def generate(ctx: click.Context, api_dir: str, output: str, model: str, workers: int, ollama_url: str, timeout: float, provider: str, verbose: bool):
    """Scan API routes and write an OpenAPI specification."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    config = GeneratorConfig(
        api_dir=api_dir,
        output=output,
        model=model,
        ollama_url=ollama_url,
        workers=workers,
        timeout=timeout,
        provider=provider,
    )
    click.echo(f"API directory: {config.api_dir}")
    click.echo(f"Output file: {config.output}")
    click.echo(f"Model: {config.model} ({config.provider})")
    click.echo(f"Workers: {config.workers}")

    routes = _scan(config.api_dir)
    if not routes:
        click.echo("No routes found. Exiting.")
        return
    click.echo(f"Found {len(routes)} routes.")

    gen = SpecGenerator(create_client(config), workers=config.workers)
    run = gen.generate(routes, on_result=_report)

    output_path = Path(config.output)
    write_spec(output_path, run.document)
    click.echo(f"OpenAPI specification written to {output_path}")
    click.echo(f"Routes: {run.discovered} discovered, {run.succeeded} documented, {run.failed} failed.")
    click.echo(f"Document contains {len(run.document.paths)} paths.")

    if run.succeeded == 0:
        click.echo("No routes could be documented.", err=True)
        ctx.exit(1)
