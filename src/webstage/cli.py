"""CLI interface for Webstage.

Command-line tool for serving static resources and inspecting resource URLs.
"""

import json
import logging
import sys
from pathlib import Path

import click

from webstage.config import PROVIDER_KINDS, Config
from webstage.providers import provider_from_config, resource_urls


@click.group()
def cli() -> None:
    """Webstage - resource locations for web application runtimes."""


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def _load_config(config_path: Path | None) -> Config:
    try:
        return Config.load(config_path)
    except (FileNotFoundError, ValueError) as e:
        click.echo(click.style(f"Error: {e}", fg="red"), err=True)
        sys.exit(1)


@cli.command()
@click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(exists=True, path_type=Path),
    default=None,
    help="Path to configuration file (default: auto-discover webstage.toml)",
)
@click.option(
    "--local-dir",
    "-d",
    type=click.Path(exists=True, path_type=Path, file_okay=False),
    default=None,
    help="Directory holding static resources (overrides config)",
)
@click.option(
    "--host",
    default=None,
    help="Host to bind to (overrides config)",
)
@click.option(
    "--port",
    "-p",
    type=int,
    default=None,
    help="Port to bind to (overrides config)",
)
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    help="Enable verbose output (log every served file)",
)
def serve(
    config_path: Path | None,
    local_dir: Path | None,
    host: str | None,
    port: int | None,
    verbose: bool,
) -> None:
    """Start the resource server."""
    from webstage.server import run_server

    _configure_logging(verbose)
    config = _load_config(config_path).with_overrides(
        host=host,
        port=port,
        local_dir=local_dir,
    )

    click.echo(f"Starting server on {config.server.host}:{config.server.port}")
    click.echo(f"Provider: {config.resources.provider}")
    if config.resources.provider == "local":
        click.echo(f"Static directory: {config.resources.local_dir}")

    try:
        run_server(config)
    except ValueError as e:
        click.echo(click.style(f"Error: {e}", fg="red"), err=True)
        sys.exit(1)


@cli.command()
@click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(exists=True, path_type=Path),
    default=None,
    help="Path to configuration file (default: auto-discover webstage.toml)",
)
@click.option(
    "--provider",
    type=click.Choice(PROVIDER_KINDS),
    default=None,
    help="Resource provider (overrides config)",
)
@click.option(
    "--local-dir",
    "-d",
    type=click.Path(path_type=Path, file_okay=False),
    default=None,
    help="Directory holding static resources (overrides config)",
)
@click.option(
    "--bucket-url",
    default=None,
    help="Remote bucket URL (overrides config)",
)
@click.option(
    "--repo-name",
    default=None,
    help="GitHub Pages repository name (overrides config)",
)
@click.option(
    "--json",
    "as_json",
    is_flag=True,
    help="Print resource locations as JSON",
)
def urls(
    config_path: Path | None,
    provider: str | None,
    local_dir: Path | None,
    bucket_url: str | None,
    repo_name: str | None,
    as_json: bool,
) -> None:
    """Show where app and static resources are located."""
    config = _load_config(config_path).with_overrides(
        provider=provider,
        local_dir=local_dir,
        bucket_url=bucket_url,
        repo_name=repo_name,
    )

    try:
        resource_provider = provider_from_config(config.resources)
    except ValueError as e:
        click.echo(click.style(f"Error: {e}", fg="red"), err=True)
        sys.exit(1)

    locations = resource_urls(resource_provider)
    if as_json:
        click.echo(json.dumps(locations, indent=2))
        return

    click.echo(f"Provider: {config.resources.provider}")
    for name, value in locations.items():
        click.echo(f"{name}: {value or '(root)'}")
