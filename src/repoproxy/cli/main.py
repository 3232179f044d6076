"""Click CLI group: inspect and check interface catalogs."""

from __future__ import annotations

import json
import sys
from pathlib import Path

import click

from repoproxy.catalog.loader import load_catalog
from repoproxy.config import get_settings, validate_settings_for_env
from repoproxy.errors import CatalogError, SynthesisError
from repoproxy.logging import configure_logging
from repoproxy.registry import ProxyRegistry
from repoproxy.synthesis.driver import synthesize


def _run_pass(catalog_path: str | None, suffix: str | None, marker: str | None) -> ProxyRegistry:
    settings = get_settings()
    resolved = catalog_path or settings.repo_catalog_path
    if not resolved:
        raise click.UsageError("no catalog given and REPO_CATALOG_PATH is empty")
    try:
        declarations = load_catalog(Path(resolved))
    except CatalogError as exc:
        raise click.ClickException(str(exc)) from exc
    try:
        return synthesize(declarations, suffix, marker=marker)
    except SynthesisError as exc:
        click.echo(f"synthesis failed: {len(exc.errors)} error(s)", err=True)
        for err in exc.errors:
            click.echo(f"  - {type(err).__name__}: {err}", err=True)
        sys.exit(1)


@click.group()
@click.option("--log-level", type=str, default=None, help="Override LOG_LEVEL.")
def cli(log_level: str | None) -> None:
    """Versioned repository proxy tooling."""
    settings = get_settings()
    try:
        validate_settings_for_env(settings)
    except ValueError as exc:
        raise click.UsageError(str(exc)) from exc
    configure_logging(log_level)


@cli.command()
@click.argument("catalog", required=False)
@click.option(
    "--suffix", type=str, default=None, help="Version suffix (default: REPO_VERSION_SUFFIX)."
)
@click.option("--marker", type=str, default=None, help="Marker interface name.")
@click.option("--json", "json_output", is_flag=True, help="Print the registry as JSON.")
def inspect(catalog: str | None, suffix: str | None, marker: str | None, json_output: bool) -> None:
    """Synthesize CATALOG and print every proxy with its command names."""
    registry = _run_pass(catalog, suffix, marker)
    if json_output:
        click.echo(json.dumps(registry.as_dict(), indent=2, sort_keys=True))
        return
    for descriptor in registry:
        click.echo(f"{descriptor.proxy_name} -> {descriptor.source_interface}")
        for method in descriptor.methods:
            params = ", ".join(method.signature.parameter_names)
            click.echo(f"  {method.name}({params}) => {method.versioned_command_name}")


@cli.command()
@click.argument("catalog", required=False)
@click.option("--suffix", type=str, default=None)
@click.option("--marker", type=str, default=None)
def check(catalog: str | None, suffix: str | None, marker: str | None) -> None:
    """Verify CATALOG synthesizes cleanly and print the registry digest."""
    registry = _run_pass(catalog, suffix, marker)
    click.echo(f"ok: {len(registry)} proxies, digest {registry.digest()}")


if __name__ == "__main__":
    cli()
