"""CLI entry point for actorspec."""

from __future__ import annotations

import asyncio
import logging
import sys
from dataclasses import replace

import click

from actorspec import __version__
from actorspec.config import Config
from actorspec.errors import ActorSpecError
from actorspec.validation import VALIDATION_MODES


@click.group()
@click.version_option(__version__, prog_name="actorspec")
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
def main(verbose: bool) -> None:
    """actorspec: metadata definitions for bots and scrapers."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        )


@main.command()
@click.option("--config", "-c", required=True, help="Path to the actorspec config module, relative to CWD")
@click.option("--out-dir", "-o", default=None, help="Directory where actorspec.json is written, relative to CWD")
@click.option("--silent", "-s", is_flag=True, help="Suppress progress output")
@click.option(
    "--validate",
    type=click.Choice(list(VALIDATION_MODES)),
    default=None,
    help="Validation mode (minimal only checks actorspecVersion)",
)
@click.option("--export", "export_name", default=None, help="Module attribute holding the actorspec (default: 'default')")
def generate(
    config: str,
    out_dir: str | None,
    silent: bool,
    validate: str | None,
    export_name: str | None,
) -> None:
    """Resolve a config module and write it as actorspec.json."""
    from actorspec.generate import generate as run_generate
    from actorspec.validation import get_validators

    settings = Config.from_env()

    overrides: dict[str, object] = {}
    if out_dir:
        overrides["out_dir"] = out_dir
    if silent:
        overrides["silent"] = True
    if validate:
        overrides["validate"] = validate
    if export_name:
        overrides["export_name"] = export_name
    if overrides:
        settings = replace(settings, **overrides)

    try:
        validators = get_validators(settings.validate)
    except ValueError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    try:
        asyncio.run(run_generate(
            config,
            out_dir=settings.out_dir,
            silent=settings.silent,
            export_name=settings.export_name,
            validators=validators,
        ))
    except ActorSpecError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)


if __name__ == "__main__":
    main()
