"""selector-builder CLI entry point: Click group with subcommands."""

from __future__ import annotations

import logging
import sys
from dataclasses import replace

import click

from selector_builder import __version__
from selector_builder.config import LOG_LEVELS, SelectorBuilderConfig


@click.group()
@click.version_option(version=__version__, prog_name="selector-builder")
@click.option(
    "--log-level",
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    default=None,
    help="Logging level (default: $SELECTOR_BUILDER_LOG_LEVEL or WARNING)",
)
@click.pass_context
def cli(ctx: click.Context, log_level: str | None) -> None:
    """selector-builder - compose CSS selector strings from ordered fragments."""
    try:
        config = SelectorBuilderConfig.from_env()
    except ValueError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)
    if log_level:
        config = replace(config, log_level=log_level.upper())
    logging.basicConfig(
        level=config.log_level,
        format="%(levelname)s %(name)s: %(message)s",
    )
    ctx.obj = config


# Import and register subcommands
from selector_builder.cli.build import build, combine  # noqa: E402

cli.add_command(build)
cli.add_command(combine)
