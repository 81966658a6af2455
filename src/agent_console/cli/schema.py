"""Commands for inspecting and checking agent configuration files."""

import json
import logging
from pathlib import Path

import click

from agent_console.cli.utils import setup_cli_logging
from agent_console.config.agent import Configuration, ConfigurationError, configuration_schema

logger = logging.getLogger(__name__)


@click.command()
@click.pass_context
def schema(ctx: click.Context) -> None:
    """Print the JSON schema of the agent configuration."""
    setup_cli_logging(ctx.obj.get("verbose", False))
    click.echo(json.dumps(configuration_schema(), indent=2))


@click.command()
@click.argument("path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.pass_context
def validate(ctx: click.Context, path: Path) -> None:
    """Validate an agent configuration JSON file and print its normalised form."""
    setup_cli_logging(ctx.obj.get("verbose", False))
    logger.debug(f"Validating agent configuration {path}")

    try:
        configuration = Configuration.from_json(path.read_bytes())
    except ConfigurationError as e:
        lines = [f"{path}: invalid agent configuration"]
        lines.extend(f"  {loc or '<root>'}: {msg}" for loc, msg in e.errors)
        raise click.ClickException("\n".join(lines)) from e

    click.echo(configuration.to_json(indent=2))
    click.echo(f"OK: {configuration.summary()}")
