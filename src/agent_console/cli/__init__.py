"""
Agent console CLI entry point.
"""

import click

from .schema import schema, validate
from .ui import ui


@click.group()
@click.option(
    "--config",
    type=click.Path(exists=True),
    help="Path to custom configuration file",
)
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    help="Enable debug logging",
)
@click.pass_context
def cli(ctx: click.Context, config: str | None, verbose: bool) -> None:
    """Agent console - edit agent settings and control the agent."""
    ctx.ensure_object(dict)
    ctx.obj["config_file"] = config
    ctx.obj["verbose"] = verbose


# Register commands
cli.add_command(ui)
cli.add_command(schema)
cli.add_command(validate)
