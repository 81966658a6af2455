"""UI command for launching the agent console."""

import click

from agent_console.cli.utils import setup_logging
from agent_console.config.app import load_config
from agent_console.tui.errors import StartupError


@click.command()
@click.option(
    "--theme",
    "-t",
    default=None,
    help="Theme preset name (overrides the configured preset)",
)
@click.option(
    "--widget",
    "-w",
    "widgets",
    multiple=True,
    help="Widget to register by name; repeat to register several (replaces the configured list)",
)
@click.pass_context
def ui(ctx: click.Context, theme: str | None, widgets: tuple[str, ...]) -> None:
    """Launch the agent console.

    The console edits agent settings and hands them to the agent controller.
    """
    from agent_console.tui.app import run_console

    overrides: dict[str, object] = {}
    if theme:
        overrides["theme.preset"] = theme
    if widgets:
        overrides["widgets"] = list(widgets)

    try:
        settings = load_config(ctx.obj.get("config_file"), cli_overrides=overrides or None)
    except ValueError as e:
        raise click.ClickException(str(e)) from e

    setup_logging(settings.logging, verbose=ctx.obj.get("verbose", False))

    try:
        run_console(settings)
    except StartupError as e:
        raise click.ClickException(f"Console failed to start: {e}") from e
