from __future__ import annotations

import os
from typing import Annotated

import typer

from confy.common import create_logger, setup_cli_logging
from confy.settings import get_settings

from .commands import config as config_commands

logger = create_logger("cli")

app = typer.Typer(help="confy command-line interface.")
app.add_typer(config_commands.app, name="config")


@app.callback(invoke_without_command=True)
def _root_callback(
    ctx: typer.Context,
    no_color: Annotated[bool, typer.Option("--no-color", help="Disable colored output")] = False,
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Log debug output to stderr")] = False,
) -> None:
    # Respect NO_COLOR environment variable and --no-color flag
    if no_color or os.getenv("NO_COLOR"):
        ctx.color = False

    _setup_logging(verbose=verbose, colorize=ctx.color is not False)

    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit()


def _setup_logging(verbose: bool, colorize: bool) -> None:
    settings = get_settings()
    logging_config = settings.logging
    if verbose:
        logging_config = logging_config.model_copy(update={"enabled": True, "log_level": "DEBUG"})

    if logging_config.enabled:
        setup_cli_logging(app_info=settings.app, config=logging_config, colorize=colorize)
        logger.debug("CLI logging initialized", config=logging_config.model_dump())


def main() -> None:
    """Entrypoint for the confy CLI."""
    app()
