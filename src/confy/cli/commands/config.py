from __future__ import annotations

from enum import Enum
from pathlib import Path
from typing import Annotated

import typer
from pydantic import BaseModel, ConfigDict
from result import is_err

from confy.codecs import Codec, get_codec
from confy.common import ConfyError, create_logger
from confy.settings import get_settings
from confy.storage import FileConfigStore

logger = create_logger("cli")


class FormatChoice(str, Enum):
    TOML = "toml"
    YAML = "yaml"
    JSON = "json"


class RawDocument(BaseModel):
    """Accepts any mapping, for checking a document without knowing its type."""

    model_config = ConfigDict(extra="allow")


AppNameArgument = Annotated[str, typer.Argument(help="Application name the configuration belongs to.")]
NameOption = Annotated[
    str | None,
    typer.Option("--name", "-n", help="Configuration name (defaults to 'default-config')."),
]
FormatOption = Annotated[
    FormatChoice | None,
    typer.Option("--format", "-f", case_sensitive=False, help="Document format; overrides CONFY_FORMAT."),
]

app = typer.Typer(help="Inspect stored configuration documents.")


@app.callback(invoke_without_command=True)
def _config_root(ctx: typer.Context) -> None:
    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit()


@app.command("path")
def path(app_name: AppNameArgument, name: NameOption = None, format: FormatOption = None) -> None:
    """Print the file a configuration is stored in."""
    typer.echo(_resolve_path(app_name, name, _codec(format)))


@app.command("show")
def show(app_name: AppNameArgument, name: NameOption = None, format: FormatOption = None) -> None:
    """Print a stored configuration document."""
    config_path = _resolve_path(app_name, name, _codec(format))
    try:
        text = config_path.read_text(encoding="utf-8")
    except OSError as exc:
        typer.secho(f"Unable to read {config_path}: {exc.strerror or exc}", err=True, fg=typer.colors.RED)
        raise typer.Exit(code=1) from exc

    typer.echo(text, nl=not text.endswith("\n"))


@app.command("check")
def check(app_name: AppNameArgument, name: NameOption = None, format: FormatOption = None) -> None:
    """Check that a stored configuration document decodes."""
    codec = _codec(format)
    config_path = _resolve_path(app_name, name, codec)
    try:
        text = config_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        typer.secho(f"Unable to read {config_path}: {exc}", err=True, fg=typer.colors.RED)
        raise typer.Exit(code=1) from exc

    result = codec.decode(text, RawDocument)
    if is_err(result):
        error = result.err_value.model_copy(update={"path": config_path})
        _handle_error(error)
        raise typer.Exit(code=1)

    logger.debug("Config document decoded", path=str(config_path), keys=len(result.ok_value.model_extra or {}))
    typer.echo(f"OK {config_path}")


def _codec(format: FormatChoice | None) -> Codec:
    if format is None:
        return get_settings().to_codec()
    return get_codec(format.value)


def _resolve_path(app_name: str, name: str | None, codec: Codec) -> Path:
    store = FileConfigStore(codec=codec, organization=get_settings().organization)
    result = store.get_configuration_file_path(app_name, name)
    if is_err(result):
        _handle_error(result.err_value)
        raise typer.Exit(code=1)
    return result.ok_value


def _handle_error(error: ConfyError) -> None:
    message = error.message
    line = getattr(error, "line", None)
    if line is not None:
        message = f"{message} (line {line})"
    if error.path is not None:
        message = f"{message} ({error.path})"

    typer.secho(message, err=True, fg=typer.colors.RED)
