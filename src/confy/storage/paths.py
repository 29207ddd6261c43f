"""Config file path construction."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

from result import Err, Ok, Result

from confy.common import BadConfigDirectoryError
from confy.constants import DEFAULT_CONFIG_NAME
from confy.utils import resolve_base_config_dir

type DirectoryResolver = Callable[[str, str], Path | None]


def resolve_config_path(
    app_name: str,
    config_name: str | None,
    extension: str,
    organization: str = "",
    resolver: DirectoryResolver = resolve_base_config_dir,
) -> Result[Path, BadConfigDirectoryError]:
    """Build ``<config dir>/<config_name>.<extension>`` for ``app_name``. Touches no files."""
    config_dir = resolver(organization, app_name)
    if config_dir is None:
        return Err(
            BadConfigDirectoryError(
                message=f"Could not determine a config directory for '{app_name}' in this environment.",
            )
        )

    try:
        str(config_dir).encode("utf-8")
    except UnicodeEncodeError as exc:
        return Err(
            BadConfigDirectoryError(
                path=config_dir,
                message="Config directory path is not valid UTF-8.",
                cause=exc,
            )
        )

    return Ok(config_dir / f"{config_name or DEFAULT_CONFIG_NAME}.{extension}")
