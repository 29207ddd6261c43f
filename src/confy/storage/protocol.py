"""Configuration storage protocol."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path
from typing import Any, Protocol

from result import Result

from confy.common import ConfyError

from .models import FilePermissions


class ConfigStore(Protocol):
    """Protocol for loading and storing typed configuration values."""

    def get_configuration_file_path(self, app_name: str, config_name: str | None = None) -> Result[Path, ConfyError]:
        """Resolve the file a named configuration lives in, without touching it."""
        ...

    def load[T](self, model_cls: type[T], app_name: str, config_name: str | None = None) -> Result[T, ConfyError]:
        """Load a named configuration, creating it with defaults if it does not exist."""
        ...

    def load_path[T](self, model_cls: type[T], path: Path) -> Result[T, ConfyError]:
        """Load the configuration at ``path``, creating it with defaults if it does not exist.

        Returns:
            Ok(value) when the file decodes or was just created.
            Err(BadFormatDataError) when the file exists but does not decode.
            Err(GeneralLoadError) when the file exists but cannot be opened.
        """
        ...

    def load_or_else[T](self, model_cls: type[T], path: Path, recover: Callable[[], T]) -> Result[T, ConfyError]:
        """Load ``path``, replacing a missing or undecodable file with ``recover()``."""
        ...

    def store(self, app_name: str, config_name: str | None, value: Any) -> Result[None, ConfyError]:  # noqa: ANN401
        """Store ``value`` as a named configuration."""
        ...

    def store_path(self, path: Path, value: Any) -> Result[None, ConfyError]:  # noqa: ANN401
        """Store ``value`` at ``path``, leaving any existing file untouched if encoding fails."""
        ...

    def store_path_perms(
        self,
        path: Path,
        value: Any,  # noqa: ANN401
        permissions: FilePermissions,
    ) -> Result[None, ConfyError]:
        """Like ``store_path``, applying ``permissions`` to the file before writing."""
        ...
