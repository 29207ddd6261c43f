"""Module-level operations backed by a store using the configured format.

The format is read once from ``Settings`` (``CONFY_FORMAT``) the first time any
of these functions runs. Build a ``FileConfigStore`` directly to pick a codec
in code instead.
"""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path
from typing import Any

from result import Result

from confy.common import ConfyError
from confy.settings import get_settings
from confy.storage import FileConfigStore, FilePermissions

_default_store: FileConfigStore | None = None


def get_default_store() -> FileConfigStore:
    global _default_store
    if _default_store is None:
        _default_store = get_settings().to_config_store()
    return _default_store


def get_configuration_file_path(app_name: str, config_name: str | None = None) -> Result[Path, ConfyError]:
    return get_default_store().get_configuration_file_path(app_name, config_name)


def load[T](model_cls: type[T], app_name: str, config_name: str | None = None) -> Result[T, ConfyError]:
    """Load a named configuration, creating it from ``model_cls()`` on first use."""
    return get_default_store().load(model_cls, app_name, config_name)


def load_path[T](model_cls: type[T], path: Path) -> Result[T, ConfyError]:
    return get_default_store().load_path(model_cls, path)


def load_or_else[T](model_cls: type[T], path: Path, recover: Callable[[], T]) -> Result[T, ConfyError]:
    """Load ``path``; a missing or undecodable file is overwritten with ``recover()``."""
    return get_default_store().load_or_else(model_cls, path, recover)


def store(app_name: str, config_name: str | None, value: Any) -> Result[None, ConfyError]:  # noqa: ANN401
    return get_default_store().store(app_name, config_name, value)


def store_path(path: Path, value: Any) -> Result[None, ConfyError]:  # noqa: ANN401
    return get_default_store().store_path(path, value)


def store_path_perms(path: Path, value: Any, permissions: FilePermissions) -> Result[None, ConfyError]:  # noqa: ANN401
    return get_default_store().store_path_perms(path, value, permissions)
