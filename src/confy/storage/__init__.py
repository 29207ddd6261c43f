"""Typed configuration load/store engine."""

from .file import FileConfigStore
from .models import FilePermissions
from .paths import resolve_config_path
from .protocol import ConfigStore

__all__ = [
    "ConfigStore",
    "FileConfigStore",
    "FilePermissions",
    "resolve_config_path",
]
