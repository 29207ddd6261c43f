"""Common models and helpers used across confy modules."""

from .errors import (
    BadConfigDirectoryError,
    BadFormatDataError,
    ConfyError,
    DeserializationFailedError,
    DirectoryCreationFailedError,
    GeneralLoadError,
    OpenConfigurationFileError,
    ReadConfigurationFileError,
    SerializationFailedError,
    SetPermissionsFileError,
    WriteConfigurationFileError,
)
from .logging import LoggingConfig, create_logger, disable_library_logging, enable_library_logging, setup_cli_logging
from .models import AppInfo

__all__ = [
    "AppInfo",
    "BadConfigDirectoryError",
    "BadFormatDataError",
    "ConfyError",
    "DeserializationFailedError",
    "DirectoryCreationFailedError",
    "GeneralLoadError",
    "LoggingConfig",
    "OpenConfigurationFileError",
    "ReadConfigurationFileError",
    "SerializationFailedError",
    "SetPermissionsFileError",
    "WriteConfigurationFileError",
    "create_logger",
    "disable_library_logging",
    "enable_library_logging",
    "setup_cli_logging",
]
