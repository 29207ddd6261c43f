"""confy - typed application configuration persisted in platform config directories.

By default, confy's internal logging is disabled when used as a library.
Library users can enable logging by calling confy.enable_logging().
"""

from confy.api import (
    get_configuration_file_path,
    get_default_store,
    load,
    load_or_else,
    load_path,
    store,
    store_path,
    store_path_perms,
)
from confy.codecs import Codec, JsonCodec, TomlCodec, YamlCodec, get_codec
from confy.common import (
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
    disable_library_logging,
    enable_library_logging,
)
from confy.constants import DEFAULT_CONFIG_NAME
from confy.storage import ConfigStore, FileConfigStore, FilePermissions

disable_library_logging()

enable_logging = enable_library_logging

__all__ = [
    "DEFAULT_CONFIG_NAME",
    "BadConfigDirectoryError",
    "BadFormatDataError",
    "Codec",
    "ConfigStore",
    "ConfyError",
    "DeserializationFailedError",
    "DirectoryCreationFailedError",
    "FileConfigStore",
    "FilePermissions",
    "GeneralLoadError",
    "JsonCodec",
    "OpenConfigurationFileError",
    "ReadConfigurationFileError",
    "SerializationFailedError",
    "SetPermissionsFileError",
    "TomlCodec",
    "WriteConfigurationFileError",
    "YamlCodec",
    "enable_logging",
    "get_codec",
    "get_configuration_file_path",
    "get_default_store",
    "load",
    "load_or_else",
    "load_path",
    "store",
    "store_path",
    "store_path_perms",
]
