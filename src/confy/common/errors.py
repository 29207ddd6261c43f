"""Error models returned by confy operations."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field


class ConfyError(BaseModel):
    """Base error. ``cause`` keeps the underlying exception when there is one."""

    model_config = ConfigDict(extra="forbid", arbitrary_types_allowed=True)

    message: str
    path: Path | None = None
    cause: BaseException | None = Field(default=None, exclude=True, repr=False)


class BadConfigDirectoryError(ConfyError):
    """No usable config directory, or a store target without a parent directory."""


class DirectoryCreationFailedError(ConfyError):
    """Creating the config directory tree failed."""


class OpenConfigurationFileError(ConfyError):
    """Opening the config file for writing failed."""


class ReadConfigurationFileError(ConfyError):
    """Reading an opened config file failed."""


class WriteConfigurationFileError(ConfyError):
    """Writing the encoded document failed."""


class SetPermissionsFileError(ConfyError):
    """Applying permissions to the config file failed."""


class GeneralLoadError(ConfyError):
    """Opening the config file for reading failed for a reason other than absence."""


class SerializationFailedError(ConfyError):
    """A value could not be encoded."""

    format: str


class DeserializationFailedError(ConfyError):
    """A document could not be decoded into the requested type."""

    format: str
    line: int | None = None
    column: int | None = None
    field: str | None = None


class BadFormatDataError(DeserializationFailedError):
    """A stored document exists but does not decode."""


__all__ = [
    "BadConfigDirectoryError",
    "BadFormatDataError",
    "ConfyError",
    "DeserializationFailedError",
    "DirectoryCreationFailedError",
    "GeneralLoadError",
    "OpenConfigurationFileError",
    "ReadConfigurationFileError",
    "SerializationFailedError",
    "SetPermissionsFileError",
    "WriteConfigurationFileError",
]
