"""File-based configuration store implementation."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path
from typing import Any

from result import Err, Ok, Result, is_err, is_ok

from confy.codecs import Codec
from confy.common import (
    BadConfigDirectoryError,
    BadFormatDataError,
    ConfyError,
    DeserializationFailedError,
    DirectoryCreationFailedError,
    GeneralLoadError,
    OpenConfigurationFileError,
    ReadConfigurationFileError,
    SetPermissionsFileError,
    WriteConfigurationFileError,
    create_logger,
)
from confy.utils import resolve_base_config_dir

from .models import FilePermissions, Missing, Opened, OpenFailed, OpenOutcome
from .paths import DirectoryResolver, resolve_config_path
from .protocol import ConfigStore

logger = create_logger("store")


class FileConfigStore(ConfigStore):
    """Loads and stores typed values as one document per file, in the format of ``codec``."""

    def __init__(
        self,
        codec: Codec,
        organization: str = "",
        directories_resolver: DirectoryResolver = resolve_base_config_dir,
    ) -> None:
        self.codec = codec
        self.organization = organization
        self.directories_resolver = directories_resolver

    def get_configuration_file_path(self, app_name: str, config_name: str | None = None) -> Result[Path, ConfyError]:
        return resolve_config_path(
            app_name,
            config_name,
            self.codec.extension,
            organization=self.organization,
            resolver=self.directories_resolver,
        )

    def load[T](self, model_cls: type[T], app_name: str, config_name: str | None = None) -> Result[T, ConfyError]:
        return self.get_configuration_file_path(app_name, config_name).and_then(
            lambda path: self.load_path(model_cls, path)
        )

    def load_path[T](self, model_cls: type[T], path: Path) -> Result[T, ConfyError]:
        logger.debug("Loading config", path=str(path), format=self.codec.name)

        match self._open_document(path):
            case Opened(data):
                return self._decode(data, model_cls, path).inspect_err(
                    lambda error: logger.error("Config decode error", path=str(path), error=error.message)
                )
            case Missing():
                logger.debug("Config file not found, storing defaults", path=str(path))
                return self._persist(path, model_cls())
            case OpenFailed(error):
                return Err(error)

    def load_or_else[T](self, model_cls: type[T], path: Path, recover: Callable[[], T]) -> Result[T, ConfyError]:
        logger.debug("Loading config with fallback", path=str(path), format=self.codec.name)

        match self._open_document(path):
            case Opened(data):
                decoded = self._decode(data, model_cls, path)
                if is_ok(decoded):
                    return decoded
                logger.warning(
                    "Config file does not decode, replacing it with fallback",
                    path=str(path),
                    error=decoded.err_value.message,
                )
            case Missing():
                logger.debug("Config file not found, storing fallback", path=str(path))
            case OpenFailed(error):
                return Err(error)

        return self._persist(path, recover())

    def store(self, app_name: str, config_name: str | None, value: Any) -> Result[None, ConfyError]:  # noqa: ANN401
        return self.get_configuration_file_path(app_name, config_name).and_then(
            lambda path: self.store_path(path, value)
        )

    def store_path(self, path: Path, value: Any) -> Result[None, ConfyError]:  # noqa: ANN401
        return self._write_document(path, value, permissions=None)

    def store_path_perms(
        self,
        path: Path,
        value: Any,  # noqa: ANN401
        permissions: FilePermissions,
    ) -> Result[None, ConfyError]:
        return self._write_document(path, value, permissions=permissions)

    def _persist[T](self, path: Path, value: T) -> Result[T, ConfyError]:
        return self.store_path(path, value).map(lambda _: value)

    def _open_document(self, path: Path) -> OpenOutcome:
        try:
            handle = path.open("rb")
        except FileNotFoundError:
            return Missing()
        except OSError as exc:
            logger.error("Config file open error", path=str(path), error=str(exc))
            return OpenFailed(
                GeneralLoadError(path=path, message=f"Unable to open configuration file: {exc}", cause=exc)
            )

        with handle:
            try:
                return Opened(handle.read())
            except OSError as exc:
                logger.error("Config file read error", path=str(path), error=str(exc))
                return OpenFailed(
                    ReadConfigurationFileError(path=path, message=f"Unable to read configuration file: {exc}", cause=exc)
                )

    def _decode[T](self, data: bytes, model_cls: type[T], path: Path) -> Result[T, BadFormatDataError]:
        try:
            text = data.decode("utf-8")
        except UnicodeDecodeError as exc:
            return Err(
                BadFormatDataError(
                    format=self.codec.name,
                    path=path,
                    message=f"Configuration file is not valid UTF-8: {exc}",
                    cause=exc,
                )
            )

        return self.codec.decode(text, model_cls).map_err(lambda error: _as_bad_format(error, path))

    def _write_document(
        self,
        path: Path,
        value: Any,  # noqa: ANN401
        permissions: FilePermissions | None,
    ) -> Result[None, ConfyError]:
        parent = path.parent
        if parent == path:
            logger.error("Refusing to store config without a parent directory", path=str(path))
            return Err(
                BadConfigDirectoryError(
                    path=path,
                    message="Configuration path has no parent directory.",
                )
            )

        try:
            parent.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            logger.error("Config directory creation error", path=str(parent), error=str(exc))
            return Err(
                DirectoryCreationFailedError(
                    path=parent,
                    message=f"Unable to create configuration directory: {exc}",
                    cause=exc,
                )
            )

        # Encode before opening so a failure leaves the existing file as it was
        encoded = self.codec.encode(value)
        if not is_ok(encoded):
            error = encoded.err_value.model_copy(update={"path": path})
            logger.error("Config serialization error", path=str(path), error=error.message)
            return Err(error)

        try:
            handle = path.open("w", encoding="utf-8", newline="\n")
        except OSError as exc:
            logger.error("Config file open error", path=str(path), error=str(exc))
            return Err(
                OpenConfigurationFileError(
                    path=path,
                    message=f"Unable to open configuration file for writing: {exc}",
                    cause=exc,
                )
            )

        # close() flushes too, so it belongs to the write phase
        try:
            with handle:
                if permissions is not None:
                    applied = self._apply_permissions(path, permissions)
                    if is_err(applied):
                        return applied
                handle.write(encoded.ok_value)
        except OSError as exc:
            logger.error("Config file write error", path=str(path), error=str(exc))
            return Err(
                WriteConfigurationFileError(
                    path=path,
                    message=f"Unable to write configuration file: {exc}",
                    cause=exc,
                )
            )

        logger.debug("Config stored", path=str(path), format=self.codec.name)
        return Ok(None)

    def _apply_permissions(self, path: Path, permissions: FilePermissions) -> Result[None, ConfyError]:
        try:
            path.chmod(permissions.mode)
        except OSError as exc:
            logger.error("Config file permission error", path=str(path), error=str(exc))
            return Err(
                SetPermissionsFileError(
                    path=path,
                    message=f"Unable to set permissions {oct(permissions.mode)}: {exc}",
                    cause=exc,
                )
            )
        return Ok(None)


def _as_bad_format(error: DeserializationFailedError, path: Path) -> BadFormatDataError:
    return BadFormatDataError(
        format=error.format,
        path=path,
        line=error.line,
        column=error.column,
        field=error.field,
        message=error.message,
        cause=error.cause,
    )
