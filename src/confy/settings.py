from __future__ import annotations

from pydantic_settings import BaseSettings, SettingsConfigDict

from confy.codecs import Codec, ConfigFormat, get_codec
from confy.common import AppInfo, LoggingConfig
from confy.storage import FileConfigStore


class Settings(BaseSettings):
    app: AppInfo = AppInfo()
    format: ConfigFormat = "toml"
    organization: str = ""
    logging: LoggingConfig = LoggingConfig()

    model_config = SettingsConfigDict(
        env_prefix="CONFY_",
        env_nested_delimiter="__",
        case_sensitive=False,
        nested_model_default_partial_update=True,
    )

    def to_codec(self) -> Codec:
        return get_codec(self.format)

    def to_config_store(self) -> FileConfigStore:
        return FileConfigStore(codec=self.to_codec(), organization=self.organization)


def get_settings() -> Settings:
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


# Private singleton instance
_settings: Settings | None = None


__all__ = [
    "AppInfo",
    "Settings",
    "get_settings",
]
