"""Structured-text codecs. Exactly one is active per store."""

from typing import Literal

from .json import JsonCodec
from .protocol import Codec
from .toml import TomlCodec
from .yaml import YamlCodec

ConfigFormat = Literal["toml", "yaml", "json"]


def get_codec(format: ConfigFormat) -> Codec:
    match format:
        case "toml":
            return TomlCodec()
        case "yaml":
            return YamlCodec()
        case "json":
            return JsonCodec()
        case _:
            raise ValueError(f"Unsupported config format: {format}")


__all__ = [
    "Codec",
    "ConfigFormat",
    "JsonCodec",
    "TomlCodec",
    "YamlCodec",
    "get_codec",
]
