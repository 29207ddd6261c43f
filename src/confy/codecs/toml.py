"""TOML codec."""

from __future__ import annotations

import tomllib
from typing import Any

import tomli_w
from result import Err, Ok, Result

from confy.common import DeserializationFailedError, SerializationFailedError

from .base import dump_value, find_lost_field, validate_mapping


class TomlCodec:
    name = "toml"
    extension = "toml"

    def encode(self, value: Any) -> Result[str, SerializationFailedError]:  # noqa: ANN401
        full = dump_value(value, self.name)
        if full.is_err():
            return full

        # TOML has no null: a None may only be left out when loading restores it
        data = dump_value(value, self.name, exclude_none=True)
        if data.is_err():
            return data

        lost_field = find_lost_field(type(value), data.ok_value, full.ok_value)
        if lost_field is not None:
            return Err(
                SerializationFailedError(
                    format=self.name,
                    message=f"TOML cannot represent null for field '{lost_field}' of {type(value).__name__}.",
                )
            )

        try:
            return Ok(tomli_w.dumps(data.ok_value))
        except (TypeError, ValueError) as exc:
            return Err(SerializationFailedError(format=self.name, message=str(exc), cause=exc))

    def decode[T](self, text: str, model_cls: type[T]) -> Result[T, DeserializationFailedError]:
        try:
            data = tomllib.loads(text)
        except tomllib.TOMLDecodeError as exc:
            return Err(
                DeserializationFailedError(
                    format=self.name,
                    line=getattr(exc, "lineno", None),
                    column=getattr(exc, "colno", None),
                    message=str(exc),
                    cause=exc,
                )
            )

        return validate_mapping(data, model_cls, self.name)
