"""JSON codec."""

from __future__ import annotations

import json
from typing import Any

from result import Err, Ok, Result

from confy.common import DeserializationFailedError, SerializationFailedError

from .base import dump_value, validate_mapping


class JsonCodec:
    name = "json"
    extension = "json"

    def encode(self, value: Any) -> Result[str, SerializationFailedError]:  # noqa: ANN401
        data = dump_value(value, self.name)
        if data.is_err():
            return data

        try:
            return Ok(json.dumps(data.ok_value, indent=2, ensure_ascii=False) + "\n")
        except (TypeError, ValueError) as exc:
            return Err(SerializationFailedError(format=self.name, message=str(exc), cause=exc))

    def decode[T](self, text: str, model_cls: type[T]) -> Result[T, DeserializationFailedError]:
        try:
            data = json.loads(text)
        except json.JSONDecodeError as exc:
            return Err(
                DeserializationFailedError(
                    format=self.name,
                    line=exc.lineno,
                    column=exc.colno,
                    message=exc.msg,
                    cause=exc,
                )
            )

        return validate_mapping(data, model_cls, self.name)
