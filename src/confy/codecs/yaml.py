"""YAML codec."""

from __future__ import annotations

from typing import Any

import yaml
from result import Err, Ok, Result

from confy.common import DeserializationFailedError, SerializationFailedError

from .base import dump_value, validate_mapping


class YamlCodec:
    name = "yaml"
    extension = "yaml"

    def encode(self, value: Any) -> Result[str, SerializationFailedError]:  # noqa: ANN401
        data = dump_value(value, self.name)
        if data.is_err():
            return data

        try:
            return Ok(yaml.safe_dump(data.ok_value, sort_keys=False, allow_unicode=True, default_flow_style=False))
        except yaml.YAMLError as exc:
            return Err(SerializationFailedError(format=self.name, message=str(exc), cause=exc))

    def decode[T](self, text: str, model_cls: type[T]) -> Result[T, DeserializationFailedError]:
        try:
            data = yaml.safe_load(text)
        except yaml.YAMLError as exc:
            mark = getattr(exc, "problem_mark", None)
            line = getattr(mark, "line", None)
            column = getattr(mark, "column", None)
            return Err(
                DeserializationFailedError(
                    format=self.name,
                    line=(line + 1) if line is not None else None,
                    column=(column + 1) if column is not None else None,
                    message=str(exc),
                    cause=exc,
                )
            )

        return validate_mapping(data, model_cls, self.name)
