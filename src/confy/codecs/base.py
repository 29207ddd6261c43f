"""Conversions between config values and plain mappings shared by all codecs."""

from __future__ import annotations

from functools import lru_cache
from typing import Any

from pydantic import TypeAdapter, ValidationError
from pydantic_core import PydanticSerializationError
from result import Err, Ok, Result

from confy.common import DeserializationFailedError, SerializationFailedError


@lru_cache(maxsize=128)
def get_adapter(model_cls: type) -> TypeAdapter[Any]:
    return TypeAdapter(model_cls)


def dump_value(value: Any, format: str, exclude_none: bool = False) -> Result[dict[str, Any], SerializationFailedError]:  # noqa: ANN401
    try:
        data = get_adapter(type(value)).dump_python(value, mode="json", exclude_none=exclude_none)
    except (PydanticSerializationError, TypeError, ValueError) as exc:
        return Err(
            SerializationFailedError(
                format=format,
                message=f"Unable to serialize {type(value).__name__}: {exc}",
                cause=exc,
            )
        )

    if not isinstance(data, dict):
        return Err(
            SerializationFailedError(
                format=format,
                message=f"{type(value).__name__} does not serialize to a mapping of keys to values.",
            )
        )
    return Ok(data)


def validate_mapping[T](data: Any, model_cls: type[T], format: str) -> Result[T, DeserializationFailedError]:  # noqa: ANN401
    if data is None:
        data = {}

    if not isinstance(data, dict):
        return Err(
            DeserializationFailedError(
                format=format,
                message="Configuration root must be a mapping of keys to values.",
            )
        )

    try:
        return Ok(get_adapter(model_cls).validate_python(data))
    except ValidationError as exc:
        error_details = exc.errors()
        field = None
        message = str(exc)
        if error_details:
            first = error_details[0]
            loc = first.get("loc") or ()
            field = ".".join(str(part) for part in loc) or None
            message = first.get("msg", message)
        return Err(
            DeserializationFailedError(
                format=format,
                field=field,
                message=message,
                cause=exc,
            )
        )


def find_lost_field(model_cls: type, data: dict[str, Any], expected: dict[str, Any]) -> str | None:
    """Return the dotted field that ``data`` does not restore to its ``expected`` dump, if any."""
    adapter = get_adapter(model_cls)
    try:
        restored = adapter.dump_python(adapter.validate_python(data), mode="json")
    except ValidationError as exc:
        error_details = exc.errors()
        loc = error_details[0].get("loc") or () if error_details else ()
        return ".".join(str(part) for part in loc) or "<root>"

    return _first_difference(expected, restored, ())


def _first_difference(expected: Any, actual: Any, location: tuple[str, ...]) -> str | None:  # noqa: ANN401
    if isinstance(expected, dict) and isinstance(actual, dict):
        for key in [*expected, *(k for k in actual if k not in expected)]:
            if key not in expected or key not in actual:
                return ".".join((*location, str(key)))
            difference = _first_difference(expected[key], actual[key], (*location, str(key)))
            if difference is not None:
                return difference
        return None

    if expected == actual:
        return None
    return ".".join(location) or "<root>"
