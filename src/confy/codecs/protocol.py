"""Codec protocol."""

from __future__ import annotations

from typing import Any, Protocol

from result import Result

from confy.common import DeserializationFailedError, SerializationFailedError


class Codec(Protocol):
    """Encodes values to one structured-text format and decodes them back."""

    name: str
    extension: str

    def encode(self, value: Any) -> Result[str, SerializationFailedError]:  # noqa: ANN401
        """Encode ``value`` to a complete document. Performs no I/O."""
        ...

    def decode[T](self, text: str, model_cls: type[T]) -> Result[T, DeserializationFailedError]:
        """Decode ``text`` into an instance of ``model_cls``.

        Keys the type does not declare are ignored unless the type forbids them.
        Missing keys fall back to field defaults, or fail if there is none.
        """
        ...
