"""Scalar-or-array codec for the schema `type` keyword."""

from __future__ import annotations

from schema_document.schema_model import MultivaluedType

from .codec_errors import TypeMismatchError, json_kind

_EXPECTED_SHAPE = "a type name string or a non-empty array of type name strings"


def encode_type(value: MultivaluedType) -> str | list[str]:
    """Return a bare string for one type name, otherwise an array in stored order.

    A value decoded from a one-element array is written back as a bare string.
    """
    if value.is_multivalued:
        return list(value.tokens)
    return value.tokens[0]


def decode_type(raw: object, *, path: str) -> MultivaluedType:
    """Decode a `type` keyword value that is either a string or an array of strings."""
    if isinstance(raw, str):
        return MultivaluedType((raw,))
    if isinstance(raw, list):
        if not raw:
            raise TypeMismatchError(path=path, expected=_EXPECTED_SHAPE, actual="empty array")
        for element in raw:
            if not isinstance(element, str):
                raise TypeMismatchError(
                    path=path,
                    expected=_EXPECTED_SHAPE,
                    actual=f"array containing {json_kind(element)}",
                )
        return MultivaluedType(tuple(raw))
    raise TypeMismatchError(path=path, expected=_EXPECTED_SHAPE, actual=json_kind(raw))
