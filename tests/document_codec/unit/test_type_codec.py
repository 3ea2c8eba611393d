"""Scalar-or-array type keyword codec tests."""

from __future__ import annotations

import pytest
from schema_document.document_codec import TypeMismatchError, decode_type, encode_type
from schema_document.schema_model import TYPE_ARRAY, TYPE_NULL, TYPE_STRING, new_multivalued_type


def test_single_name_encodes_as_bare_string() -> None:
    assert encode_type(TYPE_STRING) == "string"


def test_multiple_names_encode_as_array_in_order() -> None:
    assert encode_type(new_multivalued_type(TYPE_ARRAY, TYPE_NULL)) == ["array", "null"]


def test_decodes_string_and_array_forms() -> None:
    assert decode_type("array", path="/type") == TYPE_ARRAY
    assert decode_type(["array", "null"], path="/type") == new_multivalued_type("array", "null")


def test_single_element_array_collapses_to_string_on_encode() -> None:
    decoded = decode_type(["string"], path="/type")

    assert decoded == TYPE_STRING
    assert decoded.is_multivalued is False
    assert encode_type(decoded) == "string"


@pytest.mark.parametrize(
    ("raw", "actual"),
    [
        (5, "number"),
        (True, "boolean"),
        (None, "null"),
        ({"type": "string"}, "object"),
        ([], "empty array"),
        (["string", 1], "array containing number"),
    ],
)
def test_rejects_other_shapes(raw: object, actual: str) -> None:
    with pytest.raises(TypeMismatchError) as excinfo:
        decode_type(raw, path="/properties/age/type")

    assert excinfo.value.actual == actual
    assert excinfo.value.path == "/properties/age/type"
    assert excinfo.value.field == "type"
