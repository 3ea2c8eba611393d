"""Schema type value tests."""

from __future__ import annotations

import pytest
from schema_document.schema_model import (
    TYPE_ARRAY,
    TYPE_NULL,
    TYPE_STRING,
    MultivaluedType,
    new_multivalued_type,
)


def test_single_type_name_is_not_multivalued() -> None:
    assert TYPE_STRING.tokens == ("string",)
    assert TYPE_STRING.is_multivalued is False
    assert len(TYPE_STRING) == 1


def test_combined_type_keeps_construction_order() -> None:
    combined = new_multivalued_type(TYPE_ARRAY, TYPE_NULL)

    assert combined.tokens == ("array", "null")
    assert combined.is_multivalued is True
    assert list(combined) == ["array", "null"]
    assert str(combined) == "array|null"


def test_equality_is_order_sensitive() -> None:
    assert new_multivalued_type("array", "null") == new_multivalued_type(TYPE_ARRAY, TYPE_NULL)
    assert new_multivalued_type("array", "null") != new_multivalued_type("null", "array")
    assert new_multivalued_type("array") == TYPE_ARRAY
    assert TYPE_ARRAY != new_multivalued_type("array", "null")


def test_values_are_hashable_and_immutable() -> None:
    combined = new_multivalued_type("string", "null")

    assert {combined: "ok"}[new_multivalued_type("string", "null")] == "ok"
    with pytest.raises(AttributeError):
        combined.tokens = ("string",)  # type: ignore[misc]


def test_includes_checks_membership() -> None:
    combined = new_multivalued_type("integer", "null")

    assert combined.includes("null")
    assert not combined.includes("string")


def test_list_input_is_stored_as_tuple() -> None:
    value = MultivaluedType(["object", "null"])  # type: ignore[arg-type]

    assert value.tokens == ("object", "null")


def test_bare_string_is_one_type_name() -> None:
    assert MultivaluedType("string") == TYPE_STRING  # type: ignore[arg-type]


@pytest.mark.parametrize("tokens", [(), ("string", 3)])
def test_rejects_empty_or_non_string_tokens(tokens: tuple) -> None:
    with pytest.raises(ValueError):
        MultivaluedType(tokens)
