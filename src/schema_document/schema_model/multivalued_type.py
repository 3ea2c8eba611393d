"""Schema `type` keyword value."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass


@dataclass(frozen=True)
class MultivaluedType:
    """One or more JSON Schema type names, in declaration order.

    A single name is the "exactly this type" form (`"array"`); two or more
    names are the "any of these types" form (`["array", "null"]`). Which
    JSON shape is emitted follows from the number of names, not from how the
    value was written in the source document.
    """

    tokens: tuple[str, ...]

    def __post_init__(self) -> None:
        if isinstance(self.tokens, str):
            tokens: tuple[str, ...] = (self.tokens,)
        else:
            tokens = tuple(self.tokens)
        if not tokens:
            raise ValueError("A schema type needs at least one type name.")
        for token in tokens:
            if not isinstance(token, str):
                raise ValueError(f"Schema type names must be strings, got {token!r}.")
        object.__setattr__(self, "tokens", tokens)

    @property
    def is_multivalued(self) -> bool:
        """Return True when the value lists more than one type name."""
        return len(self.tokens) > 1

    def includes(self, token: str) -> bool:
        """Return True when `token` is one of the type names."""
        return token in self.tokens

    def __iter__(self) -> Iterator[str]:
        return iter(self.tokens)

    def __len__(self) -> int:
        return len(self.tokens)

    def __str__(self) -> str:
        return "|".join(self.tokens)


def new_multivalued_type(*tokens: str | MultivaluedType) -> MultivaluedType:
    """Build a type value from names or from existing type values.

    `new_multivalued_type(TYPE_ARRAY, TYPE_NULL)` and
    `new_multivalued_type("array", "null")` are equivalent.
    """
    return MultivaluedType(tuple(_flatten_tokens(tokens)))


def _flatten_tokens(values: Iterable[str | MultivaluedType]) -> Iterator[str]:
    for value in values:
        if isinstance(value, MultivaluedType):
            yield from value.tokens
        else:
            yield value


TYPE_ARRAY = MultivaluedType(("array",))
TYPE_BOOLEAN = MultivaluedType(("boolean",))
TYPE_INTEGER = MultivaluedType(("integer",))
TYPE_NULL = MultivaluedType(("null",))
TYPE_NUMBER = MultivaluedType(("number",))
TYPE_OBJECT = MultivaluedType(("object",))
TYPE_STRING = MultivaluedType(("string",))
