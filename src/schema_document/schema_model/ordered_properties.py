"""Insertion-ordered `properties` container."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, MutableMapping
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .schema_node import Schema


class OrderedProperties(MutableMapping[str, "Schema"]):
    """Property name to schema mapping that remembers declaration order.

    Setting an existing name replaces its schema in place; setting a new name
    appends it. The order is kept in an explicit name list so encoding never
    depends on how a lookup table happens to iterate. Not thread-safe.
    """

    def __init__(self, pairs: Iterable[tuple[str, Schema]] = ()) -> None:
        self._names: list[str] = []
        self._schemas: dict[str, Schema] = {}
        for name, schema in pairs:
            self.set(name, schema)

    def set(self, name: str, schema: Schema) -> None:
        """Insert or replace the schema for `name` without moving it."""
        if name not in self._schemas:
            self._names.append(name)
        self._schemas[name] = schema

    def lookup(self, name: str) -> tuple[Schema | None, bool]:
        """Return the schema for `name` and whether it was present."""
        schema = self._schemas.get(name)
        return schema, name in self._schemas

    def names(self) -> tuple[str, ...]:
        """Return property names in declaration order."""
        return tuple(self._names)

    def __getitem__(self, name: str) -> Schema:
        return self._schemas[name]

    def __setitem__(self, name: str, schema: Schema) -> None:
        self.set(name, schema)

    def __delitem__(self, name: str) -> None:
        del self._schemas[name]
        self._names.remove(name)

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._names))

    def __len__(self) -> int:
        return len(self._names)

    def __contains__(self, name: object) -> bool:
        return name in self._schemas

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, OrderedProperties):
            return NotImplemented
        return list(self.items()) == list(other.items())

    def __repr__(self) -> str:
        members = ", ".join(f"{name!r}: {self._schemas[name]!r}" for name in self._names)
        return f"OrderedProperties({{{members}}})"
