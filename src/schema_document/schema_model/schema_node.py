"""Schema node and definitions table entities."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from .multivalued_type import MultivaluedType
from .ordered_properties import OrderedProperties


@dataclass
class Schema:  # pylint: disable=too-many-instance-attributes
    """One JSON Schema node.

    Fields left as None are absent from the document. `ref` holds the raw
    `$ref` string and is never resolved. Keywords outside the modelled subset
    are kept verbatim in `extra_keywords`. `keyword_order` records the member
    order of the source object and does not take part in equality.
    """

    description: str | None = None
    title: str | None = None
    type: MultivaluedType | None = None
    properties: OrderedProperties | None = None
    required: list[str] | None = None
    items: Schema | None = None
    ref: str | None = None
    extra_keywords: dict[str, Any] = field(default_factory=dict)
    keyword_order: tuple[str, ...] = field(default=(), compare=False, repr=False)


class Definitions(dict[str, Schema]):
    """Named top-level schemas, such as an OpenAPI `components/schemas` table."""

    def lookup(self, name: str) -> tuple[Schema | None, bool]:
        """Return the schema registered under `name` and whether it exists."""
        schema = self.get(name)
        return schema, name in self
