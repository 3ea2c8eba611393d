"""Schema model exports."""

from .multivalued_type import (
    TYPE_ARRAY,
    TYPE_BOOLEAN,
    TYPE_INTEGER,
    TYPE_NULL,
    TYPE_NUMBER,
    TYPE_OBJECT,
    TYPE_STRING,
    MultivaluedType,
    new_multivalued_type,
)
from .ordered_properties import OrderedProperties
from .schema_node import Definitions, Schema

__all__ = [
    "Definitions",
    "MultivaluedType",
    "OrderedProperties",
    "Schema",
    "TYPE_ARRAY",
    "TYPE_BOOLEAN",
    "TYPE_INTEGER",
    "TYPE_NULL",
    "TYPE_NUMBER",
    "TYPE_OBJECT",
    "TYPE_STRING",
    "new_multivalued_type",
]
