"""Order-preserving JSON Schema document model."""

import logging

from .document_codec import (
    DuplicateKeyError,
    MalformedDocumentError,
    SchemaCodecError,
    TypeMismatchError,
    decode_definitions,
    decode_schema,
    encode_definitions,
    encode_schema,
)
from .schema_model import (
    TYPE_ARRAY,
    TYPE_BOOLEAN,
    TYPE_INTEGER,
    TYPE_NULL,
    TYPE_NUMBER,
    TYPE_OBJECT,
    TYPE_STRING,
    Definitions,
    MultivaluedType,
    OrderedProperties,
    Schema,
    new_multivalued_type,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "Definitions",
    "DuplicateKeyError",
    "MalformedDocumentError",
    "MultivaluedType",
    "OrderedProperties",
    "Schema",
    "SchemaCodecError",
    "TYPE_ARRAY",
    "TYPE_BOOLEAN",
    "TYPE_INTEGER",
    "TYPE_NULL",
    "TYPE_NUMBER",
    "TYPE_OBJECT",
    "TYPE_STRING",
    "TypeMismatchError",
    "decode_definitions",
    "decode_schema",
    "encode_definitions",
    "encode_schema",
    "new_multivalued_type",
]
