"""Schema document codec exports."""

from .codec_errors import (
    DuplicateKeyError,
    MalformedDocumentError,
    NestingTooDeepError,
    SchemaCodecError,
    TypeMismatchError,
    json_pointer,
)
from .schema_codec import (
    decode_definitions,
    decode_schema,
    encode_definitions,
    encode_schema,
    schema_from_json_value,
    schema_to_json_value,
)
from .type_codec import decode_type, encode_type

__all__ = [
    "DuplicateKeyError",
    "MalformedDocumentError",
    "NestingTooDeepError",
    "SchemaCodecError",
    "TypeMismatchError",
    "decode_definitions",
    "decode_schema",
    "decode_type",
    "encode_definitions",
    "encode_schema",
    "encode_type",
    "json_pointer",
    "schema_from_json_value",
    "schema_to_json_value",
]
