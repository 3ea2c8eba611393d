"""Schema document decoding and encoding service."""

from __future__ import annotations

import json
import logging
from collections.abc import Callable, Iterable
from typing import Any

from schema_document.configuration.runtime_settings import CodecSettings, DuplicateKeyPolicy
from schema_document.schema_model import Definitions, OrderedProperties, Schema

from .codec_errors import (
    DuplicateKeyError,
    MalformedDocumentError,
    NestingTooDeepError,
    SchemaCodecError,
    TypeMismatchError,
    json_kind,
    json_pointer,
)
from .type_codec import decode_type, encode_type

_LOGGER = logging.getLogger(__name__)

_CANONICAL_KEYWORD_ORDER = (
    "$ref",
    "title",
    "description",
    "type",
    "properties",
    "required",
    "items",
)
_MODELLED_KEYWORDS = frozenset(_CANONICAL_KEYWORD_ORDER)


class _JsonObject(dict):
    """Decoded JSON object that remembers member names seen more than once."""

    duplicate_keys: tuple[str, ...] = ()


def _collect_members(pairs: Iterable[tuple[str, Any]]) -> _JsonObject:
    # A repeated name keeps the position of its first occurrence and the last value.
    members = _JsonObject()
    duplicates: list[str] = []
    for key, value in pairs:
        if key in members and key not in duplicates:
            duplicates.append(key)
        members[key] = value
    members.duplicate_keys = tuple(duplicates)
    return members


def decode_schema(data: bytes | str, settings: CodecSettings | None = None) -> Schema:
    """Decode one schema node document."""
    resolved = settings or CodecSettings()
    root = _parse_document(data)
    if not isinstance(root, dict):
        raise MalformedDocumentError(
            f"Schema document root must be a JSON object, got {json_kind(root)}"
        )
    try:
        schema = _SchemaDecoder(resolved).schema(root, path="")
    except RecursionError as exc:
        raise NestingTooDeepError("Schema document nests too deeply to decode") from exc
    _LOGGER.debug("Decoded schema document with %d keyword(s)", len(root))
    return schema


def decode_definitions(data: bytes | str, settings: CodecSettings | None = None) -> Definitions:
    """Decode a name to schema table such as an OpenAPI `components/schemas` object."""
    resolved = settings or CodecSettings()
    root = _parse_document(data)
    if not isinstance(root, dict):
        raise MalformedDocumentError(
            f"Definitions document root must be a JSON object, got {json_kind(root)}"
        )
    try:
        definitions = _SchemaDecoder(resolved).definitions(root)
    except RecursionError as exc:
        raise NestingTooDeepError("Definitions document nests too deeply to decode") from exc
    _LOGGER.debug("Decoded %d schema definition(s)", len(definitions))
    return definitions


def schema_from_json_value(
    value: Any, path: str = "", settings: CodecSettings | None = None
) -> Schema:
    """Decode an already parsed JSON value into a schema node."""
    try:
        return _SchemaDecoder(settings or CodecSettings()).schema(value, path=path)
    except RecursionError as exc:
        raise NestingTooDeepError("Schema value nests too deeply to decode", path=path) from exc


def encode_schema(schema: Schema, settings: CodecSettings | None = None) -> bytes:
    """Encode one schema node as UTF-8 JSON."""
    resolved = settings or CodecSettings()
    value = schema_to_json_value(schema, preserve_keyword_order=resolved.preserve_keyword_order)
    return _dump(value, resolved)


def encode_definitions(definitions: Definitions, settings: CodecSettings | None = None) -> bytes:
    """Encode a definitions table as UTF-8 JSON, members in table order."""
    resolved = settings or CodecSettings()
    try:
        value = {
            name: _encode_node(
                schema,
                path=json_pointer("", name),
                preserve_keyword_order=resolved.preserve_keyword_order,
            )
            for name, schema in definitions.items()
        }
    except RecursionError as exc:
        raise NestingTooDeepError("Definitions table nests too deeply to encode") from exc
    return _dump(value, resolved)


def schema_to_json_value(schema: Schema, *, preserve_keyword_order: bool = True) -> dict[str, Any]:
    """Return the JSON object for a schema node; absent fields are left out.

    Raises:
      SchemaCodecError: If an extra keyword reuses a modelled keyword name.
      NestingTooDeepError: If the tree is too deep to walk.
    """
    try:
        return _encode_node(schema, path="", preserve_keyword_order=preserve_keyword_order)
    except RecursionError as exc:
        raise NestingTooDeepError("Schema nests too deeply to encode") from exc


def _encode_node(schema: Schema, *, path: str, preserve_keyword_order: bool) -> dict[str, Any]:
    members: dict[str, Any] = {}
    if schema.ref is not None:
        members["$ref"] = schema.ref
    if schema.title is not None:
        members["title"] = schema.title
    if schema.description is not None:
        members["description"] = schema.description
    if schema.type is not None:
        members["type"] = encode_type(schema.type)
    if schema.properties is not None:
        properties_path = json_pointer(path, "properties")
        members["properties"] = {
            name: _encode_node(
                child,
                path=json_pointer(properties_path, name),
                preserve_keyword_order=preserve_keyword_order,
            )
            for name, child in schema.properties.items()
        }
    if schema.required is not None:
        members["required"] = list(schema.required)
    if schema.items is not None:
        members["items"] = _encode_node(
            schema.items,
            path=json_pointer(path, "items"),
            preserve_keyword_order=preserve_keyword_order,
        )
    for keyword, value in schema.extra_keywords.items():
        if keyword in _MODELLED_KEYWORDS:
            raise SchemaCodecError(
                f"Extra keyword {keyword!r} collides with the modelled field of the same name",
                path=json_pointer(path, keyword),
            )
        members[keyword] = value

    if not preserve_keyword_order or not schema.keyword_order:
        return members
    ordered = [keyword for keyword in schema.keyword_order if keyword in members]
    ordered.extend(keyword for keyword in members if keyword not in schema.keyword_order)
    return {keyword: members[keyword] for keyword in ordered}


def _reject_constant(name: str) -> Any:
    raise MalformedDocumentError(f"Invalid JSON document: {name} is not a JSON number")


def _parse_document(data: bytes | str) -> Any:
    try:
        return json.loads(
            data, object_pairs_hook=_collect_members, parse_constant=_reject_constant
        )
    except ValueError as exc:
        raise MalformedDocumentError(f"Invalid JSON document: {exc}") from exc
    except RecursionError as exc:
        raise NestingTooDeepError("JSON document nests too deeply to parse") from exc


def _dump(value: Any, settings: CodecSettings) -> bytes:
    try:
        text = json.dumps(
            value,
            indent=settings.indent,
            ensure_ascii=settings.ensure_ascii,
            allow_nan=False,
        )
    except ValueError as exc:
        raise SchemaCodecError(f"Cannot encode schema document: {exc}") from exc
    except RecursionError as exc:
        raise NestingTooDeepError("Schema document nests too deeply to encode") from exc
    return text.encode("utf-8")


class _SchemaDecoder:
    """Walks parsed JSON and builds the schema tree, tracking pointer paths."""

    def __init__(self, settings: CodecSettings) -> None:
        self._settings = settings
        self._keyword_decoders: dict[str, Callable[[Any, str], Any]] = {
            "$ref": self._string,
            "title": self._string,
            "description": self._string,
            "type": lambda raw, path: decode_type(raw, path=path),
            "properties": self.properties,
            "required": self._required,
            "items": lambda raw, path: self.schema(raw, path=path),
        }

    def definitions(self, raw: dict) -> Definitions:
        members = self._object(raw, path="", expected="a definitions object")
        definitions = Definitions()
        for name, node in members.items():
            definitions[name] = self.schema(node, path=json_pointer("", name))
        return definitions

    def schema(self, raw: Any, *, path: str) -> Schema:
        members = self._object(raw, path=path, expected="a schema object")
        fields: dict[str, Any] = {}
        extra_keywords: dict[str, Any] = {}
        for keyword, value in members.items():
            member_path = json_pointer(path, keyword)
            decoder = self._keyword_decoders.get(keyword)
            if decoder is None:
                extra_keywords[keyword] = self._plain(value, member_path)
                continue
            fields["ref" if keyword == "$ref" else keyword] = decoder(value, member_path)
        return Schema(
            **fields,
            extra_keywords=extra_keywords,
            keyword_order=tuple(members),
        )

    def properties(self, raw: Any, path: str) -> OrderedProperties:
        members = self._object(raw, path=path, expected="a properties object")
        properties = OrderedProperties()
        for name, node in members.items():
            properties.set(name, self.schema(node, path=json_pointer(path, name)))
        return properties

    def _object(self, raw: Any, *, path: str, expected: str) -> dict:
        if not isinstance(raw, dict):
            raise TypeMismatchError(path=path, expected=expected, actual=json_kind(raw))
        self._check_duplicates(raw, path)
        return raw

    def _check_duplicates(self, raw: dict, path: str) -> None:
        if self._settings.duplicate_keys is not DuplicateKeyPolicy.REJECT:
            return
        duplicates = getattr(raw, "duplicate_keys", ())
        if duplicates:
            raise DuplicateKeyError(path=path, key=duplicates[0])

    def _plain(self, value: Any, path: str) -> Any:
        if isinstance(value, dict):
            self._check_duplicates(value, path)
            return {
                key: self._plain(member, json_pointer(path, key)) for key, member in value.items()
            }
        if isinstance(value, list):
            return [
                self._plain(element, json_pointer(path, index))
                for index, element in enumerate(value)
            ]
        return value

    @staticmethod
    def _string(raw: Any, path: str) -> str:
        if not isinstance(raw, str):
            raise TypeMismatchError(path=path, expected="a string", actual=json_kind(raw))
        return raw

    @staticmethod
    def _required(raw: Any, path: str) -> list[str]:
        if not isinstance(raw, list):
            raise TypeMismatchError(
                path=path, expected="an array of property names", actual=json_kind(raw)
            )
        for index, name in enumerate(raw):
            if not isinstance(name, str):
                raise TypeMismatchError(
                    path=json_pointer(path, index),
                    expected="a property name string",
                    actual=json_kind(name),
                )
        return list(raw)
