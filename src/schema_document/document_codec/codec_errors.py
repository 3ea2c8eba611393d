"""Schema document codec errors and JSON pointer helpers."""

from __future__ import annotations


class SchemaCodecError(Exception):
    """Base error for schema document decode and encode failures.

    `path` is a JSON pointer (RFC 6901) to the offending node; the document
    root is the empty string.
    """

    def __init__(self, message: str, *, path: str = "") -> None:
        location = path or "/"
        super().__init__(f"{message} (at {location})")
        self.path = path


class TypeMismatchError(SchemaCodecError):
    """Raised when a JSON value has the wrong shape for its schema keyword."""

    def __init__(self, *, path: str, expected: str, actual: str) -> None:
        super().__init__(f"Expected {expected}, got {actual}", path=path)
        self.expected = expected
        self.actual = actual

    @property
    def field(self) -> str:
        """Return the keyword or member name the mismatch was found at."""
        if not self.path:
            return ""
        return unescape_pointer_segment(self.path.rsplit("/", 1)[-1])


class MalformedDocumentError(SchemaCodecError):
    """Raised when the input is not JSON or its root is not a JSON object."""


class NestingTooDeepError(SchemaCodecError):
    """Raised when a schema tree nests deeper than the interpreter stack allows."""


class DuplicateKeyError(SchemaCodecError):
    """Raised when a JSON object repeats a member name under the reject policy."""

    def __init__(self, *, path: str, key: str) -> None:
        super().__init__(f"Duplicate member name {key!r}", path=path)
        self.key = key


def json_pointer(parent: str, segment: str | int) -> str:
    """Append one reference token to a JSON pointer."""
    return f"{parent}/{escape_pointer_segment(str(segment))}"


def escape_pointer_segment(segment: str) -> str:
    return segment.replace("~", "~0").replace("/", "~1")


def unescape_pointer_segment(segment: str) -> str:
    return segment.replace("~1", "/").replace("~0", "~")


def json_kind(value: object) -> str:
    """Name the JSON kind of a decoded value."""
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, list):
        return "array"
    if isinstance(value, dict):
        return "object"
    return type(value).__name__
