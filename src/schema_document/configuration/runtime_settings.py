"""Configuration domain entities."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path


class DuplicateKeyPolicy(str, Enum):
    """How repeated member names inside one JSON object are handled."""

    LAST_WINS = "last_wins"
    REJECT = "reject"


@dataclass(frozen=True)
class CodecSettings:
    """Decode and encode options for schema documents."""

    duplicate_keys: DuplicateKeyPolicy = DuplicateKeyPolicy.LAST_WINS
    indent: int | None = 2
    ensure_ascii: bool = False
    preserve_keyword_order: bool = True


@dataclass(frozen=True)
class Configuration:
    """Top-level configuration aggregate."""

    path: Path | None
    codec: CodecSettings = field(default_factory=CodecSettings)
