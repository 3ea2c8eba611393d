"""Configuration loader service."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml

from .runtime_settings import CodecSettings, Configuration, DuplicateKeyPolicy

_LOGGER = logging.getLogger(__name__)

_CODEC_KEYS = frozenset({"duplicate_keys", "indent", "ensure_ascii", "preserve_keyword_order"})


class ConfigurationError(Exception):
    """Raised when the configuration file is invalid."""


def load_configuration(config_path: Path | str | None = None) -> Configuration:
    """Load and validate the configuration file.

    Without a path the built-in defaults are returned. YAML and JSON files are
    both accepted since every JSON document is valid YAML.
    """
    if config_path is None:
        return Configuration(path=None)

    path = Path(config_path)
    if not path.exists():
        raise ConfigurationError(f"Configuration file not found: {path}")

    configuration = parse_configuration_text(path.read_text(encoding="utf-8"), path=path)
    _LOGGER.debug("Loaded configuration from %s: %s", path, configuration.codec)
    return configuration


def parse_configuration_text(text: str, *, path: Path | None = None) -> Configuration:
    """Validate configuration text without touching the filesystem."""
    try:
        parsed = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigurationError(f"Failed to parse configuration file: {exc}") from exc

    if parsed is None:
        parsed = {}

    if not isinstance(parsed, Mapping):
        raise ConfigurationError("Configuration root must be a mapping.")

    return Configuration(path=path, codec=_parse_codec_section(parsed.get("codec")))


def _parse_codec_section(value: Any) -> CodecSettings:
    if value is None:
        return CodecSettings()
    if not isinstance(value, Mapping):
        raise ConfigurationError("Configuration section 'codec' must be a mapping.")

    unknown = sorted(str(key) for key in value if key not in _CODEC_KEYS)
    if unknown:
        raise ConfigurationError(f"Unknown codec setting(s): {', '.join(unknown)}")

    defaults = CodecSettings()
    return CodecSettings(
        duplicate_keys=_parse_duplicate_key_policy(
            value.get("duplicate_keys", defaults.duplicate_keys.value)
        ),
        indent=_optional_non_negative_int(value.get("indent", defaults.indent), "codec.indent"),
        ensure_ascii=_require_bool(
            value.get("ensure_ascii", defaults.ensure_ascii), "codec.ensure_ascii"
        ),
        preserve_keyword_order=_require_bool(
            value.get("preserve_keyword_order", defaults.preserve_keyword_order),
            "codec.preserve_keyword_order",
        ),
    )


def _parse_duplicate_key_policy(value: Any) -> DuplicateKeyPolicy:
    if not isinstance(value, str):
        raise ConfigurationError("codec.duplicate_keys must be a string.")
    normalized = value.strip().lower()
    try:
        return DuplicateKeyPolicy(normalized)
    except ValueError as exc:
        choices = ", ".join(policy.value for policy in DuplicateKeyPolicy)
        raise ConfigurationError(
            f"codec.duplicate_keys '{value}' is not one of: {choices}."
        ) from exc


def _optional_non_negative_int(value: Any, field_name: str) -> int | None:
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, int):
        raise ConfigurationError(f"{field_name} must be an integer.")
    if value < 0:
        raise ConfigurationError(f"{field_name} must not be negative.")
    return value


def _require_bool(value: Any, field_name: str) -> bool:
    if not isinstance(value, bool):
        raise ConfigurationError(f"{field_name} must be true or false.")
    return value
