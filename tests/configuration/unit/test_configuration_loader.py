"""Configuration loader tests."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from schema_document.configuration.loader import (
    ConfigurationError,
    load_configuration,
    parse_configuration_text,
)
from schema_document.configuration.runtime_settings import CodecSettings, DuplicateKeyPolicy


def _write_file(path: Path, contents: str) -> Path:
    path.write_text(contents, encoding="utf-8")
    return path


def test_missing_path_returns_defaults() -> None:
    configuration = load_configuration(None)

    assert configuration.path is None
    assert configuration.codec == CodecSettings()
    assert configuration.codec.duplicate_keys is DuplicateKeyPolicy.LAST_WINS
    assert configuration.codec.indent == 2


def test_loads_yaml_codec_section(tmp_path: Path) -> None:
    config_path = _write_file(
        tmp_path / "schema-document.yaml",
        """
codec:
  duplicate_keys: Reject
  indent: 4
  ensure_ascii: true
  preserve_keyword_order: false
""",
    )

    configuration = load_configuration(config_path)

    assert configuration.path == config_path
    assert configuration.codec.duplicate_keys is DuplicateKeyPolicy.REJECT
    assert configuration.codec.indent == 4
    assert configuration.codec.ensure_ascii is True
    assert configuration.codec.preserve_keyword_order is False


def test_loads_json_configuration_with_compact_output(tmp_path: Path) -> None:
    config_path = _write_file(
        tmp_path / "config.json", json.dumps({"codec": {"indent": None}})
    )

    configuration = load_configuration(config_path)

    assert configuration.codec.indent is None
    assert configuration.codec.duplicate_keys is DuplicateKeyPolicy.LAST_WINS


def test_empty_file_uses_defaults(tmp_path: Path) -> None:
    config_path = _write_file(tmp_path / "empty.yaml", "")

    assert load_configuration(config_path).codec == CodecSettings()


def test_errors_when_file_missing(tmp_path: Path) -> None:
    with pytest.raises(ConfigurationError, match="not found"):
        load_configuration(tmp_path / "absent.yaml")


def test_errors_when_root_is_not_mapping(tmp_path: Path) -> None:
    config_path = _write_file(tmp_path / "list.yaml", "- codec\n")

    with pytest.raises(ConfigurationError, match="root must be a mapping"):
        load_configuration(config_path)


def test_errors_when_yaml_is_invalid(tmp_path: Path) -> None:
    config_path = _write_file(tmp_path / "broken.yaml", "codec: [unclosed\n")

    with pytest.raises(ConfigurationError, match="Failed to parse"):
        load_configuration(config_path)


@pytest.mark.parametrize(
    ("codec_section", "message"),
    [
        ("codec: 3", "must be a mapping"),
        ("codec:\n  duplicate_keys: first_wins", "codec.duplicate_keys"),
        ("codec:\n  duplicate_keys: 1", "codec.duplicate_keys must be a string"),
        ("codec:\n  indent: -1", "codec.indent must not be negative"),
        ("codec:\n  indent: true", "codec.indent must be an integer"),
        ("codec:\n  ensure_ascii: 'yes'", "codec.ensure_ascii must be true or false"),
        ("codec:\n  sort_keys: true", "Unknown codec setting"),
    ],
)
def test_errors_for_invalid_codec_values(tmp_path: Path, codec_section: str, message: str) -> None:
    config_path = _write_file(tmp_path / "config.yaml", codec_section + "\n")

    with pytest.raises(ConfigurationError, match=message):
        load_configuration(config_path)


def test_parses_text_without_a_file() -> None:
    configuration = parse_configuration_text("codec:\n  duplicate_keys: REJECT\n")

    assert configuration.path is None
    assert configuration.codec.duplicate_keys is DuplicateKeyPolicy.REJECT
