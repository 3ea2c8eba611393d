"""Configuration scaffold generation helpers."""

from __future__ import annotations

from pathlib import Path

from .loader import ConfigurationError, parse_configuration_text
from .runtime_settings import CodecSettings

DEFAULT_CONFIG_FILENAME = "schema-document.yaml"

_CONFIG_SCAFFOLD_TEMPLATE = """# Codec configuration for schema-document.
# Every setting is optional; remove a line to fall back to its default.

codec:
  # What to do when one JSON object repeats a member name.
  #   last_wins: keep the last value at the position of the first occurrence
  #   reject:    fail the whole decode and report the object path
  duplicate_keys: {duplicate_keys}
  # Spaces per indentation level when encoding; null writes compact JSON.
  indent: {indent}
  # Escape non-ASCII characters as \\uXXXX sequences.
  ensure_ascii: {ensure_ascii}
  # Re-emit schema keywords in the order they were read.
  preserve_keyword_order: {preserve_keyword_order}
"""


def build_placeholder_configuration(settings: CodecSettings | None = None) -> str:
    """Render the YAML configuration template with the given codec values.

    Without settings the built-in defaults are written, so the scaffold
    documents exactly what an absent configuration file means.
    """
    resolved = settings or CodecSettings()
    return _CONFIG_SCAFFOLD_TEMPLATE.format(
        duplicate_keys=resolved.duplicate_keys.value,
        indent="null" if resolved.indent is None else resolved.indent,
        ensure_ascii=_yaml_bool(resolved.ensure_ascii),
        preserve_keyword_order=_yaml_bool(resolved.preserve_keyword_order),
    )


def write_placeholder_configuration(
    output_path: Path | str, settings: CodecSettings | None = None
) -> Path:
    """Write the configuration template to the requested output path.

    The rendered text is loaded back before writing and must yield the same
    codec settings it was rendered from.

    Raises:
      FileExistsError: If the destination file already exists.
      ConfigurationError: If the rendered scaffold does not load back unchanged.
      OSError: If writing the scaffold fails.
    """
    destination = Path(output_path)
    if destination.exists():
        raise FileExistsError(f"Configuration file already exists: {destination.resolve()}")
    resolved = settings or CodecSettings()
    text = build_placeholder_configuration(resolved)
    if parse_configuration_text(text).codec != resolved:
        raise ConfigurationError("Rendered configuration scaffold does not round-trip.")
    destination.write_text(text, encoding="utf-8")
    return destination.resolve()


def _yaml_bool(value: bool) -> str:
    return "true" if value else "false"
