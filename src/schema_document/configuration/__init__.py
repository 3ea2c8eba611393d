"""Configuration domain exports."""

from .config_scaffold_builder import (
    DEFAULT_CONFIG_FILENAME,
    build_placeholder_configuration,
    write_placeholder_configuration,
)
from .loader import ConfigurationError, load_configuration, parse_configuration_text
from .runtime_settings import CodecSettings, Configuration, DuplicateKeyPolicy

__all__ = [
    "CodecSettings",
    "Configuration",
    "DuplicateKeyPolicy",
    "ConfigurationError",
    "load_configuration",
    "parse_configuration_text",
    "DEFAULT_CONFIG_FILENAME",
    "build_placeholder_configuration",
    "write_placeholder_configuration",
]
