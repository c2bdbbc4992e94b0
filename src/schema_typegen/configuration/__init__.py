"""Configuration domain exports."""

from .config_scaffold_builder import (
    DEFAULT_CONFIG_FILENAME,
    build_placeholder_configuration,
    write_placeholder_configuration,
)
from .loader import ConfigurationError, load_configuration
from .runtime_settings import (
    DEFAULT_DIRECTORY_TYPE_NAME,
    ComputedField,
    GenerationOptions,
    SnapshotSource,
    TypegenConfiguration,
)

__all__ = [
    "ComputedField",
    "GenerationOptions",
    "SnapshotSource",
    "TypegenConfiguration",
    "ConfigurationError",
    "load_configuration",
    "DEFAULT_CONFIG_FILENAME",
    "DEFAULT_DIRECTORY_TYPE_NAME",
    "build_placeholder_configuration",
    "write_placeholder_configuration",
]
