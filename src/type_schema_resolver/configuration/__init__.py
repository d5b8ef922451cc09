"""Configuration domain exports."""

from .config_scaffold_builder import (
    DEFAULT_CONFIG_FILENAME,
    build_placeholder_configuration,
    write_placeholder_configuration,
)
from .loader import ConfigurationError, load_configuration, parse_model_targets
from .model_targets import ModelImportError, load_model_class
from .runtime_settings import Configuration, IntrospectionSettings, OutputSettings

__all__ = [
    "Configuration",
    "IntrospectionSettings",
    "OutputSettings",
    "ConfigurationError",
    "ModelImportError",
    "load_configuration",
    "load_model_class",
    "parse_model_targets",
    "DEFAULT_CONFIG_FILENAME",
    "build_placeholder_configuration",
    "write_placeholder_configuration",
]
