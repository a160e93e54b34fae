"""Configuration models and loaders for brgen."""

from brgen.config.loader import (
    ConfigurationError,
    collect_property_names,
    create_config_from_args,
    generate_default_config,
    load_config_from_yaml,
    load_property_names,
)
from brgen.config.models import BRGenConfig, GenerationConfig, OutputConfig

__all__ = [
    "BRGenConfig",
    "ConfigurationError",
    "collect_property_names",
    "GenerationConfig",
    "OutputConfig",
    "create_config_from_args",
    "generate_default_config",
    "load_config_from_yaml",
    "load_property_names",
]
