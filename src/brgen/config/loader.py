"""
Configuration loader for brgen.

Handles loading configuration from YAML files and CLI arguments, and reading
property-name lists.
"""

import logging
from pathlib import Path

import yaml
from pydantic import ValidationError

from .models import BRGenConfig, GenerationConfig, OutputConfig

logger = logging.getLogger(__name__)


class ConfigurationError(Exception):
    """Raised when configuration is invalid."""

    pass


def load_config_from_yaml(config_path: Path) -> BRGenConfig:
    """Load configuration from a YAML file.

    A relative ``properties_file`` is resolved against the directory that
    holds the configuration file.
    """
    if not config_path.exists():
        raise ConfigurationError(f"Configuration file not found: {config_path}")

    try:
        with open(config_path, encoding="utf-8") as f:
            raw_config = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Invalid YAML in configuration file: {e}")
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigurationError(f"Cannot read configuration file {config_path}: {e}") from e

    if raw_config is None:
        raise ConfigurationError("Configuration file is empty")
    if not isinstance(raw_config, dict):
        raise ConfigurationError("Configuration file must contain a mapping at the top level")

    try:
        config = BRGenConfig(**raw_config)
    except ValidationError as e:
        raise ConfigurationError(f"Configuration validation failed:\n{e}")

    if config.properties_file is not None and not config.properties_file.is_absolute():
        config.properties_file = config_path.parent / config.properties_file

    logger.debug(f"Loaded configuration from {config_path}")
    return config


def create_config_from_args(
    package_name: str | None,
    properties: list[str] | None = None,
    properties_file: Path | None = None,
    use_final: bool = True,
    output_dir: Path = Path("./generated"),
) -> BRGenConfig:
    """Create configuration from CLI arguments."""
    if not package_name:
        raise ConfigurationError("A package name is required ('--package')")

    try:
        return BRGenConfig(
            generation=GenerationConfig(package_name=package_name, use_final=use_final),
            output=OutputConfig(output_dir=output_dir),
            properties=list(properties or []),
            properties_file=properties_file,
        )
    except ValidationError as e:
        raise ConfigurationError(f"Configuration validation failed:\n{e}")


def load_property_names(path: Path) -> list[str]:
    """Read property names from a text file.

    One name per line. Surrounding whitespace is stripped; blank lines and
    lines starting with ``#`` are skipped.
    """
    if not path.exists():
        raise ConfigurationError(f"Properties file not found: {path}")

    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigurationError(f"Cannot read properties file {path}: {e}") from e

    names = []
    for raw in text.splitlines():
        line = raw.strip()
        if not line or line.startswith("#"):
            continue
        names.append(line)

    logger.debug(f"Read {len(names)} property names from {path}")
    return names


def collect_property_names(config: BRGenConfig) -> set[str]:
    """Union of the inline properties and the properties file, if any."""
    names = set(config.properties)
    if config.properties_file is not None:
        names.update(load_property_names(config.properties_file))
    return names


def generate_default_config(output_path: Path) -> None:
    """Generate a default configuration file."""
    default_config = {
        "generation": {
            "package_name": "com.example.app",
            "use_final": True,
        },
        "output": {
            "output_dir": "./generated",
        },
        "properties": [],
        "properties_file": None,
    }

    output_path.parent.mkdir(parents=True, exist_ok=True)
    with open(output_path, "w", encoding="utf-8") as f:
        yaml.dump(default_config, f, default_flow_style=False, sort_keys=False)
