"""
Unit tests for configuration loading.
"""

import tempfile
from pathlib import Path

import pytest
import yaml
from pydantic import ValidationError

from brgen.config.loader import (
    ConfigurationError,
    collect_property_names,
    create_config_from_args,
    generate_default_config,
    load_config_from_yaml,
    load_property_names,
)
from brgen.config.models import BRGenConfig, GenerationConfig


@pytest.fixture
def temp_dir():
    """Create a temporary directory for config files."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


def write_yaml(path: Path, data) -> Path:
    path.write_text(yaml.safe_dump(data), encoding="utf-8")
    return path


def test_load_config_from_yaml(temp_dir):
    """A complete YAML file maps onto the models."""
    config_path = write_yaml(
        temp_dir / "brgen.yaml",
        {
            "generation": {"package_name": "com.example.app", "use_final": False},
            "output": {"output_dir": "out"},
            "properties": ["name", "age"],
        },
    )

    config = load_config_from_yaml(config_path)

    assert config.generation.package_name == "com.example.app"
    assert config.generation.use_final is False
    assert config.output.output_dir == Path("out")
    assert config.properties == ["name", "age"]
    assert config.properties_file is None


def test_load_config_defaults(temp_dir):
    """Only the package name is mandatory."""
    config_path = write_yaml(temp_dir / "brgen.yaml", {"generation": {"package_name": "a.b"}})

    config = load_config_from_yaml(config_path)

    assert config.generation.use_final is True
    assert config.output.output_dir == Path("./generated")
    assert config.properties == []


def test_load_config_resolves_properties_file(temp_dir):
    """A relative properties file is resolved next to the config."""
    config_path = write_yaml(
        temp_dir / "brgen.yaml",
        {"generation": {"package_name": "a.b"}, "properties_file": "props.txt"},
    )

    config = load_config_from_yaml(config_path)

    assert config.properties_file == temp_dir / "props.txt"


def test_load_config_missing_file(temp_dir):
    with pytest.raises(ConfigurationError, match="not found"):
        load_config_from_yaml(temp_dir / "missing.yaml")


def test_load_config_empty_file(temp_dir):
    config_path = temp_dir / "brgen.yaml"
    config_path.write_text("", encoding="utf-8")

    with pytest.raises(ConfigurationError, match="empty"):
        load_config_from_yaml(config_path)


def test_load_config_invalid_yaml(temp_dir):
    config_path = temp_dir / "brgen.yaml"
    config_path.write_text("generation: [unclosed", encoding="utf-8")

    with pytest.raises(ConfigurationError, match="Invalid YAML"):
        load_config_from_yaml(config_path)


def test_load_config_not_a_mapping(temp_dir):
    config_path = write_yaml(temp_dir / "brgen.yaml", ["a", "b"])

    with pytest.raises(ConfigurationError, match="mapping"):
        load_config_from_yaml(config_path)


def test_load_config_validation_error(temp_dir):
    """Missing generation section fails validation."""
    config_path = write_yaml(temp_dir / "brgen.yaml", {"properties": ["a"]})

    with pytest.raises(ConfigurationError, match="validation failed"):
        load_config_from_yaml(config_path)


def test_create_config_from_args():
    config = create_config_from_args(
        package_name="com.example",
        properties=["b", "a"],
        use_final=False,
        output_dir=Path("build/gen"),
    )

    assert config.generation == GenerationConfig(package_name="com.example", use_final=False)
    assert config.properties == ["b", "a"]
    assert config.output.output_dir == Path("build/gen")


def test_create_config_requires_package():
    with pytest.raises(ConfigurationError, match="package name"):
        create_config_from_args(package_name=None)


def test_generation_config_is_frozen():
    config = GenerationConfig(package_name="a.b")

    with pytest.raises(ValidationError):
        config.package_name = "c.d"


def test_load_property_names(temp_dir):
    """Comments, blank lines and whitespace are ignored."""
    path = temp_dir / "props.txt"
    path.write_text("# bindable properties\nname\n\n  age  \n# user\nuser\n", encoding="utf-8")

    assert load_property_names(path) == ["name", "age", "user"]


def test_load_property_names_missing(temp_dir):
    with pytest.raises(ConfigurationError, match="Properties file not found"):
        load_property_names(temp_dir / "nope.txt")


def test_load_property_names_not_utf8(temp_dir):
    """Undecodable bytes surface as a configuration error."""
    path = temp_dir / "props.txt"
    path.write_bytes(b"\xff\xfe")

    with pytest.raises(ConfigurationError, match="Cannot read properties file"):
        load_property_names(path)


def test_load_property_names_directory(temp_dir):
    with pytest.raises(ConfigurationError, match="Cannot read properties file"):
        load_property_names(temp_dir)


def test_load_config_not_utf8(temp_dir):
    config_path = temp_dir / "brgen.yaml"
    config_path.write_bytes(b"generation:\n  package_name: \xff\xfe\n")

    with pytest.raises(ConfigurationError):
        load_config_from_yaml(config_path)


def test_load_config_directory(temp_dir):
    with pytest.raises(ConfigurationError, match="Cannot read configuration file"):
        load_config_from_yaml(temp_dir)


def test_collect_property_names_union(temp_dir):
    """Inline names and file names are merged without duplicates."""
    path = temp_dir / "props.txt"
    path.write_text("age\nname\n", encoding="utf-8")
    config = BRGenConfig(
        generation=GenerationConfig(package_name="a.b"),
        properties=["name", "user"],
        properties_file=path,
    )

    assert collect_property_names(config) == {"age", "name", "user"}


def test_generate_default_config_round_trips(temp_dir):
    """The default config is loadable."""
    config_path = temp_dir / "nested" / "brgen.yaml"
    generate_default_config(config_path)

    config = load_config_from_yaml(config_path)

    assert config.generation.package_name == "com.example.app"
    assert config.generation.use_final is True
    assert config.properties_file is None
