# tests/unit/test_config.py
"""Tests for RegistryConfig and YAML loading."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from implkit.core.config import (
    ConfigError,
    ConfigNotFoundError,
    ConfigParseError,
    ConfigValidationError,
    RegistryConfig,
    coerce_config,
    load_config,
    load_yaml,
)
from implkit.core.mode import ResolveMode
from implkit.core.registry import Registry

# =============================================================================
# Schema
# =============================================================================


def test_defaults():
    config = RegistryConfig()

    assert config.name == "default"
    assert config.thread_safe is False
    assert config.default_mode is ResolveMode.REQUIRED


def test_unknown_fields_are_rejected():
    with pytest.raises(ValidationError):
        RegistryConfig(strict=True)


def test_blank_name_is_rejected():
    with pytest.raises(ValidationError):
        RegistryConfig(name="  ")


def test_config_is_frozen():
    config = RegistryConfig()
    with pytest.raises(ValidationError):
        config.name = "other"


def test_unknown_mode_is_rejected():
    with pytest.raises(ValidationError):
        RegistryConfig(default_mode="sometimes")


# =============================================================================
# Loading
# =============================================================================


def test_load_nested_config(tmp_path):
    path = tmp_path / "implkit.yaml"
    path.write_text("registry:\n  name: app\n  thread_safe: true\n  default_mode: optional\n")

    config = load_config(path)

    assert config.name == "app"
    assert config.thread_safe is True
    assert config.default_mode is ResolveMode.OPTIONAL


def test_load_flat_config(tmp_path):
    path = tmp_path / "implkit.yaml"
    path.write_text("name: flat\n")

    assert load_config(str(path)).name == "flat"


def test_empty_file_gives_defaults(tmp_path):
    path = tmp_path / "empty.yaml"
    path.write_text("")

    assert load_config(path) == RegistryConfig()


def test_missing_file(tmp_path):
    path = tmp_path / "missing.yaml"

    with pytest.raises(ConfigNotFoundError) as exc_info:
        load_yaml(path)

    assert exc_info.value.path == path
    assert "missing.yaml" in str(exc_info.value)


def test_directory_is_not_a_config(tmp_path):
    with pytest.raises(ConfigError, match="directory"):
        load_yaml(tmp_path)


def test_invalid_yaml(tmp_path):
    path = tmp_path / "broken.yaml"
    path.write_text("registry: [unclosed\n")

    with pytest.raises(ConfigParseError, match="Invalid YAML syntax"):
        load_config(path)


def test_non_mapping_root(tmp_path):
    path = tmp_path / "list.yaml"
    path.write_text("- a\n- b\n")

    with pytest.raises(ConfigParseError, match="mapping"):
        load_config(path)


def test_non_mapping_registry_section(tmp_path):
    path = tmp_path / "section.yaml"
    path.write_text("registry: app\n")

    with pytest.raises(ConfigParseError, match="'registry' section"):
        load_config(path)


def test_schema_errors_name_the_file(tmp_path):
    path = tmp_path / "bad.yaml"
    path.write_text("registry:\n  thread_safe: maybe\n  colour: blue\n")

    with pytest.raises(ConfigValidationError) as exc_info:
        load_config(path)

    assert "bad.yaml" in str(exc_info.value)


# =============================================================================
# Registry construction
# =============================================================================


def test_registry_from_yaml(tmp_path):
    path = tmp_path / "implkit.yaml"
    path.write_text("registry:\n  name: wiring\n")

    registry = Registry.from_config(path)

    assert registry.name == "wiring"
    assert repr(registry) == "Registry(name='wiring', records=0)"


def test_registry_from_mapping():
    assert Registry({"name": "inline"}).name == "inline"


def test_coerce_config_passthrough():
    config = RegistryConfig(name="same")
    assert coerce_config(config) is config
    assert coerce_config(None) == RegistryConfig()


def test_coerce_config_rejects_other_sources():
    with pytest.raises(ConfigError, match="Unsupported config source"):
        coerce_config(42)
