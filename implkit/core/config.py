# implkit/core/config.py
"""
Registry configuration.

Usage:
    from implkit.core.config import RegistryConfig, load_config

    # In code
    config = RegistryConfig(name="app", thread_safe=True)

    # From YAML (settings may be nested under a top-level "registry:" key)
    config = load_config("implkit.yaml")

Example YAML:
    registry:
      name: app
      thread_safe: true
      default_mode: optional
"""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from implkit.core.mode import ResolveMode
from implkit.logging.logger import get_logger
from implkit.logging.tags import CONFIG

logger = get_logger(__name__)


# =============================================================================
# Errors
# =============================================================================


class ConfigError(Exception):
    """Base error for configuration issues."""

    def __init__(self, message: str, path: Optional[Path] = None):
        self.path = path
        if path:
            message = f"{message} (file: {path})"
        super().__init__(message)


class ConfigNotFoundError(ConfigError):
    """Raised when a config file doesn't exist."""

    pass


class ConfigParseError(ConfigError):
    """Raised when YAML parsing fails."""

    pass


class ConfigValidationError(ConfigError):
    """Raised when config doesn't match schema."""

    pass


# =============================================================================
# Schema
# =============================================================================


class RegistryConfig(BaseModel):
    """
    Settings for one Registry.

    Examples:
        >>> RegistryConfig().default_mode
        <ResolveMode.REQUIRED: 'required'>
        >>> RegistryConfig(default_mode="optional").default_mode
        <ResolveMode.OPTIONAL: 'optional'>
    """

    name: str = Field(default="default", description="Registry name used in log messages")
    thread_safe: bool = Field(
        default=False, description="Serialize every operation behind a re-entrant lock"
    )
    default_mode: ResolveMode = Field(
        default=ResolveMode.REQUIRED, description="Mode used when resolve() is given none"
    )

    model_config = ConfigDict(extra="forbid", frozen=True)

    @field_validator("name")
    @classmethod
    def _name_not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("name must not be blank")
        return v


# =============================================================================
# Loading
# =============================================================================


def load_yaml(path: Union[str, Path]) -> Dict[str, Any]:
    """
    Load a YAML file and return it as a dictionary.

    Raises:
        ConfigNotFoundError: If file doesn't exist
        ConfigParseError: If YAML is invalid or its root is not a mapping
    """
    p = Path(path)

    if not p.exists():
        raise ConfigNotFoundError("Config file not found", path=p)

    if p.is_dir():
        raise ConfigError("Config path is a directory, not a file", path=p)

    try:
        with p.open("r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        raise ConfigParseError(f"Invalid YAML syntax: {e}", path=p) from e

    if not isinstance(data, dict):
        raise ConfigParseError("Config root must be a mapping (dict)", path=p)

    logger.debug(f"{CONFIG} Loaded config from {p}")
    return data


def build_config(data: Mapping, path: Optional[Path] = None) -> RegistryConfig:
    """Validate raw settings, unwrapping a top-level ``registry`` key."""
    settings = data.get("registry", data)
    if not isinstance(settings, Mapping):
        raise ConfigParseError("'registry' section must be a mapping", path=path)

    try:
        return RegistryConfig.model_validate(dict(settings))
    except ValidationError as e:
        raise ConfigValidationError(f"Invalid registry config: {e}", path=path) from e


def load_config(path: Union[str, Path]) -> RegistryConfig:
    """Load and validate a registry config file."""
    p = Path(path)
    return build_config(load_yaml(p), path=p)


def coerce_config(source: Union[RegistryConfig, Mapping, str, Path, None]) -> RegistryConfig:
    """Turn a config object, mapping, YAML path or None into a RegistryConfig."""
    if source is None:
        return RegistryConfig()
    if isinstance(source, RegistryConfig):
        return source
    if isinstance(source, Mapping):
        return build_config(source)
    if isinstance(source, (str, Path)):
        return load_config(source)
    raise ConfigError(f"Unsupported config source: {type(source).__name__}")


__all__ = [
    "ConfigError",
    "ConfigNotFoundError",
    "ConfigParseError",
    "ConfigValidationError",
    "RegistryConfig",
    "build_config",
    "coerce_config",
    "load_config",
    "load_yaml",
]
