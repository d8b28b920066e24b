"""Configuration management with Pydantic models and validation."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional

import tomli
from pydantic import BaseModel, Field, field_validator

from nrotel.errors import ConfigError

PACKAGE_LOGGER_NAME = "nrotel"

# Environment variable mapping, first set variable wins
ENV_VAR_MAPPING = {
    "service_name": ["NROTEL_SERVICE_NAME", "NEW_RELIC_SERVICE_NAME", "OTEL_SERVICE_NAME"],
    "debug": ["NROTEL_DEBUG"],
}

_TRUTHY = ("true", "1", "yes")


class TransformConfig(BaseModel):
    """Transform configuration section."""

    service_name: Optional[str] = Field(
        default=None,
        description="Service name added to every metric as service.name"
    )

    @field_validator("service_name")
    @classmethod
    def strip_service_name(cls, value: Optional[str]) -> Optional[str]:
        if value is None:
            return None
        return value.strip() or None


class LoggingConfig(BaseModel):
    """Logging configuration section."""

    debug: bool = Field(
        default=False,
        description="Enable debug logging for the nrotel package"
    )


class NrOtelConfig(BaseModel):
    """
    Complete nrotel configuration.

    This model validates and merges configuration from multiple sources:
    1. Config file (nrotel.toml)
    2. Environment variables
    3. Explicit parameters
    """

    transform: TransformConfig = Field(default_factory=TransformConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    def service(self) -> str:
        """Service name in the form the transform expects ("" when unset)."""
        return self.transform.service_name or ""


def find_config_file() -> Optional[str]:
    """
    Find nrotel.toml config file in standard locations.

    Lookup order:
    1. ./nrotel.toml (current directory)
    2. ~/.nrotel/config.toml (user home)

    Returns:
        Path to config file if found, None otherwise
    """
    cwd_config = Path.cwd() / "nrotel.toml"
    if cwd_config.exists():
        return str(cwd_config)

    home_config = Path.home() / ".nrotel" / "config.toml"
    if home_config.exists():
        return str(home_config)

    return None


def load_toml_config(path: str) -> Dict[str, Any]:
    """
    Load configuration from a TOML file.

    Args:
        path: Path to the TOML config file

    Returns:
        Dictionary with nested config structure ({} if the file does not exist)
    """
    if not os.path.exists(path):
        return {}

    try:
        with open(path, "rb") as f:
            return tomli.load(f)
    except (OSError, tomli.TOMLDecodeError) as e:
        raise ConfigError(f"Failed to load config file: {e}", details={"path": path})


def get_env_value(config_key: str) -> Optional[str]:
    """
    Get environment variable value for a config key.

    Tries multiple environment variable names in order of preference.
    """
    for env_var in ENV_VAR_MAPPING.get(config_key, []):
        value = os.getenv(env_var)
        if value is not None:
            return value
    return None


def load_config_from_env() -> Dict[str, Any]:
    """Load configuration from environment variables (nested structure)."""
    env_config: Dict[str, Dict[str, Any]] = {
        "transform": {},
        "logging": {},
    }

    value = get_env_value("service_name")
    if value is not None:
        env_config["transform"]["service_name"] = value

    value = get_env_value("debug")
    if value is not None:
        env_config["logging"]["debug"] = value.strip().lower() in _TRUTHY

    return {k: v for k, v in env_config.items() if v}


def merge_configs(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    """
    Deep merge two config dictionaries.

    Args:
        base: Base configuration
        override: Override configuration (takes precedence)

    Returns:
        Merged configuration
    """
    result = base.copy()
    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = merge_configs(result[key], value)
        else:
            result[key] = value
    return result


def load_config(
    config_file: Optional[str] = None,
    overrides: Optional[Dict[str, Any]] = None
) -> NrOtelConfig:
    """
    Load and validate nrotel configuration from multiple sources.

    Priority (highest to lowest):
    1. Explicit overrides (passed as parameters)
    2. Environment variables
    3. Config file (./nrotel.toml or ~/.nrotel/config.toml)
    4. Defaults

    Raises:
        ConfigError: If configuration is invalid
    """
    merged_config: Dict[str, Any] = {}

    path = config_file or find_config_file()
    if path:
        merged_config = merge_configs(merged_config, load_toml_config(path))

    merged_config = merge_configs(merged_config, load_config_from_env())

    if overrides:
        merged_config = merge_configs(merged_config, overrides)

    try:
        return NrOtelConfig(**merged_config)
    except (TypeError, ValueError) as e:
        raise ConfigError(f"Configuration validation failed: {e}")


def validate_config(
    config_file: Optional[str] = None,
    overrides: Optional[Dict[str, Any]] = None
) -> tuple[bool, str, Optional[NrOtelConfig]]:
    """
    Validate configuration without raising.

    Returns:
        Tuple of (is_valid, message, config_or_none)
    """
    try:
        config = load_config(config_file=config_file, overrides=overrides)
        return True, "Configuration is valid", config
    except ConfigError as e:
        return False, f"Configuration error: {e}", None


def configure_logging(config: NrOtelConfig) -> logging.Logger:
    """Apply the logging section to the package logger and return it."""
    logger = logging.getLogger(PACKAGE_LOGGER_NAME)
    if config.logging.debug:
        logger.setLevel(logging.DEBUG)
    return logger
