"""Global configuration for field-binding.

Settings are resolved in this order:
    1. Environment variables (FIELD_BINDING_*)
    2. <home>/config.yaml
    3. Built-in defaults

Where <home> is $FIELD_BINDING_HOME or ~/.config/field-binding.
"""

import logging
import os
from pathlib import Path
from typing import Any

import yaml

from field_binding.errors import ConfigError

logger = logging.getLogger(__name__)

DEFAULT_VALIDATION_DEBOUNCE_MS = 500

HOME_ENV = "FIELD_BINDING_HOME"
DEBOUNCE_ENV = "FIELD_BINDING_DEBOUNCE_MS"


def get_home() -> Path:
    """Return the field-binding configuration directory."""
    env_path = os.environ.get(HOME_ENV)
    if env_path:
        return Path(env_path)
    return Path.home() / ".config" / "field-binding"


def get_config_path() -> Path:
    """Return the path of the global config file."""
    return get_home() / "config.yaml"


def load_global_config() -> dict[str, Any]:
    """Load config.yaml from the configuration directory.

    Returns:
        The parsed config mapping, or an empty dict if no file exists.

    Raises:
        ConfigError: If the file is not valid YAML or not a mapping.
    """
    config_path = get_config_path()
    if not config_path.exists():
        return {}

    try:
        with open(config_path) as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {config_path}: {e}") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(f"Config file {config_path} must contain a mapping")

    logger.debug("Loaded config from %s", config_path)
    return data


def _parse_ms(raw: Any, source: str) -> int:
    try:
        value = int(raw)
    except (TypeError, ValueError) as e:
        raise ConfigError(f"{source} must be an integer number of milliseconds, got {raw!r}") from e
    if value < 0:
        raise ConfigError(f"{source} must not be negative, got {value}")
    return value


def get_default_debounce_ms() -> int:
    """Resolve the debounce interval used when a rule-set sets none.

    Returns:
        Interval in milliseconds.

    Raises:
        ConfigError: If the configured value is not a non-negative integer.
    """
    env_value = os.environ.get(DEBOUNCE_ENV)
    if env_value:
        return _parse_ms(env_value, DEBOUNCE_ENV)

    config = load_global_config()
    if "default_debounce_ms" in config:
        return _parse_ms(config["default_debounce_ms"], "default_debounce_ms")

    return DEFAULT_VALIDATION_DEBOUNCE_MS
