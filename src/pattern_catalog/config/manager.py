"""
Configuration loading for the catalogue.

Configuration is resolved in this order:
1. Built-in defaults from the pydantic schema
2. A YAML or JSON configuration file (``--config`` or PATTERN_CATALOG_CONFIG)
3. PATTERN_CATALOG_* environment variable overrides
"""
import copy
import json
import os
import re
from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from pydantic import ValidationError as PydanticValidationError

from pattern_catalog._package import ENV_PREFIX
from pattern_catalog.domain.exceptions import ConfigurationError

from .schemas import AppConfig, validate_config

# ${VAR}, ${VAR:default} and bare $VAR references
_ENV_PATTERN = re.compile(r"\$\{([A-Za-z_][A-Za-z0-9_]*)(?::([^}]*))?\}|\$([A-Za-z_][A-Za-z0-9_]*)")

# Environment variable suffix -> dotted config key
ENV_OVERRIDES: Dict[str, str] = {
    "LOG_LEVEL": "logging.level",
    "LOG_DESTINATION": "logging.destination",
    "LOG_FORMAT": "logging.format",
    "LOG_FILE": "logging.file.path",
    "OUTPUT_FORMAT": "output.format",
    "TRANSITION_MODE": "state_machine.transition_mode",
}


def expand_env_vars(value: Any) -> Any:
    """
    Expand environment variable references in strings, lists and dicts.

    Unknown variables without a default are left untouched.
    """
    if isinstance(value, dict):
        return {k: expand_env_vars(v) for k, v in value.items()}
    if isinstance(value, list):
        return [expand_env_vars(v) for v in value]
    if not isinstance(value, str):
        return value

    def _replace(match: "re.Match[str]") -> str:
        name = match.group(1) or match.group(3)
        default = match.group(2)
        if name in os.environ:
            return os.environ[name]
        if default is not None:
            return default
        return match.group(0)

    return _ENV_PATTERN.sub(_replace, value)


def _set_dotted(data: Dict[str, Any], dotted_key: str, value: Any) -> None:
    parts = dotted_key.split(".")
    node = data
    for part in parts[:-1]:
        # An empty YAML section loads as None
        if not isinstance(node.get(part), dict):
            node[part] = {}
        node = node[part]
    node[parts[-1]] = value


class ConfigurationManager:
    """Loads, expands and validates the application configuration."""

    def __init__(self, config_file: Optional[str] = None):
        self._config_file = config_file or os.environ.get(f"{ENV_PREFIX}CONFIG")
        self._app_config: Optional[AppConfig] = None

    @property
    def config_file(self) -> Optional[str]:
        return self._config_file

    @property
    def app_config(self) -> AppConfig:
        """Validated configuration, loaded on first access."""
        if self._app_config is None:
            self._app_config = self._load_app_config()
        return self._app_config

    def _load_app_config(self) -> AppConfig:
        config_data: Dict[str, Any] = {}
        if self._config_file:
            config_data = self._read_file(Path(self._config_file))

        config_data = expand_env_vars(config_data)

        # Apply environment variable overrides
        config_data = self.apply_environment_overrides(config_data)

        try:
            return validate_config(config_data)
        except PydanticValidationError as e:
            fields = [".".join(str(p) for p in err["loc"]) for err in e.errors()]
            raise ConfigurationError(f"Invalid configuration: {e}", missing_fields=fields) from e

    @staticmethod
    def _read_file(path: Path) -> Dict[str, Any]:
        if not path.exists():
            raise ConfigurationError(f"Configuration file not found: {path}")

        try:
            with open(path, "r", encoding="utf-8") as f:
                if path.suffix.lower() == ".json":
                    data = json.load(f)
                else:
                    data = yaml.safe_load(f)
        except (json.JSONDecodeError, yaml.YAMLError) as e:
            raise ConfigurationError(f"Could not parse configuration file {path}: {e}") from e

        if data is None:
            return {}
        if not isinstance(data, dict):
            raise ConfigurationError(f"Configuration file {path} must contain a mapping")
        return data

    @staticmethod
    def apply_environment_overrides(config_data: Dict[str, Any]) -> Dict[str, Any]:
        """Overlay PATTERN_CATALOG_* environment variables onto the config data."""
        result = copy.deepcopy(config_data)
        for suffix, dotted_key in ENV_OVERRIDES.items():
            value = os.environ.get(f"{ENV_PREFIX}{suffix}")
            if value:
                _set_dotted(result, dotted_key, value)
        return result

    def get(self, key: str, default: Any = None) -> Any:
        """Look up a dotted key in the validated configuration."""
        node: Any = self.app_config.model_dump(mode="json")
        for part in key.split("."):
            if not isinstance(node, dict) or part not in node:
                return default
            node = node[part]
        return node

    def reload(self) -> None:
        """Drop the cached configuration so the next access reloads it."""
        self._app_config = None
