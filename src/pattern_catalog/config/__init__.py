"""Configuration package."""

from .schemas import (
    AppConfig,
    LogDestination,
    LogFormat,
    LoggingConfig,
    LogLevel,
    OutputConfig,
    OutputFormat,
    StateMachineConfig,
    TransitionMode,
    validate_config,
)
from .manager import ConfigurationManager, expand_env_vars

__all__ = [
    "AppConfig",
    "LoggingConfig",
    "LogLevel",
    "LogDestination",
    "LogFormat",
    "OutputConfig",
    "OutputFormat",
    "StateMachineConfig",
    "TransitionMode",
    "validate_config",
    "ConfigurationManager",
    "expand_env_vars",
]
