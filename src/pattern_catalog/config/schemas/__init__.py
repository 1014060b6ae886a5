"""Configuration schemas package."""

from .app_schema import AppConfig, validate_config
from .logging_schema import LogDestination, LogFileConfig, LogFormat, LoggingConfig, LogLevel
from .output_schema import OutputConfig, OutputFormat
from .state_machine_schema import StateMachineConfig, TransitionMode

__all__ = [
    # Main configuration
    "AppConfig",
    "validate_config",
    # Logging configuration
    "LoggingConfig",
    "LogFileConfig",
    "LogLevel",
    "LogDestination",
    "LogFormat",
    # Output configuration
    "OutputConfig",
    "OutputFormat",
    # State machine configuration
    "StateMachineConfig",
    "TransitionMode",
]
