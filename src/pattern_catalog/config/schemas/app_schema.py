"""Main application configuration schema."""

from typing import Any, Dict

from pydantic import BaseModel, Field, field_validator

from .logging_schema import LoggingConfig
from .output_schema import OutputConfig
from .state_machine_schema import StateMachineConfig


class AppConfig(BaseModel):
    """Application configuration."""

    version: str = Field("1.0", description="Configuration version")
    logging: LoggingConfig = Field(default_factory=lambda: LoggingConfig())
    output: OutputConfig = Field(default_factory=lambda: OutputConfig())
    state_machine: StateMachineConfig = Field(default_factory=lambda: StateMachineConfig())

    @field_validator("version")
    @classmethod
    def validate_version(cls, v: str) -> str:
        """
        Validate configuration version.

        Args:
            v: Value to validate

        Returns:
            Validated value

        Raises:
            ValueError: If the major version is not supported
        """
        major = v.split(".")[0]
        if major != "1":
            raise ValueError(f"Unsupported configuration version: {v}")
        return v


def validate_config(config: Dict[str, Any]) -> AppConfig:
    """
    Validate configuration.

    Args:
        config: Configuration to validate

    Returns:
        Validated configuration

    Raises:
        pydantic.ValidationError: If configuration is invalid
    """
    return AppConfig(**config)
