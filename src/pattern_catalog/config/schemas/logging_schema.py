"""Logging configuration schema."""

from enum import Enum

from pydantic import BaseModel, Field, field_validator


class LogLevel(str, Enum):
    """Log level enumeration."""
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class LogDestination(str, Enum):
    """Log destination enumeration."""
    FILE = "file"
    STDERR = "stderr"
    BOTH = "both"
    NONE = "none"


class LogFormat(str, Enum):
    """Rendering used by the log handlers."""
    CONSOLE = "console"
    JSON = "json"


class LogFileConfig(BaseModel):
    """Rotating log file settings."""

    path: str = Field("logs/pattern_catalog.log", description="Log file path")
    max_size_mb: int = Field(10, description="Rotate after this many megabytes")
    backup_count: int = Field(5, description="Number of rotated files to keep")

    @field_validator("max_size_mb", "backup_count")
    @classmethod
    def validate_positive(cls, v: int) -> int:
        """Validate size and count settings."""
        if v < 1:
            raise ValueError("Value must be at least 1")
        return v


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: LogLevel = Field(LogLevel.WARNING, description="Root log level")
    destination: LogDestination = Field(LogDestination.STDERR, description="Where log records go")
    format: LogFormat = Field(LogFormat.CONSOLE, description="Log record rendering")
    file: LogFileConfig = Field(default_factory=LogFileConfig)

    @field_validator("level", mode="before")
    @classmethod
    def normalize_level(cls, v):
        """Accept log levels in any case."""
        if isinstance(v, str):
            return v.upper()
        return v

    @field_validator("destination", "format", mode="before")
    @classmethod
    def normalize_choice(cls, v):
        """Accept destinations and formats in any case."""
        if isinstance(v, str):
            return v.strip().lower()
        return v
