"""Output configuration schema."""

from enum import Enum

from pydantic import BaseModel, Field, field_validator


class OutputFormat(str, Enum):
    """Formats understood by the CLI formatters."""
    TEXT = "text"
    JSON = "json"
    YAML = "yaml"
    TABLE = "table"
    LIST = "list"


class OutputConfig(BaseModel):
    """CLI output configuration."""

    format: OutputFormat = Field(OutputFormat.TEXT, description="Default output format")
    width: int = Field(100, ge=40, le=400, description="Table width in columns")

    @field_validator("format", mode="before")
    @classmethod
    def normalize_format(cls, v):
        """Accept output formats in any case."""
        if isinstance(v, str):
            return v.strip().lower()
        return v
