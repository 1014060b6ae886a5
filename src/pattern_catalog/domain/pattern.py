"""Catalogue metadata describing each design pattern."""
from enum import Enum
from typing import List

from pydantic import BaseModel, ConfigDict, Field, field_validator


class PatternCategory(str, Enum):
    """Gang-of-Four pattern families."""
    CREATIONAL = "creational"
    STRUCTURAL = "structural"
    BEHAVIORAL = "behavioral"


class PatternInfo(BaseModel):
    """Describes a pattern: what it is for and who takes part in it."""
    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="Catalogue key, e.g. 'state'")
    title: str = Field(..., description="Human readable pattern name")
    category: PatternCategory
    intent: str
    participants: List[str] = Field(default_factory=list)
    advantages: List[str] = Field(default_factory=list)
    examples: List[str] = Field(default_factory=list)
    module: str = Field(..., description="Dotted path of the implementing module")

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        """Catalogue keys are lower case without spaces."""
        if not v or v != v.strip().lower() or " " in v:
            raise ValueError(f"Invalid pattern name: {v!r}")
        return v

    def summary(self) -> str:
        """First sentence of the intent, for listings."""
        return self.intent.split(". ")[0].rstrip(".") + "."

    def to_dict(self) -> dict:
        return self.model_dump(mode="json")
