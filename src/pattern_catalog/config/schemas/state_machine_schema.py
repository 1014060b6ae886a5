"""State machine configuration schema."""

from enum import Enum
from typing import Literal

from pydantic import BaseModel, Field, field_validator


class TransitionMode(str, Enum):
    """How a connection reacts to the next state returned by a state operation.

    APPLY switches the connection to the returned state. DESCRIBE only reports
    the transition and leaves the active state untouched until the client
    calls ``set_state``.
    """
    APPLY = "apply"
    DESCRIBE = "describe"


class StateMachineConfig(BaseModel):
    """Settings for the TCP connection State example."""

    transition_mode: TransitionMode = Field(
        TransitionMode.APPLY, description="Whether state operations perform their transitions"
    )
    initial_state: Literal["closed", "listening", "established"] = Field(
        "closed", description="State a new connection starts in"
    )

    @field_validator("transition_mode", "initial_state", mode="before")
    @classmethod
    def normalize_case(cls, v):
        """Accept mode and state names in any case."""
        if isinstance(v, str):
            return v.strip().lower()
        return v
