"""Domain package - catalogue metadata and exceptions."""

from .exceptions import (
    ConfigurationError,
    DomainException,
    InvalidStateTransitionError,
    PatternNotFoundError,
    ValidationError,
)
from .pattern import PatternCategory, PatternInfo

__all__ = [
    "DomainException",
    "ValidationError",
    "ConfigurationError",
    "PatternNotFoundError",
    "InvalidStateTransitionError",
    "PatternCategory",
    "PatternInfo",
]
