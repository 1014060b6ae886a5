# src/pattern_catalog/domain/exceptions.py
from typing import Any, List, Optional


class DomainException(Exception):
    """Base exception for all catalogue errors."""
    pass


class ValidationError(DomainException):
    """Raised when input validation fails."""
    def __init__(self, message: str, details: Any = None):
        super().__init__(message)
        self.details = details


class ConfigurationError(DomainException):
    """Raised when there's an issue with configuration."""
    def __init__(self, message: str, missing_fields: Optional[List[str]] = None):
        super().__init__(message)
        self.missing_fields = missing_fields or []


class PatternNotFoundError(DomainException):
    """Raised when a requested pattern or variant is not in the catalogue."""
    def __init__(self, resource_type: str, name: str, available: Optional[List[str]] = None):
        super().__init__(f"{resource_type} '{name}' not found")
        self.resource_type = resource_type
        self.name = name
        self.available = available or []


class InvalidStateTransitionError(DomainException):
    """Raised when a state name cannot be resolved to a known state.

    ``current_state`` is None when the connection has no state yet, i.e. the
    initial state itself is unknown.
    """
    def __init__(self, current_state: Optional[str], attempted_state: str):
        if current_state is None:
            message = f"Unknown initial state: {attempted_state}"
        else:
            message = f"Cannot transition from {current_state} to {attempted_state}"
        super().__init__(message)
        self.current_state = current_state
        self.attempted_state = attempted_state
