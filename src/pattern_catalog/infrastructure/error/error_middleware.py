"""Error handling middleware for command line handlers."""

import functools
import json
import sys
from dataclasses import asdict, dataclass, field
from typing import Any, Callable, Dict

from pattern_catalog.domain.exceptions import (
    ConfigurationError,
    DomainException,
    PatternNotFoundError,
    ValidationError,
)
from pattern_catalog.infrastructure.logging import get_logger

logger = get_logger(__name__)

EXIT_DOMAIN_ERROR = 1
EXIT_UNEXPECTED_ERROR = 2


@dataclass
class ErrorResponse:
    """Serializable description of a failure."""
    error_code: str
    message: str
    details: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def to_error_response(error: Exception) -> ErrorResponse:
    """Map an exception to an error response."""
    if isinstance(error, PatternNotFoundError):
        return ErrorResponse(
            "PATTERN_NOT_FOUND",
            str(error),
            {"name": error.name, "available": error.available},
        )
    if isinstance(error, ConfigurationError):
        return ErrorResponse("CONFIGURATION_ERROR", str(error), {"fields": error.missing_fields})
    if isinstance(error, ValidationError):
        details = error.details if isinstance(error.details, dict) else {"details": error.details}
        return ErrorResponse("VALIDATION_ERROR", str(error), details)
    if isinstance(error, DomainException):
        return ErrorResponse("DOMAIN_ERROR", str(error))
    return ErrorResponse("INTERNAL_ERROR", f"Unexpected error: {error}")


def handle_cli_errors(handler: Callable[..., int]) -> Callable[..., int]:
    """
    Wrap a CLI handler so failures become an error report and an exit code.

    Domain errors are expected (bad pattern name, bad config) and exit with 1.
    Anything else is logged with its traceback and exits with 2.

    Args:
        handler: The handler function to wrap

    Returns:
        Wrapped handler function returning an exit code
    """

    @functools.wraps(handler)
    def wrapped_handler(*args, **kwargs) -> int:
        try:
            return handler(*args, **kwargs)
        except DomainException as e:
            logger.info("Command failed", error=str(e), error_type=type(e).__name__)
            print(json.dumps(to_error_response(e).to_dict(), indent=2), file=sys.stderr)
            return EXIT_DOMAIN_ERROR
        except Exception as e:
            logger.exception("Unexpected error while running command")
            print(json.dumps(to_error_response(e).to_dict(), indent=2), file=sys.stderr)
            return EXIT_UNEXPECTED_ERROR

    return wrapped_handler
