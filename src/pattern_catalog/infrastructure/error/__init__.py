"""Error handling infrastructure package."""

from .error_middleware import ErrorResponse, handle_cli_errors, to_error_response

__all__ = ["ErrorResponse", "handle_cli_errors", "to_error_response"]
