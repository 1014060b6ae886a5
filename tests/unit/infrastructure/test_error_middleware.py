"""Tests for CLI error handling middleware."""

import json

from pattern_catalog.domain.exceptions import (
    ConfigurationError,
    InvalidStateTransitionError,
    PatternNotFoundError,
    ValidationError,
)
from pattern_catalog.infrastructure.error import handle_cli_errors, to_error_response
from pattern_catalog.infrastructure.error.error_middleware import (
    EXIT_DOMAIN_ERROR,
    EXIT_UNEXPECTED_ERROR,
)


class TestToErrorResponse:
    """Test mapping of exceptions to error responses."""

    def test_pattern_not_found(self):
        response = to_error_response(PatternNotFoundError("Pattern", "visitor", ["state"]))

        assert response.error_code == "PATTERN_NOT_FOUND"
        assert response.message == "Pattern 'visitor' not found"
        assert response.details == {"name": "visitor", "available": ["state"]}

    def test_configuration_error(self):
        response = to_error_response(ConfigurationError("bad config", ["logging.level"]))

        assert response.error_code == "CONFIGURATION_ERROR"
        assert response.details == {"fields": ["logging.level"]}

    def test_validation_error_with_plain_details(self):
        response = to_error_response(ValidationError("bad", details="oops"))

        assert response.error_code == "VALIDATION_ERROR"
        assert response.details == {"details": "oops"}

    def test_other_domain_error(self):
        response = to_error_response(InvalidStateTransitionError("closed", "half-open"))

        assert response.error_code == "DOMAIN_ERROR"
        assert response.message == "Cannot transition from closed to half-open"

    def test_unexpected_error(self):
        response = to_error_response(RuntimeError("boom"))

        assert response.to_dict() == {
            "error_code": "INTERNAL_ERROR",
            "message": "Unexpected error: boom",
            "details": {},
        }


class TestHandleCliErrors:
    """Test the CLI handler decorator."""

    def test_passes_through_exit_code(self):
        @handle_cli_errors
        def handler(value):
            return value

        assert handler(0) == 0
        assert handler.__name__ == "handler"

    def test_domain_error_exits_with_one(self, capsys):
        @handle_cli_errors
        def handler():
            raise PatternNotFoundError("Pattern", "visitor")

        assert handler() == EXIT_DOMAIN_ERROR

        error = json.loads(capsys.readouterr().err)
        assert error["error_code"] == "PATTERN_NOT_FOUND"

    def test_unexpected_error_exits_with_two(self, capsys):
        @handle_cli_errors
        def handler():
            raise KeyError("missing")

        assert handler() == EXIT_UNEXPECTED_ERROR
        assert '"INTERNAL_ERROR"' in capsys.readouterr().err
