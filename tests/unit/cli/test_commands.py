"""Tests for CLI command handlers."""

import argparse

import pytest

from pattern_catalog.catalog import build_registry
from pattern_catalog.cli.commands import handle_connection, handle_run, parse_operation
from pattern_catalog.config.schemas import AppConfig, TransitionMode
from pattern_catalog.domain.exceptions import ValidationError


class TestParseOperation:
    """Test connection operation parsing."""

    @pytest.mark.parametrize(
        "operation, expected",
        [
            ("open", ("open", "")),
            (" CLOSE ", ("close", "")),
            ("send:Hello", ("send", "Hello")),
            ("send_data:a:b", ("send", "a:b")),
            ("recv:Hi", ("receive", "Hi")),
            ("set-state:established", ("set", "established")),
        ],
    )
    def test_valid_operations(self, operation, expected):
        assert parse_operation(operation) == expected

    def test_unknown_operation(self):
        with pytest.raises(ValidationError) as exc_info:
            parse_operation("jump")

        assert "open" in exc_info.value.details["supported"]

    def test_set_needs_state(self):
        with pytest.raises(ValidationError):
            parse_operation("set:")


class TestHandlers:
    """Test handlers against the real catalogue."""

    def test_run_all_keeps_catalogue_order(self):
        registry = build_registry()

        result = handle_run(argparse.Namespace(names=["all"]), registry)

        assert [run["pattern"] for run in result["runs"]] == registry.names()

    def test_connection_uses_configured_initial_state(self):
        config = AppConfig(state_machine={"initial_state": "established"})

        result = handle_connection(argparse.Namespace(operations=["send:x"]), config)

        assert result["connection"]["steps"][0]["message"] == "Sending data: x"
        assert result["connection"]["final_state"] == "established"

    def test_explicit_mode_overrides_config(self):
        config = AppConfig(state_machine={"transition_mode": "apply"})

        result = handle_connection(
            argparse.Namespace(operations=["open"]), config, transition_mode=TransitionMode.DESCRIBE
        )

        assert result["connection"]["transition_mode"] == "describe"
        assert result["connection"]["final_state"] == "closed"
