"""Tests for configuration schemas."""

import pytest
from pydantic import ValidationError as PydanticValidationError

from pattern_catalog.config import (
    AppConfig,
    LogDestination,
    LoggingConfig,
    LogLevel,
    OutputConfig,
    OutputFormat,
    StateMachineConfig,
    TransitionMode,
    validate_config,
)


class TestAppConfig:
    """Test application configuration validation."""

    def test_defaults(self):
        config = AppConfig()

        assert config.version == "1.0"
        assert config.logging.destination is LogDestination.STDERR
        assert config.output.width == 100

    def test_validate_config_builds_nested_models(self):
        config = validate_config({"state_machine": {"transition_mode": "describe"}})

        assert config.state_machine.transition_mode is TransitionMode.DESCRIBE

    @pytest.mark.parametrize("version", ["1", "1.2"])
    def test_supported_versions(self, version):
        assert AppConfig(version=version).version == version

    def test_unsupported_version(self):
        with pytest.raises(PydanticValidationError):
            AppConfig(version="2.0")


class TestLoggingConfig:
    def test_level_is_case_insensitive(self):
        assert LoggingConfig(level="debug").level is LogLevel.DEBUG

    def test_unknown_level_rejected(self):
        with pytest.raises(PydanticValidationError):
            LoggingConfig(level="verbose")

    @pytest.mark.parametrize("field", ["max_size_mb", "backup_count"])
    def test_file_limits_must_be_positive(self, field):
        with pytest.raises(PydanticValidationError):
            LoggingConfig(file={field: 0})


class TestOutputAndStateMachineConfig:
    def test_choices_are_case_insensitive(self):
        """Test that enum-valued settings accept any case."""
        assert OutputConfig(format=" JSON ").format is OutputFormat.JSON

        config = StateMachineConfig(transition_mode="DESCRIBE", initial_state="Listening")
        assert config.transition_mode is TransitionMode.DESCRIBE
        assert config.initial_state == "listening"

        logging_config = LoggingConfig(destination="Both", format="JSON")
        assert logging_config.destination is LogDestination.BOTH

    @pytest.mark.parametrize("width", [10, 1000])
    def test_width_bounds(self, width):
        with pytest.raises(PydanticValidationError):
            OutputConfig(width=width)

    def test_unknown_initial_state_rejected(self):
        with pytest.raises(PydanticValidationError):
            StateMachineConfig(initial_state="half-open")
