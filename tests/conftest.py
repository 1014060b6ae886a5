import logging

import pytest

from pattern_catalog.creational.singleton import SingletonRegistry
from pattern_catalog.infrastructure.console import RecordingConsole


PATTERN_CATALOG_ENV_VARS = (
    "PATTERN_CATALOG_CONFIG",
    "PATTERN_CATALOG_LOG_LEVEL",
    "PATTERN_CATALOG_LOG_DESTINATION",
    "PATTERN_CATALOG_LOG_FORMAT",
    "PATTERN_CATALOG_LOG_FILE",
    "PATTERN_CATALOG_OUTPUT_FORMAT",
    "PATTERN_CATALOG_TRANSITION_MODE",
)


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Keep the developer's own PATTERN_CATALOG_* settings out of the tests."""
    for name in PATTERN_CATALOG_ENV_VARS:
        monkeypatch.delenv(name, raising=False)


def _is_pytest_handler(handler):
    return type(handler).__module__.startswith("_pytest")


@pytest.fixture(autouse=True)
def restore_root_logger():
    """setup_logging replaces root handlers; put the originals back afterwards.

    pytest manages its own capture handlers per test phase, so those are left alone.
    """
    root = logging.getLogger()
    handlers = [h for h in root.handlers if not _is_pytest_handler(h)]
    level = root.level
    yield
    for handler in root.handlers[:]:
        if not _is_pytest_handler(handler) and handler not in handlers:
            root.removeHandler(handler)
            handler.close()
    for handler in handlers:
        if handler not in root.handlers:
            root.addHandler(handler)
    root.setLevel(level)


@pytest.fixture
def recording_console():
    """Console that keeps every written line."""
    return RecordingConsole()


@pytest.fixture
def singleton_registry():
    """Fresh, explicitly constructed singleton registry."""
    return SingletonRegistry()
