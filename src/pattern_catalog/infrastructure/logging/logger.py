import logging
import os
from logging.handlers import RotatingFileHandler
from typing import List, Optional

import structlog

from pattern_catalog.config.schemas import LogDestination, LogFormat, LoggingConfig

# Processors shared by structlog loggers and foreign (stdlib) log records
_SHARED_PROCESSORS = [
    structlog.stdlib.add_logger_name,
    structlog.stdlib.add_log_level,
    structlog.stdlib.PositionalArgumentsFormatter(),
    structlog.processors.TimeStamper(fmt="iso"),
    structlog.processors.StackInfoRenderer(),
    structlog.processors.UnicodeDecoder(),
]

_plain_renderer = structlog.dev.ConsoleRenderer(colors=False)

# Set once setup_logging has installed ProcessorFormatter handlers
_formatter_installed = False


def _render(logger, method_name, event_dict):
    """Hand records to ProcessorFormatter, or render plain text before setup_logging."""
    if _formatter_installed:
        return structlog.stdlib.ProcessorFormatter.wrap_for_formatter(logger, method_name, event_dict)
    return _plain_renderer(logger, method_name, event_dict)


def _configure_structlog() -> None:
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            *_SHARED_PROCESSORS,
            _render,
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )


def _build_formatter(log_format: LogFormat) -> logging.Formatter:
    if log_format == LogFormat.JSON:
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=False)

    return structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=_SHARED_PROCESSORS,
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            structlog.processors.format_exc_info,
            renderer,
        ],
    )


def setup_logging(config: Optional[LoggingConfig] = None) -> structlog.stdlib.BoundLogger:
    """
    Set up structured logging for the application using structlog.

    Demo output is written to the console port, so log records go to stderr
    and/or a rotating file and never interleave with stdout.

    Args:
        config: Logging configuration. If None, defaults are used.

    Returns:
        Configured structlog logger instance.
    """
    config = config or LoggingConfig()

    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, config.level.value))

    formatter = _build_formatter(config.format)
    handlers: List[logging.Handler] = []

    if config.destination in (LogDestination.FILE, LogDestination.BOTH):
        log_path = os.path.expandvars(config.file.path)
        log_dir = os.path.dirname(log_path)
        if log_dir:
            os.makedirs(log_dir, exist_ok=True)
        file_handler = RotatingFileHandler(
            log_path,
            maxBytes=config.file.max_size_mb * 1024 * 1024,
            backupCount=config.file.backup_count,
        )
        file_handler.setFormatter(formatter)
        handlers.append(file_handler)

    if config.destination in (LogDestination.STDERR, LogDestination.BOTH):
        # StreamHandler defaults to sys.stderr
        console_handler = logging.StreamHandler()
        console_handler.setFormatter(formatter)
        handlers.append(console_handler)

    if config.destination == LogDestination.NONE:
        handlers.append(logging.NullHandler())

    # Remove any existing handlers and add new ones
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)
        handler.close()

    for handler in handlers:
        root_logger.addHandler(handler)

    global _formatter_installed
    _formatter_installed = True
    _configure_structlog()

    logger = structlog.get_logger("pattern_catalog")
    logger.debug(
        "Logging configured",
        log_level=config.level.value,
        log_destination=config.destination.value,
        log_format=config.format.value,
    )
    return logger


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Get a structlog logger routed through the stdlib logging tree."""
    if not structlog.is_configured():
        _configure_structlog()
    return structlog.get_logger(name)
