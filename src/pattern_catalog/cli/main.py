"""
Main CLI module with argument parsing and command execution.

This module provides the main CLI interface including:
- Command line argument parsing
- Configuration and logging bootstrap
- Command routing and output formatting
"""
import argparse
import os
import sys
from typing import Any, Dict, List, Optional

from pattern_catalog._package import DESCRIPTION, __version__
from pattern_catalog.catalog import build_registry
from pattern_catalog.cli.commands import (
    ALL_PATTERNS,
    handle_connection,
    handle_list,
    handle_run,
    handle_show,
)
from pattern_catalog.cli.formatters import format_output
from pattern_catalog.config import ConfigurationManager, LogLevel, OutputFormat, TransitionMode
from pattern_catalog.domain.pattern import PatternCategory
from pattern_catalog.infrastructure.error import handle_cli_errors
from pattern_catalog.infrastructure.logging import get_logger, setup_logging

FORMAT_CHOICES = [f.value for f in OutputFormat]


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog=os.path.basename(sys.argv[0]) or "pattern-catalog",
        description=DESCRIPTION,
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s                                  # Run every demo
  %(prog)s list --category behavioral       # List behavioral patterns
  %(prog)s show state --format yaml         # Describe one pattern
  %(prog)s run observer strategy            # Run selected demos
  %(prog)s connection open receive:Hi send:Hello close
        """,
    )

    # Global options
    parser.add_argument("--config", help="Configuration file path")
    parser.add_argument(
        "--log-level", choices=[level.value for level in LogLevel], help="Set logging level"
    )
    parser.add_argument("--format", choices=FORMAT_CHOICES, help="Output format")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    list_parser = subparsers.add_parser("list", help="List catalogue entries")
    list_parser.add_argument(
        "--category", choices=[c.value for c in PatternCategory], help="Filter by category"
    )

    show_parser = subparsers.add_parser("show", help="Show pattern details")
    show_parser.add_argument("name", help="Pattern name, e.g. state or factory-method")

    run_parser = subparsers.add_parser("run", help="Run pattern demos")
    run_parser.add_argument(
        "names", nargs="*", default=[ALL_PATTERNS], help="Pattern names, or 'all' (default)"
    )

    connection_parser = subparsers.add_parser(
        "connection", help="Drive a TCP connection through a sequence of operations"
    )
    connection_parser.add_argument(
        "operations",
        nargs="+",
        help="Operations: open, close, send:DATA, receive:DATA, set:STATE",
    )
    connection_parser.add_argument(
        "--transition-mode",
        choices=[m.value for m in TransitionMode],
        help="apply performs returned transitions, describe only reports them",
    )

    return parser.parse_args(argv)


def execute_command(args: argparse.Namespace, config_manager: ConfigurationManager) -> Dict[str, Any]:
    """Route parsed arguments to the matching command handler."""
    config = config_manager.app_config

    if args.command == "connection":
        mode = TransitionMode(args.transition_mode) if args.transition_mode else None
        return handle_connection(args, config, transition_mode=mode)

    registry = build_registry(transition_mode=config.state_machine.transition_mode)

    if args.command == "list":
        return handle_list(args, registry)
    if args.command == "show":
        return handle_show(args, registry)
    # "run" and no command at all both run demos
    return handle_run(args, registry)


@handle_cli_errors
def main(argv: Optional[List[str]] = None) -> int:
    """
    Main CLI entry point.

    Returns:
        Process exit code
    """
    args = parse_args(argv)

    config_manager = ConfigurationManager(args.config)
    config = config_manager.app_config

    logging_config = config.logging
    if args.log_level:
        logging_config = logging_config.model_copy(update={"level": LogLevel(args.log_level)})
    setup_logging(logging_config)

    logger = get_logger(__name__)
    logger.debug("Executing command", command=args.command or "run", config_file=config_manager.config_file)

    result = execute_command(args, config_manager)

    output_format = args.format or config.output.format.value
    print(format_output(result, output_format, width=config.output.width))
    return 0


def run() -> None:
    """Console script entry point."""
    sys.exit(main())


if __name__ == "__main__":
    run()
