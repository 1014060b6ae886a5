"""
Command handlers behind the CLI subcommands.

Each handler takes the parsed arguments plus its collaborators and returns a
plain dictionary that the formatters know how to render.
"""
import argparse
from typing import Any, Dict, List, Optional, Tuple

from pattern_catalog.behavioral.state import TCPConnection
from pattern_catalog.config.schemas import AppConfig, TransitionMode
from pattern_catalog.domain.exceptions import ValidationError
from pattern_catalog.domain.pattern import PatternCategory
from pattern_catalog.infrastructure.console import RecordingConsole
from pattern_catalog.infrastructure.logging import get_logger
from pattern_catalog.infrastructure.registry import PatternRegistry

logger = get_logger(__name__)

ALL_PATTERNS = "all"

OPERATIONS = ("open", "close", "send", "receive", "set")

_OPERATION_ALIASES = {
    "send_data": "send",
    "send-data": "send",
    "receive_data": "receive",
    "receive-data": "receive",
    "recv": "receive",
    "set_state": "set",
    "set-state": "set",
}


def handle_list(args: argparse.Namespace, registry: PatternRegistry) -> Dict[str, Any]:
    """List catalogue entries, optionally restricted to one category."""
    category = PatternCategory(args.category) if getattr(args, "category", None) else None
    return {
        "patterns": [
            dict(info.to_dict(), summary=info.summary()) for info in registry.list(category)
        ]
    }


def handle_show(args: argparse.Namespace, registry: PatternRegistry) -> Dict[str, Any]:
    return {"pattern": registry.get(args.name).info.to_dict()}


def handle_run(args: argparse.Namespace, registry: PatternRegistry) -> Dict[str, Any]:
    """
    Run one or more demos and collect what they wrote.

    Every name is resolved before any demo runs, so an unknown name fails the
    whole command without partial output.
    """
    names: List[str] = getattr(args, "names", None) or [ALL_PATTERNS]
    if any(name.strip().lower() == ALL_PATTERNS for name in names):
        registrations = [registry.get(name) for name in registry.names()]
    else:
        registrations = [registry.get(name) for name in names]

    runs = []
    for registration in registrations:
        console = RecordingConsole()
        registry.run(registration.name, console)
        runs.append(
            {
                "pattern": registration.name,
                "title": registration.info.title,
                "output": list(console.lines),
            }
        )
    return {"runs": runs}


def parse_operation(operation: str) -> Tuple[str, str]:
    """
    Split a connection operation such as ``send:Hello`` into name and argument.

    Raises:
        ValidationError: If the operation is unknown or ``set`` has no state
    """
    name, _, argument = operation.partition(":")
    name = name.strip().lower()
    name = _OPERATION_ALIASES.get(name, name)
    if name not in OPERATIONS:
        raise ValidationError(
            f"Unknown connection operation: {operation}",
            details={"operation": operation, "supported": list(OPERATIONS)},
        )
    if name == "set" and not argument.strip():
        raise ValidationError(
            "The set operation needs a target state, e.g. set:listening",
            details={"operation": operation},
        )
    return name, argument


def handle_connection(
    args: argparse.Namespace, config: AppConfig, transition_mode: Optional[TransitionMode] = None
) -> Dict[str, Any]:
    """Drive a TCP connection through the given operations and trace each step."""
    operations = [parse_operation(op) for op in args.operations]
    mode = TransitionMode(transition_mode or config.state_machine.transition_mode)

    console = RecordingConsole()
    connection = TCPConnection(
        initial_state=config.state_machine.initial_state,
        console=console,
        transition_mode=mode,
    )

    steps = []
    for (name, argument), raw in zip(operations, args.operations):
        accepted: Optional[bool] = None
        if name == "set":
            connection.set_state(argument)
            message = f"State set to {connection.state.label}."
        else:
            if name == "open":
                outcome = connection.open()
            elif name == "close":
                outcome = connection.close()
            elif name == "send":
                outcome = connection.send_data(argument)
            else:
                outcome = connection.receive_data(argument)
            message = outcome.message
            accepted = outcome.accepted
        steps.append(
            {
                "operation": raw,
                "message": message,
                "accepted": accepted,
                "state": connection.state.value,
            }
        )

    logger.debug("Connection trace complete", steps=len(steps), final_state=connection.state.value)
    return {
        "connection": {
            "transition_mode": mode.value,
            "initial_state": config.state_machine.initial_state,
            "steps": steps,
            "final_state": connection.state.value,
            "history": [
                {
                    "from": change.from_state.value,
                    "to": change.to_state.value,
                    "trigger": change.trigger,
                }
                for change in connection.history
            ],
        }
    }
