"""
CLI-specific formatting functions for human-readable output.

This module handles presentation formatting for the CLI, including:
- JSON and YAML serialisation
- Rich tables for catalogue listings, demo runs and connection traces
- List formatting for detailed views
"""

import json
from typing import Any, Dict, List

import yaml
from rich.console import Console as RichConsole
from rich.table import Table

from pattern_catalog.config.schemas import OutputFormat

DEFAULT_WIDTH = 100


def format_output(data: Any, format_type: str, width: int = DEFAULT_WIDTH) -> str:
    """Format data according to the specified format type."""
    format_type = OutputFormat(format_type)
    if format_type == OutputFormat.JSON:
        return json.dumps(data, indent=2, default=str)
    elif format_type == OutputFormat.YAML:
        return yaml.safe_dump(data, default_flow_style=False, sort_keys=False)
    elif format_type == OutputFormat.TABLE:
        return format_table_output(data, width)
    elif format_type == OutputFormat.LIST:
        return format_list_output(data)
    else:
        return format_text_output(data)


def format_table_output(data: Any, width: int = DEFAULT_WIDTH) -> str:
    """Format data as a table."""
    if isinstance(data, dict) and "patterns" in data:
        return format_patterns_table(data["patterns"], width)
    elif isinstance(data, dict) and "pattern" in data:
        return format_patterns_table([data["pattern"]], width)
    elif isinstance(data, dict) and "runs" in data:
        return format_runs_table(data["runs"], width)
    elif isinstance(data, dict) and "connection" in data:
        return format_connection_table(data["connection"], width)
    else:
        # Fallback to JSON for unknown data structures
        return json.dumps(data, indent=2, default=str)


def format_list_output(data: Any) -> str:
    """Format data as a detailed list."""
    if isinstance(data, dict) and "patterns" in data:
        return format_patterns_list(data["patterns"])
    elif isinstance(data, dict) and "pattern" in data:
        return format_patterns_list([data["pattern"]])
    elif isinstance(data, dict) and "runs" in data:
        return format_runs_text(data["runs"])
    elif isinstance(data, dict) and "connection" in data:
        return format_connection_text(data["connection"])
    else:
        return json.dumps(data, indent=2, default=str)


def format_text_output(data: Any) -> str:
    """Plain text: demo output as written, listings as detailed lists."""
    if isinstance(data, dict) and "runs" in data:
        return format_runs_text(data["runs"])
    elif isinstance(data, dict) and "connection" in data:
        return format_connection_text(data["connection"])
    return format_list_output(data)


def _render(table: Table, width: int) -> str:
    console = RichConsole(width=width, legacy_windows=False, force_terminal=False)
    with console.capture() as capture:
        console.print(table)
    return capture.get()


def format_patterns_table(patterns: List[Dict], width: int = DEFAULT_WIDTH) -> str:
    """Format catalogue entries as a Rich table."""
    if not patterns:
        return "No patterns found."

    table = Table(show_header=True, header_style="bold magenta")
    table.add_column("Name", style="cyan", no_wrap=True)
    table.add_column("Pattern", style="green")
    table.add_column("Category", style="blue")
    table.add_column("Summary")

    for pattern in patterns:
        table.add_row(
            pattern.get("name", "N/A"),
            pattern.get("title", "N/A"),
            pattern.get("category", "N/A"),
            pattern.get("summary") or pattern.get("intent", ""),
        )

    return _render(table, width)


def format_runs_table(runs: List[Dict], width: int = DEFAULT_WIDTH) -> str:
    """Format demo runs as a table, one row per pattern."""
    if not runs:
        return "No demos run."

    table = Table(show_header=True, header_style="bold magenta", show_lines=True)
    table.add_column("Pattern", style="cyan", no_wrap=True)
    table.add_column("Output")

    for run in runs:
        table.add_row(run.get("title", run.get("pattern", "N/A")), "\n".join(run.get("output", [])))

    return _render(table, width)


def format_connection_table(connection: Dict, width: int = DEFAULT_WIDTH) -> str:
    """Format a connection trace as a table of operations."""
    table = Table(
        show_header=True,
        header_style="bold magenta",
        caption=f"Final state: {connection.get('final_state')}",
    )
    table.add_column("Operation", style="cyan", no_wrap=True)
    table.add_column("Message")
    table.add_column("Accepted", justify="center")
    table.add_column("State", style="green")

    for step in connection.get("steps", []):
        accepted = step.get("accepted")
        table.add_row(
            step.get("operation", ""),
            step.get("message", ""),
            "" if accepted is None else ("yes" if accepted else "no"),
            step.get("state", ""),
        )

    return _render(table, width)


def format_patterns_list(patterns: List[Dict]) -> str:
    """Format catalogue entries as a detailed list."""
    if not patterns:
        return "No patterns found."

    blocks = []
    for pattern in patterns:
        lines = [
            f"{pattern.get('title', 'N/A')} ({pattern.get('name', 'N/A')})",
            f"  Category: {pattern.get('category', 'N/A')}",
            f"  Intent: {pattern.get('intent', '')}",
        ]
        for label, key in (
            ("Participants", "participants"),
            ("Advantages", "advantages"),
            ("Examples", "examples"),
        ):
            items = pattern.get(key) or []
            if items:
                lines.append(f"  {label}:")
                lines.extend(f"    - {item}" for item in items)
        if pattern.get("module"):
            lines.append(f"  Module: {pattern['module']}")
        blocks.append("\n".join(lines))

    return "\n\n".join(blocks)


def format_runs_text(runs: List[Dict]) -> str:
    """Demo output, with a heading per pattern when several ran."""
    if len(runs) == 1:
        return "\n".join(runs[0].get("output", []))

    blocks = []
    for run in runs:
        heading = f"=== {run.get('title', run.get('pattern'))} ==="
        blocks.append("\n".join([heading] + list(run.get("output", []))))
    return "\n\n".join(blocks)


def format_connection_text(connection: Dict) -> str:
    lines = [step.get("message", "") for step in connection.get("steps", []) if step.get("message")]
    lines.append(f"Final state: {connection.get('final_state')}")
    return "\n".join(lines)
