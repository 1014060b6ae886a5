"""Console output port used by every pattern demo.

Demo classes never call ``print`` directly. They write human-readable lines
to a ``Console`` so the same code can target stdout, a buffer for the
structured CLI formats, or a recorder in tests.
"""
from abc import ABC, abstractmethod
from typing import List, Optional, TextIO


class Console(ABC):
    """Port for human-readable demo output."""

    @abstractmethod
    def write(self, message: str = "") -> None:
        """Write a single line."""


class StdoutConsole(Console):
    """Writes lines to a text stream, standard output by default."""

    def __init__(self, stream: Optional[TextIO] = None):
        # None defers to whatever sys.stdout is at write time
        self._stream = stream

    def write(self, message: str = "") -> None:
        print(message, file=self._stream)


class RecordingConsole(Console):
    """Keeps every written line in memory."""

    def __init__(self):
        self.lines: List[str] = []

    def write(self, message: str = "") -> None:
        self.lines.append(message)

    @property
    def text(self) -> str:
        return "\n".join(self.lines)

    @property
    def last(self) -> Optional[str]:
        return self.lines[-1] if self.lines else None

    def clear(self) -> None:
        self.lines.clear()


def default_console(console: Optional[Console] = None) -> Console:
    """Return the given console, or a stdout console when none is supplied."""
    return console if console is not None else StdoutConsole()
