"""Pattern registry - maps catalogue names to pattern metadata and demo drivers."""
from dataclasses import dataclass
from typing import Callable, Dict, List, Optional

from pattern_catalog.domain.exceptions import PatternNotFoundError, ValidationError
from pattern_catalog.domain.pattern import PatternCategory, PatternInfo
from pattern_catalog.infrastructure.console import Console
from pattern_catalog.infrastructure.logging import get_logger

DemoFunction = Callable[[Console], None]


@dataclass(frozen=True)
class PatternRegistration:
    """A registered pattern: its description and the demo that exercises it."""
    info: PatternInfo
    demo: DemoFunction

    @property
    def name(self) -> str:
        return self.info.name


def normalize_name(name: str) -> str:
    """Normalize user supplied names: 'Factory_Method' -> 'factory-method'."""
    return name.strip().lower().replace("_", "-").replace(" ", "-")


class PatternRegistry:
    """
    Registry of catalogue entries, kept in registration order.

    Entries can be looked up by name or by any of their aliases.
    """

    def __init__(self):
        self._registrations: Dict[str, PatternRegistration] = {}
        self._aliases: Dict[str, str] = {}
        self._logger = get_logger(__name__)

    def register(
        self, info: PatternInfo, demo: DemoFunction, aliases: Optional[List[str]] = None
    ) -> None:
        """
        Register a pattern.

        Args:
            info: Pattern metadata
            demo: Callable writing the demo output to a console
            aliases: Additional names the pattern can be looked up by

        Raises:
            ValidationError: If the name or an alias is already taken
        """
        keys = [info.name] + [normalize_name(a) for a in aliases or []]
        for key in keys:
            if key in self._registrations or key in self._aliases:
                raise ValidationError(f"Pattern name '{key}' is already registered")

        self._registrations[info.name] = PatternRegistration(info=info, demo=demo)
        for alias in keys[1:]:
            self._aliases[alias] = info.name
        self._logger.debug("Registered pattern", pattern=info.name, category=info.category.value)

    def is_registered(self, name: str) -> bool:
        key = normalize_name(name)
        return key in self._registrations or key in self._aliases

    def get(self, name: str) -> PatternRegistration:
        """Look up a registration by name or alias."""
        key = normalize_name(name)
        key = self._aliases.get(key, key)
        registration = self._registrations.get(key)
        if registration is None:
            raise PatternNotFoundError("Pattern", name, available=self.names())
        return registration

    def names(self) -> List[str]:
        return list(self._registrations)

    def list(self, category: Optional[PatternCategory] = None) -> List[PatternInfo]:
        """Pattern metadata in registration order, optionally filtered by category."""
        return [
            r.info
            for r in self._registrations.values()
            if category is None or r.info.category == category
        ]

    def run(self, name: str, console: Console) -> PatternInfo:
        """Run a pattern's demo against the given console."""
        registration = self.get(name)
        self._logger.debug("Running demo", pattern=registration.name)
        registration.demo(console)
        return registration.info

    def __len__(self) -> int:
        return len(self._registrations)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self.is_registered(name)
