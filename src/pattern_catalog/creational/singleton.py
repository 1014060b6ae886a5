"""Singleton pattern with an explicit registry instead of a hidden global.

The classic Singleton hides its only instance behind a static accessor. Here
the "only one instance" guarantee belongs to a ``SingletonRegistry`` that the
application constructs once and passes to whoever needs shared instances. The
first ``get`` for a class creates the instance, every later ``get`` returns
that same object, and tests simply build a fresh registry.

Participants:
    - SingletonRegistry: init-once store keyed by class
    - AppSingleton: the shared service handed out by the registry
"""
import threading
from typing import Any, Dict, List, Optional, Type, TypeVar, cast

from pattern_catalog.domain.exceptions import ValidationError
from pattern_catalog.domain.pattern import PatternCategory, PatternInfo
from pattern_catalog.infrastructure.console import Console, StdoutConsole, default_console
from pattern_catalog.infrastructure.logging import get_logger

T = TypeVar("T")
logger = get_logger(__name__)


class SingletonRegistry:
    """
    Holds at most one instance per class.

    Creation is guarded by a re-entrant lock so concurrent first requests
    still produce a single instance, and a constructor may itself ask the
    registry for its dependencies.
    """

    def __init__(self):
        self._instances: Dict[Type[Any], Any] = {}
        self._lock = threading.RLock()

    def get(self, singleton_class: Type[T], *args: Any, **kwargs: Any) -> T:
        """
        Return the instance of ``singleton_class``, creating it on first use.

        Args:
            singleton_class: The class to get an instance of
            *args: Constructor arguments, used only when creating the instance
            **kwargs: Constructor keyword arguments, used only when creating the instance

        Returns:
            The shared instance
        """
        instance = self._instances.get(singleton_class)
        if instance is not None:
            if args or kwargs:
                logger.debug(
                    "Instance already exists, constructor arguments ignored",
                    singleton=singleton_class.__name__,
                )
            return cast(T, instance)

        with self._lock:
            instance = self._instances.get(singleton_class)
            if instance is None:
                instance = singleton_class(*args, **kwargs)
                self._instances[singleton_class] = instance
                logger.debug("Created singleton instance", singleton=singleton_class.__name__)
        return cast(T, instance)

    def register(self, singleton_class: Type[T], instance: T) -> None:
        """
        Register a pre-built instance.

        Raises:
            ValidationError: If a different instance is already registered
        """
        with self._lock:
            existing = self._instances.get(singleton_class)
            if existing is not None and existing is not instance:
                raise ValidationError(
                    f"{singleton_class.__name__} already has a registered instance"
                )
            self._instances[singleton_class] = instance

    def has(self, singleton_class: Type[Any]) -> bool:
        return singleton_class in self._instances

    def registered_types(self) -> List[Type[Any]]:
        return list(self._instances)

    def reset(self, singleton_class: Optional[Type[Any]] = None) -> None:
        """Forget one instance, or all of them."""
        with self._lock:
            if singleton_class is None:
                self._instances.clear()
            else:
                self._instances.pop(singleton_class, None)


class AppSingleton:
    """Shared service. Obtain it through a ``SingletonRegistry``."""

    def __init__(self, console: Optional[Console] = None):
        self._console = default_console(console)
        self._console.write("Singleton instance created.")

    def show_message(self) -> None:
        self._console.write("Hello from the Singleton instance!")


PATTERN_INFO = PatternInfo(
    name="singleton",
    title="Singleton",
    category=PatternCategory.CREATIONAL,
    intent=(
        "Ensure a class has only one instance and provide a well-defined point "
        "of access to it. Here that point is an explicitly passed registry "
        "rather than a hidden global."
    ),
    participants=[
        "SingletonRegistry: creates each instance once and hands it out",
        "AppSingleton: the shared instance",
    ],
    advantages=[
        "Exactly one instance per registry",
        "Lazy creation on first request",
        "No ambient global state, so tests can use a fresh registry",
    ],
    examples=[
        "Application-wide configuration",
        "Shared connection pools or caches",
    ],
    module=__name__,
)


def run_demo(console: Console) -> None:
    registry = SingletonRegistry()

    first = registry.get(AppSingleton, console)
    first.show_message()

    second = registry.get(AppSingleton, console)
    second.show_message()

    if first is second:
        console.write("Both variables point to the same Singleton instance.")


def main() -> None:
    run_demo(StdoutConsole())


if __name__ == "__main__":
    main()
