"""Observer pattern: displays following a weather station's temperature.

A subject keeps a list of observers and notifies all of them whenever its
state changes. The subject only knows the ``Observer`` interface, so displays
can be attached and detached at runtime without the station changing.

Participants:
    - Observer: receives ``update(temperature)`` calls
    - Subject: add, remove and notify observers
    - WeatherStation: concrete subject holding the temperature
    - PhoneDisplay, WindowDisplay: concrete observers
"""
from abc import ABC, abstractmethod
from typing import List, Optional

from pattern_catalog.domain.pattern import PatternCategory, PatternInfo
from pattern_catalog.infrastructure.console import Console, StdoutConsole, default_console
from pattern_catalog.infrastructure.logging import get_logger

logger = get_logger(__name__)


def format_temperature(value: float) -> str:
    """Render a temperature without a trailing '.0' for whole degrees."""
    return f"{value:g}"


class Observer(ABC):
    @abstractmethod
    def update(self, temperature: float) -> None:
        """Called by the subject after its temperature changes."""


class Subject(ABC):
    @abstractmethod
    def add_observer(self, observer: Observer) -> None:
        pass

    @abstractmethod
    def remove_observer(self, observer: Observer) -> None:
        pass

    @abstractmethod
    def notify_observers(self) -> None:
        pass


class WeatherStation(Subject):
    """Concrete subject tracking the current temperature."""

    def __init__(self, console: Optional[Console] = None):
        self._console = default_console(console)
        self._observers: List[Observer] = []
        self._temperature: Optional[float] = None

    @property
    def temperature(self) -> Optional[float]:
        return self._temperature

    @property
    def observers(self) -> List[Observer]:
        return list(self._observers)

    def add_observer(self, observer: Observer) -> None:
        if observer in self._observers:
            logger.debug("Observer already registered", observer=type(observer).__name__)
            return
        self._observers.append(observer)
        logger.debug("Registered observer", observer=type(observer).__name__)

    def remove_observer(self, observer: Observer) -> None:
        if observer in self._observers:
            self._observers.remove(observer)
            logger.debug("Removed observer", observer=type(observer).__name__)

    def notify_observers(self) -> None:
        if self._temperature is None:
            return

        logger.debug("Notifying observers", count=len(self._observers))
        for observer in list(self._observers):
            try:
                observer.update(self._temperature)
            except Exception as e:
                # One broken display must not stop the others from updating
                logger.error(
                    "Observer update failed",
                    observer=type(observer).__name__,
                    error=str(e),
                )

    def set_temperature(self, temperature: float) -> None:
        self._console.write(
            f"WeatherStation: New temperature is {format_temperature(temperature)} degrees."
        )
        self._temperature = temperature
        self.notify_observers()


class _Display(Observer):
    display_name = "Display"

    def __init__(self, console: Optional[Console] = None):
        self._console = default_console(console)
        self.last_temperature: Optional[float] = None

    def update(self, temperature: float) -> None:
        self.last_temperature = temperature
        self._console.write(
            f"{self.display_name}: The temperature is now {format_temperature(temperature)} degrees."
        )


class PhoneDisplay(_Display):
    display_name = "PhoneDisplay"


class WindowDisplay(_Display):
    display_name = "WindowDisplay"


PATTERN_INFO = PatternInfo(
    name="observer",
    title="Observer",
    category=PatternCategory.BEHAVIORAL,
    intent=(
        "Define a one-to-many dependency so that when one object changes state, "
        "all its dependents are notified and updated automatically."
    ),
    participants=[
        "Subject: manages and notifies observers",
        "Observer: interface receiving updates",
        "WeatherStation: concrete subject",
        "PhoneDisplay / WindowDisplay: concrete observers",
    ],
    advantages=[
        "Loose coupling between subject and observers",
        "Observers can subscribe and unsubscribe at runtime",
        "Change notification is centralised in the subject",
    ],
    examples=[
        "GUI widgets notifying registered listeners",
        "Publish/subscribe messaging such as MQTT topics",
    ],
    module=__name__,
)


def run_demo(console: Console) -> None:
    station = WeatherStation(console)
    station.add_observer(PhoneDisplay(console))
    station.add_observer(WindowDisplay(console))

    station.set_temperature(25.0)
    station.set_temperature(30.0)


def main() -> None:
    run_demo(StdoutConsole())


if __name__ == "__main__":
    main()
