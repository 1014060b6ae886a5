"""Proxy pattern: a virtual proxy that loads an image on first display.

Participants:
    - Image: subject interface
    - RealImage: expensive object, loads itself when constructed
    - ProxyImage: stands in for RealImage and creates it lazily
"""
from abc import ABC, abstractmethod
from typing import Optional

from pattern_catalog.domain.pattern import PatternCategory, PatternInfo
from pattern_catalog.infrastructure.console import Console, StdoutConsole, default_console
from pattern_catalog.infrastructure.logging import get_logger

logger = get_logger(__name__)


class Image(ABC):
    @abstractmethod
    def display(self) -> None:
        pass


class RealImage(Image):
    def __init__(self, filename: str, console: Optional[Console] = None):
        self.filename = filename
        self._console = default_console(console)
        self._load_from_disk()

    def _load_from_disk(self) -> None:
        self._console.write(f"Loading image from disk: {self.filename}")

    def display(self) -> None:
        self._console.write(f"Displaying image: {self.filename}")


class ProxyImage(Image):
    def __init__(self, filename: str, console: Optional[Console] = None):
        self.filename = filename
        self._console = default_console(console)
        self._real_image: Optional[RealImage] = None

    @property
    def is_loaded(self) -> bool:
        return self._real_image is not None

    def display(self) -> None:
        if self._real_image is None:
            logger.debug("Loading real image on first access", filename=self.filename)
            self._real_image = RealImage(self.filename, self._console)
        self._real_image.display()


PATTERN_INFO = PatternInfo(
    name="proxy",
    title="Proxy",
    category=PatternCategory.STRUCTURAL,
    intent=(
        "Provide a surrogate or placeholder for another object to control access "
        "to it, for example to defer its creation until it is needed."
    ),
    participants=[
        "Image: common subject interface",
        "RealImage: the expensive real subject",
        "ProxyImage: controls access and loads the real subject lazily",
    ],
    advantages=[
        "Expensive objects are created only when needed",
        "Access control or logging can be added in front of the real object",
        "Remote objects can be represented locally",
    ],
    examples=[
        "Lazy loading of large images in a GUI",
        "Database connection proxies and pools",
        "Web service client stubs",
    ],
    module=__name__,
)


def run_demo(console: Console) -> None:
    image: Image = ProxyImage("high_resolution_image.jpg", console)

    console.write("First display:")
    image.display()

    console.write()
    console.write("Second display:")
    image.display()


def main() -> None:
    run_demo(StdoutConsole())


if __name__ == "__main__":
    main()
