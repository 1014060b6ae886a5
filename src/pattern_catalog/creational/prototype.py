"""Prototype pattern: cloning shapes instead of building them from scratch.

Participants:
    - Shape: prototype interface declaring ``clone``
    - Circle, Square: concrete prototypes

A clone is a deep copy, so changing the clone's colour leaves the original
untouched.
"""
import copy
from abc import ABC, abstractmethod
from typing import TypeVar

from pattern_catalog.domain.exceptions import ValidationError
from pattern_catalog.domain.pattern import PatternCategory, PatternInfo
from pattern_catalog.infrastructure.console import Console, StdoutConsole

S = TypeVar("S", bound="Shape")


class Shape(ABC):
    def __init__(self, color: str):
        self.color = color

    def clone(self: S) -> S:
        return copy.deepcopy(self)

    def set_color(self, color: str) -> None:
        self.color = color

    @abstractmethod
    def describe(self) -> str:
        pass

    def draw(self, console: Console) -> None:
        console.write(self.describe())


class Circle(Shape):
    def __init__(self, radius: int, color: str):
        if radius <= 0:
            raise ValidationError("Circle radius must be positive", {"radius": radius})
        super().__init__(color)
        self.radius = radius

    def describe(self) -> str:
        return f"Drawing a {self.color} circle with radius {self.radius}"


class Square(Shape):
    def __init__(self, side: int, color: str):
        if side <= 0:
            raise ValidationError("Square side must be positive", {"side": side})
        super().__init__(color)
        self.side = side

    def describe(self) -> str:
        return f"Drawing a {self.color} square with side {self.side}"


PATTERN_INFO = PatternInfo(
    name="prototype",
    title="Prototype",
    category=PatternCategory.CREATIONAL,
    intent=(
        "Create new objects by copying an existing instance, the prototype, "
        "instead of constructing them from scratch."
    ),
    participants=[
        "Shape: prototype interface with clone()",
        "Circle / Square: concrete prototypes",
    ],
    advantages=[
        "Cheap creation when construction is expensive",
        "Avoids a subclass per configuration",
        "Variations are produced by cloning and tweaking",
    ],
    examples=[
        "Game enemies cloned from a configured template",
        "New documents created from a template document",
    ],
    module=__name__,
)


def run_demo(console: Console) -> None:
    original_circle = Circle(10, "Red")
    original_square = Square(5, "Blue")

    cloned_circle = original_circle.clone()
    cloned_square = original_square.clone()

    cloned_circle.set_color("Green")
    cloned_square.set_color("Yellow")

    console.write("Original shapes:")
    original_circle.draw(console)
    original_square.draw(console)

    console.write()
    console.write("Cloned and modified shapes:")
    cloned_circle.draw(console)
    cloned_square.draw(console)


def main() -> None:
    run_demo(StdoutConsole())


if __name__ == "__main__":
    main()
