"""Builder pattern: assembling a house step by step.

The builder separates how a complex object is put together from the object
itself. A director can fix the order of the steps, or the client can drive
the builder by hand.

Participants:
    - House: the product
    - HouseBuilder: abstract builder declaring the construction steps
    - ConcreteHouseBuilder: builds a particular kind of house
    - Director: runs the steps in a fixed order (optional)
"""
from abc import ABC, abstractmethod
from typing import Optional

from pydantic import BaseModel

from pattern_catalog.domain.exceptions import ConfigurationError
from pattern_catalog.domain.pattern import PatternCategory, PatternInfo
from pattern_catalog.infrastructure.console import Console, StdoutConsole


class House(BaseModel):
    """The product. Parts stay None until a builder sets them."""

    windows: Optional[str] = None
    doors: Optional[str] = None
    rooms: Optional[str] = None

    @property
    def is_complete(self) -> bool:
        return None not in (self.windows, self.doors, self.rooms)

    def describe(self) -> str:
        parts = [part or "" for part in (self.windows, self.doors, self.rooms)]
        return "House with: " + ", ".join(parts)


class HouseBuilder(ABC):
    def __init__(self):
        self._house = House()

    def get_house(self) -> House:
        return self._house

    def reset(self) -> None:
        """Start over with an empty house."""
        self._house = House()

    @abstractmethod
    def build_windows(self) -> None:
        pass

    @abstractmethod
    def build_doors(self) -> None:
        pass

    @abstractmethod
    def build_rooms(self) -> None:
        pass


class ConcreteHouseBuilder(HouseBuilder):
    def build_windows(self) -> None:
        self._house.windows = "4 large windows"

    def build_doors(self) -> None:
        self._house.doors = "2 wooden doors"

    def build_rooms(self) -> None:
        self._house.rooms = "3 spacious rooms"


class Director:
    def __init__(self, builder: Optional[HouseBuilder] = None):
        self._builder = builder

    def set_builder(self, builder: HouseBuilder) -> None:
        self._builder = builder

    def construct_house(self) -> House:
        """
        Run every construction step in order.

        Raises:
            ConfigurationError: If no builder has been set
        """
        if self._builder is None:
            raise ConfigurationError("Director has no builder", missing_fields=["builder"])

        self._builder.build_windows()
        self._builder.build_doors()
        self._builder.build_rooms()
        return self._builder.get_house()


PATTERN_INFO = PatternInfo(
    name="builder",
    title="Builder",
    category=PatternCategory.CREATIONAL,
    intent=(
        "Separate the construction of a complex object from its representation "
        "so the same process can create different representations."
    ),
    participants=[
        "House: product being built",
        "HouseBuilder: abstract construction steps",
        "ConcreteHouseBuilder: concrete step implementations",
        "Director: optional driver of the step order",
    ],
    advantages=[
        "Construction can happen step by step",
        "The same steps can produce different products",
        "Construction code is isolated from the product",
    ],
    examples=[
        "Building documents or reports section by section",
        "Query builders assembling SQL statements",
    ],
    module=__name__,
)


def build_with_director(console: Console) -> House:
    builder = ConcreteHouseBuilder()
    director = Director()
    director.set_builder(builder)
    house = director.construct_house()
    console.write(house.describe())
    return house


def build_without_director(console: Console) -> House:
    builder = ConcreteHouseBuilder()
    builder.build_windows()
    builder.build_doors()
    builder.build_rooms()
    house = builder.get_house()
    console.write(house.describe())
    return house


def run_demo(console: Console) -> None:
    build_with_director(console)
    build_without_director(console)


def main() -> None:
    run_demo(StdoutConsole())


if __name__ == "__main__":
    main()
