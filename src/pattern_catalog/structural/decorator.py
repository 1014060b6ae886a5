"""Decorator pattern: adding milk and sugar to a coffee at runtime.

Participants:
    - Coffee: component interface
    - SimpleCoffee: concrete component
    - CoffeeDecorator: wraps a coffee and forwards to it
    - MilkDecorator, SugarDecorator: concrete decorators

Each decorator owns exactly the coffee it wraps, so a chain is a simple
linked list ending in the concrete component.
"""
from abc import ABC, abstractmethod
from typing import List

from pattern_catalog.domain.pattern import PatternCategory, PatternInfo
from pattern_catalog.infrastructure.console import Console, StdoutConsole


class Coffee(ABC):
    @abstractmethod
    def get_description(self) -> str:
        pass

    @abstractmethod
    def cost(self) -> float:
        pass


class SimpleCoffee(Coffee):
    def get_description(self) -> str:
        return "Simple Coffee"

    def cost(self) -> float:
        return 5.0


class CoffeeDecorator(Coffee):
    """Forwards everything to the wrapped coffee."""

    def __init__(self, coffee: Coffee):
        self._coffee = coffee

    @property
    def wrapped(self) -> Coffee:
        return self._coffee

    def get_description(self) -> str:
        return self._coffee.get_description()

    def cost(self) -> float:
        return self._coffee.cost()


class MilkDecorator(CoffeeDecorator):
    def get_description(self) -> str:
        return self._coffee.get_description() + ", Milk"

    def cost(self) -> float:
        return self._coffee.cost() + 1.0


class SugarDecorator(CoffeeDecorator):
    def get_description(self) -> str:
        return self._coffee.get_description() + ", Sugar"

    def cost(self) -> float:
        return self._coffee.cost() + 0.5


def unwrap(coffee: Coffee) -> List[Coffee]:
    """List the chain from the outermost decorator down to the component."""
    chain = [coffee]
    while isinstance(coffee, CoffeeDecorator):
        coffee = coffee.wrapped
        chain.append(coffee)
    return chain


def format_cost(cost: float) -> str:
    return f"{cost:g}"


PATTERN_INFO = PatternInfo(
    name="decorator",
    title="Decorator",
    category=PatternCategory.STRUCTURAL,
    intent=(
        "Attach additional responsibilities to an individual object dynamically, "
        "as a flexible alternative to subclassing."
    ),
    participants=[
        "Coffee: component interface",
        "SimpleCoffee: concrete component",
        "CoffeeDecorator: base wrapper",
        "MilkDecorator / SugarDecorator: concrete decorators",
    ],
    advantages=[
        "Behaviour is added without modifying existing classes",
        "Decorators combine freely at runtime",
        "Each decorator carries one small responsibility",
    ],
    examples=[
        "Bold, italic and underline styles in a text editor",
        "Buffered and compressed stream wrappers",
    ],
    module=__name__,
)


def _describe(coffee: Coffee, console: Console) -> None:
    console.write(f"Description: {coffee.get_description()}")
    console.write(f"Cost: ${format_cost(coffee.cost())}")


def run_demo(console: Console) -> None:
    my_coffee: Coffee = SimpleCoffee()
    _describe(my_coffee, console)

    my_coffee = MilkDecorator(my_coffee)
    _describe(my_coffee, console)

    my_coffee = SugarDecorator(my_coffee)
    _describe(my_coffee, console)


def main() -> None:
    run_demo(StdoutConsole())


if __name__ == "__main__":
    main()
