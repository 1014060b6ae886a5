"""Factory Method pattern: vehicle factories.

The creator declares a factory method returning the product interface and
each concrete creator decides which product to instantiate. Adding a new
vehicle means adding a product class and a factory for it; client code that
works with ``VehicleFactory`` and ``Vehicle`` stays untouched, as ``Truck``
shows.

Participants:
    - Vehicle: product interface
    - Car, Bike, Truck: concrete products
    - VehicleFactory: creator declaring ``create_vehicle``
    - CarFactory, BikeFactory, TruckFactory: concrete creators
"""
from abc import ABC, abstractmethod
from typing import Dict, Type

from pattern_catalog.domain.exceptions import PatternNotFoundError
from pattern_catalog.domain.pattern import PatternCategory, PatternInfo
from pattern_catalog.infrastructure.console import Console, StdoutConsole


class Vehicle(ABC):
    @abstractmethod
    def describe(self) -> str:
        pass

    def show_details(self, console: Console) -> None:
        console.write(self.describe())


class Car(Vehicle):
    def describe(self) -> str:
        return "This is a Car."


class Bike(Vehicle):
    def describe(self) -> str:
        return "This is a Bike."


class Truck(Vehicle):
    def describe(self) -> str:
        return "This is a Truck."


class VehicleFactory(ABC):
    @abstractmethod
    def create_vehicle(self) -> Vehicle:
        """Factory method."""


class CarFactory(VehicleFactory):
    def create_vehicle(self) -> Vehicle:
        return Car()


class BikeFactory(VehicleFactory):
    def create_vehicle(self) -> Vehicle:
        return Bike()


class TruckFactory(VehicleFactory):
    def create_vehicle(self) -> Vehicle:
        return Truck()


VEHICLE_FACTORIES: Dict[str, Type[VehicleFactory]] = {
    "car": CarFactory,
    "bike": BikeFactory,
    "truck": TruckFactory,
}


def get_vehicle_factory(kind: str) -> VehicleFactory:
    """
    Look up the factory for a vehicle kind.

    Raises:
        PatternNotFoundError: If no factory builds that kind of vehicle
    """
    factory_class = VEHICLE_FACTORIES.get(kind.strip().lower())
    if factory_class is None:
        raise PatternNotFoundError("Vehicle factory", kind, available=list(VEHICLE_FACTORIES))
    return factory_class()


PATTERN_INFO = PatternInfo(
    name="factory-method",
    title="Factory Method",
    category=PatternCategory.CREATIONAL,
    intent=(
        "Define an interface for creating an object but let subclasses decide "
        "which class to instantiate."
    ),
    participants=[
        "Vehicle: product interface",
        "Car / Bike / Truck: concrete products",
        "VehicleFactory: creator declaring the factory method",
        "CarFactory / BikeFactory / TruckFactory: concrete creators",
    ],
    advantages=[
        "Client code is decoupled from concrete product classes",
        "New products are added with new factories, without editing clients",
    ],
    examples=[
        "Plugin systems instantiating handlers by type",
        "Document editors creating type-specific documents",
    ],
    module=__name__,
)


def run_demo(console: Console) -> None:
    car_factory: VehicleFactory = CarFactory()
    car = car_factory.create_vehicle()
    car.show_details(console)

    bike_factory: VehicleFactory = BikeFactory()
    bike = bike_factory.create_vehicle()
    bike.show_details(console)


def main() -> None:
    run_demo(StdoutConsole())


if __name__ == "__main__":
    main()
