"""Design Pattern Catalog - Root Package.

This package collects small, self-contained implementations of the classic
object-oriented design patterns, each paired with prose describing its
intent and trade-offs and a demo driver that prints to standard output.

Key Components:
    - creational: Singleton, Builder, Factory Method, Prototype
    - structural: Facade, Adapter, Proxy, Decorator
    - behavioral: Observer, Strategy, State, Iterator
    - domain: Catalogue metadata and exceptions
    - infrastructure: Console output, logging, registry and error handling
    - config: Configuration schema and loading
    - cli: Command line interface

Usage:
    >>> pattern-catalog                  # run every demo
    >>> pattern-catalog show state       # describe one pattern
    >>> python -m pattern_catalog.behavioral.state
"""

from ._package import PACKAGE_NAME, __version__

__all__ = ["PACKAGE_NAME", "__version__"]
