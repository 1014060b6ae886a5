"""Registration of every pattern in the catalogue."""
from pattern_catalog.behavioral import iterator, observer, state, strategy
from pattern_catalog.config.schemas import TransitionMode
from pattern_catalog.creational import builder, factory, prototype, singleton
from pattern_catalog.infrastructure.console import Console
from pattern_catalog.infrastructure.registry import PatternRegistry
from pattern_catalog.structural import adapter, decorator, facade, proxy


def build_registry(transition_mode: TransitionMode = TransitionMode.APPLY) -> PatternRegistry:
    """
    Build a registry holding the whole catalogue in presentation order.

    Args:
        transition_mode: Transition mode used by the State demo

    Returns:
        Populated registry
    """
    registry = PatternRegistry()

    # Creational
    registry.register(singleton.PATTERN_INFO, singleton.run_demo)
    registry.register(builder.PATTERN_INFO, builder.run_demo)
    registry.register(factory.PATTERN_INFO, factory.run_demo, aliases=["factory"])
    registry.register(prototype.PATTERN_INFO, prototype.run_demo)

    # Structural
    registry.register(facade.PATTERN_INFO, facade.run_demo)
    registry.register(adapter.PATTERN_INFO, adapter.run_demo)
    registry.register(proxy.PATTERN_INFO, proxy.run_demo)
    registry.register(decorator.PATTERN_INFO, decorator.run_demo)

    # Behavioral
    registry.register(observer.PATTERN_INFO, observer.run_demo)
    registry.register(strategy.PATTERN_INFO, strategy.run_demo)

    def _state_demo(console: Console) -> None:
        state.run_demo(console, transition_mode=transition_mode)

    registry.register(state.PATTERN_INFO, _state_demo, aliases=["tcp-connection"])
    registry.register(iterator.PATTERN_INFO, iterator.run_demo)

    return registry
