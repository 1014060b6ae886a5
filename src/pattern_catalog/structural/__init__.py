"""Structural patterns: Facade, Adapter, Proxy, Decorator."""
