"""Creational patterns: Singleton, Builder, Factory Method, Prototype."""
