"""Behavioral patterns: Observer, Strategy, State, Iterator."""
