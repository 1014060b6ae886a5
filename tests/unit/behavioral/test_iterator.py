"""Tests for the library Iterator pattern."""

import pytest

from pattern_catalog.behavioral.iterator import Book, BookIterator, Library, run_demo
from pattern_catalog.domain.exceptions import ValidationError


class TestBookIterator:
    """Test explicit and protocol-based iteration."""

    def setup_method(self):
        """Set up test fixtures."""
        self.library = Library()
        self.library.add_book("Dune", "Frank Herbert")
        self.library.add_book("Emma", "Jane Austen")

    def test_has_next_and_next(self):
        """Test the explicit traversal interface."""
        iterator = self.library.create_iterator()

        titles = []
        while iterator.has_next():
            titles.append(iterator.next().title)

        assert titles == ["Dune", "Emma"]
        assert iterator.has_next() is False

    def test_next_after_exhaustion_returns_none(self):
        """Test that an exhausted iterator returns None instead of failing."""
        iterator = self.library.create_iterator()
        iterator.next()
        iterator.next()

        assert iterator.next() is None

    def test_python_iteration_protocol(self):
        """Test that the library works in a for loop."""
        assert [book.author for book in self.library] == ["Frank Herbert", "Jane Austen"]
        assert list(BookIterator([])) == []

    def test_iterators_are_independent(self):
        """Test that each iterator keeps its own position."""
        first = self.library.create_iterator()
        second = self.library.create_iterator()
        first.next()

        assert second.next().title == "Dune"
        assert first.next().title == "Emma"

    def test_books_added_later_are_visible(self):
        """Test that iteration walks the live collection."""
        iterator = self.library.create_iterator()
        iterator.next()
        self.library.add_book("Ulysses", "James Joyce")

        assert [book.title for book in iterator] == ["Emma", "Ulysses"]
        assert len(self.library) == 3


class TestBook:
    def test_str(self):
        assert str(Book("1984", "George Orwell")) == "Title: 1984, Author: George Orwell"

    def test_empty_title_rejected(self):
        with pytest.raises(ValidationError):
            Book("  ", "Nobody")


def test_demo_output(recording_console):
    """Test the iterator demo."""
    run_demo(recording_console)

    assert recording_console.lines == [
        "Books in the library:",
        "Title: The Catcher in the Rye, Author: J.D. Salinger",
        "Title: To Kill a Mockingbird, Author: Harper Lee",
        "Title: 1984, Author: George Orwell",
    ]
