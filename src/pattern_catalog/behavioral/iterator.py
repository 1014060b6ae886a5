"""Iterator pattern: walking a library's books without exposing its storage.

Participants:
    - Book: element of the collection
    - Iterator: ``has_next`` / ``next`` traversal interface
    - BookIterator: concrete iterator over a list of books
    - BookCollection: aggregate interface declaring ``create_iterator``
    - Library: concrete aggregate

Iterators also speak the Python iterator protocol, so a ``Library`` can be
used directly in a ``for`` loop.
"""
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import List, Optional, Sequence

from pattern_catalog.domain.exceptions import ValidationError
from pattern_catalog.domain.pattern import PatternCategory, PatternInfo
from pattern_catalog.infrastructure.console import Console, StdoutConsole


@dataclass(frozen=True)
class Book:
    title: str
    author: str

    def __post_init__(self):
        if not self.title.strip():
            raise ValidationError("Book title must not be empty")

    def __str__(self) -> str:
        return f"Title: {self.title}, Author: {self.author}"


class Iterator(ABC):
    @abstractmethod
    def has_next(self) -> bool:
        """Check if there are more elements."""

    @abstractmethod
    def next(self) -> Optional[Book]:
        """Return the next element, or None once exhausted."""

    def __iter__(self) -> "Iterator":
        return self

    def __next__(self) -> Book:
        book = self.next()
        if book is None:
            raise StopIteration
        return book


class BookIterator(Iterator):
    """Walks the live list, so books added mid-iteration are still reached."""

    def __init__(self, books: Sequence[Book]):
        self._books = books
        self._index = 0

    def has_next(self) -> bool:
        return self._index < len(self._books)

    def next(self) -> Optional[Book]:
        if not self.has_next():
            return None
        book = self._books[self._index]
        self._index += 1
        return book


class BookCollection(ABC):
    @abstractmethod
    def create_iterator(self) -> Iterator:
        """Return a fresh iterator positioned at the first element."""


class Library(BookCollection):
    def __init__(self):
        self._books: List[Book] = []

    def add_book(self, title: str, author: str) -> Book:
        book = Book(title, author)
        self._books.append(book)
        return book

    def create_iterator(self) -> Iterator:
        return BookIterator(self._books)

    def __iter__(self) -> Iterator:
        return self.create_iterator()

    def __len__(self) -> int:
        return len(self._books)


PATTERN_INFO = PatternInfo(
    name="iterator",
    title="Iterator",
    category=PatternCategory.BEHAVIORAL,
    intent=(
        "Provide a way to access the elements of an aggregate sequentially "
        "without exposing its underlying representation."
    ),
    participants=[
        "Iterator: traversal interface (has_next, next)",
        "BookIterator: concrete iterator",
        "BookCollection: aggregate interface creating iterators",
        "Library: concrete aggregate of books",
    ],
    advantages=[
        "Traversal logic is encapsulated away from the client",
        "Several independent iterations can run over one collection",
        "One traversal interface works across different collections",
    ],
    examples=[
        "Container iterators in standard libraries",
        "Walking directory trees",
        "Paging through a social media feed",
    ],
    module=__name__,
)


def run_demo(console: Console) -> None:
    library = Library()
    library.add_book("The Catcher in the Rye", "J.D. Salinger")
    library.add_book("To Kill a Mockingbird", "Harper Lee")
    library.add_book("1984", "George Orwell")

    iterator = library.create_iterator()

    console.write("Books in the library:")
    while iterator.has_next():
        console.write(str(iterator.next()))


def main() -> None:
    run_demo(StdoutConsole())


if __name__ == "__main__":
    main()
