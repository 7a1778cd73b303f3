"""
Record store for books.

``BookRepository`` is the interface the HTTP layer depends on;
``InMemoryBookStore`` is the list-backed implementation used by default.
"""
from datetime import date
from threading import Lock
from typing import Any, Callable, Iterable, Mapping, Optional, Protocol

from bookstore.core.exceptions import NotFoundError, ValidationError
from bookstore.core.logging import get_logger
from bookstore.schemas.book import Book

logger = get_logger("storage")

DEFAULT_ISBN = "N/A"
UPDATABLE_FIELDS = ("title", "author", "year", "isbn")

SEED_BOOKS: tuple[dict[str, Any], ...] = (
    {"id": 1, "title": "The Great Gatsby", "author": "F. Scott Fitzgerald", "year": 1925, "isbn": "978-0743273565"},
    {"id": 2, "title": "To Kill a Mockingbird", "author": "Harper Lee", "year": 1960, "isbn": "978-0061120084"},
    {"id": 3, "title": "1984", "author": "George Orwell", "year": 1949, "isbn": "978-0451524935"},
)


class BookRepository(Protocol):
    """
    Repository interface for book CRUD operations.
    """
    def list(self) -> list[Book]:
        ...
    def get(self, book_id: Optional[int]) -> Book:
        ...
    def create(
        self,
        title: Optional[str],
        author: Optional[str],
        year: Optional[int] = None,
        isbn: Optional[str] = None,
    ) -> Book:
        ...
    def update(self, book_id: Optional[int], fields: Mapping[str, Any]) -> Book:
        ...
    def remove(self, book_id: Optional[int]) -> Book:
        ...
    def remove_all(self) -> int:
        ...


class InMemoryBookStore:
    """
    List-based in-memory book store.

    Insertion order is listing order. Ids come from a counter that starts
    one past the highest seeded id and is never reused, except that
    ``remove_all`` rewinds it to that starting value.
    """
    def __init__(
        self,
        seed: Iterable[Mapping[str, Any]] = SEED_BOOKS,
        clock: Callable[[], date] = date.today,
    ):
        self._books: list[Book] = [Book(**record) for record in seed]
        self._initial_next_id = max((b.id for b in self._books), default=0) + 1
        self._next_id = self._initial_next_id
        self._clock = clock
        self._lock = Lock()

    @property
    def next_id(self) -> int:
        return self._next_id

    def list(self) -> list[Book]:
        return list(self._books)

    def _index_of(self, book_id: Optional[int]) -> int:
        for idx, book in enumerate(self._books):
            if book.id == book_id:
                return idx
        logger.debug(f"No book with id {book_id!r}")
        raise NotFoundError("Book", book_id)

    def get(self, book_id: Optional[int]) -> Book:
        return self._books[self._index_of(book_id)]

    def create(
        self,
        title: Optional[str],
        author: Optional[str],
        year: Optional[int] = None,
        isbn: Optional[str] = None,
    ) -> Book:
        """
        Append a new book and return it.

        Raises ``ValidationError`` when title or author is missing or empty;
        the store is left untouched in that case.
        """
        if not title or not author:
            missing = [name for name, value in (("title", title), ("author", author)) if not value]
            raise ValidationError("Title and author are required", fields=missing)

        with self._lock:
            book = Book(
                id=self._next_id,
                title=title,
                author=author,
                year=year or self._clock().year,
                isbn=isbn or DEFAULT_ISBN,
            )
            self._next_id += 1
            self._books.append(book)
        logger.info(f"Created book {book.id}: {book.title!r}")
        return book

    def update(self, book_id: Optional[int], fields: Mapping[str, Any]) -> Book:
        """
        Overwrite the given fields of an existing book in place.

        Only truthy values are applied: an empty string, ``0`` or ``None``
        leaves the stored value as it was.
        """
        with self._lock:
            book = self._books[self._index_of(book_id)]
            changed = []
            for name in UPDATABLE_FIELDS:
                value = fields.get(name)
                if value:
                    setattr(book, name, value)
                    changed.append(name)
        logger.info(f"Updated book {book.id}: {', '.join(changed) or 'no changes'}")
        return book

    def remove(self, book_id: Optional[int]) -> Book:
        with self._lock:
            book = self._books.pop(self._index_of(book_id))
        logger.info(f"Deleted book {book.id}")
        return book

    def remove_all(self) -> int:
        """Empty the store, rewind the id counter and return how many books were removed."""
        with self._lock:
            count = len(self._books)
            self._books = []
            self._next_id = self._initial_next_id
        logger.info(f"Deleted all {count} books")
        return count
