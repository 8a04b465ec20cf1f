# core/catalog/store.py
import logging
import threading
from dataclasses import dataclass
from enum import Enum
from functools import wraps
from typing import Any, Callable, Dict, List, Optional, Union

from core.catalog.errors import NotFoundError, ValidationFailedError
from core.catalog.models import Author, Book, BookCopy, CatalogRecord, Genre
from core.catalog.repositories import (
    AuthorRepository, BookCopyRepository, BookRepository, GenreRepository
)
from core.catalog.tables import CatalogTables

logger = logging.getLogger(__name__)


class Outcome(str, Enum):
    RECORD = "record"
    LIST = "list"
    EMPTY = "empty"
    NOT_FOUND = "not_found"
    INVALID = "invalid"


@dataclass(frozen=True)
class StoreResult:
    """What a store operation produced, free of any transport detail.

    ``value`` holds the record or list for RECORD/LIST outcomes, ``reason``
    the human-readable message for NOT_FOUND/INVALID.
    """
    outcome: Outcome
    value: Union[CatalogRecord, List[CatalogRecord], None] = None
    reason: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.outcome in (Outcome.RECORD, Outcome.LIST, Outcome.EMPTY)

    @classmethod
    def of(cls, value: Any) -> "StoreResult":
        if value is None:
            return cls(Outcome.EMPTY)
        if isinstance(value, list):
            return cls(Outcome.LIST, value=value)
        return cls(Outcome.RECORD, value=value)


def _as_result(method: Callable[..., Any]) -> Callable[..., StoreResult]:
    """Run a store method under the store lock and wrap what it returns.

    Catalog errors stop here and become NOT_FOUND / INVALID results.
    """
    @wraps(method)
    def wrapper(self: "CatalogStore", *args, **kwargs) -> StoreResult:
        with self._lock:
            try:
                return StoreResult.of(method(self, *args, **kwargs))
            except NotFoundError as e:
                logger.debug("%s: %s", method.__name__, e.reason)
                return StoreResult(Outcome.NOT_FOUND, reason=e.reason)
            except ValidationFailedError as e:
                logger.info("%s rejected: %s", method.__name__, e.reason)
                return StoreResult(Outcome.INVALID, reason=e.reason)
    return wrapper


def _require_object(payload: Any) -> Dict[str, Any]:
    if not isinstance(payload, dict):
        raise ValidationFailedError("Request body must be a JSON object")
    return payload


class CatalogStore:
    """The one entry point into the catalog.

    Owns the four tables and a single lock that serializes every operation,
    which keeps the book/copy cascade indivisible for concurrent callers.
    """

    def __init__(self, tables: Optional[CatalogTables] = None):
        self._tables = tables if tables is not None else CatalogTables()
        self._lock = threading.RLock()
        self._authors = AuthorRepository(self._tables)
        self._genres = GenreRepository(self._tables)
        self._books = BookRepository(self._tables)
        self._copies = BookCopyRepository(self._tables)

    def counts(self) -> Dict[str, int]:
        with self._lock:
            return self._tables.counts()

    def seed(self, *records: CatalogRecord) -> None:
        """Insert fixed rows as they are, bypassing id generation and checks.

        Used for sample data; rows must be listed parents first.
        """
        with self._lock:
            for record in records:
                table = {
                    Author: self._tables.authors,
                    Genre: self._tables.genres,
                    Book: self._tables.books,
                    BookCopy: self._tables.copies,
                }[type(record)]
                table.add(record)

    # Authors

    @_as_result
    def list_authors(self):
        return self._authors.list_all()

    @_as_result
    def get_author(self, author_id: str):
        return self._authors.get(author_id)

    @_as_result
    def add_author(self, payload: Dict[str, Any]):
        return self._authors.create(_require_object(payload))

    @_as_result
    def update_author(self, author_id: str, payload: Dict[str, Any]):
        return self._authors.update(author_id, _require_object(payload))

    @_as_result
    def delete_author(self, author_id: str):
        self._authors.delete(author_id)

    # Genres

    @_as_result
    def list_genres(self):
        return self._genres.list_all()

    @_as_result
    def get_genre(self, genre_id: str):
        return self._genres.get(genre_id)

    @_as_result
    def add_genre(self, payload: Dict[str, Any]):
        return self._genres.create(_require_object(payload))

    @_as_result
    def update_genre(self, genre_id: str, payload: Dict[str, Any]):
        return self._genres.update(genre_id, _require_object(payload))

    @_as_result
    def delete_genre(self, genre_id: str):
        self._genres.delete(genre_id)

    # Books

    @_as_result
    def list_books(self):
        return self._books.list_all()

    @_as_result
    def get_book(self, book_id: str):
        return self._books.get(book_id)

    @_as_result
    def add_book(self, payload: Dict[str, Any]):
        return self._books.create(_require_object(payload))

    @_as_result
    def update_book(self, book_id: str, payload: Dict[str, Any]):
        return self._books.update(book_id, _require_object(payload))

    @_as_result
    def delete_book(self, book_id: str):
        self._books.delete(book_id)

    # Book copies

    @_as_result
    def list_copies(self, book_id: Optional[str] = None, status: Optional[str] = None):
        return self._copies.filter(book_id=book_id, status=status)

    @_as_result
    def get_copy(self, copy_id: str):
        return self._copies.get(copy_id)

    @_as_result
    def add_copy(self, payload: Dict[str, Any]):
        return self._copies.create(_require_object(payload))

    @_as_result
    def update_copy(self, copy_id: str, payload: Dict[str, Any]):
        return self._copies.update(copy_id, _require_object(payload))

    @_as_result
    def delete_copy(self, copy_id: str):
        self._copies.delete(copy_id)
