# core/catalog/repositories/book.py
import logging
from typing import Any, Dict, List

from core.catalog.errors import NotFoundError
from core.catalog.ids import generate_id
from core.catalog.integrity import (
    build, require_fields, require_non_empty_list, require_references
)
from core.catalog.models import Book, BookUpdate
from core.catalog.tables import CatalogTables

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ('title', 'authorIds', 'genreIds', 'isbn', 'summary')


class BookRepository:
    """Repository for Book rows.

    Writes are accepted only when every referenced author and genre exists at
    that moment. Deleting a book also deletes its copies.
    """

    def __init__(self, tables: CatalogTables):
        self.tables = tables

    def list_all(self) -> List[Book]:
        return self.tables.books.all()

    def get(self, book_id: str) -> Book:
        book = self.tables.books.find(book_id)
        if book is None:
            raise NotFoundError("Book not found")
        return book

    def validate(self, payload: Dict[str, Any]) -> Dict[str, Any]:
        """Check a book payload and return its fields by attribute name.

        Order: required fields, authorIds shape, genreIds shape, author
        references, genre references. The reference checks report every
        offending id.

        Args:
            payload: Wire payload with camelCase keys

        Returns:
            Dict of snake_case attribute names to values

        Raises:
            ValidationFailedError: on the first failing check
        """
        require_fields(payload, REQUIRED_FIELDS)
        author_ids = require_non_empty_list(payload, 'authorIds')
        genre_ids = require_non_empty_list(payload, 'genreIds')
        require_references(
            author_ids, lambda ref: self.tables.authors.find(ref) is not None, 'author'
        )
        require_references(
            genre_ids, lambda ref: self.tables.genres.find(ref) is not None, 'genre'
        )
        return {
            'title': payload['title'],
            'author_ids': list(author_ids),
            'genre_ids': list(genre_ids),
            'isbn': payload['isbn'],
            'summary': payload['summary'],
        }

    def create(self, payload: Dict[str, Any]) -> Book:
        fields = self.validate(payload)
        book = build(Book, id=generate_id(), **fields)
        self.tables.books.add(book)
        logger.info("Created book %s (%s)", book.id, book.title)
        return book

    def update(self, book_id: str, payload: Dict[str, Any]) -> Book:
        self.get(book_id)
        patch = build(BookUpdate, **self.validate(payload))
        book = self.tables.books.update(book_id, patch)
        logger.info("Updated book %s", book_id)
        return book

    def delete(self, book_id: str) -> int:
        """Delete a book and every copy of it.

        The caller holds the store lock, so no reader can observe the copies
        gone while the book remains, or the reverse.

        Returns:
            Number of copies removed with the book

        Raises:
            NotFoundError: if no book has that id
        """
        self.get(book_id)
        removed = self.tables.copies.remove_where(lambda copy: copy.book_id == book_id)
        self.tables.books.delete(book_id)
        logger.info("Deleted book %s and %d copies", book_id, removed)
        return removed
