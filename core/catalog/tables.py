# core/catalog/tables.py
from typing import Callable, Generic, List, Optional, TypeVar

from core.catalog.models import Author, Book, BookCopy, CatalogRecord, Genre, PartialUpdate

T = TypeVar('T', bound=CatalogRecord)


class EntityTable(Generic[T]):
    """Insertion-ordered rows of one entity kind, keyed by id.

    Tables know nothing about other kinds; reference checks live in the
    repositories above them.
    """

    def __init__(self, name: str):
        self.name = name
        self._rows: List[T] = []

    def __len__(self) -> int:
        return len(self._rows)

    def _index_of(self, record_id: str) -> int:
        for index, row in enumerate(self._rows):
            if row.id == record_id:
                return index
        return -1

    def find(self, record_id: str) -> Optional[T]:
        """Get the first row with the given id, or None"""
        index = self._index_of(record_id)
        return self._rows[index] if index != -1 else None

    def all(self) -> List[T]:
        """Snapshot of every row in insertion order"""
        return list(self._rows)

    def add(self, record: T) -> T:
        """Append a row. The caller has already validated it."""
        self._rows.append(record)
        return record

    def update(self, record_id: str, patch: PartialUpdate) -> Optional[T]:
        """Merge the fields set on ``patch`` into the row with the given id.

        Args:
            record_id: Id of the row to update
            patch: Partial update; only its explicitly set fields are applied

        Returns:
            The resulting full row, or None if no row has that id
        """
        index = self._index_of(record_id)
        if index == -1:
            return None

        changes = patch.changes()
        changes.pop('id', None)
        self._rows[index] = self._rows[index].model_copy(update=changes)
        return self._rows[index]

    def delete(self, record_id: str) -> bool:
        """Remove the row with the given id. Returns False if there was none."""
        index = self._index_of(record_id)
        if index == -1:
            return False
        del self._rows[index]
        return True

    def remove_where(self, predicate: Callable[[T], bool]) -> int:
        """Remove every row matching ``predicate`` and return how many went"""
        kept = [row for row in self._rows if not predicate(row)]
        removed = len(self._rows) - len(kept)
        self._rows = kept
        return removed


class CatalogTables:
    """The four catalog tables. Owned by a single CatalogStore."""

    def __init__(self):
        self.authors: EntityTable[Author] = EntityTable('authors')
        self.genres: EntityTable[Genre] = EntityTable('genres')
        self.books: EntityTable[Book] = EntityTable('books')
        self.copies: EntityTable[BookCopy] = EntityTable('book_copies')

    def counts(self) -> dict:
        return {
            table.name: len(table)
            for table in (self.authors, self.genres, self.books, self.copies)
        }