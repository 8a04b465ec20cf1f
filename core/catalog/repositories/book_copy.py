# core/catalog/repositories/book_copy.py
import logging
from typing import Any, Dict, List, Optional

from core.catalog.errors import NotFoundError, ValidationFailedError
from core.catalog.ids import generate_id
from core.catalog.integrity import build, require_fields, require_status
from core.catalog.models import BookCopy, CopyUpdate
from core.catalog.tables import CatalogTables

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ('bookId', 'imprint', 'status')


class BookCopyRepository:
    def __init__(self, tables: CatalogTables):
        self.tables = tables

    def list_all(self) -> List[BookCopy]:
        return self.tables.copies.all()

    def filter(self, book_id: Optional[str] = None, status: Optional[str] = None) -> List[BookCopy]:
        """Get copies, optionally narrowed to one book and/or one status"""
        copies = self.list_all()
        if book_id:
            copies = [copy for copy in copies if copy.book_id == book_id]
        if status:
            copies = [copy for copy in copies if copy.status == status]
        return copies

    def get(self, copy_id: str) -> BookCopy:
        copy = self.tables.copies.find(copy_id)
        if copy is None:
            raise NotFoundError("Book copy not found")
        return copy

    def validate(self, payload: Dict[str, Any]) -> Dict[str, Any]:
        """Required fields, then the book reference, then the status value."""
        require_fields(payload, REQUIRED_FIELDS)
        book_id = payload['bookId']
        if not isinstance(book_id, str) or self.tables.books.find(book_id) is None:
            raise ValidationFailedError("Invalid book ID")
        status = require_status(payload['status'])
        return {
            'book_id': book_id,
            'imprint': payload['imprint'],
            'status': status,
            'due_back_date': payload.get('dueBackDate'),
        }

    def create(self, payload: Dict[str, Any]) -> BookCopy:
        copy = build(BookCopy, id=generate_id(), **self.validate(payload))
        self.tables.copies.add(copy)
        logger.info("Created copy %s of book %s", copy.id, copy.book_id)
        return copy

    def update(self, copy_id: str, payload: Dict[str, Any]) -> BookCopy:
        """Replace a copy's attributes. A missing dueBackDate clears it."""
        self.get(copy_id)
        patch = build(CopyUpdate, **self.validate(payload))
        copy = self.tables.copies.update(copy_id, patch)
        logger.info("Updated copy %s", copy_id)
        return copy

    def delete(self, copy_id: str) -> None:
        if not self.tables.copies.delete(copy_id):
            raise NotFoundError("Book copy not found")
        logger.info("Deleted copy %s", copy_id)
