# core/catalog/repositories/author.py
import logging
from typing import Any, Dict, List

from core.catalog.errors import NotFoundError
from core.catalog.ids import generate_id
from core.catalog.integrity import build, require_fields
from core.catalog.models import Author, AuthorUpdate
from core.catalog.tables import CatalogTables

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ('firstName', 'birthDate')


class AuthorRepository:
    def __init__(self, tables: CatalogTables):
        self.tables = tables

    def list_all(self) -> List[Author]:
        """Get every author in insertion order"""
        return self.tables.authors.all()

    def get(self, author_id: str) -> Author:
        author = self.tables.authors.find(author_id)
        if author is None:
            raise NotFoundError("Author not found")
        return author

    def create(self, payload: Dict[str, Any]) -> Author:
        """Create an author from a wire payload. firstName and birthDate are required."""
        require_fields(payload, REQUIRED_FIELDS)
        author = build(
            Author,
            id=generate_id(),
            first_name=payload.get('firstName'),
            last_name=payload.get('lastName'),
            birth_date=payload.get('birthDate'),
            death_date=payload.get('deathDate'),
        )
        self.tables.authors.add(author)
        logger.info("Created author %s", author.id)
        return author

    def update(self, author_id: str, payload: Dict[str, Any]) -> Author:
        """Replace an author's attributes. Optional attributes missing from the payload are cleared."""
        self.get(author_id)
        require_fields(payload, REQUIRED_FIELDS)
        patch = build(
            AuthorUpdate,
            first_name=payload.get('firstName'),
            last_name=payload.get('lastName'),
            birth_date=payload.get('birthDate'),
            death_date=payload.get('deathDate'),
        )
        author = self.tables.authors.update(author_id, patch)
        logger.info("Updated author %s", author_id)
        return author

    def delete(self, author_id: str) -> None:
        """Delete an author. Books referencing it are left as they are."""
        if not self.tables.authors.delete(author_id):
            raise NotFoundError("Author not found")
        logger.info("Deleted author %s", author_id)
