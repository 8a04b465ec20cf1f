# core/catalog/repositories/genre.py
import logging
from typing import Any, Dict, List

from core.catalog.errors import NotFoundError
from core.catalog.ids import generate_id
from core.catalog.integrity import build, require_fields
from core.catalog.models import Genre, GenreUpdate
from core.catalog.tables import CatalogTables

logger = logging.getLogger(__name__)


class GenreRepository:
    """Repository for managing Genre rows."""

    def __init__(self, tables: CatalogTables):
        """Initialize the repository.

        Args:
            tables: The catalog tables this repository reads and writes
        """
        self.tables = tables

    def list_all(self) -> List[Genre]:
        return self.tables.genres.all()

    def get(self, genre_id: str) -> Genre:
        """Get a genre by id.

        Raises:
            NotFoundError: if no genre has that id
        """
        genre = self.tables.genres.find(genre_id)
        if genre is None:
            raise NotFoundError("Genre not found")
        return genre

    def create(self, payload: Dict[str, Any]) -> Genre:
        require_fields(payload, ('name',))
        genre = build(Genre, id=generate_id(), name=payload.get('name'))
        self.tables.genres.add(genre)
        logger.info("Created genre %s (%s)", genre.id, genre.name)
        return genre

    def update(self, genre_id: str, payload: Dict[str, Any]) -> Genre:
        self.get(genre_id)
        require_fields(payload, ('name',))
        patch = build(GenreUpdate, name=payload.get('name'))
        genre = self.tables.genres.update(genre_id, patch)
        logger.info("Updated genre %s", genre_id)
        return genre

    def delete(self, genre_id: str) -> None:
        """Delete a genre without touching the books that reference it.

        Raises:
            NotFoundError: if no genre has that id
        """
        if not self.tables.genres.delete(genre_id):
            raise NotFoundError("Genre not found")
        logger.info("Deleted genre %s", genre_id)
