# core/catalog/__init__.py
from .errors import CatalogError, NotFoundError, ValidationFailedError
from .ids import generate_id
from .models import (
    Author, AuthorUpdate, Genre, GenreUpdate, Book, BookUpdate,
    BookCopy, CopyStatus, CopyUpdate
)
from .tables import EntityTable, CatalogTables
from .store import CatalogStore, StoreResult, Outcome
from .sample_data import seed_sample_data

__all__ = [
    'CatalogError',
    'NotFoundError',
    'ValidationFailedError',
    'generate_id',
    'Author',
    'AuthorUpdate',
    'Genre',
    'GenreUpdate',
    'Book',
    'BookUpdate',
    'BookCopy',
    'CopyStatus',
    'CopyUpdate',
    'EntityTable',
    'CatalogTables',
    'CatalogStore',
    'StoreResult',
    'Outcome',
    'seed_sample_data'
]
