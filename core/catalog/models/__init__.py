# core/catalog/models/__init__.py
from .base import CatalogRecord, PartialUpdate
from .author import Author, AuthorUpdate
from .genre import Genre, GenreUpdate
from .book import Book, BookUpdate
from .book_copy import BookCopy, CopyStatus, CopyUpdate

__all__ = [
    'CatalogRecord',
    'PartialUpdate',
    'Author',
    'AuthorUpdate',
    'Genre',
    'GenreUpdate',
    'Book',
    'BookUpdate',
    'BookCopy',
    'CopyStatus',
    'CopyUpdate'
]
