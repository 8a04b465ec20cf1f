# core/catalog/repositories/__init__.py
from .author import AuthorRepository
from .genre import GenreRepository
from .book import BookRepository
from .book_copy import BookCopyRepository

__all__ = ['AuthorRepository', 'GenreRepository', 'BookRepository', 'BookCopyRepository']
