# core/catalog/models/book.py
from typing import List, Optional
from .base import CatalogRecord, PartialUpdate


class Book(CatalogRecord):
    """A catalog title. Authors and genres are referenced by id, in order."""
    title: str
    author_ids: List[str]
    genre_ids: List[str]
    isbn: str
    summary: str


class BookUpdate(PartialUpdate):
    title: Optional[str] = None
    author_ids: Optional[List[str]] = None
    genre_ids: Optional[List[str]] = None
    isbn: Optional[str] = None
    summary: Optional[str] = None
