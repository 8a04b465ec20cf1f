# core/catalog/models/genre.py
from typing import Optional
from .base import CatalogRecord, PartialUpdate


class Genre(CatalogRecord):
    name: str


class GenreUpdate(PartialUpdate):
    name: Optional[str] = None
