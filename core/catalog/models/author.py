# core/catalog/models/author.py
from typing import Optional
from .base import CatalogRecord, PartialUpdate


class Author(CatalogRecord):
    first_name: str
    last_name: Optional[str] = None
    birth_date: str
    death_date: Optional[str] = None


class AuthorUpdate(PartialUpdate):
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    birth_date: Optional[str] = None
    death_date: Optional[str] = None
