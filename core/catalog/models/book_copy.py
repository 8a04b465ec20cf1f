# core/catalog/models/book_copy.py
from enum import Enum
from typing import Optional
from pydantic import ConfigDict
from .base import CatalogRecord, PartialUpdate


class CopyStatus(str, Enum):
    AVAILABLE = "available"
    UNAVAILABLE = "unavailable"
    CAN_BE_CHECKED_OUT = "can be checkout"
    CHECKED_OUT = "checked out"

    @classmethod
    def values(cls) -> list[str]:
        return [status.value for status in cls]


class BookCopy(CatalogRecord):
    """A physical copy of a book. Status is a label; the store never transitions it."""
    model_config = ConfigDict(use_enum_values=True)

    book_id: str
    imprint: str
    status: CopyStatus
    due_back_date: Optional[str] = None


class CopyUpdate(PartialUpdate):
    model_config = ConfigDict(use_enum_values=True)

    book_id: Optional[str] = None
    imprint: Optional[str] = None
    status: Optional[CopyStatus] = None
    due_back_date: Optional[str] = None
