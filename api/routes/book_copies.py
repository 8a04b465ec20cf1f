# api/routes/book_copies.py

from typing import Any, List, Optional

from fastapi import APIRouter, Body, Depends, Query, status

from api.dependencies import body_or_empty, get_store, unwrap
from api.schemas.catalog import BAD_REQUEST, BOOK_COPY_EXAMPLE, NOT_FOUND
from core.catalog import BookCopy, CatalogStore, CopyStatus

router = APIRouter(prefix="/book-copies", tags=["Book Copies"])


@router.get("", response_model=List[BookCopy], response_model_exclude_none=True)
def get_book_copies(
    book_id: Optional[str] = Query(None, alias="bookId", description="Only copies of this book"),
    copy_status: Optional[str] = Query(
        None, alias="status", description="Only copies with this status",
        json_schema_extra={"enum": CopyStatus.values()}
    ),
    store: CatalogStore = Depends(get_store)
):
    """Get all book copies, optionally filtered by bookId and status."""
    return unwrap(store.list_copies(book_id=book_id, status=copy_status))


@router.get("/{copy_id}", response_model=BookCopy, response_model_exclude_none=True,
            responses=NOT_FOUND)
def get_book_copy(copy_id: str, store: CatalogStore = Depends(get_store)):
    return unwrap(store.get_copy(copy_id))


@router.post("", response_model=BookCopy, response_model_exclude_none=True,
             status_code=status.HTTP_201_CREATED, responses=BAD_REQUEST)
def create_book_copy(
    payload: Any = Body(None, examples=[BOOK_COPY_EXAMPLE]),
    store: CatalogStore = Depends(get_store)
):
    """
    Create a new copy of an existing book.

    bookId, imprint and status are required; status must be one of
    available, unavailable, can be checkout, checked out.
    """
    return unwrap(store.add_copy(body_or_empty(payload)))


@router.put("/{copy_id}", response_model=BookCopy, response_model_exclude_none=True,
            responses={**BAD_REQUEST, **NOT_FOUND})
def update_book_copy(
    copy_id: str,
    payload: Any = Body(None, examples=[BOOK_COPY_EXAMPLE]),
    store: CatalogStore = Depends(get_store)
):
    return unwrap(store.update_copy(copy_id, body_or_empty(payload)))


@router.delete("/{copy_id}", status_code=status.HTTP_204_NO_CONTENT, responses=NOT_FOUND)
def delete_book_copy(copy_id: str, store: CatalogStore = Depends(get_store)):
    unwrap(store.delete_copy(copy_id))
