# api/routes/books.py

from typing import Any, List

from fastapi import APIRouter, Body, Depends, status

from api.dependencies import body_or_empty, get_store, unwrap
from api.schemas.catalog import BAD_REQUEST, BOOK_EXAMPLE, NOT_FOUND
from core.catalog import Book, CatalogStore

router = APIRouter(prefix="/books", tags=["Books"])


@router.get("", response_model=List[Book])
def get_books(store: CatalogStore = Depends(get_store)):
    """Get all books"""
    return unwrap(store.list_books())


@router.get("/{book_id}", response_model=Book, responses=NOT_FOUND)
def get_book(book_id: str, store: CatalogStore = Depends(get_store)):
    """Get a book by ID"""
    return unwrap(store.get_book(book_id))


@router.post("", response_model=Book, status_code=status.HTTP_201_CREATED,
             responses=BAD_REQUEST)
def create_book(
    payload: Any = Body(None, examples=[BOOK_EXAMPLE]),
    store: CatalogStore = Depends(get_store)
):
    """
    Create a new book.

    title, authorIds, genreIds, isbn and summary are required. authorIds and
    genreIds must be non-empty arrays of existing author and genre IDs.
    """
    return unwrap(store.add_book(body_or_empty(payload)))


@router.put("/{book_id}", response_model=Book, responses={**BAD_REQUEST, **NOT_FOUND})
def update_book(
    book_id: str,
    payload: Any = Body(None, examples=[BOOK_EXAMPLE]),
    store: CatalogStore = Depends(get_store)
):
    """
    Replace a book's details.

    Same rules as creating a book; every field is replaced.
    """
    return unwrap(store.update_book(book_id, body_or_empty(payload)))


@router.delete("/{book_id}", status_code=status.HTTP_204_NO_CONTENT, responses=NOT_FOUND)
def delete_book(book_id: str, store: CatalogStore = Depends(get_store)):
    """Delete a book together with all of its copies."""
    unwrap(store.delete_book(book_id))
