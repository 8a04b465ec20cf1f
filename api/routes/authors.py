# api/routes/authors.py

from typing import Any, List

from fastapi import APIRouter, Body, Depends, status

from api.dependencies import body_or_empty, get_store, unwrap
from api.schemas.catalog import AUTHOR_EXAMPLE, BAD_REQUEST, NOT_FOUND
from core.catalog import Author, CatalogStore

router = APIRouter(prefix="/authors", tags=["Authors"])


@router.get("", response_model=List[Author], response_model_exclude_none=True)
def get_authors(store: CatalogStore = Depends(get_store)):
    """Get all authors"""
    return unwrap(store.list_authors())


@router.get("/{author_id}", response_model=Author, response_model_exclude_none=True,
            responses=NOT_FOUND)
def get_author(author_id: str, store: CatalogStore = Depends(get_store)):
    """Get an author by ID"""
    return unwrap(store.get_author(author_id))


@router.post("", response_model=Author, response_model_exclude_none=True,
             status_code=status.HTTP_201_CREATED, responses=BAD_REQUEST)
def create_author(
    payload: Any = Body(None, examples=[AUTHOR_EXAMPLE]),
    store: CatalogStore = Depends(get_store)
):
    """Create a new author. firstName and birthDate are required."""
    return unwrap(store.add_author(body_or_empty(payload)))


@router.put("/{author_id}", response_model=Author, response_model_exclude_none=True,
            responses={**BAD_REQUEST, **NOT_FOUND})
def update_author(
    author_id: str,
    payload: Any = Body(None, examples=[AUTHOR_EXAMPLE]),
    store: CatalogStore = Depends(get_store)
):
    """Replace an author's details. lastName and deathDate are cleared when omitted."""
    return unwrap(store.update_author(author_id, body_or_empty(payload)))


@router.delete("/{author_id}", status_code=status.HTTP_204_NO_CONTENT, responses=NOT_FOUND)
def delete_author(author_id: str, store: CatalogStore = Depends(get_store)):
    """Delete an author. Books that reference the author are not changed."""
    unwrap(store.delete_author(author_id))
