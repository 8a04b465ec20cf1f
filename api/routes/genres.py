# api/routes/genres.py

from typing import Any, List

from fastapi import APIRouter, Body, Depends, status

from api.dependencies import body_or_empty, get_store, unwrap
from api.schemas.catalog import BAD_REQUEST, GENRE_EXAMPLE, NOT_FOUND
from core.catalog import CatalogStore, Genre

router = APIRouter(prefix="/genres", tags=["Genres"])


@router.get("", response_model=List[Genre])
def get_genres(store: CatalogStore = Depends(get_store)):
    return unwrap(store.list_genres())


@router.get("/{genre_id}", response_model=Genre, responses=NOT_FOUND)
def get_genre(genre_id: str, store: CatalogStore = Depends(get_store)):
    return unwrap(store.get_genre(genre_id))


@router.post("", response_model=Genre, status_code=status.HTTP_201_CREATED,
             responses=BAD_REQUEST)
def create_genre(
    payload: Any = Body(None, examples=[GENRE_EXAMPLE]),
    store: CatalogStore = Depends(get_store)
):
    """Create a genre. name is required."""
    return unwrap(store.add_genre(body_or_empty(payload)))


@router.put("/{genre_id}", response_model=Genre, responses={**BAD_REQUEST, **NOT_FOUND})
def update_genre(
    genre_id: str,
    payload: Any = Body(None, examples=[GENRE_EXAMPLE]),
    store: CatalogStore = Depends(get_store)
):
    return unwrap(store.update_genre(genre_id, body_or_empty(payload)))


@router.delete("/{genre_id}", status_code=status.HTTP_204_NO_CONTENT, responses=NOT_FOUND)
def delete_genre(genre_id: str, store: CatalogStore = Depends(get_store)):
    """Delete a genre. Books that reference the genre are not changed."""
    unwrap(store.delete_genre(genre_id))
