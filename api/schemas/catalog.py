# api/schemas/catalog.py
from pydantic import BaseModel

AUTHOR_EXAMPLE = {
    "firstName": "Jane",
    "lastName": "Doe",
    "birthDate": "1975-03-15",
    "deathDate": "2020-12-01",
}

GENRE_EXAMPLE = {"name": "Science Fiction"}

BOOK_EXAMPLE = {
    "title": "The Great Adventure",
    "authorIds": ["auth123", "auth456"],
    "genreIds": ["gen123"],
    "isbn": "978-3-16-148410-0",
    "summary": "An epic tale of adventure and discovery.",
}

BOOK_COPY_EXAMPLE = {
    "bookId": "book123",
    "imprint": "First Edition 2023",
    "status": "available",
    "dueBackDate": "2024-01-15",
}


class ErrorSchema(BaseModel):
    error: str
    message: str


NOT_FOUND = {404: {"model": ErrorSchema, "description": "Not found"}}
BAD_REQUEST = {400: {"model": ErrorSchema, "description": "Validation failed"}}
