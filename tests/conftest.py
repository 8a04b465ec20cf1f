# tests/conftest.py
import sys
import pytest
from pathlib import Path

# Add project root to Python path
project_root = str(Path(__file__).parent.parent)
if project_root not in sys.path:
    sys.path.insert(0, project_root)

from core.catalog import CatalogStore, CatalogTables


@pytest.fixture
def tables():
    """Empty catalog tables"""
    return CatalogTables()


@pytest.fixture
def store():
    """An empty catalog store"""
    return CatalogStore()


@pytest.fixture
def author(store):
    """Create a sample author and return it."""
    return store.add_author({"firstName": "Isaac", "lastName": "Asimov", "birthDate": "1920-01-02"}).value


@pytest.fixture
def genre(store):
    return store.add_genre({"name": "Science Fiction"}).value


@pytest.fixture
def book_payload(author, genre):
    """A valid book payload referencing the sample author and genre."""
    return {
        "title": "Foundation",
        "authorIds": [author.id],
        "genreIds": [genre.id],
        "isbn": "978-0-553-29335-4",
        "summary": "The first book in the Foundation series.",
    }


@pytest.fixture
def book(store, book_payload):
    return store.add_book(book_payload).value


@pytest.fixture
def copy_payload(book):
    return {"bookId": book.id, "imprint": "First Edition 1951", "status": "available"}
