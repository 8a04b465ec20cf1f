# tests/test_catalog/test_tables.py

import pytest
from core.catalog.models import Author, AuthorUpdate, Genre, GenreUpdate
from core.catalog.tables import EntityTable


@pytest.fixture
def genre_table():
    """Fixture with three genres in insertion order."""
    table = EntityTable('genres')
    for index, name in enumerate(["Fantasy", "Horror", "Mystery"], 1):
        table.add(Genre(id=f"gen{index}", name=name))
    return table


def test_find(genre_table):
    """Test fetching a row by id"""
    genre = genre_table.find("gen2")
    assert genre is not None
    assert genre.name == "Horror"


def test_find_nonexistent(genre_table):
    assert genre_table.find("missing") is None


def test_all_keeps_insertion_order(genre_table):
    assert [g.id for g in genre_table.all()] == ["gen1", "gen2", "gen3"]


def test_all_returns_snapshot(genre_table):
    rows = genre_table.all()
    rows.clear()
    assert len(genre_table) == 3


def test_update_applies_set_fields_only():
    """Test that an update leaves fields it does not set untouched"""
    table = EntityTable('authors')
    table.add(Author(id="a1", first_name="Ursula", last_name="Le Guin", birth_date="1929-10-21"))

    updated = table.update("a1", AuthorUpdate(first_name="U. K."))

    assert updated.first_name == "U. K."
    assert updated.last_name == "Le Guin"
    assert updated.birth_date == "1929-10-21"
    assert updated.id == "a1"
    assert table.find("a1") == updated


def test_update_can_clear_optional_field():
    table = EntityTable('authors')
    table.add(Author(id="a1", first_name="Ursula", last_name="Le Guin", birth_date="1929-10-21"))

    updated = table.update("a1", AuthorUpdate(first_name="Ursula", last_name=None, birth_date="1929-10-21"))

    assert updated.last_name is None


def test_update_nonexistent(genre_table):
    """Test that updating a missing id changes nothing"""
    before = genre_table.all()
    assert genre_table.update("missing", GenreUpdate(name="Poetry")) is None
    assert genre_table.all() == before


def test_delete(genre_table):
    assert genre_table.delete("gen1") is True
    assert genre_table.find("gen1") is None
    assert len(genre_table) == 2


def test_delete_nonexistent(genre_table):
    assert genre_table.delete("missing") is False
    assert len(genre_table) == 3


def test_remove_where(genre_table):
    removed = genre_table.remove_where(lambda g: g.name.startswith(("F", "M")))
    assert removed == 2
    assert [g.id for g in genre_table.all()] == ["gen2"]


def test_counts(tables):
    tables.genres.add(Genre(id="g", name="Poetry"))
    assert tables.counts() == {"authors": 0, "genres": 1, "books": 0, "book_copies": 0}
