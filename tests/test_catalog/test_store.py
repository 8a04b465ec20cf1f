# tests/test_catalog/test_store.py

import threading

import pytest
from core.catalog import CatalogStore, Outcome, seed_sample_data


def test_create_then_get_round_trip(store, book_payload):
    """Test that a created book reads back equal to its payload plus an id"""
    created = store.add_book(book_payload)
    assert created.outcome == Outcome.RECORD
    assert created.value.id

    fetched = store.get_book(created.value.id)
    assert fetched.outcome == Outcome.RECORD
    assert fetched.value.to_dict() == {"id": created.value.id, **book_payload}


def test_list_outcome(store, author):
    result = store.list_authors()
    assert result.outcome == Outcome.LIST
    assert result.value == [author]


def test_get_missing_is_not_found(store):
    result = store.get_genre("missing")
    assert result.outcome == Outcome.NOT_FOUND
    assert result.reason == "Genre not found"
    assert not result.ok


def test_invalid_payload_is_reported_not_raised(store):
    result = store.add_genre({})
    assert result.outcome == Outcome.INVALID
    assert result.reason == "name is required"


@pytest.mark.parametrize("payload", [None, [], "name", 3])
def test_non_object_payload_is_invalid(store, payload):
    result = store.add_author(payload)
    assert result.outcome == Outcome.INVALID
    assert result.reason == "Request body must be a JSON object"


def test_copy_with_unknown_book_appends_nothing(store):
    result = store.add_copy({"bookId": "nonexistent", "imprint": "i", "status": "available"})
    assert result.outcome == Outcome.INVALID
    assert result.reason == "Invalid book ID"
    assert store.counts()["book_copies"] == 0


@pytest.mark.parametrize("method, payload", [
    ("update_author", {"firstName": "Jane", "birthDate": "1980-01-01"}),
    ("update_genre", {"name": "Poetry"}),
    ("update_book", {}),
    ("update_copy", {"bookId": "b", "imprint": "i", "status": "available"}),
])
def test_update_missing_is_not_found_and_mutates_nothing(store, book, method, payload):
    before = store.counts()
    snapshot = [store.list_authors().value, store.list_genres().value, store.list_books().value]

    result = getattr(store, method)("missing", payload)

    assert result.outcome == Outcome.NOT_FOUND
    assert store.counts() == before
    assert [store.list_authors().value, store.list_genres().value, store.list_books().value] == snapshot


def test_update_keeps_identifier(store, book, book_payload):
    result = store.update_book(book.id, {**book_payload, "title": "Foundation and Empire", "id": "other"})
    assert result.outcome == Outcome.RECORD
    assert result.value.id == book.id
    assert result.value.title == "Foundation and Empire"
    assert store.get_book(book.id).value.title == "Foundation and Empire"


def test_delete_twice(store, genre):
    before = store.counts()["genres"]
    assert store.delete_genre(genre.id).outcome == Outcome.EMPTY
    assert store.counts()["genres"] == before - 1
    second = store.delete_genre(genre.id)
    assert second.outcome == Outcome.NOT_FOUND
    assert store.counts()["genres"] == before - 1


def test_delete_book_removes_its_copies(store, book, copy_payload, book_payload):
    other = store.add_book({**book_payload, "title": "Other"}).value
    store.add_copy(copy_payload)
    store.add_copy({**copy_payload, "imprint": "Second printing"})
    store.add_copy({**copy_payload, "bookId": other.id})
    before = store.counts()

    assert store.delete_book(book.id).outcome == Outcome.EMPTY

    after = store.counts()
    assert after["books"] == before["books"] - 1
    assert after["book_copies"] == before["book_copies"] - 2
    assert store.list_copies(book_id=book.id).value == []
    assert store.delete_book(book.id).outcome == Outcome.NOT_FOUND


def test_deleting_author_leaves_dangling_reference(store, author, book):
    assert store.delete_author(author.id).outcome == Outcome.EMPTY
    assert store.get_book(book.id).value.author_ids == [author.id]


def test_seed_sample_data():
    store = CatalogStore()
    seed_sample_data(store)
    assert store.counts() == {"authors": 2, "genres": 2, "books": 1, "book_copies": 1}
    assert store.get_book("book1").value.author_ids == ["auth1"]
    assert store.list_copies(book_id="book1").value[0].id == "copy1"


def test_concurrent_cascade_leaves_no_orphans(store, book_payload):
    """Test that copies added while books are deleted never outlive their book"""
    books = [store.add_book(book_payload).value for _ in range(20)]
    errors = []

    def add_copies(book_id):
        for _ in range(20):
            result = store.add_copy({"bookId": book_id, "imprint": "i", "status": "available"})
            if result.outcome not in (Outcome.RECORD, Outcome.INVALID):
                errors.append(result)

    def delete_book(book_id):
        store.delete_book(book_id)

    threads = []
    for b in books:
        threads.append(threading.Thread(target=add_copies, args=(b.id,)))
        threads.append(threading.Thread(target=delete_book, args=(b.id,)))
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert errors == []
    assert store.counts()["books"] == 0
    assert store.list_copies().value == []
