# core/catalog/sample_data.py
import logging

from core.catalog.models import Author, Book, BookCopy, CopyStatus, Genre

logger = logging.getLogger(__name__)


def sample_records() -> list:
    """Fixed rows used to pre-populate a fresh catalog, parents first"""
    return [
        Author(
            id='auth1',
            first_name='Isaac',
            last_name='Asimov',
            birth_date='1920-01-02',
            death_date='1992-04-06',
        ),
        Author(
            id='auth2',
            first_name='Ursula',
            last_name='K. Le Guin',
            birth_date='1929-10-21',
            death_date='2018-01-22',
        ),
        Genre(id='gen1', name='Science Fiction'),
        Genre(id='gen2', name='Fantasy'),
        Book(
            id='book1',
            title='Foundation',
            author_ids=['auth1'],
            genre_ids=['gen1'],
            isbn='978-0-553-29335-4',
            summary='The first book in the Foundation series by Isaac Asimov.',
        ),
        BookCopy(
            id='copy1',
            book_id='book1',
            imprint='First Edition 1951',
            status=CopyStatus.AVAILABLE,
        ),
    ]


def seed_sample_data(store) -> None:
    store.seed(*sample_records())
    logger.info("Sample data initialized: %s", store.counts())
