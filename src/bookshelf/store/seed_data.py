"""
Seed data loaded into the store at process start.

The collections are fixed literals; the store built from them lives for the
lifetime of the process and is only ever appended to.
"""

from __future__ import annotations

from ..logging import get_logger
from .collections import LibraryStore
from .records import AuthorRecord, BookRecord, PublisherRecord

logger = get_logger(__name__)


SEED_PUBLISHERS: tuple[PublisherRecord, ...] = (
    PublisherRecord(id=1, name="Pragma"),
    PublisherRecord(id=2, name="Melvil"),
)

SEED_AUTHORS: tuple[AuthorRecord, ...] = (
    AuthorRecord(id=1, name="J. K. Rowling"),
    AuthorRecord(id=2, name="J. R. R. Tolkien"),
    AuthorRecord(id=3, name="Brent Weeks"),
)

SEED_BOOKS: tuple[BookRecord, ...] = (
    BookRecord(id=1, name="Harry Potter and the Chamber of Secrets", author_id=1, publisher_id=1),
    BookRecord(id=2, name="Harry Potter and the Prisoner of Azkaban", author_id=1, publisher_id=1),
    BookRecord(id=3, name="Harry Potter and the Goblet of Fire", author_id=1, publisher_id=2),
    BookRecord(id=4, name="The Fellowship of the Ring", author_id=2, publisher_id=1),
    BookRecord(id=5, name="The Two Towers", author_id=2, publisher_id=2),
    BookRecord(id=6, name="The Return of the King", author_id=2, publisher_id=2),
    BookRecord(id=7, name="The Way of Shadows", author_id=3, publisher_id=2),
    BookRecord(id=8, name="Beyond the Shadows", author_id=3, publisher_id=1),
)


def create_seeded_store() -> LibraryStore:
    """
    Create a new store preloaded with the seed collections.

    Each call returns an independent store, so mutations on one never leak
    into another.

    Returns:
        LibraryStore holding 8 books, 3 authors and 2 publishers
    """
    store = LibraryStore(
        books=SEED_BOOKS,
        authors=SEED_AUTHORS,
        publishers=SEED_PUBLISHERS,
    )
    logger.info("Seed data loaded", **store.counts())
    return store


def create_store(seed: bool = True) -> LibraryStore:
    """Create the store used by the application, seeded unless ``seed`` is False."""
    if seed:
        return create_seeded_store()

    logger.info("Starting with an empty store")
    return LibraryStore()
