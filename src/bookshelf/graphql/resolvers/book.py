"""
Book resolvers for GraphQL API
"""

from __future__ import annotations

import strawberry

from ...logging import get_logger
from ..context import get_store_from_info
from ..types import Author, Book, Publisher

logger = get_logger(__name__)


# Query resolvers
def resolve_book_by_id(info: strawberry.Info, id: int | None) -> Book | None:
    """Resolve a book by its ID, or None when the id is omitted or unknown."""
    record = get_store_from_info(info).get_book(id)
    if record is None:
        logger.debug("Book not found", book_id=id)
        return None
    return Book.from_record(record)


def resolve_books(info: strawberry.Info) -> list[Book]:
    """Resolve every book in insertion order."""
    return [Book.from_record(record) for record in get_store_from_info(info).list_books()]


# Field resolvers
def resolve_book_author(book: Book, info: strawberry.Info) -> Author | None:
    """Resolve the author referenced by a book's authorId."""
    record = get_store_from_info(info).get_author(book.author_id)
    if record is None:
        logger.debug("Book references missing author", book_id=book.id, author_id=book.author_id)
        return None
    return Author.from_record(record)


def resolve_book_publisher(book: Book, info: strawberry.Info) -> Publisher | None:
    """Resolve the publisher referenced by a book's publisherId."""
    record = get_store_from_info(info).get_publisher(book.publisher_id)
    if record is None:
        logger.debug(
            "Book references missing publisher",
            book_id=book.id,
            publisher_id=book.publisher_id,
        )
        return None
    return Publisher.from_record(record)


# Mutation resolvers
def add_book(info: strawberry.Info, name: str, author_id: int) -> Book:
    """Append a new book without a publisher and return it."""
    record = get_store_from_info(info).add_book(name=name, author_id=author_id)
    logger.info("Book created", book_id=record.id, author_id=author_id)
    return Book.from_record(record)
