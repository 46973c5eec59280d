"""
Author resolvers for GraphQL API
"""

from __future__ import annotations

import strawberry

from ...logging import get_logger
from ..context import get_store_from_info
from ..types import Author, Book

logger = get_logger(__name__)


def resolve_author_by_id(info: strawberry.Info, id: int | None) -> Author | None:
    record = get_store_from_info(info).get_author(id)
    if record is None:
        logger.debug("Author not found", author_id=id)
        return None
    return Author.from_record(record)


def resolve_authors(info: strawberry.Info) -> list[Author]:
    return [Author.from_record(record) for record in get_store_from_info(info).list_authors()]


def resolve_author_books(author: Author, info: strawberry.Info) -> list[Book]:
    """Resolve the books whose authorId matches this author."""
    store = get_store_from_info(info)
    return [Book.from_record(record) for record in store.books_by_author(author.id)]


def add_author(info: strawberry.Info, name: str) -> Author:
    record = get_store_from_info(info).add_author(name=name)
    logger.info("Author created", author_id=record.id)
    return Author.from_record(record)
