"""
Publisher resolvers for GraphQL API
"""

from __future__ import annotations

import strawberry

from ...logging import get_logger
from ..context import get_store_from_info
from ..types import Book, Publisher

logger = get_logger(__name__)


def resolve_publisher_by_id(info: strawberry.Info, id: int | None) -> Publisher | None:
    record = get_store_from_info(info).get_publisher(id)
    if record is None:
        logger.debug("Publisher not found", publisher_id=id)
        return None
    return Publisher.from_record(record)


def resolve_publishers(info: strawberry.Info) -> list[Publisher]:
    store = get_store_from_info(info)
    return [Publisher.from_record(record) for record in store.list_publishers()]


def resolve_publisher_books(publisher: Publisher, info: strawberry.Info) -> list[Book]:
    """Resolve the books whose publisherId matches this publisher."""
    store = get_store_from_info(info)
    return [Book.from_record(record) for record in store.books_by_publisher(publisher.id)]


def add_publisher(info: strawberry.Info, name: str) -> Publisher:
    record = get_store_from_info(info).add_publisher(name=name)
    logger.info("Publisher created", publisher_id=record.id)
    return Publisher.from_record(record)
