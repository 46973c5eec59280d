"""
GraphQL type definitions for books, authors and publishers.

The three types reference each other. They are declared together here and the
relation field types are attached by strawberry when the schema is built.
"""

import strawberry

from ..store.records import AuthorRecord, BookRecord, PublisherRecord


@strawberry.type(description="This represents an author of books")
class Author:
    """Author type for GraphQL API."""

    id: int
    name: str

    @strawberry.field(description="Books written by this author")
    def books(self, info: strawberry.Info) -> list["Book"]:
        from .resolvers.author import resolve_author_books

        return resolve_author_books(self, info)

    @classmethod
    def from_record(cls, record: AuthorRecord) -> "Author":
        return cls(id=record.id, name=record.name)


@strawberry.type(description="This represents a publisher")
class Publisher:
    """Publisher type for GraphQL API."""

    id: int
    name: str

    @strawberry.field(description="Books released by this publisher")
    def books(self, info: strawberry.Info) -> list["Book"]:
        from .resolvers.publisher import resolve_publisher_books

        return resolve_publisher_books(self, info)

    @classmethod
    def from_record(cls, record: PublisherRecord) -> "Publisher":
        return cls(id=record.id, name=record.name)


@strawberry.type(description="This represents a book written by an author")
class Book:
    """Book type for GraphQL API."""

    id: int
    name: str
    author_id: int
    publisher_id: int | None

    @strawberry.field(description="The author of this book")
    def author(self, info: strawberry.Info) -> Author | None:
        from .resolvers.book import resolve_book_author

        return resolve_book_author(self, info)

    @strawberry.field(description="The publisher of this book")
    def publisher(self, info: strawberry.Info) -> Publisher | None:
        if self.publisher_id is None:
            return None
        from .resolvers.book import resolve_book_publisher

        return resolve_book_publisher(self, info)

    @classmethod
    def from_record(cls, record: BookRecord) -> "Book":
        return cls(
            id=record.id,
            name=record.name,
            author_id=record.author_id,
            publisher_id=record.publisher_id,
        )
