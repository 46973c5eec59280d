"""
Root GraphQL query definitions
"""

import strawberry

from ..types import Author, Book, Publisher


@strawberry.type(description="Root Query")
class Query:
    """Root GraphQL query type."""

    @strawberry.field(description="Get book")
    def book(self, info: strawberry.Info, id: int | None = None) -> Book | None:
        from ..resolvers.book import resolve_book_by_id

        return resolve_book_by_id(info, id)

    @strawberry.field(description="Get author")
    def author(self, info: strawberry.Info, id: int | None = None) -> Author | None:
        from ..resolvers.author import resolve_author_by_id

        return resolve_author_by_id(info, id)

    @strawberry.field(description="Get publisher")
    def publisher(self, info: strawberry.Info, id: int | None = None) -> Publisher | None:
        from ..resolvers.publisher import resolve_publisher_by_id

        return resolve_publisher_by_id(info, id)

    @strawberry.field(description="Get all books")
    def books(self, info: strawberry.Info) -> list[Book]:
        from ..resolvers.book import resolve_books

        return resolve_books(info)

    @strawberry.field(description="Get all authors")
    def authors(self, info: strawberry.Info) -> list[Author]:
        from ..resolvers.author import resolve_authors

        return resolve_authors(info)

    @strawberry.field(description="Get all publishers")
    def publishers(self, info: strawberry.Info) -> list[Publisher]:
        from ..resolvers.publisher import resolve_publishers

        return resolve_publishers(info)
