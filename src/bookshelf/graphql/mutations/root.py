"""
Root GraphQL mutation definitions
"""

import strawberry

from ..types import Author, Book, Publisher


@strawberry.type(description="Root Mutation")
class Mutation:
    """Root GraphQL mutation type."""

    @strawberry.mutation(name="addBook", description="Add a book")
    def add_book(self, info: strawberry.Info, name: str, author_id: int) -> Book:
        from ..resolvers.book import add_book

        return add_book(info, name, author_id)

    @strawberry.mutation(name="addAuthor", description="Add an author")
    def add_author(self, info: strawberry.Info, name: str) -> Author:
        from ..resolvers.author import add_author

        return add_author(info, name)

    @strawberry.mutation(name="addPublisher", description="Add a publisher")
    def add_publisher(self, info: strawberry.Info, name: str) -> Publisher:
        from ..resolvers.publisher import add_publisher

        return add_publisher(info, name)
