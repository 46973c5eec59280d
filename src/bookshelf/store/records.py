"""
Record types held by the in-memory store
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class AuthorRecord:
    id: int
    name: str


@dataclass(frozen=True)
class PublisherRecord:
    id: int
    name: str


@dataclass(frozen=True)
class BookRecord:
    id: int
    name: str
    author_id: int
    # Books created through addBook carry no publisher
    publisher_id: int | None = None
