"""
Append-only record collections and the library store built from them.
"""

from __future__ import annotations

import threading
from collections.abc import Iterable, Iterator
from typing import Any, Generic, TypeVar

from ..logging import get_logger
from .records import AuthorRecord, BookRecord, PublisherRecord

logger = get_logger(__name__)

R = TypeVar("R", AuthorRecord, BookRecord, PublisherRecord)


class RecordCollection(Generic[R]):
    """
    Ordered, append-only sequence of records of a single type.

    Lookups are linear scans. Ids for new records come from a monotonic
    counter that starts after the largest id seen at construction, so an id
    is never handed out twice even if the initial records are sparse.
    """

    def __init__(self, record_type: type[R], name: str, records: Iterable[R] = ()):
        self.record_type = record_type
        self.name = name
        self._records: list[R] = list(records)
        self._next_id = max((record.id for record in self._records), default=0) + 1
        self._lock = threading.Lock()

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[R]:
        return iter(self.all())

    def get(self, record_id: int | None) -> R | None:
        """
        Return the first record with the given id.

        Args:
            record_id: Id to look up; None never matches

        Returns:
            The matching record or None if absent
        """
        if record_id is None:
            return None
        for record in self._records:
            if record.id == record_id:
                return record
        return None

    def filter_by(self, field: str, value: Any) -> list[R]:
        """Return all records whose ``field`` equals ``value``, in insertion order."""
        return [record for record in self._records if getattr(record, field) == value]

    def all(self) -> list[R]:
        """Return a snapshot of every record in insertion order."""
        return list(self._records)

    def create(self, **fields: Any) -> R:
        """
        Build a record with the next id and append it.

        Args:
            **fields: Record fields other than ``id``

        Returns:
            The newly appended record
        """
        with self._lock:
            record = self.record_type(id=self._next_id, **fields)
            self._records.append(record)
            self._next_id += 1

        logger.debug("Record appended", collection=self.name, record_id=record.id)
        return record


class LibraryStore:
    """
    In-memory store owning the books, authors and publishers collections.

    No foreign-key integrity is enforced: a book may reference an author or
    publisher id that does not exist.
    """

    def __init__(
        self,
        books: Iterable[BookRecord] = (),
        authors: Iterable[AuthorRecord] = (),
        publishers: Iterable[PublisherRecord] = (),
    ):
        self.books: RecordCollection[BookRecord] = RecordCollection(BookRecord, "books", books)
        self.authors: RecordCollection[AuthorRecord] = RecordCollection(
            AuthorRecord, "authors", authors
        )
        self.publishers: RecordCollection[PublisherRecord] = RecordCollection(
            PublisherRecord, "publishers", publishers
        )

    # Lookups
    def get_book(self, book_id: int | None) -> BookRecord | None:
        return self.books.get(book_id)

    def get_author(self, author_id: int | None) -> AuthorRecord | None:
        return self.authors.get(author_id)

    def get_publisher(self, publisher_id: int | None) -> PublisherRecord | None:
        return self.publishers.get(publisher_id)

    def list_books(self) -> list[BookRecord]:
        return self.books.all()

    def list_authors(self) -> list[AuthorRecord]:
        return self.authors.all()

    def list_publishers(self) -> list[PublisherRecord]:
        return self.publishers.all()

    def books_by_author(self, author_id: int) -> list[BookRecord]:
        return self.books.filter_by("author_id", author_id)

    def books_by_publisher(self, publisher_id: int) -> list[BookRecord]:
        return self.books.filter_by("publisher_id", publisher_id)

    # Appends
    def add_book(self, name: str, author_id: int, publisher_id: int | None = None) -> BookRecord:
        return self.books.create(name=name, author_id=author_id, publisher_id=publisher_id)

    def add_author(self, name: str) -> AuthorRecord:
        return self.authors.create(name=name)

    def add_publisher(self, name: str) -> PublisherRecord:
        return self.publishers.create(name=name)

    def counts(self) -> dict[str, int]:
        """Return the number of records in each collection."""
        return {
            "books": len(self.books),
            "authors": len(self.authors),
            "publishers": len(self.publishers),
        }
