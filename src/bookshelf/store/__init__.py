"""
In-memory record store
"""

from .collections import LibraryStore, RecordCollection
from .records import AuthorRecord, BookRecord, PublisherRecord
from .seed_data import create_seeded_store, create_store

__all__ = [
    "AuthorRecord",
    "BookRecord",
    "LibraryStore",
    "PublisherRecord",
    "RecordCollection",
    "create_seeded_store",
    "create_store",
]
