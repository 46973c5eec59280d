"""
Access to per-request GraphQL context values
"""

from typing import Any

import strawberry

from ..store import LibraryStore


class StoreUnavailableError(RuntimeError):
    """Raised when a resolver runs without a store in its context."""

    pass


def get_store_from_info(info: strawberry.Info) -> LibraryStore:
    """
    Get the library store from the GraphQL context.

    Raises:
        StoreUnavailableError: If the context does not carry a LibraryStore
    """
    context: Any = info.context
    store = context.get("store") if isinstance(context, dict) else getattr(context, "store", None)
    if not isinstance(store, LibraryStore):
        raise StoreUnavailableError("No library store in GraphQL context")
    return store
