"""
Shared pytest fixtures and configuration for all tests.
"""

import logging
import os
from collections.abc import Generator
from typing import Any
from unittest.mock import MagicMock

import pytest
import strawberry
import structlog

from bookshelf.config import Settings
from bookshelf.store import LibraryStore, create_seeded_store


@pytest.fixture
def store() -> LibraryStore:
    """Provide an isolated store loaded with the seed data."""
    return create_seeded_store()


@pytest.fixture
def empty_store() -> LibraryStore:
    """Provide an isolated store with no records."""
    return LibraryStore()


@pytest.fixture
def mock_info(store: LibraryStore) -> MagicMock:
    """Create a mock GraphQL info object whose context carries the seeded store."""
    info = MagicMock(spec=strawberry.Info)
    info.context = {"request": MagicMock(), "store": store}
    return info


@pytest.fixture
def test_settings() -> Settings:
    """Settings for building test applications."""
    return Settings(debug=False, graphiql=False, seed_data=True, cors_origins=["*"])


@pytest.fixture
def execute(store: LibraryStore):
    """Execute a GraphQL document against the schema with the seeded store."""
    from bookshelf.graphql.schema import schema

    def _execute(document: str, variables: dict[str, Any] | None = None):
        return schema.execute_sync(
            document,
            variable_values=variables,
            context_value={"store": store},
        )

    return _execute


@pytest.fixture(autouse=True)
def reset_environment() -> Generator[None, None, None]:
    """Reset environment variables for each test."""
    original_env = os.environ.copy()
    yield
    os.environ.clear()
    os.environ.update(original_env)


@pytest.fixture(autouse=True)
def reset_logging() -> Generator[None, None, None]:
    """Drop handlers bound to captured streams once a test finishes."""
    yield
    structlog.reset_defaults()
    logging.getLogger().handlers.clear()


# Test markers
def pytest_configure(config: Any) -> None:
    """Register custom markers."""
    config.addinivalue_line("markers", "integration: mark test as integration test")
    config.addinivalue_line("markers", "unit: mark test as unit test")
