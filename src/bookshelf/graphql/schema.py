"""
Main GraphQL schema definition using Strawberry
"""

from typing import Any

import strawberry
from fastapi import Request
from graphql import GraphQLError
from graphql import validate_schema as gql_validate_schema
from strawberry.fastapi import GraphQLRouter
from strawberry.types import ExecutionContext

from ..logging import get_logger
from ..store import LibraryStore
from .mutations.root import Mutation
from .queries.root import Query

logger = get_logger(__name__)


class SchemaValidationError(Exception):
    """Raised when the GraphQL schema fails validation at startup."""

    pass


class BookshelfSchema(strawberry.Schema):
    """Strawberry schema that reports execution errors through structlog."""

    def process_errors(
        self,
        errors: list[GraphQLError],
        execution_context: ExecutionContext | None = None,
    ) -> None:
        operation_name = execution_context.operation_name if execution_context else None
        for error in errors:
            original = error.original_error
            if original is not None and not isinstance(original, GraphQLError):
                logger.error(
                    "GraphQL resolver error",
                    error=error.message,
                    path=error.path,
                    operation=operation_name,
                    exc_info=original,
                )
            else:
                logger.warning(
                    "GraphQL request error",
                    error=error.message,
                    path=error.path,
                    operation=operation_name,
                )


# Create the GraphQL schema
schema = BookshelfSchema(
    query=Query,
    mutation=Mutation,
)


def validate_schema() -> None:
    """Validate the GraphQL schema at startup.

    Checks that every type reference resolves and that introspection works,
    so the server fails fast instead of answering with broken types.

    Raises:
        SchemaValidationError: If the schema is invalid or introspection fails
    """
    from graphql import get_introspection_query, graphql_sync

    graphql_schema = schema._schema

    errors = gql_validate_schema(graphql_schema)
    if errors:
        error_messages = [str(e) for e in errors]
        logger.error("GraphQL schema validation failed", errors=error_messages)
        raise SchemaValidationError(
            f"GraphQL schema validation failed: {'; '.join(error_messages)}"
        )

    result = graphql_sync(graphql_schema, get_introspection_query())
    if result.errors:
        error_messages = [str(e) for e in result.errors]
        logger.error("GraphQL introspection failed", errors=error_messages)
        raise SchemaValidationError(f"GraphQL introspection failed: {'; '.join(error_messages)}")

    logger.info("GraphQL schema validation successful")


def create_graphql_router(
    store: LibraryStore, graphiql: bool = True
) -> GraphQLRouter[dict[str, Any], None]:
    """Create a GraphQL router for FastAPI bound to ``store``."""

    async def get_context(request: Request) -> dict[str, Any]:
        """Get the context for GraphQL resolvers."""
        return {
            "request": request,
            "store": store,
        }

    return GraphQLRouter(
        schema,
        path="/graphql",
        graphql_ide="graphiql" if graphiql else None,
        context_getter=get_context,
    )
