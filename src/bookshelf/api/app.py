"""
Main FastAPI application for the Bookshelf API
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .. import __version__
from ..config import Settings, settings as default_settings
from ..logging import configure_logging, get_logger
from ..middleware import LoggingContextMiddleware
from ..store import LibraryStore, create_store

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager."""
    logger.info("Starting Bookshelf API...", **app.state.store.counts())

    yield

    logger.info("Shutting down Bookshelf API...", **app.state.store.counts())


def create_app(settings: Settings | None = None, store: LibraryStore | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        settings: Settings to use instead of the environment-loaded defaults
        store: Store to serve instead of a freshly created one

    Returns:
        Configured FastAPI application with the store on ``app.state.store``
    """
    settings = settings or default_settings

    app = FastAPI(
        title="Bookshelf API",
        description="In-memory GraphQL API for books, authors and publishers",
        version=__version__,
        lifespan=lifespan,
        debug=settings.debug,
    )

    app.state.settings = settings
    app.state.store = store if store is not None else create_store(seed=settings.seed_data)

    app.add_middleware(LoggingContextMiddleware)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.get("/health")
    async def health_check():  # pyright: ignore [reportUnusedFunction]
        """Health check endpoint."""
        return {"status": "healthy", "version": __version__}

    from ..graphql.schema import create_graphql_router, validate_schema

    # Fail fast: the server should not start with a broken schema
    logger.info("Validating GraphQL schema...")
    validate_schema()

    graphql_router = create_graphql_router(app.state.store, graphiql=settings.graphiql)
    app.include_router(graphql_router, prefix="")
    logger.info("GraphQL endpoint initialized", endpoint="/graphql", graphiql=settings.graphiql)

    return app


def build_default_app() -> FastAPI:
    """Create the application from environment settings with logging configured."""
    configure_logging(debug=default_settings.debug, log_level=default_settings.log_level)
    return create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "bookshelf.api.app:build_default_app",
        factory=True,
        host=default_settings.api_host,
        port=default_settings.api_port,
        reload=default_settings.api_reload,
        log_level=default_settings.log_level.lower(),
    )
