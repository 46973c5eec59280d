#!/usr/bin/env python3
"""
Main CLI entry point for the Bookshelf API server.
"""

import os
import sys

import click
import uvicorn

from bookshelf import __version__
from bookshelf.config import settings
from bookshelf.logging import configure_logging, get_logger

logger = get_logger(__name__)


@click.group()
@click.version_option(version=__version__, prog_name="bookshelf")
def cli() -> None:
    """Bookshelf CLI - serve the GraphQL API and inspect its schema."""
    pass


@cli.command()
@click.option(
    "--host",
    default=settings.api_host,
    show_default=True,
    help="Host to bind to",
)
@click.option(
    "--port",
    default=settings.api_port,
    type=int,
    show_default=True,
    help="Port to bind to",
)
@click.option(
    "--reload",
    is_flag=True,
    default=False,
    help="Enable auto-reload for development",
)
@click.option(
    "--log-level",
    default="info",
    type=click.Choice(["debug", "info", "warning", "error"]),
    help="Log level (default: info)",
)
def serve(host: str, port: int, reload: bool, log_level: str) -> None:
    """Start the Bookshelf API server."""
    configure_logging(debug=(log_level == "debug"), log_level=log_level)

    logger.info(
        "Starting Bookshelf API server",
        host=host,
        port=port,
        reload=reload,
        log_level=log_level,
    )

    # The reloader re-imports the app in a child process, which reads settings
    # from the environment
    if log_level == "debug":
        os.environ["BOOKSHELF_DEBUG"] = "true"
    os.environ["BOOKSHELF_LOG_LEVEL"] = log_level

    try:
        uvicorn.run(
            "bookshelf.api.app:build_default_app",
            factory=True,
            host=host,
            port=port,
            reload=reload,
            log_level=log_level,
            access_log=True,
        )
    except KeyboardInterrupt:
        logger.info("Server shutdown requested by user")
    except Exception as e:
        logger.error("Server startup failed", error=str(e))
        sys.exit(1)


@cli.command("export-schema")
@click.option(
    "--output",
    "-o",
    type=click.Path(dir_okay=False, writable=True),
    default=None,
    help="Write the SDL to this file instead of stdout",
)
def export_schema(output: str | None) -> None:
    """Print the GraphQL schema in SDL form."""
    from bookshelf.graphql.schema import schema

    sdl = schema.as_str()
    if output is None:
        click.echo(sdl)
        return

    with open(output, "w", encoding="utf-8") as fileobj:
        fileobj.write(sdl + "\n")
    click.echo(f"Schema written to {output}")


def main() -> None:
    cli()


if __name__ == "__main__":
    main()
