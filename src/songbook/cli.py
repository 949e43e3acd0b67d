#!/usr/bin/env python3
"""
CLI entry point for the Songbook API server.
"""

import os
import sys

import click
import uvicorn

from songbook import __version__
from songbook.config import settings
from songbook.logging import configure_logging, get_logger

logger = get_logger(__name__)


@click.command()
@click.version_option(version=__version__, prog_name="songbook")
@click.option(
    "--host",
    default=settings.host,
    show_default=True,
    help="Host to bind to",
)
@click.option(
    "--port",
    default=settings.port,
    type=int,
    show_default=True,
    help="Port to bind to (also read from PORT)",
)
@click.option(
    "--reload",
    is_flag=True,
    default=settings.reload,
    help="Enable auto-reload for development",
)
@click.option(
    "--log-level",
    default=settings.log_level.lower(),
    type=click.Choice(["debug", "info", "warning", "error"]),
    show_default=True,
    help="Log level",
)
def cli(host: str, port: int, reload: bool, log_level: str) -> None:
    """Start the Songbook GraphQL server."""
    debug = log_level == "debug"
    configure_logging(debug=debug, log_level=log_level)

    logger.info(
        "Starting Songbook API server",
        host=host,
        port=port,
        reload=reload,
        log_level=log_level,
    )

    # Reloaded workers re-import settings from the environment
    if debug:
        os.environ["SONGBOOK_DEBUG"] = "true"
    os.environ["SONGBOOK_LOG_LEVEL"] = log_level

    try:
        uvicorn.run(
            "songbook.api.app:create_app",
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


def main():
    """Entry point for the CLI."""
    cli()


if __name__ == "__main__":
    cli()
