"""
Main FastAPI application for the Songbook gateway
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .. import __version__
from ..config import Settings, settings
from ..logging import configure_logging, get_logger
from ..middleware import LoggingContextMiddleware
from ..store.base import DocumentStore
from ..store.factory import create_document_store

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Own the document store for the lifetime of the process."""
    app_settings: Settings = app.state.settings

    logger.info("Starting Songbook API...", environment=app_settings.environment)
    if getattr(app.state, "document_store", None) is None:
        app.state.document_store = create_document_store(app_settings)
    logger.info("Document store ready", store=type(app.state.document_store).__name__)

    yield

    logger.info("Shutting down Songbook API...")
    await app.state.document_store.close()
    app.state.document_store = None


def create_app(
    store: DocumentStore | None = None, app_settings: Settings | None = None
) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        store: Document store to serve from. When omitted, one is built from
            the settings during startup and closed on shutdown.
        app_settings: Settings to use instead of the process-wide instance.
    """
    app_settings = app_settings or settings
    configure_logging(debug=app_settings.debug, log_level=app_settings.log_level)

    app = FastAPI(
        title="Songbook API",
        description="Read-only GraphQL gateway for songs, lyrics and playlists",
        version=__version__,
        lifespan=lifespan,
        debug=app_settings.debug,
    )
    app.state.settings = app_settings
    app.state.document_store = store

    app.add_middleware(LoggingContextMiddleware, graphql_path=app_settings.graphql_path)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=app_settings.cors_origins,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["*"],
    )

    @app.get("/health")
    async def health_check():  # pyright: ignore [reportUnusedFunction]
        """Health check endpoint."""
        return {"status": "healthy", "version": __version__}

    try:
        from ..graphql.schema import create_graphql_router, validate_schema

        graphql_router = create_graphql_router(app_settings, app_settings.graphql_path)

        logger.info("Validating GraphQL schema...")
        validate_schema(graphql_router.schema)

        app.include_router(graphql_router, prefix="")
        logger.info("GraphQL endpoint initialized successfully", endpoint=app_settings.graphql_path)
    except Exception as e:  # pragma: no cover
        logger.error("Failed to initialize GraphQL endpoint", error=str(e))
        raise

    from .otel import setup_opentelemetry

    setup_opentelemetry(app, app_settings)

    return app


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        create_app(),
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )
