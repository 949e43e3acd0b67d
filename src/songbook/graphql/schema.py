"""
Main GraphQL schema definition using Strawberry
"""

from typing import Any

import strawberry
from fastapi import Request
from graphql import get_introspection_query, graphql_sync
from graphql import validate_schema as gql_validate_schema
from strawberry.extensions import SchemaExtension
from strawberry.fastapi import GraphQLRouter

from ..config import Settings
from ..logging import get_logger
from .context import build_context
from .queries.root import Query

logger = get_logger(__name__)


def _schema_extensions(app_settings: Settings | None) -> list[type[SchemaExtension]]:
    """Resolver tracing is only worth its overhead when traces are exported."""
    if app_settings is None or not app_settings.monitoring_api_key:
        return []

    from strawberry.extensions.tracing import OpenTelemetryExtension

    return [OpenTelemetryExtension]


def create_schema(app_settings: Settings | None = None) -> strawberry.Schema:
    """Build the read-only schema (no mutation root) for the given settings."""
    return strawberry.Schema(query=Query, extensions=_schema_extensions(app_settings))


# Untraced schema for direct execution and startup validation
schema = create_schema()


def validate_schema(target: strawberry.Schema | None = None) -> None:
    """Validate the GraphQL schema at startup.

    Runs graphql-core validation and an introspection query so that broken
    type references fail the process at boot instead of at request time.

    Raises:
        Exception: If the schema is invalid or has unresolved types
    """
    try:
        graphql_schema = (target or schema)._schema

        errors = gql_validate_schema(graphql_schema)
        if errors:
            error_messages = [str(e) for e in errors]
            raise Exception(f"GraphQL schema validation failed: {'; '.join(error_messages)}")

        result = graphql_sync(graphql_schema, get_introspection_query())
        if result.errors:
            error_messages = [str(e) for e in result.errors]
            raise Exception(f"GraphQL introspection failed: {'; '.join(error_messages)}")

        logger.info("GraphQL schema validation successful")

    except Exception as e:
        logger.error("GraphQL schema validation failed", error=str(e))
        raise


def create_graphql_router(
    app_settings: Settings | None = None, path: str = "/graphql"
) -> GraphQLRouter[dict[str, Any], None]:
    """Create a GraphQL router for FastAPI.

    The document store is read from ``app.state.document_store``, which the
    application sets up once and tears down with its lifespan.
    """

    async def get_context(request: Request) -> dict[str, Any]:
        return build_context(request.app.state.document_store, request)

    return GraphQLRouter(
        create_schema(app_settings),
        path=path,
        graphql_ide="graphiql",
        context_getter=get_context,
    )
