"""
Per-request GraphQL context shared by all resolvers
"""

from typing import Any

import strawberry

from ..logging import get_logger
from ..store.base import DocumentStore
from .errors import InternalServerError

logger = get_logger(__name__)


def build_context(store: DocumentStore, request: Any | None = None) -> dict[str, Any]:
    """Build the resolver context for one GraphQL execution."""
    return {
        "request": request,
        "store": store,
    }


def get_store_from_info(info: strawberry.Info) -> DocumentStore:
    """Extract the document store injected into the GraphQL context."""
    store = info.context.get("store")
    if store is None:
        logger.error("Document store not found in GraphQL context")
        raise InternalServerError()
    return store
