"""Factory for creating document stores from settings."""

from ..config import Settings
from ..logging import get_logger
from .base import DocumentStore
from .implementations.firestore import FirestoreDocumentStore
from .implementations.memory import InMemoryDocumentStore

logger = get_logger(__name__)


def create_document_store(settings: Settings) -> DocumentStore:
    """Create the document store selected by ``settings.store_provider``.

    Raises:
        ValueError: If the provider is unknown
    """
    provider = settings.store_provider

    if provider == "firestore":
        logger.info("Using Firestore document store", project_id=settings.firestore_project_id)
        return FirestoreDocumentStore(
            project_id=settings.firestore_project_id,
            database=settings.firestore_database,
            credentials_path=settings.google_credentials_path,
            credentials_json=settings.google_credentials_json,
        )
    elif provider == "memory":
        if settings.memory_store_path:
            return InMemoryDocumentStore.from_file(settings.memory_store_path)
        logger.warning("Using empty in-memory document store")
        return InMemoryDocumentStore()
    else:
        raise ValueError(f"Unknown document store provider: {provider}")
