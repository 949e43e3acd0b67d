"""Google Cloud Firestore document store with service account auth."""

import inspect
import json
from pathlib import Path
from typing import Any

from google.cloud import firestore
from google.cloud.firestore_v1.base_query import FieldFilter as FirestoreFieldFilter
from google.oauth2 import service_account

from ...logging import get_logger
from ..base import (
    Document,
    DocumentStore,
    FieldFilter,
    StoreException,
    split_document_path,
    with_document_id,
)

logger = get_logger(__name__)

_SCOPES = ["https://www.googleapis.com/auth/datastore"]


class FirestoreDocumentStore(DocumentStore):
    """Firestore-backed store using the native async client."""

    def __init__(
        self,
        project_id: str | None = None,
        database: str | None = None,
        credentials_path: str | None = None,
        credentials_json: str | None = None,
    ):
        self.project_id = project_id
        self.database = database
        self.credentials_path = credentials_path
        self.credentials_json = credentials_json

        # Client is created lazily on first use
        self._client: Any | None = None

    def _load_credentials(self) -> Any | None:
        if self.credentials_json:
            info = json.loads(self.credentials_json)
            return service_account.Credentials.from_service_account_info(info, scopes=_SCOPES)
        if self.credentials_path:
            path = Path(self.credentials_path)
            if not path.exists():
                raise FileNotFoundError(f"Credentials file not found: {self.credentials_path}")
            return service_account.Credentials.from_service_account_file(str(path), scopes=_SCOPES)
        # Application default credentials
        return None

    def _get_client(self) -> Any:
        """Get or create the Firestore client with proper authentication."""
        if self._client is None:
            try:
                credentials = self._load_credentials()
                project = self.project_id or getattr(credentials, "project_id", None)
                kwargs: dict[str, Any] = {"project": project, "credentials": credentials}
                if self.database:
                    kwargs["database"] = self.database
                self._client = firestore.AsyncClient(**kwargs)
                logger.info(
                    "Firestore client initialized",
                    project_id=project,
                    database=self.database or "(default)",
                )
            except Exception as e:
                logger.error("Failed to initialize Firestore client", error=str(e))
                raise StoreException(f"Firestore client initialization failed: {e}") from e

        return self._client

    async def get_document(self, path: str) -> Document | None:
        _, document_id = split_document_path(path)
        client = self._get_client()
        try:
            snapshot = await client.document(path).get()
        except Exception as e:
            logger.error("Firestore document read failed", path=path, error=str(e))
            raise StoreException(f"Failed to read document {path}: {e}") from e

        if not snapshot.exists:
            return None
        return with_document_id(snapshot.id or document_id, snapshot.to_dict() or {})

    async def query_collection(
        self, collection: str, field_filter: FieldFilter | None = None
    ) -> list[Document]:
        client = self._get_client()
        query = client.collection(collection)
        if field_filter is not None:
            query = query.where(
                filter=FirestoreFieldFilter(
                    field_filter.field_path, field_filter.op_string, field_filter.value
                )
            )

        try:
            return [
                with_document_id(snapshot.id, snapshot.to_dict() or {})
                async for snapshot in query.stream()
            ]
        except Exception as e:
            logger.error(
                "Firestore collection query failed",
                collection=collection,
                field_filter=field_filter,
                error=str(e),
            )
            raise StoreException(f"Failed to query collection {collection}: {e}") from e

    async def close(self) -> None:
        if self._client is None:
            return
        result = self._client.close()
        if inspect.isawaitable(result):
            await result
        self._client = None
        logger.info("Firestore client closed")
