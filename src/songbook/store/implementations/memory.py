"""In-memory document store for development and tests."""

import copy
import json
from collections.abc import Iterable, Mapping
from pathlib import Path
from typing import Any

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


class InMemoryDocumentStore(DocumentStore):
    """Dict-backed store keyed by collection name, then document id."""

    def __init__(self, collections: Mapping[str, Any] | None = None):
        self._collections: dict[str, dict[str, Document]] = {}
        for name, documents in (collections or {}).items():
            self.load_collection(name, documents)

    @classmethod
    def from_file(cls, path: str | Path) -> "InMemoryDocumentStore":
        """Load collections from a JSON file.

        The file maps collection names either to a list of documents carrying
        an ``id`` field or to an object keyed by document id.
        """
        file_path = Path(path)
        try:
            with file_path.open(encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            raise StoreException(f"Failed to load document fixtures from {file_path}: {e}") from e

        if not isinstance(data, dict):
            raise StoreException(f"Document fixtures in {file_path} must be a JSON object")

        store = cls(data)
        logger.info(
            "Loaded in-memory document store",
            path=str(file_path),
            collections={name: len(docs) for name, docs in store._collections.items()},
        )
        return store

    def load_collection(self, name: str, documents: Mapping[str, Document] | Iterable[Document]):
        collection = self._collections.setdefault(name, {})
        if isinstance(documents, Mapping):
            items = documents.items()
        else:
            items = []
            for document in documents:
                if "id" not in document:
                    raise StoreException(f"Document in collection {name!r} has no id")
                items.append((str(document["id"]), document))

        for document_id, document in items:
            collection[document_id] = copy.deepcopy(dict(document))

    async def get_document(self, path: str) -> Document | None:
        collection, document_id = split_document_path(path)
        document = self._collections.get(collection, {}).get(document_id)
        if document is None:
            return None
        return with_document_id(document_id, copy.deepcopy(document))

    async def query_collection(
        self, collection: str, field_filter: FieldFilter | None = None
    ) -> list[Document]:
        documents = self._collections.get(collection, {})
        return [
            with_document_id(document_id, copy.deepcopy(document))
            for document_id, document in documents.items()
            if field_filter is None or field_filter.matches(document)
        ]
