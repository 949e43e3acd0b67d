"""Core document store interfaces."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Literal

Document = dict[str, Any]


@dataclass(frozen=True)
class FieldFilter:
    """Single equality predicate applied to a collection scan."""

    field_path: str
    value: Any
    op_string: Literal["=="] = "=="

    def matches(self, document: Document) -> bool:
        return self.field_path in document and document[self.field_path] == self.value


class StoreException(Exception):
    """Base exception for document store operations."""

    pass


class InvalidPathException(StoreException):
    """Raised when a document path does not address a single document."""

    pass


def split_document_path(path: str) -> tuple[str, str]:
    """Split a ``collection/document_id`` path into its two segments."""
    segments = path.split("/")
    if len(segments) != 2 or not all(segments):
        raise InvalidPathException(f"Invalid document path: {path!r}")
    return segments[0], segments[1]


def document_path(collection: str, document_id: str) -> str:
    return f"{collection}/{document_id}"


def with_document_id(document_id: str, data: Document) -> Document:
    """Return the stored fields with ``id`` set to the document key.

    The key is authoritative: a stored ``id`` field that disagrees with it is replaced.
    """
    document = dict(data)
    document["id"] = document_id
    return document


class DocumentStore(ABC):
    """Abstract read-only document store."""

    @abstractmethod
    async def get_document(self, path: str) -> Document | None:
        """Fetch a single document by ``collection/id`` path, or None if absent."""
        pass

    @abstractmethod
    async def query_collection(
        self, collection: str, field_filter: FieldFilter | None = None
    ) -> list[Document]:
        """Fetch every document in a collection, optionally filtered by one equality."""
        pass

    async def close(self) -> None:
        """Release client resources."""
        return None
