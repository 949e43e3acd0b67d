"""
Shared store access for resolvers.

Single-document reads produce a tagged ``Found | NotFound`` result which the
field resolvers unwrap into either a record or a ``NotFoundError``. Every
document is decoded through its pydantic model before it leaves this module.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from pydantic import BaseModel, ValidationError

from ...logging import get_logger
from ...store.base import DocumentStore, FieldFilter, document_path
from ..errors import DocumentDecodeError, InternalServerError, NotFoundError

logger = get_logger(__name__)

RecordT = TypeVar("RecordT", bound=BaseModel)

MAX_DOCUMENT_ID_BYTES = 1500
_RESERVED_ID = re.compile(r"__.*__", re.DOTALL)


@dataclass(frozen=True)
class Found(Generic[RecordT]):
    record: RecordT


@dataclass(frozen=True)
class NotFound:
    collection: str
    document_id: str


LookupResult = Found[RecordT] | NotFound


def is_addressable(document_id: str) -> bool:
    """Whether the id can name exactly one document in a collection.

    Follows Firestore's document id rules so every store reports unusable ids
    as not-found instead of rejecting the request.
    """
    if not document_id or "/" in document_id or document_id in (".", ".."):
        return False
    if _RESERVED_ID.fullmatch(document_id):
        return False
    return len(document_id.encode("utf-8")) <= MAX_DOCUMENT_ID_BYTES


def decode_document(model: type[RecordT], document: dict[str, Any]) -> RecordT:
    try:
        return model.model_validate(document)
    except ValidationError as e:
        fields = [".".join(str(part) for part in error["loc"]) for error in e.errors()]
        logger.warning(
            "Stored document failed to decode",
            model=model.__name__,
            document_id=document.get("id"),
            fields=fields,
        )
        raise DocumentDecodeError(
            f"Malformed document {document.get('id')!r}",
            fields=fields,
        ) from e


async def lookup_document(
    store: DocumentStore, collection: str, document_id: str, model: type[RecordT]
) -> LookupResult[RecordT]:
    """Read one document by id and decode it."""
    if not is_addressable(document_id):
        return NotFound(collection, document_id)

    try:
        document = await store.get_document(document_path(collection, document_id))
    except Exception as e:
        logger.exception(
            "Document lookup failed", collection=collection, document_id=document_id
        )
        raise InternalServerError() from e

    if document is None:
        return NotFound(collection, document_id)
    return Found(decode_document(model, document))


def unwrap(result: LookupResult[RecordT], label: str) -> RecordT:
    """Return the found record or raise ``NotFoundError`` for the response error list."""
    if isinstance(result, NotFound):
        logger.info(
            f"{label} not found", collection=result.collection, document_id=result.document_id
        )
        raise NotFoundError(f"{label} ID not found", id=result.document_id)
    return result.record


async def scan_collection(
    store: DocumentStore,
    collection: str,
    model: type[RecordT],
    field_filter: FieldFilter | None = None,
) -> list[RecordT]:
    """Read every matching document in a collection and decode each one."""
    try:
        documents = await store.query_collection(collection, field_filter)
    except Exception as e:
        logger.exception(
            "Collection query failed", collection=collection, field_filter=field_filter
        )
        raise InternalServerError() from e

    return [decode_document(model, document) for document in documents]
