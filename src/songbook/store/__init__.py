"""
Document store access for the Songbook gateway.
"""

from .base import DocumentStore, FieldFilter, InvalidPathException, StoreException
from .factory import create_document_store

__all__ = [
    "DocumentStore",
    "FieldFilter",
    "InvalidPathException",
    "StoreException",
    "create_document_store",
]
