"""
Shared pytest fixtures and configuration for all tests.
"""

import os
from collections.abc import Generator
from typing import Any
from unittest.mock import MagicMock

import pytest
import strawberry

from songbook.graphql.context import build_context
from songbook.store.base import Document, FieldFilter, split_document_path
from songbook.store.implementations.memory import InMemoryDocumentStore

AVE_MARIA = {
    "id": "s1",
    "name": "Ave Maria",
    "language": "la",
    "enteredBy": "u1",
    "lyrics": [
        {"original": "Ave Maria", "translation": "Hail Mary", "transliteration": ""},
    ],
}


def sample_collections() -> dict[str, list[dict[str, Any]]]:
    return {
        "users": [
            {
                "id": "u1",
                "name": "Ada",
                "lastName": "Lovelace",
                "username": "ada",
                "email": "ada@example.com",
            },
            {
                "id": "u2",
                "name": "Alan",
                "lastName": "Turing",
                "username": "alan",
                "email": "alan@example.com",
            },
        ],
        "songs": [
            AVE_MARIA,
            {
                "id": "s2",
                "name": "Sakura Sakura",
                "language": "ja",
                "enteredBy": "u2",
                "lyrics": [
                    {
                        "original": "さくら さくら",
                        "translation": "Cherry blossoms, cherry blossoms",
                        "transliteration": "sakura sakura",
                    }
                ],
            },
        ],
        "playlists": [
            {
                "id": "p1",
                "name": "Evening",
                "createdBy": "u1",
                "songs": [
                    {"order": 2, "songId": "s2"},
                    {"order": 1, "songId": "s1"},
                ],
            },
        ],
    }


class FlakyDocumentStore(InMemoryDocumentStore):
    """In-memory store whose reads fail for selected collections."""

    def __init__(self, collections: dict[str, Any], failing_collections: set[str]):
        super().__init__(collections)
        self.failing_collections = failing_collections

    async def get_document(self, path: str) -> Document | None:
        collection, _ = split_document_path(path)
        if collection in self.failing_collections:
            raise RuntimeError(f"backend unavailable for {collection}")
        return await super().get_document(path)

    async def query_collection(
        self, collection: str, field_filter: FieldFilter | None = None
    ) -> list[Document]:
        if collection in self.failing_collections:
            raise RuntimeError(f"backend unavailable for {collection}")
        return await super().query_collection(collection, field_filter)


@pytest.fixture
def memory_store() -> InMemoryDocumentStore:
    return InMemoryDocumentStore(sample_collections())


@pytest.fixture
def flaky_users_store() -> FlakyDocumentStore:
    return FlakyDocumentStore(sample_collections(), failing_collections={"users"})


@pytest.fixture
def mock_info(memory_store):
    """Create a mock GraphQL info object carrying the sample store."""
    info = MagicMock(spec=strawberry.Info)
    info.context = build_context(memory_store)
    return info


@pytest.fixture(autouse=True)
def reset_environment() -> Generator[None, None, None]:
    """Reset environment variables for each test."""
    original_env = os.environ.copy()
    yield
    os.environ.clear()
    os.environ.update(original_env)
