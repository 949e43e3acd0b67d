"""Tests for the document store factory."""

import json

import pytest

from songbook.config import Settings
from songbook.store.factory import create_document_store
from songbook.store.implementations.firestore import FirestoreDocumentStore
from songbook.store.implementations.memory import InMemoryDocumentStore


class TestCreateDocumentStore:
    def test_create_firestore_store(self):
        settings = Settings(
            store_provider="firestore",
            firestore_project_id="test-project",
            firestore_database="songbook",
            google_credentials_path="/secrets/service-account.json",
        )

        store = create_document_store(settings)

        assert isinstance(store, FirestoreDocumentStore)
        assert store.project_id == "test-project"
        assert store.database == "songbook"
        assert store.credentials_path == "/secrets/service-account.json"
        assert store._client is None

    def test_create_empty_memory_store(self):
        store = create_document_store(Settings(store_provider="memory"))

        assert isinstance(store, InMemoryDocumentStore)

    @pytest.mark.asyncio
    async def test_create_memory_store_from_file(self, tmp_path):
        fixtures = tmp_path / "songbook.json"
        fixtures.write_text(json.dumps({"users": {"u1": {"name": "Ada"}}}), encoding="utf-8")

        store = create_document_store(
            Settings(store_provider="memory", memory_store_path=str(fixtures))
        )

        assert await store.get_document("users/u1") == {"id": "u1", "name": "Ada"}

    def test_create_unknown_provider(self):
        settings = Settings()
        settings.store_provider = "mongo"  # type: ignore[assignment]

        with pytest.raises(ValueError, match="Unknown document store provider"):
            create_document_store(settings)
