"""Tests for the in-memory document store."""

import json

import pytest

from songbook.store.base import FieldFilter, InvalidPathException, StoreException
from songbook.store.implementations.memory import InMemoryDocumentStore


class TestInMemoryDocumentStore:
    @pytest.mark.asyncio
    async def test_get_document(self, memory_store):
        document = await memory_store.get_document("songs/s1")

        assert document is not None
        assert document["id"] == "s1"
        assert document["name"] == "Ave Maria"

    @pytest.mark.asyncio
    async def test_get_missing_document_returns_none(self, memory_store):
        assert await memory_store.get_document("songs/nope") is None
        assert await memory_store.get_document("albums/s1") is None

    @pytest.mark.asyncio
    async def test_get_document_rejects_nested_path(self, memory_store):
        with pytest.raises(InvalidPathException):
            await memory_store.get_document("songs/s1/lyrics/0")

    @pytest.mark.asyncio
    async def test_returned_documents_are_copies(self, memory_store):
        document = await memory_store.get_document("songs/s1")
        document["lyrics"].clear()

        again = await memory_store.get_document("songs/s1")
        assert len(again["lyrics"]) == 1

    @pytest.mark.asyncio
    async def test_query_collection_returns_every_document(self, memory_store):
        documents = await memory_store.query_collection("songs")

        assert sorted(d["id"] for d in documents) == ["s1", "s2"]

    @pytest.mark.asyncio
    async def test_query_collection_with_field_filter(self, memory_store):
        documents = await memory_store.query_collection("songs", FieldFilter("enteredBy", "u2"))

        assert [d["id"] for d in documents] == ["s2"]

    @pytest.mark.asyncio
    async def test_query_unknown_collection_is_empty(self, memory_store):
        assert await memory_store.query_collection("albums") == []

    @pytest.mark.asyncio
    async def test_document_key_used_when_id_field_missing(self):
        store = InMemoryDocumentStore({"users": {"u9": {"name": "Grace"}}})

        document = await store.get_document("users/u9")

        assert document == {"id": "u9", "name": "Grace"}

    def test_list_documents_require_id(self):
        with pytest.raises(StoreException, match="has no id"):
            InMemoryDocumentStore({"songs": [{"name": "Untitled"}]})

    @pytest.mark.asyncio
    async def test_from_file(self, tmp_path):
        fixtures = tmp_path / "songbook.json"
        fixtures.write_text(
            json.dumps({"playlists": [{"id": "p1", "name": "Morning", "songs": []}]}),
            encoding="utf-8",
        )

        store = InMemoryDocumentStore.from_file(fixtures)

        document = await store.get_document("playlists/p1")
        assert document["name"] == "Morning"

    def test_from_file_missing(self, tmp_path):
        with pytest.raises(StoreException, match="Failed to load document fixtures"):
            InMemoryDocumentStore.from_file(tmp_path / "missing.json")

    def test_from_file_rejects_non_object(self, tmp_path):
        fixtures = tmp_path / "songbook.json"
        fixtures.write_text("[]", encoding="utf-8")

        with pytest.raises(StoreException, match="must be a JSON object"):
            InMemoryDocumentStore.from_file(fixtures)
