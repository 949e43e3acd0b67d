"""
HTTP tests for the FastAPI application
"""

from unittest.mock import AsyncMock

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from songbook import __version__
from songbook.api.app import create_app, lifespan
from songbook.config import Settings
from songbook.store.implementations.memory import InMemoryDocumentStore


@pytest.fixture
def app(memory_store):
    return create_app(store=memory_store, app_settings=Settings(store_provider="memory"))


@pytest_asyncio.fixture
async def client(app):
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


@pytest.mark.asyncio
async def test_health_check(client):
    response = await client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "healthy", "version": __version__}


@pytest.mark.asyncio
async def test_graphql_post(client):
    response = await client.post(
        "/graphql",
        json={
            "query": "query Song($id: String!) { song(id: $id) { id name } }",
            "operationName": "Song",
            "variables": {"id": "s1"},
        },
    )

    assert response.status_code == 200
    assert response.json() == {"data": {"song": {"id": "s1", "name": "Ave Maria"}}}


@pytest.mark.asyncio
async def test_graphql_get(client):
    response = await client.get("/graphql", params={"query": "{ playlists { id } }"})

    assert response.status_code == 200
    assert response.json()["data"] == {"playlists": [{"id": "p1"}]}


@pytest.mark.asyncio
async def test_graphql_not_found_in_error_list(client):
    response = await client.post("/graphql", json={"query": '{ user(id: "nope") { id } }'})

    body = response.json()
    assert response.status_code == 200
    assert body["data"] == {"user": None}
    assert body["errors"][0]["message"] == "User ID not found"
    assert body["errors"][0]["extensions"]["code"] == "NOT_FOUND"


@pytest.mark.asyncio
async def test_request_id_header_is_echoed(client):
    response = await client.get("/health", headers={"X-Request-ID": "req-123"})

    assert response.headers["X-Request-ID"] == "req-123"


@pytest.mark.asyncio
async def test_request_id_header_is_generated(client):
    response = await client.get("/health")

    assert response.headers["X-Request-ID"]


@pytest.mark.asyncio
async def test_lifespan_builds_and_closes_store(monkeypatch):
    store = InMemoryDocumentStore()
    store.close = AsyncMock()
    monkeypatch.setattr("songbook.api.app.create_document_store", lambda settings: store)

    app = create_app(app_settings=Settings(store_provider="memory"))
    assert app.state.document_store is None

    async with lifespan(app):
        assert app.state.document_store is store

    store.close.assert_awaited_once()
    assert app.state.document_store is None


@pytest.mark.asyncio
async def test_lifespan_keeps_injected_store(memory_store):
    app = create_app(store=memory_store, app_settings=Settings(store_provider="memory"))

    async with lifespan(app):
        assert app.state.document_store is memory_store


@pytest.mark.asyncio
async def test_graphiql_is_served_to_browsers(client):
    response = await client.get("/graphql", headers={"Accept": "text/html"})

    assert response.status_code == 200
    assert "graphiql" in response.text.lower()
