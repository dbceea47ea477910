import pytest

import textsearch_frontend.web as webmod
from textsearch_frontend import initialize
from textsearch_frontend.web import app as flask_app


@pytest.fixture
def client():
    eng = initialize(demo=True)
    webmod._engine = eng
    try:
        yield flask_app.test_client()
    finally:
        webmod._engine = None
        eng.shutdown()


@pytest.mark.e2e
def test_search_api_json(client):
    rv = client.get("/api/search?q=Hello&k=5")
    assert rv.status_code == 200
    data = rv.get_json()
    assert [r["document_id"] for r in data] == [2, 1]
    for key in ("document_id", "score", "text"):
        assert key in data[0]


@pytest.mark.e2e
def test_search_api_respects_k(client):
    data = client.get("/api/search?q=Hello&k=1").get_json()
    assert len(data) == 1


@pytest.mark.e2e
def test_phrase_api(client):
    data = client.get("/api/phrase?q=search%20engine").get_json()
    assert [r["document_id"] for r in data] == [2]


@pytest.mark.e2e
def test_complete_api(client):
    assert client.get("/api/complete?q=sear").get_json() == ["search", "searches"]
    assert client.get("/api/complete?q=").get_json() == []
    assert client.get("/api/search").get_json() == []


@pytest.mark.e2e
def test_document_routes(client):
    rv = client.get("/api/documents/3")
    assert rv.status_code == 200
    assert rv.get_json()["text"].startswith("The world is full")
    missing = client.get("/api/documents/99")
    assert missing.status_code == 404
    assert missing.get_json()["id"] == 99


@pytest.mark.e2e
def test_add_document_route(client):
    rv = client.post("/api/documents", json={"id": 4, "text": "brand new engine"})
    assert rv.status_code == 201
    data = client.get("/api/search?q=brand").get_json()
    assert [r["document_id"] for r in data] == [4]
    assert client.post("/api/documents", json={"id": "4", "text": "x"}).status_code == 400
    assert client.post("/api/documents", data="nope").status_code == 400


@pytest.mark.e2e
def test_health_and_home(client):
    health = client.get("/health").get_json()
    assert health["ok"] is True
    assert health["documents"] == 3
    home = client.get("/")
    assert home.status_code == 200
    assert b"Text Search" in home.data
