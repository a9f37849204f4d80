"""HTTP routes, driven through FastAPI's TestClient."""

import json
from datetime import datetime

import httpx
import pytest
from fastapi.testclient import TestClient

from conftest import SOURCE_URL, RecordingHandler
from quickfetch.app import app
from quickfetch.core.settings import SETTINGS
from quickfetch.deps.provider_deps import get_post_provider
from quickfetch.posts.provider import PostProvider


@pytest.fixture
def source(raw_posts):
    return RecordingHandler(json=raw_posts)


@pytest.fixture
def client(source, make_client):
    app.dependency_overrides[get_post_provider] = lambda: PostProvider(
        source_url=SOURCE_URL, cache=None, client=make_client(source)
    )
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


def _is_iso(ts: str) -> bool:
    datetime.fromisoformat(ts.replace("Z", "+00:00"))
    return True


# ---------------------------------------------------------------------------
# Echo
# ---------------------------------------------------------------------------


def test_echo_post_reflects_body(client):
    r = client.post("/api/echo", json={"test": "hello"})
    assert r.status_code == 200
    body = r.json()
    assert body["data"] == {"test": "hello"}
    assert body["message"] == "Echo API endpoint working!"
    assert _is_iso(body["timestamp"])


@pytest.mark.parametrize("payload", [[1, 2, {"a": None}], "just a string", 42, {"nested": {"deep": [True]}}])
def test_echo_post_accepts_any_json(client, payload):
    r = client.post("/api/echo", json=payload)
    assert r.status_code == 200
    assert r.json()["data"] == payload


@pytest.mark.parametrize("raw", [b"{not json", b"", b"\xff\xfe", b"NaN", b'{"x": Infinity}', b"[-Infinity]"])
def test_echo_post_rejects_malformed_json(client, raw):
    r = client.post("/api/echo", content=raw, headers={"content-type": "application/json"})
    assert r.status_code == 400
    assert r.json() == {"error": "Invalid JSON in request body"}


def test_echo_get(client):
    r = client.get("/api/echo")
    assert r.status_code == 200
    body = r.json()
    assert body["message"] == "Echo API is running! Send a POST request with JSON data."
    assert _is_iso(body["timestamp"])
    assert "data" not in body


# ---------------------------------------------------------------------------
# Posts
# ---------------------------------------------------------------------------


def test_api_posts_returns_first_ten(client, source):
    r = client.get("/api/posts")
    assert r.status_code == 200
    body = r.json()
    assert body["totalCount"] == 10
    assert body["query"] == ""
    assert body["resultCount"] == 10
    assert [p["id"] for p in body["results"]] == list(range(1, 11))
    assert set(body["results"][0]) == {"id", "title", "body", "authorId"}
    assert len(source.calls) == 1


def test_api_posts_search(client):
    body = client.get("/api/posts", params={"q": "COOK"}).json()
    assert body["totalCount"] == 10
    assert body["resultCount"] == 1
    assert body["results"][0]["title"] == "How to Cook"


def test_api_posts_source_down(make_client):
    handler = RecordingHandler(status=502, json={})
    app.dependency_overrides[get_post_provider] = lambda: PostProvider(
        source_url=SOURCE_URL, cache=None, client=make_client(handler)
    )
    try:
        with TestClient(app) as c:
            r = c.get("/api/posts", params={"q": "cook"})
            page = c.get("/")
    finally:
        app.dependency_overrides.clear()
    assert r.status_code == 200
    assert r.json() == {"totalCount": 0, "query": "cook", "results": [], "resultCount": 0}
    assert page.status_code == 200
    assert "No posts available." in page.text


def test_home_page_renders_posts(client):
    r = client.get("/")
    assert r.status_code == 200
    assert r.headers["content-type"].startswith("text/html")
    assert "Latest Posts (10)" in r.text
    assert "How to Cook" in r.text
    assert "Travel Tips" in r.text
    assert "No posts available." not in r.text


def test_home_page_search(client):
    r = client.get("/", params={"q": "travel"})
    assert 'Found 1 post(s) matching "travel"' in r.text
    assert "Travel Tips" in r.text
    assert "How to Cook" not in r.text


def test_health(client):
    assert client.get("/health").json() == {"ok": True}


def test_request_id_header_is_accepted(client):
    r = client.get("/health", headers={"x-id": "abc123"})
    assert r.status_code == 200


# ---------------------------------------------------------------------------
# Settings
# ---------------------------------------------------------------------------


@pytest.fixture
def isolated_settings(tmp_path, monkeypatch):
    monkeypatch.setenv("QUICKFETCH_OVERRIDES_PATH", str(tmp_path / "overrides.json"))
    SETTINGS.reload()
    yield tmp_path / "overrides.json"
    monkeypatch.undo()
    SETTINGS.reload()


def test_settings_defaults(client, isolated_settings):
    defaults = client.get("/api/settings/defaults").json()
    assert defaults["post_cache_ttl_sec"] == 3600
    assert defaults["post_source_url"].startswith("https://")


def test_settings_overrides_file_is_reported(client, isolated_settings):
    isolated_settings.write_text(json.dumps({"post_cache_ttl_sec": 60}), encoding="utf-8")
    SETTINGS.reload()
    assert client.get("/api/settings/overrides").json() == {"post_cache_ttl_sec": 60}
    effective = client.get("/api/settings/effective").json()
    assert effective["post_cache_ttl_sec"] == 60
    assert effective["http_timeout_sec"] == 10.0


@pytest.mark.parametrize("method", ["PATCH", "PUT"])
def test_settings_cannot_be_written_over_http(client, isolated_settings, method):
    r = client.request(method, "/api/settings/overrides", json={"post_source_url": "http://169.254.169.254/latest/meta-data"})
    assert r.status_code == 405
    assert not isolated_settings.exists()
    assert SETTINGS["post_source_url"] == "https://jsonplaceholder.typicode.com/posts"
    assert get_post_provider().source_url == "https://jsonplaceholder.typicode.com/posts"
