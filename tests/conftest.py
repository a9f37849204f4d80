# tests/conftest.py
import os
import tempfile

# keep settings overrides away from the real home directory
os.environ.setdefault(
    "QUICKFETCH_OVERRIDES_PATH",
    os.path.join(tempfile.mkdtemp(prefix="quickfetch-test-"), "override_settings.json"),
)

import httpx
import pytest

from quickfetch.posts.models import PostRecord

SOURCE_URL = "https://posts.example.test/posts"

# ---------------------------------------------------------------------------
# Sample data
# ---------------------------------------------------------------------------

TITLES = [
    "How to Cook",
    "Travel Tips",
    "Gardening for Beginners",
    "Morning Routines",
    "Budget Planning",
    "Learning Python",
    "Weekend Hikes",
    "Photography Basics",
    "Home Workouts",
    "Reading List",
]


def raw_post(i: int, title: str | None = None, body: str | None = None, user_id: int | None = None) -> dict:
    return {
        "userId": user_id if user_id is not None else (i % 3) + 1,
        "id": i,
        "title": title if title is not None else f"post number {i}",
        "body": body if body is not None else f"body text for post {i}",
    }


@pytest.fixture
def raw_posts() -> list[dict]:
    """25 source records: the first 10 carry readable titles, the rest are filler."""
    out = [raw_post(i + 1, title=t, body=f"notes about {t.lower()}") for i, t in enumerate(TITLES)]
    # one post whose body shares nothing with its title
    out[1]["body"] = "pack light and see the world"
    out.extend(raw_post(i) for i in range(11, 26))
    return out


@pytest.fixture
def posts(raw_posts) -> list[PostRecord]:
    return [PostRecord.from_raw(r) for r in raw_posts[:10]]


# ---------------------------------------------------------------------------
# HTTP fakes
# ---------------------------------------------------------------------------


class RecordingHandler:
    """httpx MockTransport handler that counts calls and replays a fixed response."""

    def __init__(self, *, json=None, status: int = 200, content: bytes | None = None, exc: Exception | None = None):
        self.json = json
        self.status = status
        self.content = content
        self.exc = exc
        self.calls: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.calls.append(request)
        if self.exc is not None:
            raise self.exc
        if self.content is not None:
            return httpx.Response(self.status, content=self.content, headers={"content-type": "application/json"})
        return httpx.Response(self.status, json=self.json)


@pytest.fixture
def make_client():
    def _make(handler: RecordingHandler) -> httpx.AsyncClient:
        return httpx.AsyncClient(transport=httpx.MockTransport(handler))

    return _make


class FakeClock:
    def __init__(self, start: float = 1_000.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()
