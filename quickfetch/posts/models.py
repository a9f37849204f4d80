# quickfetch/posts/models.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Any


class MalformedPayloadError(ValueError):
    """The post source returned something that is not a list of posts."""


def _is_int(v: Any) -> bool:
    return isinstance(v, int) and not isinstance(v, bool)


@dataclass(frozen=True)
class PostRecord:
    id: int
    title: str
    body: str
    author_id: int

    @classmethod
    def from_raw(cls, raw: Any) -> PostRecord:
        if not isinstance(raw, dict):
            raise MalformedPayloadError(f"post must be an object, got {type(raw).__name__}")
        author = raw.get("userId", raw.get("authorId"))
        if not _is_int(raw.get("id")):
            raise MalformedPayloadError(f"post id must be an integer: {raw.get('id')!r}")
        if not isinstance(raw.get("title"), str) or not isinstance(raw.get("body"), str):
            raise MalformedPayloadError(f"post {raw['id']} is missing title/body text")
        if not _is_int(author):
            raise MalformedPayloadError(f"post {raw['id']} has no integer userId")
        return cls(id=raw["id"], title=raw["title"], body=raw["body"], author_id=author)

    def to_dict(self) -> dict[str, Any]:
        return {"id": self.id, "title": self.title, "body": self.body, "authorId": self.author_id}


def parse_posts(payload: Any) -> list[PostRecord]:
    if not isinstance(payload, list):
        raise MalformedPayloadError(f"expected a JSON array, got {type(payload).__name__}")
    return [PostRecord.from_raw(item) for item in payload]
