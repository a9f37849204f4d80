# quickfetch/posts/filtering.py
from __future__ import annotations

from typing import Iterable, List, Optional

from .models import PostRecord


def is_blank(query: Optional[str]) -> bool:
    return not (query or "").strip()


def matches(post: PostRecord, needle: str) -> bool:
    """``needle`` must already be lowercased."""
    return needle in post.title.lower() or needle in post.body.lower()


def filter_posts(records: Iterable[PostRecord], query: Optional[str]) -> List[PostRecord]:
    """Case-insensitive substring search over title and body.

    A blank query (empty or whitespace only) returns every record. Otherwise the
    query is matched as typed, surrounding spaces included, and the input order
    is kept.
    """
    if is_blank(query):
        return list(records)
    needle = query.lower()
    return [p for p in records if matches(p, needle)]
