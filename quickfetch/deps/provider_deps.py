# quickfetch/deps/provider_deps.py
from __future__ import annotations

from ..posts.provider import PostProvider


def get_post_provider() -> PostProvider:
    return PostProvider()
