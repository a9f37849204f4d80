# quickfetch/posts/provider.py
from __future__ import annotations

import time
from typing import Any, Dict, List, Optional

import httpx

from ..core.http import ExternalServiceError, arequest_json
from ..core.logging import get_logger
from ..core.settings import SETTINGS
from .cache import TTLCache
from .models import MalformedPayloadError, PostRecord, parse_posts

log = get_logger(__name__)

POST_LIMIT = 10

_SHARED = object()
_CACHE: Optional[TTLCache[List[PostRecord]]] = None


def shared_cache() -> Optional[TTLCache[List[PostRecord]]]:
    """Process-wide cache used by providers that are not handed one explicitly."""
    global _CACHE
    eff = SETTINGS.effective()
    if not eff["post_cache_enabled"]:
        return None
    ttl = float(eff["post_cache_ttl_sec"])
    if _CACHE is None or _CACHE.ttl_sec != ttl:
        _CACHE = TTLCache(ttl)
    return _CACHE


class PostProvider:
    """Fetches posts from the remote source. Never raises: failures become ``[]``."""

    service = "post_source"

    def __init__(
        self,
        *,
        source_url: Optional[str] = None,
        cache: Any = _SHARED,
        client: Optional[httpx.AsyncClient] = None,
    ) -> None:
        self.source_url = source_url or str(SETTINGS["post_source_url"])
        self.cache: Optional[TTLCache[List[PostRecord]]] = shared_cache() if cache is _SHARED else cache
        self._client = client

    async def _fetch_all(self) -> List[PostRecord]:
        payload = await arequest_json(
            method="GET",
            url=self.source_url,
            service=self.service,
            client=self._client,
            headers={"Accept": "application/json"},
        )
        return parse_posts(payload)

    async def fetch_posts(self, limit: int = POST_LIMIT, telemetry: Optional[Dict[str, Any]] = None) -> List[PostRecord]:
        t_start = time.perf_counter()
        n = max(0, int(limit))
        tel: Dict[str, Any] = {"url": self.source_url, "limit": n, "cache": {"enabled": self.cache is not None, "hit": False}}

        cached = self.cache.get(self.source_url) if self.cache is not None else None
        if cached is not None:
            tel["cache"]["hit"] = True
            posts = cached
        else:
            try:
                posts = await self._fetch_all()
            except (ExternalServiceError, MalformedPayloadError) as e:
                log.warning("[posts] fetch failed url=%s: %s", self.source_url, e)
                tel["errorType"] = type(e).__name__
                tel["errorMsg"] = str(e)
                posts = []
            except Exception as e:
                log.exception("[posts] unexpected error fetching %s", self.source_url)
                tel["errorType"] = type(e).__name__
                tel["errorMsg"] = str(e)
                posts = []
            else:
                if self.cache is not None:
                    self.cache.set(self.source_url, posts)

        out = posts[:n]
        tel["fetched"] = len(posts)
        tel["returned"] = len(out)
        tel["elapsedSec"] = round(time.perf_counter() - t_start, 6)
        log.info("[posts] url=%s cache_hit=%s fetched=%d returned=%d",
                 self.source_url, tel["cache"]["hit"], len(posts), len(out))
        if telemetry is not None:
            telemetry.update(tel)
        return out
