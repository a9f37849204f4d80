# quickfetch/posts/page.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional

from ..core.logging import get_logger
from .provider import POST_LIMIT, PostProvider
from .session import RenderState, Renderer, SearchSession

log = get_logger(__name__)


@dataclass
class PageView:
    total_count: int
    session: SearchSession

    @property
    def state(self) -> RenderState:
        return self.session.snapshot()

    @property
    def show_empty_fallback(self) -> bool:
        return self.total_count == 0


class PageComposer:
    def __init__(self, provider: PostProvider, *, limit: int = POST_LIMIT) -> None:
        self._provider = provider
        self._limit = limit

    async def compose(
        self,
        query: str = "",
        renderer: Optional[Renderer] = None,
        telemetry: Optional[Dict[str, Any]] = None,
    ) -> PageView:
        posts = await self._provider.fetch_posts(self._limit, telemetry=telemetry)
        session = SearchSession.initialize(posts, renderer)
        if query:
            session.set_query(query)
        log.debug("[page] composed total=%d query=%r", len(posts), query)
        return PageView(total_count=len(session.source), session=session)
