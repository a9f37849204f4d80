# quickfetch/posts/session.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional, Sequence, Tuple

from .filtering import filter_posts
from .models import PostRecord


@dataclass(frozen=True)
class RenderState:
    """What a renderer receives after every query change."""

    total_count: int
    query: str
    results: Tuple[PostRecord, ...]

    @property
    def result_count(self) -> int:
        return len(self.results)

    @property
    def show_result_count(self) -> bool:
        return bool(self.query)

    @property
    def no_matches(self) -> bool:
        return bool(self.query) and not self.results

    def to_dict(self) -> Dict[str, Any]:
        return {
            "totalCount": self.total_count,
            "query": self.query,
            "results": [p.to_dict() for p in self.results],
            "resultCount": self.result_count,
        }


Renderer = Callable[[RenderState], None]


class SearchSession:
    def __init__(self, source: Sequence[PostRecord], renderer: Optional[Renderer] = None) -> None:
        self._source: Tuple[PostRecord, ...] = tuple(source)
        self._query = ""
        self._renderers: List[Renderer] = []
        if renderer is not None:
            self._renderers.append(renderer)

    @classmethod
    def initialize(cls, source: Sequence[PostRecord], renderer: Optional[Renderer] = None) -> SearchSession:
        return cls(source, renderer)

    @property
    def source(self) -> Tuple[PostRecord, ...]:
        return self._source

    @property
    def query(self) -> str:
        return self._query

    @property
    def view(self) -> List[PostRecord]:
        # derived on every read, never stored
        return filter_posts(self._source, self._query)

    def subscribe(self, renderer: Renderer) -> Callable[[], None]:
        self._renderers.append(renderer)

        def _unsubscribe() -> None:
            if renderer in self._renderers:
                self._renderers.remove(renderer)

        return _unsubscribe

    def snapshot(self) -> RenderState:
        return RenderState(total_count=len(self._source), query=self._query, results=tuple(self.view))

    def set_query(self, new_query: Optional[str]) -> RenderState:
        self._query = new_query or ""
        state = self.snapshot()
        for r in list(self._renderers):
            r(state)
        return state
