# quickfetch/posts/cache.py
from __future__ import annotations

import time
from typing import Callable, Dict, Generic, Optional, Tuple, TypeVar

T = TypeVar("T")


class TTLCache(Generic[T]):
    """In-memory cache whose entries expire ``ttl_sec`` seconds after being set.

    ``clock`` is injectable so expiry can be exercised without sleeping.
    """

    def __init__(self, ttl_sec: float, *, clock: Callable[[], float] = time.time) -> None:
        self.ttl_sec = float(ttl_sec)
        self._clock = clock
        self._entries: Dict[str, Tuple[float, T]] = {}

    def get(self, key: str) -> Optional[T]:
        v = self._entries.get(key)
        if not v:
            return None
        ts, value = v
        if (self._clock() - ts) > self.ttl_sec:
            self._entries.pop(key, None)
            return None
        return value

    def set(self, key: str, value: T) -> None:
        self._entries[key] = (self._clock(), value)

    def clear(self) -> None:
        self._entries.clear()

    def __len__(self) -> int:
        return len(self._entries)
