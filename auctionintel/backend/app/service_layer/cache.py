# app/service_layer/cache.py
from __future__ import annotations

import asyncio
import time
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Awaitable, Callable, Generic, Hashable, TypeVar

T = TypeVar("T")


def utc_now_iso() -> str:
    return datetime.now(timezone.utc).isoformat()


@dataclass
class CacheStats:
    hits: int = 0
    misses: int = 0

    def snapshot(self) -> dict[str, int]:
        return {"hits": self.hits, "misses": self.misses}


@dataclass(frozen=True)
class _Entry(Generic[T]):
    value: T
    fetched_at: float


class TtlCache(Generic[T]):
    """
    In-process cache of (value, fetched_at) keyed by query.
    Freshness is checked on read; stale entries are refetched, never served.

    The lock is held across the fetch so concurrent misses for the same
    process trigger one upstream call, not N.
    """

    def __init__(self, ttl_s: float, *, clock: Callable[[], float] = time.monotonic) -> None:
        self.ttl_s = float(ttl_s)
        self._clock = clock
        self._entries: dict[Hashable, _Entry[T]] = {}
        self._lock = asyncio.Lock()
        self.stats = CacheStats()

    def _is_fresh(self, entry: _Entry[T], now: float) -> bool:
        return (now - entry.fetched_at) < self.ttl_s

    async def get_or_fetch(self, key: Hashable, fetcher: Callable[[], Awaitable[T]]) -> T:
        async with self._lock:
            entry = self._entries.get(key)
            if entry is not None and self._is_fresh(entry, self._clock()):
                self.stats.hits += 1
                return entry.value

            self.stats.misses += 1
            # Failures propagate and leave the previous entry untouched
            value = await fetcher()
            self._entries[key] = _Entry(value=value, fetched_at=self._clock())
            return value
