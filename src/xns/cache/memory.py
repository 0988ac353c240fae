"""Bounded in-memory cache with per-entry time-to-live."""

from __future__ import annotations

import asyncio
import time
from collections import OrderedDict
from collections.abc import Callable
from dataclasses import dataclass
from typing import Generic, TypeVar

ValueT = TypeVar("ValueT")


@dataclass
class CacheEntry(Generic[ValueT]):
    """A cached value and the monotonic time it stops being valid."""

    value: ValueT
    expires_at: float


class MemoryCache(Generic[ValueT]):
    """
    Async-safe cache bounded by entry count and TTL.

    The TTL runs from insertion; reads do not extend it. When full, expired
    entries are purged first and then the oldest insertions are evicted.
    """

    def __init__(
        self,
        max_entries: int = 1000,
        ttl: float = 300.0,
        *,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        if max_entries < 1:
            raise ValueError("max_entries must be at least 1")
        if ttl <= 0:
            raise ValueError("ttl must be positive")
        self.max_entries = max_entries
        self.ttl = ttl
        self._clock = clock
        self._entries: OrderedDict[str, CacheEntry[ValueT]] = OrderedDict()
        self._lock = asyncio.Lock()

    async def get(self, key: str) -> ValueT | None:
        """Get a value, or None if absent or expired."""
        async with self._lock:
            entry = self._entries.get(key)
            if entry is None:
                return None
            if entry.expires_at <= self._clock():
                del self._entries[key]
                return None
            return entry.value

    async def set(self, key: str, value: ValueT) -> None:
        """Insert or replace a value, restarting its TTL."""
        async with self._lock:
            now = self._clock()
            self._entries.pop(key, None)
            if len(self._entries) >= self.max_entries:
                self._purge_expired(now)
            while len(self._entries) >= self.max_entries:
                self._entries.popitem(last=False)
            self._entries[key] = CacheEntry(value=value, expires_at=now + self.ttl)

    async def delete(self, key: str) -> bool:
        """Delete a key from cache."""
        async with self._lock:
            return self._entries.pop(key, None) is not None

    async def clear(self) -> None:
        """Drop every entry."""
        async with self._lock:
            self._entries.clear()

    def _purge_expired(self, now: float) -> None:
        expired = [k for k, e in self._entries.items() if e.expires_at <= now]
        for key in expired:
            del self._entries[key]

    def __len__(self) -> int:
        return len(self._entries)
