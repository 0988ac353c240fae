"""Tests for the in-memory TTL cache."""

from __future__ import annotations

import asyncio

import pytest

from xns.cache.memory import MemoryCache


class FakeClock:
    """Manually advanced monotonic clock."""

    def __init__(self) -> None:
        self.now = 0.0

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def cache(clock: FakeClock) -> MemoryCache[str]:
    return MemoryCache(max_entries=3, ttl=10.0, clock=clock)


class TestMemoryCacheBasics:
    """Tests for get/set/delete."""

    async def test_get_missing(self, cache: MemoryCache[str]):
        """Unknown keys return None."""
        assert await cache.get("missing") is None

    async def test_set_and_get(self, cache: MemoryCache[str]):
        """Stored values are returned."""
        await cache.set("a", "alpha")
        assert await cache.get("a") == "alpha"
        assert len(cache) == 1

    async def test_overwrite(self, cache: MemoryCache[str]):
        """Setting an existing key replaces the value."""
        await cache.set("a", "alpha")
        await cache.set("a", "beta")

        assert await cache.get("a") == "beta"
        assert len(cache) == 1

    async def test_delete(self, cache: MemoryCache[str]):
        """Deleting reports whether the key existed."""
        await cache.set("a", "alpha")

        assert await cache.delete("a") is True
        assert await cache.delete("a") is False
        assert await cache.get("a") is None

    async def test_clear(self, cache: MemoryCache[str]):
        """Clearing drops every entry."""
        await cache.set("a", "alpha")
        await cache.set("b", "beta")
        await cache.clear()

        assert len(cache) == 0

    @pytest.mark.parametrize("kwargs", [{"max_entries": 0}, {"ttl": 0}, {"ttl": -1.0}])
    def test_invalid_bounds(self, kwargs: dict):
        """Non-positive capacity or TTL is rejected."""
        with pytest.raises(ValueError):
            MemoryCache(**kwargs)


class TestMemoryCacheExpiry:
    """Tests for TTL handling."""

    async def test_valid_before_ttl(self, cache: MemoryCache[str], clock: FakeClock):
        """Entries are served until the TTL elapses."""
        await cache.set("a", "alpha")
        clock.advance(9.9)
        assert await cache.get("a") == "alpha"

    async def test_expired_after_ttl(self, cache: MemoryCache[str], clock: FakeClock):
        """Entries vanish once the TTL has elapsed."""
        await cache.set("a", "alpha")
        clock.advance(10.0)

        assert await cache.get("a") is None
        assert len(cache) == 0

    async def test_reads_do_not_extend_ttl(self, cache: MemoryCache[str], clock: FakeClock):
        """The TTL runs from insertion, not from the last read."""
        await cache.set("a", "alpha")
        clock.advance(6.0)
        assert await cache.get("a") == "alpha"
        clock.advance(6.0)
        assert await cache.get("a") is None

    async def test_overwrite_restarts_ttl(self, cache: MemoryCache[str], clock: FakeClock):
        """Re-setting a key gives it a fresh TTL."""
        await cache.set("a", "alpha")
        clock.advance(6.0)
        await cache.set("a", "alpha")
        clock.advance(6.0)
        assert await cache.get("a") == "alpha"


class TestMemoryCacheCapacity:
    """Tests for the entry bound."""

    async def test_evicts_oldest(self, cache: MemoryCache[str]):
        """When full, the oldest insertion is evicted."""
        for key in ("a", "b", "c", "d"):
            await cache.set(key, key)

        assert len(cache) == 3
        assert await cache.get("a") is None
        assert await cache.get("d") == "d"

    async def test_purges_expired_before_evicting(self, cache: MemoryCache[str], clock: FakeClock):
        """Expired entries make room before live ones are evicted."""
        await cache.set("old", "old")
        clock.advance(5.0)
        await cache.set("b", "b")
        await cache.set("c", "c")
        clock.advance(5.0)  # "old" has now expired

        await cache.set("d", "d")

        assert len(cache) == 3
        assert await cache.get("b") == "b"
        assert await cache.get("c") == "c"
        assert await cache.get("d") == "d"

    async def test_concurrent_writers(self, clock: FakeClock):
        """Concurrent sets never exceed the bound."""
        cache: MemoryCache[int] = MemoryCache(max_entries=5, ttl=10.0, clock=clock)

        await asyncio.gather(*(cache.set(f"k{i}", i) for i in range(50)))

        assert len(cache) == 5
