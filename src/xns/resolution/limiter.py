"""Concurrency limiting and coarse throttling for metadata fetches."""

from __future__ import annotations

import asyncio
from contextlib import asynccontextmanager
from typing import AsyncIterator

from xns.core.exceptions import InternalError


class ConcurrencyLimiter:
    """
    Fixed-size pool of slots for outbound metadata fetches.

    Shared by every resolution running on the same resolver. Waiters are
    served in FIFO order (asyncio.Semaphore).
    """

    def __init__(self, max_concurrent: int = 10) -> None:
        if max_concurrent < 1:
            raise InternalError(
                f"Limiter needs at least one slot, got {max_concurrent}",
                details={"max_concurrent": max_concurrent},
            )
        self.max_concurrent = max_concurrent
        self._semaphore = asyncio.Semaphore(max_concurrent)
        self._in_flight = 0

    @property
    def in_flight(self) -> int:
        """Slots currently held."""
        return self._in_flight

    async def acquire(self) -> None:
        """Wait for a free slot."""
        await self._semaphore.acquire()
        self._in_flight += 1

    def release(self) -> None:
        """Return a slot to the pool."""
        if self._in_flight <= 0:
            raise InternalError("Limiter released more slots than were acquired")
        self._in_flight -= 1
        self._semaphore.release()

    @asynccontextmanager
    async def slot(self) -> AsyncIterator[None]:
        """Hold a slot for the duration of the block, success or failure."""
        await self.acquire()
        try:
            yield
        finally:
            self.release()


class TokenThrottle:
    """Sleeps briefly after every batch of scanned tokens."""

    def __init__(self, batch_size: int = 50, pause: float = 0.1) -> None:
        if batch_size < 1:
            raise InternalError(f"Throttle batch size must be positive, got {batch_size}")
        self.batch_size = batch_size
        self.pause = pause

    async def tick(self, processed: int) -> None:
        """Call after each token with the running count of processed tokens."""
        if self.pause > 0 and processed > 0 and processed % self.batch_size == 0:
            await asyncio.sleep(self.pause)
