"""Throttling policies applied between players of a batch.

Batches resolve players one after another; each player is admitted through a
``Throttle`` so the upstream rate limit is respected regardless of batch size.
"""

import asyncio
import time
from typing import Protocol

import structlog

logger = structlog.get_logger(__name__)


class Throttle(Protocol):
    """Admission policy awaited before each upstream unit of work."""

    async def acquire(self) -> None:
        """Wait until the next unit of work may start."""
        ...


class FixedDelayThrottle:
    """Spaces acquisitions at least ``delay_seconds`` apart.

    The first acquisition never waits, so a batch of N players takes at least
    ``(N - 1) * delay_seconds``.
    """

    def __init__(self, delay_seconds: float):
        if delay_seconds < 0:
            raise ValueError("delay_seconds must be >= 0")
        self.delay_seconds = delay_seconds
        self._last_acquired: float | None = None
        self._lock = asyncio.Lock()

    async def acquire(self) -> None:
        async with self._lock:
            if self._last_acquired is not None:
                wait = self._last_acquired + self.delay_seconds - time.monotonic()
                if wait > 0:
                    logger.debug("Throttling before next player", wait_seconds=round(wait, 3))
                    await asyncio.sleep(wait)
            self._last_acquired = time.monotonic()


class TokenBucketThrottle:
    """Token bucket refilled at ``rate_per_second`` up to ``capacity`` tokens."""

    def __init__(self, rate_per_second: float, capacity: int = 1):
        if rate_per_second <= 0:
            raise ValueError("rate_per_second must be > 0")
        if capacity < 1:
            raise ValueError("capacity must be >= 1")
        self.rate_per_second = rate_per_second
        self.capacity = capacity
        self._tokens = float(capacity)
        self._updated_at = time.monotonic()
        self._lock = asyncio.Lock()

    def _refill(self) -> None:
        now = time.monotonic()
        elapsed = now - self._updated_at
        self._tokens = min(self.capacity, self._tokens + elapsed * self.rate_per_second)
        self._updated_at = now

    async def acquire(self) -> None:
        async with self._lock:
            self._refill()
            while self._tokens < 1:
                wait = (1 - self._tokens) / self.rate_per_second
                logger.debug("Token bucket empty, waiting", wait_seconds=round(wait, 3))
                await asyncio.sleep(wait)
                self._refill()
            self._tokens -= 1

    @property
    def available_tokens(self) -> float:
        self._refill()
        return self._tokens
