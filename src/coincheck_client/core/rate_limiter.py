import asyncio
import time
from typing import Awaitable, Callable

from coincheck_client.resilience.log import log_event


class RateLimiter:
    """
    Token bucket for the calls of one client.

    Awaited by the request pipeline before a nonce is issued, so a throttled
    private call is signed only once its slot comes up and never goes out
    with a nonce older than a call that overtook it. Callers are served in
    arrival order.

    Nothing in the client throttles by default; pass an instance to opt in.
    """

    def __init__(
        self,
        rate_per_s: float = 5.0,
        burst: int = 10,
        name: str = "coincheck",
        clock: Callable[[], float] = time.monotonic,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
    ):
        if rate_per_s <= 0 or burst < 1:
            raise ValueError("rate_per_s must be > 0 and burst >= 1")
        self.rate_per_s = rate_per_s
        self.burst = burst
        self.name = name
        self._clock = clock
        self._sleep = sleep
        self._tokens = float(burst)
        self._updated = clock()
        self._lock = asyncio.Lock()
        self.total_wait_seconds = 0.0

    def _refill(self) -> None:
        now = self._clock()
        self._tokens = min(self.burst, self._tokens + (now - self._updated) * self.rate_per_s)
        self._updated = now

    def delay(self) -> float:
        """Seconds until the next slot is free; 0.0 when a call may go now."""
        self._refill()
        if self._tokens >= 1.0:
            return 0.0
        return (1.0 - self._tokens) / self.rate_per_s

    async def acquire(self) -> None:
        async with self._lock:
            delay = self.delay()
            if delay > 0:
                self.total_wait_seconds += delay
                log_event("rate_limited", {"limiter": self.name, "delay_s": round(delay, 3)})
                await self._sleep(delay)
                self._refill()
            # May go negative under a clock that did not advance during sleep;
            # the deficit is then paid by the next caller.
            self._tokens -= 1.0
