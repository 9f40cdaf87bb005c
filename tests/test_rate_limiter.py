import pytest

from coincheck_client.core.rate_limiter import RateLimiter


class FakeTime:
    """Clock plus async sleep that advances it."""

    def __init__(self):
        self.now = 100.0
        self.sleeps = []

    def clock(self):
        return self.now

    async def sleep(self, delay):
        self.sleeps.append(delay)
        self.now += delay


def limiter_for(fake, rate_per_s=2.0, burst=1):
    return RateLimiter(rate_per_s=rate_per_s, burst=burst, clock=fake.clock, sleep=fake.sleep)


@pytest.mark.asyncio
async def test_burst_is_free():
    fake = FakeTime()
    limiter = limiter_for(fake, burst=3)
    for _ in range(3):
        await limiter.acquire()
    assert fake.sleeps == []


@pytest.mark.asyncio
async def test_throttles_after_burst():
    fake = FakeTime()
    limiter = limiter_for(fake, rate_per_s=4.0)
    for _ in range(3):
        await limiter.acquire()
    assert fake.sleeps == [pytest.approx(0.25), pytest.approx(0.25)]
    assert limiter.total_wait_seconds == pytest.approx(0.5)


@pytest.mark.asyncio
async def test_tokens_refill_with_time():
    fake = FakeTime()
    limiter = limiter_for(fake)
    await limiter.acquire()
    assert limiter.delay() == pytest.approx(0.5)
    fake.now += 1.0
    assert limiter.delay() == 0.0
    await limiter.acquire()
    assert fake.sleeps == []


@pytest.mark.asyncio
async def test_frozen_clock_accumulates_deficit():
    slept = []

    async def sleep(delay):
        slept.append(delay)

    limiter = RateLimiter(rate_per_s=4.0, burst=1, clock=lambda: 0.0, sleep=sleep)
    for _ in range(3):
        await limiter.acquire()
    assert slept == [pytest.approx(0.25), pytest.approx(0.5)]


def test_rejects_bad_arguments():
    with pytest.raises(ValueError):
        RateLimiter(rate_per_s=0)
    with pytest.raises(ValueError):
        RateLimiter(burst=0)
