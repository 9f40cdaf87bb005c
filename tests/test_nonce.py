import asyncio
from concurrent.futures import ThreadPoolExecutor

import pytest

from coincheck_client.auth.nonce import NonceGenerator


def test_strictly_increasing_when_clock_is_frozen():
    gen = NonceGenerator(clock=lambda: 1_700_000_000_000)
    values = [gen.next() for _ in range(1000)]
    assert values[0] == 1_700_000_000_000
    assert all(b > a for a, b in zip(values, values[1:]))


def test_clock_moving_backwards_never_lowers_nonce():
    ticks = iter([5000, 4000, 3000, 6000])
    gen = NonceGenerator(clock=lambda: next(ticks))
    assert [gen.next() for _ in range(4)] == [5000, 5001, 5002, 6000]


def test_follows_clock_when_it_advances():
    ticks = iter([100, 200, 300])
    gen = NonceGenerator(clock=lambda: next(ticks))
    assert [gen.next(), gen.next(), gen.next()] == [100, 200, 300]
    assert gen.last == 300


def test_default_clock_is_milliseconds():
    gen = NonceGenerator()
    value = gen.next()
    # 2020-01-01 in ms; a seconds-based clock would be far below this
    assert value > 1_577_836_800_000


def test_generators_do_not_share_sequences():
    a = NonceGenerator(clock=lambda: 10)
    b = NonceGenerator(clock=lambda: 10)
    a.next()
    a.next()
    assert b.next() == 10


@pytest.mark.asyncio
async def test_concurrent_coroutines_get_unique_nonces():
    gen = NonceGenerator(clock=lambda: 42)

    async def take():
        await asyncio.sleep(0)
        return gen.next()

    values = await asyncio.gather(*(take() for _ in range(200)))
    assert len(set(values)) == 200


def test_threads_get_unique_nonces():
    gen = NonceGenerator(clock=lambda: 1)
    with ThreadPoolExecutor(max_workers=8) as pool:
        values = list(pool.map(lambda _: gen.next(), range(2000)))
    assert len(set(values)) == 2000
    assert max(values) == 2000
