# tests/test_cache.py
import asyncio

import pytest

from app.service_layer.cache import TtlCache


def _counting_fetcher(values):
    calls = {"n": 0}

    async def fetch():
        calls["n"] += 1
        await asyncio.sleep(0)
        return values[min(calls["n"], len(values)) - 1]

    return fetch, calls


@pytest.mark.asyncio
async def test_fresh_entry_is_served_without_refetch(clock):
    cache = TtlCache(60, clock=clock)
    fetch, calls = _counting_fetcher(["a", "b"])

    assert await cache.get_or_fetch("k", fetch) == "a"
    clock.advance(59)
    assert await cache.get_or_fetch("k", fetch) == "a"

    assert calls["n"] == 1
    assert cache.stats.snapshot() == {"hits": 1, "misses": 1}


@pytest.mark.asyncio
async def test_stale_entry_is_refetched(clock):
    cache = TtlCache(60, clock=clock)
    fetch, calls = _counting_fetcher(["a", "b"])

    await cache.get_or_fetch("k", fetch)
    clock.advance(60)
    assert await cache.get_or_fetch("k", fetch) == "b"
    assert calls["n"] == 2


@pytest.mark.asyncio
async def test_keys_are_independent(clock):
    cache = TtlCache(60, clock=clock)
    fetch_a, _ = _counting_fetcher(["a"])
    fetch_b, _ = _counting_fetcher(["b"])

    assert await cache.get_or_fetch("x", fetch_a) == "a"
    assert await cache.get_or_fetch("y", fetch_b) == "b"
    assert await cache.get_or_fetch("x", fetch_b) == "a"
    assert await cache.get_or_fetch("y", fetch_a) == "b"


@pytest.mark.asyncio
async def test_failed_fetch_propagates_and_caches_nothing(clock):
    cache = TtlCache(60, clock=clock)

    async def boom():
        raise RuntimeError("upstream down")

    with pytest.raises(RuntimeError):
        await cache.get_or_fetch("k", boom)
    fetch, calls = _counting_fetcher(["ok"])
    assert await cache.get_or_fetch("k", fetch) == "ok"
    assert calls["n"] == 1


@pytest.mark.asyncio
async def test_concurrent_misses_share_one_fetch(clock):
    cache = TtlCache(60, clock=clock)
    fetch, calls = _counting_fetcher(["a"])

    results = await asyncio.gather(*(cache.get_or_fetch("k", fetch) for _ in range(5)))

    assert results == ["a"] * 5
    assert calls["n"] == 1

