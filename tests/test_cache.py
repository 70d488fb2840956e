"""Tests for the Cache module."""

from geonoise import Cache, Constant, Perlin


def test_cache_returns_source_value():
    perlin = Perlin(seed=3)
    cache = Cache(perlin)
    assert cache.evaluate(0.3, 0.7, 0.1) == perlin.evaluate(0.3, 0.7, 0.1)


def test_cache_reuses_last_value(recorder):
    cache = Cache(recorder)
    assert not cache.is_cached

    cache.evaluate(1.0, 2.0, 3.0)
    cache.evaluate(1.0, 2.0, 3.0)
    assert cache.is_cached
    assert recorder.calls == [(1.0, 2.0, 3.0)]

    cache.evaluate(1.0, 2.0, 3.5)
    assert len(recorder.calls) == 2


def test_cache_clear(recorder):
    cache = Cache(recorder)
    cache.evaluate(0.0, 0.0, 0.0)
    cache.clear()
    assert not cache.is_cached
    cache.evaluate(0.0, 0.0, 0.0)
    assert len(recorder.calls) == 2


def test_cache_invalidated_by_new_source(recorder):
    cache = Cache(Constant(1.0))
    assert cache.evaluate(0.0, 0.0, 0.0) == 1.0

    cache.source = recorder
    assert not cache.is_cached
    assert cache.evaluate(0.0, 0.0, 0.0) == 0.0
    assert recorder.calls == [(0.0, 0.0, 0.0)]
    assert cache.sources() == [recorder]


def test_cache_distinguishes_signed_zero(recorder):
    cache = Cache(recorder)
    cache.evaluate(0.0, 0.0, 0.0)
    cache.evaluate(-0.0, 0.0, 0.0)
    cache.evaluate(0.0, 0.0, -0.0)
    assert len(recorder.calls) == 3

    # The same bit pattern is still a hit
    cache.evaluate(0.0, 0.0, -0.0)
    assert len(recorder.calls) == 3
