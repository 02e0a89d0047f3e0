# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""Unit tests for the fingerprint LRU cache and in-flight deduplication."""

from __future__ import annotations

import threading
import time
from concurrent.futures import TimeoutError as FuturesTimeoutError

import pytest

from leasecast.cache import DEFAULT_CAPACITY, FingerprintCache


@pytest.fixture
def inputs(engine_input_factory):
    """Three inputs with distinct fingerprints."""
    return [engine_input_factory(contract_period_years=years, with_transition=False) for years in (3, 4, 5)]


def _wait_for(predicate, timeout: float = 5.0) -> None:
    deadline = time.monotonic() + timeout
    while not predicate():
        if time.monotonic() > deadline:
            raise AssertionError("condition not met in time")
        time.sleep(0.005)


class TestLRU:
    def test_default_capacity(self):
        assert FingerprintCache().capacity == DEFAULT_CAPACITY == 128

    def test_capacity_must_be_positive(self):
        with pytest.raises(ValueError):
            FingerprintCache(capacity=0)

    def test_get_put_and_stats(self, inputs):
        cache = FingerprintCache()
        output = object()

        assert cache.get(inputs[0]) is None
        cache.put(inputs[0], output)
        assert cache.get(inputs[0]) is output

        stats = cache.stats()
        assert (stats.hits, stats.misses, stats.size) == (1, 1, 1)
        assert stats.hit_ratio == 0.5

    def test_least_recently_used_is_evicted(self, inputs):
        cache = FingerprintCache(capacity=2)
        cache.put(inputs[0], "a")
        cache.put(inputs[1], "b")
        # Touch the first entry so the second becomes least recent
        cache.get(inputs[0])
        cache.put(inputs[2], "c")

        assert cache.get(inputs[1]) is None
        assert cache.get(inputs[0]) == "a"
        assert cache.get(inputs[2]) == "c"
        assert cache.stats().evictions == 1
        assert len(cache) == 2

    def test_entry_records_insertion_time(self, inputs):
        cache = FingerprintCache()
        cache.put(inputs[0], "a")
        entry = cache.entry(inputs[0])
        assert entry.output == "a"
        assert entry.inserted_at.tzinfo is not None
        assert cache.stats().hits == 0

    def test_invalidate_and_clear(self, inputs):
        cache = FingerprintCache()
        cache.put(inputs[0], "a")
        cache.put(inputs[1], "b")
        assert cache.invalidate(inputs[0])
        assert not cache.invalidate(inputs[0])
        cache.clear()
        assert len(cache) == 0
        assert cache.stats().misses == 0


class TestGetOrCompute:
    def test_computes_once(self, inputs):
        cache = FingerprintCache()
        calls = []

        def compute(engine_input):
            calls.append(engine_input)
            return "result"

        assert cache.get_or_compute(inputs[0], compute) == "result"
        assert cache.get_or_compute(inputs[0], compute) == "result"
        assert len(calls) == 1

    def test_concurrent_identical_requests_share_one_computation(self, inputs):
        cache = FingerprintCache()
        started = threading.Event()
        release = threading.Event()
        calls = []
        results = []

        def compute(engine_input):
            calls.append(engine_input)
            started.set()
            release.wait(5)
            return "shared"

        def request():
            results.append(cache.get_or_compute(inputs[0], compute))

        owner = threading.Thread(target=request)
        owner.start()
        started.wait(5)
        joiner = threading.Thread(target=request)
        joiner.start()
        _wait_for(lambda: cache.stats().deduplicated == 1)
        release.set()
        owner.join(5)
        joiner.join(5)

        assert len(calls) == 1
        assert results == ["shared", "shared"]

    def test_failure_reaches_joiners_and_is_not_cached(self, inputs):
        cache = FingerprintCache()
        started = threading.Event()
        release = threading.Event()
        errors = []

        def compute(engine_input):
            started.set()
            release.wait(5)
            raise RuntimeError("engine failed")

        def request():
            try:
                cache.get_or_compute(inputs[0], compute)
            except RuntimeError as exc:
                errors.append(exc)

        owner = threading.Thread(target=request)
        owner.start()
        started.wait(5)
        joiner = threading.Thread(target=request)
        joiner.start()
        _wait_for(lambda: cache.stats().deduplicated == 1)
        release.set()
        owner.join(5)
        joiner.join(5)

        assert len(errors) == 2
        assert cache.get(inputs[0]) is None
        # A later request computes afresh
        assert cache.get_or_compute(inputs[0], lambda engine_input: "retry") == "retry"

    def test_joiner_wait_timeout(self, inputs):
        cache = FingerprintCache()
        started = threading.Event()
        release = threading.Event()

        def compute(engine_input):
            started.set()
            release.wait(5)
            return "late"

        owner = threading.Thread(target=cache.get_or_compute, args=(inputs[0], compute))
        owner.start()
        started.wait(5)
        try:
            with pytest.raises(FuturesTimeoutError):
                cache.get_or_compute(inputs[0], compute, wait_timeout=0.01)
        finally:
            release.set()
            owner.join(5)
        assert cache.get(inputs[0]) == "late"
