# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Fingerprint-keyed cache of engine outputs.

A bounded least-recently-used map from input fingerprint to output. The
cache also tracks computations in flight: when two callers ask for the same
fingerprint at once, the second waits on the first caller's future instead
of running the engine again. The check-and-insert on the in-flight table
happens under a single lock.

The cache is a performance optimization only. Results are correct with it
disabled, and an output is stored only after its computation returns
normally in the caller that owns it.
"""

from __future__ import annotations

import logging
import threading
from collections import OrderedDict
from concurrent.futures import Future
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import TYPE_CHECKING, Callable, Dict, Optional

from pydantic import computed_field

from ..core.primitives import Model
from .fingerprint import fingerprint

if TYPE_CHECKING:
    from ..engine.inputs import CalculationEngineInput
    from ..engine.results import CalculationEngineOutput

logger = logging.getLogger(__name__)

DEFAULT_CAPACITY = 128


@dataclass(frozen=True)
class CacheEntry:
    output: "CalculationEngineOutput"
    inserted_at: datetime


class CacheStats(Model):
    hits: int
    misses: int
    evictions: int
    deduplicated: int
    size: int
    capacity: int

    @computed_field
    @property
    def hit_ratio(self) -> float:
        lookups = self.hits + self.misses
        return self.hits / lookups if lookups else 0.0


class FingerprintCache:
    """
    Thread-safe LRU cache with in-flight deduplication.

    Example:
        ```python
        cache = FingerprintCache(capacity=64)
        output = cache.get_or_compute(engine_input, run_projection)
        assert cache.get(engine_input) is output
        ```
    """

    def __init__(self, capacity: int = DEFAULT_CAPACITY):
        if capacity < 1:
            raise ValueError(f"capacity must be at least 1, got {capacity}")
        self.capacity = capacity
        self._entries: "OrderedDict[str, CacheEntry]" = OrderedDict()
        self._in_flight: Dict[str, Future] = {}
        self._lock = threading.Lock()
        self._hits = 0
        self._misses = 0
        self._evictions = 0
        self._deduplicated = 0

    def get(self, engine_input: CalculationEngineInput) -> Optional[CalculationEngineOutput]:
        key = fingerprint(engine_input)
        with self._lock:
            entry = self._lookup(key)
        return entry.output if entry is not None else None

    def put(self, engine_input: CalculationEngineInput, output: CalculationEngineOutput) -> None:
        key = fingerprint(engine_input)
        with self._lock:
            self._store(key, output)

    def entry(self, engine_input: CalculationEngineInput) -> Optional[CacheEntry]:
        """Cached entry with its insertion time; does not affect hit counters or recency."""
        key = fingerprint(engine_input)
        with self._lock:
            return self._entries.get(key)

    def invalidate(self, engine_input: CalculationEngineInput) -> bool:
        """Drop the entry for ``engine_input``. Returns whether one existed."""
        key = fingerprint(engine_input)
        with self._lock:
            return self._entries.pop(key, None) is not None

    def clear(self) -> None:
        """Drop every entry and reset counters. In-flight computations are unaffected."""
        with self._lock:
            self._entries.clear()
            self._hits = self._misses = self._evictions = self._deduplicated = 0

    def stats(self) -> CacheStats:
        with self._lock:
            return CacheStats(
                hits=self._hits,
                misses=self._misses,
                evictions=self._evictions,
                deduplicated=self._deduplicated,
                size=len(self._entries),
                capacity=self.capacity,
            )

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def get_or_compute(
        self,
        engine_input: CalculationEngineInput,
        compute: Callable[[CalculationEngineInput], CalculationEngineOutput],
        wait_timeout: Optional[float] = None,
    ) -> CalculationEngineOutput:
        """
        Return the cached output, join an identical computation in flight, or run ``compute``.

        Args:
            engine_input: Input to look up or compute
            compute: Engine entry point, called at most once per fingerprint at a time
            wait_timeout: Seconds a joining caller waits for the owner's result

        Raises:
            Whatever ``compute`` raises; joining callers receive the same exception.
            concurrent.futures.TimeoutError: If a joining caller's wait expires
        """
        key = fingerprint(engine_input)

        with self._lock:
            entry = self._lookup(key)
            if entry is not None:
                return entry.output
            pending = self._in_flight.get(key)
            if pending is None:
                pending = Future()
                self._in_flight[key] = pending
                owner = True
            else:
                self._deduplicated += 1
                owner = False

        if not owner:
            logger.debug("Joining in-flight computation %s", key[:12])
            return pending.result(timeout=wait_timeout)

        try:
            output = compute(engine_input)
        except BaseException as exc:
            with self._lock:
                self._in_flight.pop(key, None)
            pending.set_exception(exc)
            raise

        with self._lock:
            self._store(key, output)
            self._in_flight.pop(key, None)
        pending.set_result(output)
        return output

    def _lookup(self, key: str) -> Optional[CacheEntry]:
        """Counted lookup that refreshes recency. Caller holds the lock."""
        entry = self._entries.get(key)
        if entry is None:
            self._misses += 1
            logger.debug("Cache miss %s", key[:12])
            return None
        self._entries.move_to_end(key)
        self._hits += 1
        logger.debug("Cache hit %s", key[:12])
        return entry

    def _store(self, key: str, output: CalculationEngineOutput) -> None:
        """Insert or refresh ``key`` and evict the least recently used entry. Caller holds the lock."""
        self._entries[key] = CacheEntry(output=output, inserted_at=datetime.now(timezone.utc))
        self._entries.move_to_end(key)
        while len(self._entries) > self.capacity:
            evicted, _ = self._entries.popitem(last=False)
            self._evictions += 1
            logger.debug("Evicted %s", evicted[:12])
