# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Cached, time-boxed projection runs.

The engine itself is synchronous, so a timeout needs a separate worker: the
run is submitted to a thread pool and the caller waits on the future with a
deadline. On expiry the caller gets ``CalculationTimeoutError``. The worker
cannot be interrupted; it finishes on its own and its result is discarded.
Only the caller path writes to the cache, and only after the run returned
in time.
"""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from concurrent.futures import TimeoutError as FuturesTimeoutError
from typing import Callable, Optional

from ..cache import FingerprintCache, fingerprint
from ..core.errors import CalculationTimeoutError
from .api import run_projection
from .inputs import CalculationEngineInput
from .results import CalculationEngineOutput

logger = logging.getLogger(__name__)

ProjectionRunner = Callable[[CalculationEngineInput], CalculationEngineOutput]


class ProjectionService:
    """
    Entry point for callers that want caching, dedup and a time limit.

    Example:
        ```python
        with ProjectionService(cache=FingerprintCache(), timeout_seconds=30) as service:
            output = service.calculate(engine_input)
        ```
    """

    def __init__(
        self,
        cache: Optional[FingerprintCache] = None,
        timeout_seconds: Optional[float] = None,
        max_workers: int = 4,
        runner: ProjectionRunner = run_projection,
    ):
        if timeout_seconds is not None and timeout_seconds <= 0:
            raise ValueError(f"timeout_seconds must be positive, got {timeout_seconds}")
        self.cache = cache
        self.timeout_seconds = timeout_seconds
        self._runner = runner
        self._executor: Optional[ThreadPoolExecutor] = None
        if timeout_seconds is not None:
            self._executor = ThreadPoolExecutor(max_workers=max_workers, thread_name_prefix="leasecast")

    def calculate(self, engine_input: CalculationEngineInput) -> CalculationEngineOutput:
        """
        Return the projection for ``engine_input``.

        Raises:
            ConfigurationError: If the input cannot be projected
            CalculationTimeoutError: If the run exceeds ``timeout_seconds``
        """
        if self.cache is None:
            return self._run(engine_input)
        return self.cache.get_or_compute(engine_input, self._run)

    def close(self) -> None:
        """Release the worker pool without waiting on abandoned runs."""
        if self._executor is not None:
            self._executor.shutdown(wait=False)
            self._executor = None

    def __enter__(self) -> "ProjectionService":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def _run(self, engine_input: CalculationEngineInput) -> CalculationEngineOutput:
        if self._executor is None:
            return self._runner(engine_input)

        future = self._executor.submit(self._runner, engine_input)
        try:
            return future.result(timeout=self.timeout_seconds)
        except FuturesTimeoutError:
            future.cancel()
            key = fingerprint(engine_input)
            logger.warning("Projection %s exceeded %ss; result will be discarded", key[:12], self.timeout_seconds)
            raise CalculationTimeoutError(self.timeout_seconds, key) from None
