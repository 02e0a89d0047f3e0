# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Projection API

Public, uncached entry point for one engine run. Caching, in-flight
deduplication and timeouts live in ``leasecast.engine.service``.
"""

from __future__ import annotations

import logging
import time
from datetime import datetime, timezone

from ..core.primitives.decimals import engine_context
from .inputs import CalculationEngineInput
from .metrics import calculate_metrics
from .results import CalculationEngineOutput, PerformanceCounters
from .sequencer import PeriodSequencer, resolve_working_capital_ratios
from .solver import CircularSolver
from .validation import validate_periods

logger = logging.getLogger(__name__)


def run_projection(engine_input: CalculationEngineInput) -> CalculationEngineOutput:
    """
    Run the full projection for one scenario.

    Workflow:
      1) Resolve working capital ratios (supplied, or derived and locked)
      2) Sequence historical, transition and dynamic periods, solving each
      3) Validate every period and roll up the checks
      4) Compute aggregate metrics
      5) Package the immutable output with performance counters

    The run is a pure function of ``engine_input``: identical inputs give
    identical periods, metrics and validation.

    Raises:
        ConfigurationError: If the input cannot be projected (unknown rent
            model, missing working capital ratios, broken year sequence)
    """
    started = time.perf_counter()
    logger.info(
        "Starting projection: %d historical, %d transition, %d dynamic years (%d-%d)",
        len(engine_input.historical_periods),
        len(engine_input.transition_periods),
        engine_input.dynamic.contract_period_years,
        engine_input.dynamic.start_year,
        engine_input.dynamic.end_year,
    )

    with engine_context():
        # Step 1: Working capital ratios
        ratios = resolve_working_capital_ratios(engine_input)

        # Step 2: Sequence periods
        solver = CircularSolver(engine_input.system_config, engine_input.solver_config)
        periods = PeriodSequencer(engine_input, ratios, solver).run()

        # Step 3: Validation
        validation = validate_periods(periods, engine_input.validation_settings)

        # Step 4: Metrics
        metrics = calculate_metrics(periods, engine_input.system_config)

    iterations = [p.solver.iterations for p in periods]
    elapsed = time.perf_counter() - started

    # Step 5: Output
    output = CalculationEngineOutput(
        periods=periods,
        metrics=metrics,
        validation=validation,
        performance=PerformanceCounters(
            elapsed_seconds=elapsed,
            period_count=len(periods),
            total_solver_iterations=sum(iterations),
            max_solver_iterations=max(iterations, default=0),
        ),
        timestamp=datetime.now(timezone.utc),
    )
    logger.info(
        "Projection finished: %d periods in %.3fs, balanced=%s, reconciled=%s",
        len(periods),
        elapsed,
        validation.all_periods_balanced,
        validation.all_cash_flows_reconciled,
    )
    return output
