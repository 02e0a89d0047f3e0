# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Leasecast - Lease Financial Projection Engine

Multi-decade profit & loss, balance sheet and cash flow projections for a
negotiated lease, under fixed-escalation, revenue-share or
partner-investment rent. Historical actuals, a transition window and the
contract years are stitched into one ledger; interest, debt, cash and
zakat are settled per year by a damped fixed-point solver, and every year
is checked for balance and cash reconciliation.

Key Entry Points:
- leasecast.run_projection() - One uncached, deterministic engine run
- leasecast.ProjectionService - Cached runs with in-flight dedup and timeouts
- leasecast.scenario - Scenario dials, comparison and sensitivity analysis
- leasecast.reporting - pandas statement tables

Example Usage:
    ```python
    from leasecast import run_projection

    output = run_projection(engine_input)
    assert output.validation.all_periods_balanced
    print(output.metrics.npv)
    ```
"""

import logging

from .cache import FingerprintCache, fingerprint
from .core import CalculationTimeoutError, ConfigurationError, LeasecastError
from .core.primitives import CircularSolverConfig, SystemConfig, ValidationSettings
from .engine import (
    CalculationEngineInput,
    CalculationEngineOutput,
    DynamicPeriodConfig,
    HistoricalBalances,
    HistoricalPeriod,
    Period,
    ProjectionService,
    TransitionBaseline,
    TransitionPeriod,
    run_projection,
)
from .rent import FixedEscalationRent, PartnerInvestmentRent, RevenueShareRent
from .scenario import ScenarioDials, apply_scenario
from .statements import WorkingCapitalRatios

# Library logging: applications configure handlers
logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    # Entry points
    "run_projection",
    "ProjectionService",
    "FingerprintCache",
    "fingerprint",
    # Inputs
    "CalculationEngineInput",
    "HistoricalPeriod",
    "HistoricalBalances",
    "TransitionPeriod",
    "TransitionBaseline",
    "DynamicPeriodConfig",
    "SystemConfig",
    "CircularSolverConfig",
    "ValidationSettings",
    "WorkingCapitalRatios",
    # Rent models
    "FixedEscalationRent",
    "RevenueShareRent",
    "PartnerInvestmentRent",
    # Outputs
    "CalculationEngineOutput",
    "Period",
    # Scenarios
    "ScenarioDials",
    "apply_scenario",
    # Errors
    "LeasecastError",
    "ConfigurationError",
    "CalculationTimeoutError",
]
