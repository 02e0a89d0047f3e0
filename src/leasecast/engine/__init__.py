# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from .api import run_projection
from .inputs import (
    CalculationEngineInput,
    DynamicPeriodConfig,
    HistoricalBalances,
    HistoricalPeriod,
    TransitionBaseline,
    TransitionPeriod,
    TransitionYearDefaults,
)
from .metrics import ProjectionMetrics, calculate_metrics
from .period import Period, SolverDiagnostics
from .results import CalculationEngineOutput, PerformanceCounters
from .sequencer import PeriodSequencer, resolve_working_capital_ratios
from .service import ProjectionRunner, ProjectionService
from .solver import CircularSolver, SolverInputs, SolverResult
from .validation import PeriodValidation, ValidationSummary, validate_period, validate_periods

__all__ = [
    # Entry points
    "run_projection",
    "ProjectionService",
    "ProjectionRunner",
    # Inputs
    "CalculationEngineInput",
    "HistoricalPeriod",
    "HistoricalBalances",
    "TransitionPeriod",
    "TransitionBaseline",
    "TransitionYearDefaults",
    "DynamicPeriodConfig",
    # Orchestration
    "PeriodSequencer",
    "resolve_working_capital_ratios",
    "CircularSolver",
    "SolverInputs",
    "SolverResult",
    # Results
    "Period",
    "SolverDiagnostics",
    "CalculationEngineOutput",
    "PerformanceCounters",
    "ProjectionMetrics",
    "calculate_metrics",
    "PeriodValidation",
    "ValidationSummary",
    "validate_period",
    "validate_periods",
]
