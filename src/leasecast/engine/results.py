# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING, Any, Dict, Tuple

from ..core.primitives import Model, PeriodTypeEnum
from .metrics import ProjectionMetrics
from .period import Period
from .validation import ValidationSummary

if TYPE_CHECKING:
    from ..reporting import ReportingInterface


class PerformanceCounters(Model):
    elapsed_seconds: float
    period_count: int
    total_solver_iterations: int
    max_solver_iterations: int


class CalculationEngineOutput(Model):
    """
    Immutable result of one engine run.

    Callers never mutate an output; ``to_transport`` returns a JSON-ready
    copy with every decimal rendered as an exact string.
    """

    periods: Tuple[Period, ...]
    metrics: ProjectionMetrics
    validation: ValidationSummary
    performance: PerformanceCounters
    timestamp: datetime

    @property
    def all_periods_balanced(self) -> bool:
        return self.validation.all_periods_balanced

    @property
    def all_cash_flows_reconciled(self) -> bool:
        return self.validation.all_cash_flows_reconciled

    def period(self, year: int) -> Period:
        for period in self.periods:
            if period.year == year:
                return period
        raise KeyError(f"No period for year {year}")

    def periods_of_type(self, period_type: PeriodTypeEnum) -> Tuple[Period, ...]:
        return tuple(p for p in self.periods if p.period_type == period_type)

    @property
    def reporting(self) -> "ReportingInterface":
        """Statement tables for this output."""
        # Import at runtime to avoid circular dependencies
        from ..reporting import ReportingInterface  # noqa: PLC0415

        return ReportingInterface(self)

    def to_transport(self) -> Dict[str, Any]:
        return self.model_dump(mode="json")

    def content_dump(self) -> Dict[str, Any]:
        """
        Transport form without the run-specific timestamp and elapsed time.

        Two runs over the same input produce equal content dumps.
        """
        return self.model_dump(
            mode="json",
            exclude={"timestamp": True, "performance": {"elapsed_seconds"}},
        )
