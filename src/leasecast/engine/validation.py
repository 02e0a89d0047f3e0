# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Per-period and aggregate consistency checks.

``all_periods_balanced`` and ``all_cash_flows_reconciled`` are the engine's
externally visible correctness signal. Neither an imbalance nor an
unconverged solve raises: both are reported here and the caller decides
whether to accept, warn or reject the scenario.
"""

from __future__ import annotations

import logging
from decimal import Decimal
from typing import List, Sequence, Tuple

from ..core.primitives import Model, PeriodTypeEnum, ValidationSettings
from ..core.primitives.decimals import ZERO
from .period import Period

logger = logging.getLogger(__name__)


class PeriodValidation(Model):
    year: int
    period_type: PeriodTypeEnum
    balance_difference: Decimal
    cash_reconciliation_diff: Decimal
    balanced: bool
    reconciled: bool
    converged: bool
    iterations: int
    cash_shortfall: bool
    debt_clamped: bool


class ValidationSummary(Model):
    periods: Tuple[PeriodValidation, ...]
    all_periods_balanced: bool
    all_cash_flows_reconciled: bool
    all_periods_converged: bool
    unconverged_years: Tuple[int, ...] = ()
    max_balance_difference: Decimal = ZERO
    max_cash_reconciliation_diff: Decimal = ZERO
    warnings: Tuple[str, ...] = ()

    @property
    def is_valid(self) -> bool:
        """Balanced, reconciled and converged in every period."""
        return self.all_periods_balanced and self.all_cash_flows_reconciled and self.all_periods_converged


def validate_period(period: Period, settings: ValidationSettings) -> PeriodValidation:
    balance_difference = period.balance_difference
    cash_diff = period.cash_reconciliation_diff
    return PeriodValidation(
        year=period.year,
        period_type=period.period_type,
        balance_difference=balance_difference,
        cash_reconciliation_diff=cash_diff,
        balanced=abs(balance_difference) <= settings.balance_tolerance,
        reconciled=abs(cash_diff) <= settings.cash_tolerance,
        converged=period.solver.converged,
        iterations=period.solver.iterations,
        cash_shortfall=period.solver.cash_shortfall,
        debt_clamped=period.solver.debt_clamped,
    )


def validate_periods(periods: Sequence[Period], settings: ValidationSettings) -> ValidationSummary:
    """Check every period and roll the results up."""
    checks = tuple(validate_period(period, settings) for period in periods)

    warnings: List[str] = []
    for period, check in zip(periods, checks):
        if not check.balanced:
            warnings.append(f"{period.year}: balance sheet off by {check.balance_difference}")
        if not check.reconciled:
            warnings.append(f"{period.year}: cash flow off by {check.cash_reconciliation_diff}")
        if not check.converged:
            warnings.append(f"{period.year}: circular solver did not converge")
        if check.cash_shortfall:
            warnings.append(f"{period.year}: cash below the minimum balance")
        if check.debt_clamped:
            warnings.append(f"{period.year}: debt plug clamped at zero")
        if period.balance_sheet.cash < ZERO:
            warnings.append(f"{period.year}: negative cash")
        if period.balance_sheet.total_equity < ZERO:
            warnings.append(f"{period.year}: negative equity")

    summary = ValidationSummary(
        periods=checks,
        all_periods_balanced=all(check.balanced for check in checks),
        all_cash_flows_reconciled=all(check.reconciled for check in checks),
        all_periods_converged=all(check.converged for check in checks),
        unconverged_years=tuple(check.year for check in checks if not check.converged),
        max_balance_difference=max((abs(check.balance_difference) for check in checks), default=ZERO),
        max_cash_reconciliation_diff=max((abs(check.cash_reconciliation_diff) for check in checks), default=ZERO),
        warnings=tuple(warnings),
    )
    if not summary.is_valid:
        logger.warning(
            "Projection failed validation: max balance difference %s, max cash difference %s, unconverged %s",
            summary.max_balance_difference,
            summary.max_cash_reconciliation_diff,
            list(summary.unconverged_years),
        )
    return summary
