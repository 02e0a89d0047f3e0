# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from decimal import Decimal
from typing import Optional

from pydantic import Field, computed_field

from ..core.primitives import Model, PeriodTypeEnum
from ..core.primitives.decimals import engine_context
from ..statements import BalanceSheet, CashFlowStatement, ProfitLossStatement


class SolverDiagnostics(Model):
    """How the circular solver settled a period. Historical periods are never solved."""

    iterations: int = 0
    converged: bool = True
    cash_shortfall: bool = False
    debt_clamped: bool = False


class Period(Model):
    """One year of the projection: the three statements plus diagnostics."""

    year: int
    period_type: PeriodTypeEnum
    profit_loss: ProfitLossStatement
    balance_sheet: BalanceSheet
    cash_flow: CashFlowStatement
    students: Optional[int] = None
    immutable: bool = False
    solver: SolverDiagnostics = Field(default_factory=SolverDiagnostics)

    @computed_field
    @property
    def balance_difference(self) -> Decimal:
        return self.balance_sheet.balance_difference

    @computed_field
    @property
    def cash_reconciliation_diff(self) -> Decimal:
        """``ending_cash - balance_sheet.cash``; zero when the cash flow reconciles."""
        with engine_context():
            return self.cash_flow.ending_cash - self.balance_sheet.cash
