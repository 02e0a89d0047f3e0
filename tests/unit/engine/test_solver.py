# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""Unit tests for the interest / debt / cash / zakat circular solver."""

from __future__ import annotations

from decimal import Decimal

import pytest

from leasecast.core.primitives import CircularSolverConfig, SystemConfig
from leasecast.engine import CircularSolver, SolverInputs
from leasecast.statements import BalanceSheet, WorkingCapitalBalances

ZERO_WC = WorkingCapitalBalances(
    accounts_receivable=Decimal("0"),
    prepaid_expenses=Decimal("0"),
    accounts_payable=Decimal("0"),
    accrued_expenses=Decimal("0"),
    deferred_revenue=Decimal("0"),
)


def _inputs(ebit: str, cash: str, debt: str = "0", **kwargs) -> SolverInputs:
    """Inputs over a balanced opening sheet holding only cash, debt and equity."""
    opening = BalanceSheet(
        cash=Decimal(cash),
        debt=Decimal(debt),
        retained_earnings=Decimal(cash) - Decimal(debt),
    )
    values = dict(
        year=2028,
        ebit=Decimal(ebit),
        depreciation=Decimal("0"),
        capital_expenditure=Decimal("0"),
        net_ppe=Decimal("0"),
        working_capital=ZERO_WC,
        opening=opening,
    )
    values.update(kwargs)
    return SolverInputs(**values)


@pytest.fixture
def solver() -> CircularSolver:
    return CircularSolver(SystemConfig(), CircularSolverConfig())


class TestCircularSolver:
    def test_surplus_cash_earns_deposit_interest(self, solver):
        result = solver.solve(_inputs(ebit="1000000", cash="5000000"))

        assert result.converged
        assert 1 < result.iterations <= 100
        assert result.debt == Decimal("0")
        assert result.interest_expense == Decimal("0")
        assert result.interest_income > Decimal("0")
        # Fixed point: c = 5M + 0.975 x (1M + 0.02 x (c - 1M))
        expected_cash = (Decimal("5975000") - Decimal("19500")) / Decimal("0.9805")
        assert abs(result.cash - expected_cash) < Decimal("0.05")
        assert result.cash == Decimal("5000000") + result.net_income

    def test_zakat_only_on_positive_earnings(self, solver):
        profit = solver.solve(_inputs(ebit="1000000", cash="5000000"))
        ebt = profit.net_income + profit.zakat_expense
        assert abs(profit.zakat_expense - ebt * Decimal("0.025")) < Decimal("1e-10")

        loss = solver.solve(_inputs(ebit="-3000000", cash="1000000"))
        assert loss.zakat_expense == Decimal("0")

    def test_losses_are_funded_by_debt_at_minimum_cash(self, solver):
        result = solver.solve(_inputs(ebit="-3000000", cash="1000000"))

        assert result.converged
        assert abs(result.cash - Decimal("1000000")) < Decimal("0.000001")
        # d = 3M + 0.05 d
        assert abs(result.debt - Decimal("3000000") / Decimal("0.95")) < Decimal("0.05")
        assert result.interest_expense > Decimal("0")
        assert result.interest_income == Decimal("0")
        assert not result.cash_shortfall

    def test_surplus_repays_opening_debt(self, solver):
        result = solver.solve(_inputs(ebit="4000000", cash="3000000", debt="2000000"))
        assert result.converged
        assert result.debt == Decimal("0")
        assert result.cash >= Decimal("1000000")

    def test_opening_cash_below_minimum_is_topped_up_without_shortfall(self, solver):
        result = solver.solve(_inputs(ebit="0", cash="500000"))
        assert result.converged
        assert abs(result.cash - Decimal("1000000")) < Decimal("0.000001")
        assert result.debt > Decimal("500000")
        assert not result.cash_shortfall

    def test_exhausted_iterations_accept_last_candidates(self):
        solver = CircularSolver(SystemConfig(), CircularSolverConfig(max_iterations=1))
        result = solver.solve(_inputs(ebit="1000000", cash="5000000"))

        assert not result.converged
        assert result.iterations == 1
        # The statements stay consistent with the accepted candidates
        assert result.cash == Decimal("5000000") + result.net_income

    def test_full_relaxation_converges(self):
        solver = CircularSolver(SystemConfig(), CircularSolverConfig(relaxation_factor=Decimal("1")))
        result = solver.solve(_inputs(ebit="-3000000", cash="1000000"))
        assert result.converged
        assert result.iterations < 20

    def test_deterministic(self, solver):
        inputs = _inputs(ebit="2500000", cash="1200000", debt="800000")
        assert solver.solve(inputs) == solver.solve(inputs)
