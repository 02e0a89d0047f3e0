# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Circular solver for the interest / debt / cash / zakat cycle.

Interest expense depends on closing debt; debt is the balance sheet plug;
the plug depends on closing cash and equity; both depend on net income,
which depends on interest and zakat. The loop is settled per period with
damped fixed-point iteration:

1. Seed debt and cash with the prior period's closing balances
2. Evaluate interest, zakat and net income from the current estimates
3. Rebuild operating and investing cash flow with that net income
4. Solve the debt plug that keeps cash at or above the minimum balance
   and balances the sheet; negative plugs clamp to zero
5. Relax both estimates toward the candidates
6. Stop once both candidates are within tolerance of the estimates

Exhausting ``max_iterations`` is not an error: the last candidates are
accepted and the period is flagged unconverged.
"""

from __future__ import annotations

import logging
from decimal import Decimal

from ..core.primitives import CircularSolverConfig, Model, SystemConfig
from ..core.primitives.decimals import ZERO, clamp_non_negative, is_within_tolerance
from ..statements import BalanceSheet, WorkingCapitalBalances

logger = logging.getLogger(__name__)


class SolverInputs(Model):
    """Everything the solver needs for one period, fixed before iteration starts."""

    year: int
    ebit: Decimal
    depreciation: Decimal
    capital_expenditure: Decimal
    net_ppe: Decimal
    working_capital: WorkingCapitalBalances
    opening: BalanceSheet


class SolverResult(Model):
    interest_expense: Decimal
    interest_income: Decimal
    zakat_expense: Decimal
    net_income: Decimal
    debt: Decimal
    cash: Decimal
    iterations: int
    converged: bool
    cash_shortfall: bool
    debt_clamped: bool


class CircularSolver:
    """
    Damped fixed-point solver, configured once per engine run.

    Example:
        ```python
        solver = CircularSolver(SystemConfig(), CircularSolverConfig())
        result = solver.solve(inputs)
        assert result.converged
        ```
    """

    def __init__(self, system_config: SystemConfig, solver_config: CircularSolverConfig):
        self.system_config = system_config
        self.solver_config = solver_config

    def solve(self, inputs: SolverInputs) -> SolverResult:
        system = self.system_config
        config = self.solver_config
        opening = inputs.opening
        wc = inputs.working_capital

        opening_debt = opening.debt
        opening_cash = opening.cash
        opening_equity = opening.total_equity

        working_capital_change = (
            -(wc.accounts_receivable - opening.accounts_receivable)
            - (wc.prepaid_expenses - opening.prepaid_expenses)
            + (wc.accounts_payable - opening.accounts_payable)
            + (wc.accrued_expenses - opening.accrued_expenses)
            + (wc.deferred_revenue - opening.deferred_revenue)
        )
        # Non-cash assets and operating liabilities are fixed for the period
        other_assets = wc.accounts_receivable + wc.prepaid_expenses + inputs.net_ppe
        operating_liabilities = wc.accounts_payable + wc.accrued_expenses + wc.deferred_revenue

        debt = opening_debt
        cash = opening_cash
        iterations = 0
        converged = False

        while iterations < config.max_iterations:
            iterations += 1

            # a. interest from current estimates
            interest_expense = debt * system.debt_interest_rate
            if cash < system.min_cash_balance:
                interest_income = ZERO
            else:
                interest_income = (cash - system.min_cash_balance) * system.deposit_interest_rate

            # b. earnings, zakat and net income
            ebt = inputs.ebit + (interest_income - interest_expense)
            zakat = system.zakat_rate * clamp_non_negative(ebt)
            net_income = ebt - zakat

            # c. cash before any change in debt
            operating = net_income + inputs.depreciation + working_capital_change
            pre_financing_cash = opening_cash + operating - inputs.capital_expenditure

            # d. debt plug
            unlevered_cash = pre_financing_cash - opening_debt
            target_cash = max(system.min_cash_balance, unlevered_cash)
            candidate_debt = (target_cash + other_assets) - operating_liabilities - (opening_equity + net_income)
            debt_clamped = candidate_debt < ZERO
            if debt_clamped:
                candidate_debt = ZERO
            candidate_cash = pre_financing_cash + candidate_debt - opening_debt

            # f. convergence on the residual between estimate and candidate
            if is_within_tolerance(candidate_debt, debt, config.convergence_tolerance) and is_within_tolerance(
                candidate_cash, cash, config.convergence_tolerance
            ):
                converged = True
                debt, cash = candidate_debt, candidate_cash
                break

            # e. relaxation
            debt = debt + config.relaxation_factor * (candidate_debt - debt)
            cash = cash + config.relaxation_factor * (candidate_cash - cash)

        if not converged:
            # Accept the last candidates so the statements stay internally consistent
            debt, cash = candidate_debt, candidate_cash
            logger.warning(
                "Circular solver did not converge for %s after %d iterations", inputs.year, iterations
            )
        else:
            logger.debug("Circular solver converged for %s in %d iterations", inputs.year, iterations)

        # Flag on the accepted cash; estimates approach a topped-up minimum from below
        cash_shortfall = cash < system.min_cash_balance - config.convergence_tolerance

        return SolverResult(
            interest_expense=interest_expense,
            interest_income=interest_income,
            zakat_expense=zakat,
            net_income=net_income,
            debt=debt,
            cash=cash,
            iterations=iterations,
            converged=converged,
            cash_shortfall=cash_shortfall,
            debt_clamped=debt_clamped,
        )
