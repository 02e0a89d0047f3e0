# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""Shared settlement step for projected (transition and dynamic) periods."""

from __future__ import annotations

from typing import Optional

from ...capex import CapExYear
from ...core.primitives import PeriodTypeEnum
from ...statements import (
    BalanceSheet,
    ProfitLossStatement,
    WorkingCapitalRatios,
    build_cash_flow,
    calculate_working_capital,
)
from ..period import Period, SolverDiagnostics
from ..solver import CircularSolver, SolverInputs


def settle_period(
    year: int,
    period_type: PeriodTypeEnum,
    operating: ProfitLossStatement,
    capex_year: CapExYear,
    ratios: WorkingCapitalRatios,
    opening: BalanceSheet,
    solver: CircularSolver,
    students: Optional[int] = None,
) -> Period:
    """
    Turn an operating P&L into a closed period.

    ``operating`` carries revenue, rent, staff, other opex and depreciation;
    the solver fills in interest and zakat, then the closing balance sheet
    and the indirect cash flow are assembled from the settled figures.
    """
    working_capital = calculate_working_capital(ratios, operating.total_revenue, operating.total_opex)

    result = solver.solve(
        SolverInputs(
            year=year,
            ebit=operating.ebit,
            depreciation=capex_year.depreciation,
            capital_expenditure=capex_year.capital_expenditure,
            net_ppe=capex_year.net_ppe,
            working_capital=working_capital,
            opening=opening,
        )
    )

    profit_loss = operating.model_copy(
        update={
            "interest_expense": result.interest_expense,
            "interest_income": result.interest_income,
            "zakat_expense": result.zakat_expense,
        }
    )

    closing = BalanceSheet(
        cash=result.cash,
        accounts_receivable=working_capital.accounts_receivable,
        prepaid_expenses=working_capital.prepaid_expenses,
        gross_ppe=capex_year.gross_ppe,
        accumulated_depreciation=capex_year.accumulated_depreciation,
        accounts_payable=working_capital.accounts_payable,
        accrued_expenses=working_capital.accrued_expenses,
        deferred_revenue=working_capital.deferred_revenue,
        debt=result.debt,
        retained_earnings=opening.total_equity,
        net_income_current_year=profit_loss.net_income,
    )

    cash_flow = build_cash_flow(
        opening=opening,
        closing=closing,
        net_income=profit_loss.net_income,
        depreciation=capex_year.depreciation,
        capital_expenditure=capex_year.capital_expenditure,
    )

    return Period(
        year=year,
        period_type=period_type,
        profit_loss=profit_loss,
        balance_sheet=closing,
        cash_flow=cash_flow,
        students=students,
        solver=SolverDiagnostics(
            iterations=result.iterations,
            converged=result.converged,
            cash_shortfall=result.cash_shortfall,
            debt_clamped=result.debt_clamped,
        ),
    )
