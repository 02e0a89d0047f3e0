# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Statement Reports

Profit & loss, balance sheet, cash flow and validation tables for a
projection, one column per year.
"""

from __future__ import annotations

from typing import Optional, Sequence

import pandas as pd

from .base import BaseReport


class ProfitLossReport(BaseReport):
    """Annual profit & loss, revenue down to net income."""

    LINES = (
        ("Tuition Revenue", lambda p: p.profit_loss.tuition_revenue),
        ("Other Revenue", lambda p: p.profit_loss.other_revenue),
        ("Total Revenue", lambda p: p.profit_loss.total_revenue),
        ("Rent Expense", lambda p: p.profit_loss.rent_expense),
        ("Staff Costs", lambda p: p.profit_loss.staff_costs),
        ("Other Opex", lambda p: p.profit_loss.other_opex),
        ("Total Opex", lambda p: p.profit_loss.total_opex),
        ("EBITDA", lambda p: p.profit_loss.ebitda),
        ("Depreciation", lambda p: p.profit_loss.depreciation),
        ("EBIT", lambda p: p.profit_loss.ebit),
        ("Interest Income", lambda p: p.profit_loss.interest_income),
        ("Interest Expense", lambda p: p.profit_loss.interest_expense),
        ("EBT", lambda p: p.profit_loss.ebt),
        ("Zakat", lambda p: p.profit_loss.zakat_expense),
        ("Net Income", lambda p: p.profit_loss.net_income),
    )

    def generate(self, rounded: bool = True, years: Optional[Sequence[int]] = None) -> pd.DataFrame:
        """
        Args:
            rounded: Round to cents for display
            years: Restrict to these years; all years when omitted

        Returns:
            DataFrame where rows are line items and columns are years
        """
        return self._line_item_frame(self.LINES, rounded, years)


class BalanceSheetReport(BaseReport):
    """Closing balance sheet per year, with the balance check as the last row."""

    LINES = (
        ("Cash", lambda p: p.balance_sheet.cash),
        ("Accounts Receivable", lambda p: p.balance_sheet.accounts_receivable),
        ("Prepaid Expenses", lambda p: p.balance_sheet.prepaid_expenses),
        ("Total Current Assets", lambda p: p.balance_sheet.total_current_assets),
        ("Gross PP&E", lambda p: p.balance_sheet.gross_ppe),
        ("Accumulated Depreciation", lambda p: p.balance_sheet.accumulated_depreciation),
        ("Net PP&E", lambda p: p.balance_sheet.net_ppe),
        ("Total Assets", lambda p: p.balance_sheet.total_assets),
        ("Accounts Payable", lambda p: p.balance_sheet.accounts_payable),
        ("Accrued Expenses", lambda p: p.balance_sheet.accrued_expenses),
        ("Deferred Revenue", lambda p: p.balance_sheet.deferred_revenue),
        ("Total Current Liabilities", lambda p: p.balance_sheet.total_current_liabilities),
        ("Debt", lambda p: p.balance_sheet.debt),
        ("Total Liabilities", lambda p: p.balance_sheet.total_liabilities),
        ("Retained Earnings", lambda p: p.balance_sheet.retained_earnings),
        ("Net Income (Current Year)", lambda p: p.balance_sheet.net_income_current_year),
        ("Total Equity", lambda p: p.balance_sheet.total_equity),
        ("Balance Difference", lambda p: p.balance_sheet.balance_difference),
    )

    def generate(self, rounded: bool = True, years: Optional[Sequence[int]] = None) -> pd.DataFrame:
        return self._line_item_frame(self.LINES, rounded, years)


class CashFlowReport(BaseReport):
    """Indirect-method cash flow per year."""

    LINES = (
        ("Net Income", lambda p: p.cash_flow.net_income),
        ("Depreciation", lambda p: p.cash_flow.depreciation),
        ("Working Capital Change", lambda p: p.cash_flow.working_capital_change),
        ("Cash Flow from Operations", lambda p: p.cash_flow.cash_flow_from_operations),
        ("Capital Expenditure", lambda p: -p.cash_flow.capital_expenditure),
        ("Cash Flow from Investing", lambda p: p.cash_flow.cash_flow_from_investing),
        ("Debt Issuance", lambda p: p.cash_flow.debt_issuance),
        ("Debt Repayment", lambda p: -p.cash_flow.debt_repayment),
        ("Other Financing", lambda p: p.cash_flow.other_financing),
        ("Cash Flow from Financing", lambda p: p.cash_flow.cash_flow_from_financing),
        ("Net Change in Cash", lambda p: p.cash_flow.net_change_in_cash),
        ("Beginning Cash", lambda p: p.cash_flow.beginning_cash),
        ("Ending Cash", lambda p: p.cash_flow.ending_cash),
        ("Reconciliation Difference", lambda p: p.cash_reconciliation_diff),
    )

    def generate(self, rounded: bool = True, years: Optional[Sequence[int]] = None) -> pd.DataFrame:
        return self._line_item_frame(self.LINES, rounded, years)


class ValidationReport(BaseReport):
    """One row per year with the consistency checks and solver diagnostics."""

    def generate(self) -> pd.DataFrame:
        rows = [
            {
                "year": check.year,
                "period_type": check.period_type.value,
                "balance_difference": check.balance_difference,
                "cash_reconciliation_diff": check.cash_reconciliation_diff,
                "balanced": check.balanced,
                "reconciled": check.reconciled,
                "converged": check.converged,
                "iterations": check.iterations,
                "cash_shortfall": check.cash_shortfall,
                "debt_clamped": check.debt_clamped,
            }
            for check in self._output.validation.periods
        ]
        if not rows:
            return pd.DataFrame()
        return pd.DataFrame(rows).set_index("year")
