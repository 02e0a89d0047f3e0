# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from decimal import Decimal

from pydantic import computed_field

from ..core.primitives import Model
from ..core.primitives.decimals import ZERO, clamp_non_negative, engine_context
from .balance_sheet import BalanceSheet


class CashFlowStatement(Model):
    """
    Indirect-method cash flow statement.

    Working-capital fields hold the change in each balance (closing minus
    opening); the sign convention of each line's cash effect is applied in
    ``cash_flow_from_operations``. Capital expenditure, debt issuance and
    debt repayment are positive amounts.
    """

    net_income: Decimal = ZERO
    depreciation: Decimal = ZERO
    change_in_receivables: Decimal = ZERO
    change_in_prepaid: Decimal = ZERO
    change_in_payables: Decimal = ZERO
    change_in_accrued: Decimal = ZERO
    change_in_deferred_revenue: Decimal = ZERO
    capital_expenditure: Decimal = ZERO
    debt_issuance: Decimal = ZERO
    debt_repayment: Decimal = ZERO
    other_financing: Decimal = ZERO
    beginning_cash: Decimal = ZERO

    @computed_field
    @property
    def working_capital_change(self) -> Decimal:
        """Cash effect of working capital movements."""
        with engine_context():
            return (
                -self.change_in_receivables
                - self.change_in_prepaid
                + self.change_in_payables
                + self.change_in_accrued
                + self.change_in_deferred_revenue
            )

    @computed_field
    @property
    def cash_flow_from_operations(self) -> Decimal:
        with engine_context():
            return self.net_income + self.depreciation + self.working_capital_change

    @computed_field
    @property
    def cash_flow_from_investing(self) -> Decimal:
        with engine_context():
            return -self.capital_expenditure

    @computed_field
    @property
    def cash_flow_from_financing(self) -> Decimal:
        with engine_context():
            return self.debt_issuance - self.debt_repayment + self.other_financing

    @computed_field
    @property
    def net_change_in_cash(self) -> Decimal:
        with engine_context():
            return self.cash_flow_from_operations + self.cash_flow_from_investing + self.cash_flow_from_financing

    @computed_field
    @property
    def ending_cash(self) -> Decimal:
        with engine_context():
            return self.beginning_cash + self.net_change_in_cash


def build_cash_flow(
    opening: BalanceSheet,
    closing: BalanceSheet,
    net_income: Decimal,
    depreciation: Decimal,
    capital_expenditure: Decimal,
    other_financing: Decimal = ZERO,
) -> CashFlowStatement:
    """
    Assemble the indirect cash flow between two balance sheets.

    The debt movement is split into issuance and repayment so neither line
    is negative.
    """
    debt_change = closing.debt - opening.debt
    return CashFlowStatement(
        net_income=net_income,
        depreciation=depreciation,
        change_in_receivables=closing.accounts_receivable - opening.accounts_receivable,
        change_in_prepaid=closing.prepaid_expenses - opening.prepaid_expenses,
        change_in_payables=closing.accounts_payable - opening.accounts_payable,
        change_in_accrued=closing.accrued_expenses - opening.accrued_expenses,
        change_in_deferred_revenue=closing.deferred_revenue - opening.deferred_revenue,
        capital_expenditure=capital_expenditure,
        debt_issuance=clamp_non_negative(debt_change),
        debt_repayment=clamp_non_negative(-debt_change),
        other_financing=other_financing,
        beginning_cash=opening.cash,
    )
