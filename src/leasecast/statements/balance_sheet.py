# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from decimal import Decimal

from pydantic import computed_field

from ..core.primitives import Model
from ..core.primitives.decimals import ZERO, engine_context


class BalanceSheet(Model):
    """
    Closing balance sheet for a year.

    ``debt`` is the balancing plug in projected years. Equity is split into
    the equity carried in from prior years (``retained_earnings``) and this
    year's net income, so ``total_equity`` rolls forward as
    ``prior total_equity + net_income``.
    """

    cash: Decimal = ZERO
    accounts_receivable: Decimal = ZERO
    prepaid_expenses: Decimal = ZERO
    gross_ppe: Decimal = ZERO
    accumulated_depreciation: Decimal = ZERO
    accounts_payable: Decimal = ZERO
    accrued_expenses: Decimal = ZERO
    deferred_revenue: Decimal = ZERO
    debt: Decimal = ZERO
    retained_earnings: Decimal = ZERO
    net_income_current_year: Decimal = ZERO

    @computed_field
    @property
    def net_ppe(self) -> Decimal:
        with engine_context():
            return self.gross_ppe - self.accumulated_depreciation

    @computed_field
    @property
    def total_current_assets(self) -> Decimal:
        with engine_context():
            return self.cash + self.accounts_receivable + self.prepaid_expenses

    @computed_field
    @property
    def total_non_current_assets(self) -> Decimal:
        with engine_context():
            return self.net_ppe

    @computed_field
    @property
    def total_assets(self) -> Decimal:
        with engine_context():
            return self.total_current_assets + self.total_non_current_assets

    @computed_field
    @property
    def total_current_liabilities(self) -> Decimal:
        with engine_context():
            return self.accounts_payable + self.accrued_expenses + self.deferred_revenue

    @computed_field
    @property
    def total_liabilities(self) -> Decimal:
        with engine_context():
            return self.total_current_liabilities + self.debt

    @computed_field
    @property
    def total_equity(self) -> Decimal:
        with engine_context():
            return self.retained_earnings + self.net_income_current_year

    @computed_field
    @property
    def balance_difference(self) -> Decimal:
        """``total_assets - (total_liabilities + total_equity)``; zero when balanced."""
        with engine_context():
            return self.total_assets - (self.total_liabilities + self.total_equity)
