# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from decimal import Decimal

from pydantic import computed_field

from ..core.primitives import Model
from ..core.primitives.decimals import ZERO, engine_context


class ProfitLossStatement(Model):
    """
    Annual profit & loss.

    Expense lines are stored as positive amounts; subtotals are derived so
    they can never disagree with their components. Subtotals are evaluated
    in the engine decimal context whenever they are read or serialized.
    """

    tuition_revenue: Decimal = ZERO
    other_revenue: Decimal = ZERO
    rent_expense: Decimal = ZERO
    staff_costs: Decimal = ZERO
    other_opex: Decimal = ZERO
    depreciation: Decimal = ZERO
    interest_expense: Decimal = ZERO
    interest_income: Decimal = ZERO
    zakat_expense: Decimal = ZERO

    @computed_field
    @property
    def total_revenue(self) -> Decimal:
        with engine_context():
            return self.tuition_revenue + self.other_revenue

    @computed_field
    @property
    def total_opex(self) -> Decimal:
        """Operating expense including rent, excluding depreciation."""
        with engine_context():
            return self.rent_expense + self.staff_costs + self.other_opex

    @computed_field
    @property
    def ebitda(self) -> Decimal:
        with engine_context():
            return self.total_revenue - self.total_opex

    @computed_field
    @property
    def ebit(self) -> Decimal:
        with engine_context():
            return self.ebitda - self.depreciation

    @computed_field
    @property
    def net_interest(self) -> Decimal:
        with engine_context():
            return self.interest_income - self.interest_expense

    @computed_field
    @property
    def ebt(self) -> Decimal:
        with engine_context():
            return self.ebit + self.net_interest

    @computed_field
    @property
    def net_income(self) -> Decimal:
        with engine_context():
            return self.ebt - self.zakat_expense
