# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Process-wide financial constants passed explicitly into every engine run.

Nothing here is read from the environment or from module globals: the
caller fetches admin-maintained values and hands them to the engine as
plain data, which keeps a run a pure function of its input.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Optional

from pydantic import Field

from .model import Model
from .types import DecimalBetween0And1, NonNegativeDecimal, PositiveDecimal, PositiveInt, RelaxationFactor


class SystemConfig(Model):
    """Financial constants applied uniformly to every projected period."""

    zakat_rate: DecimalBetween0And1 = Field(
        default=Decimal("0.025"), description="Zakat charged on positive earnings before tax"
    )
    debt_interest_rate: DecimalBetween0And1 = Field(
        default=Decimal("0.05"), description="Annual rate charged on the closing debt balance"
    )
    deposit_interest_rate: DecimalBetween0And1 = Field(
        default=Decimal("0.02"), description="Annual rate earned on cash above the minimum balance"
    )
    min_cash_balance: NonNegativeDecimal = Field(
        default=Decimal("1000000"), description="Cash floor maintained by drawing debt"
    )
    discount_rate: Optional[DecimalBetween0And1] = Field(
        default=None, description="Rate used for NPV metrics; falls back to debt_interest_rate"
    )

    @property
    def effective_discount_rate(self) -> Decimal:
        """Discount rate used for NPV and annualization metrics."""
        if self.discount_rate is not None:
            return self.discount_rate
        return self.debt_interest_rate


class CircularSolverConfig(Model):
    """Damped fixed-point iteration parameters for the interest/debt/cash cycle."""

    max_iterations: PositiveInt = 100
    convergence_tolerance: PositiveDecimal = Decimal("0.01")
    relaxation_factor: RelaxationFactor = Decimal("0.5")


class ValidationSettings(Model):
    """Tolerances used by the validation checker."""

    balance_tolerance: PositiveDecimal = Field(
        default=Decimal("1"), description="Maximum |assets - (liabilities + equity)|"
    )
    cash_tolerance: PositiveDecimal = Field(
        default=Decimal("1"), description="Maximum |ending cash - balance sheet cash|"
    )
