# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""Non-staff, non-rent operating expense."""

from __future__ import annotations

from decimal import Decimal
from typing import Optional

from pydantic import model_validator

from ..core.primitives import DecimalBetween0And1, Frequency, GrowthRate, Model, NonNegativeDecimal, ValidationMixin
from ..core.primitives.decimals import banded_growth


class OtherOpexConfig(Model, ValidationMixin):
    """Other operating expense as a share of revenue or as a CPI-escalated amount."""

    percent_of_revenue: Optional[DecimalBetween0And1] = None
    fixed_amount: Optional[NonNegativeDecimal] = None
    cpi_rate: GrowthRate = Decimal("0")
    cpi_frequency: Frequency = 1

    @model_validator(mode="after")
    def _validate_one_basis(self) -> "OtherOpexConfig":
        return self.validate_either_or_required(self, "percent_of_revenue", "fixed_amount")

    def amount_for_period(self, revenue: Decimal, period_index: int) -> Decimal:
        if self.percent_of_revenue is not None:
            return revenue * self.percent_of_revenue
        return banded_growth(self.fixed_amount, self.cpi_rate, period_index, self.cpi_frequency)
