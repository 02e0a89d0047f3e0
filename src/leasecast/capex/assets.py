# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""Capital expenditure configuration: existing assets, manual items, reinvestment."""

from __future__ import annotations

from decimal import Decimal
from typing import List, Optional, Tuple

from pydantic import Field, model_validator

from ..core.primitives import (
    CapExSourceEnum,
    DecimalBetween0And1,
    Frequency,
    Model,
    NonNegativeDecimal,
    PositiveInt,
    ValidationMixin,
    Year,
)


class ExistingAssets(Model, ValidationMixin):
    """
    Runoff of the PP&E carried in from the historical balance sheet.

    Either the remaining useful life (straight-line over the carried net
    book value) or an explicit annual depreciation amount.
    """

    remaining_useful_life: Optional[PositiveInt] = None
    annual_depreciation: Optional[NonNegativeDecimal] = None

    @model_validator(mode="after")
    def _validate_runoff_basis(self) -> "ExistingAssets":
        return self.validate_either_or_required(self, "remaining_useful_life", "annual_depreciation")

    def annual_amount(self, net_book_value: Decimal) -> Decimal:
        if self.annual_depreciation is not None:
            return self.annual_depreciation
        return net_book_value / Decimal(self.remaining_useful_life)


class CapExItem(Model):
    """A manually scheduled capital purchase."""

    year: Year
    amount: NonNegativeDecimal
    useful_life: PositiveInt = Field(..., description="Straight-line depreciation life in years")
    description: str = ""


class ReinvestmentPolicy(Model, ValidationMixin):
    """
    Automatic reinvestment every ``frequency`` years.

    Reinvestment falls in each year where ``year - start_year`` is a positive
    multiple of ``frequency``; the start year itself never triggers. The
    amount is fixed or a share of that year's revenue.
    """

    frequency: Frequency
    amount: Optional[NonNegativeDecimal] = None
    percent_of_revenue: Optional[DecimalBetween0And1] = None
    useful_life: PositiveInt = 10
    start_year: Optional[Year] = Field(default=None, description="Defaults to the dynamic window start year")

    @model_validator(mode="after")
    def _validate_amount_basis(self) -> "ReinvestmentPolicy":
        return self.validate_either_or_required(self, "amount", "percent_of_revenue")

    def is_due(self, year: int, default_start_year: int) -> bool:
        start = self.start_year if self.start_year is not None else default_start_year
        elapsed = year - start
        return elapsed > 0 and elapsed % self.frequency == 0

    def amount_for(self, revenue: Decimal) -> Decimal:
        if self.amount is not None:
            return self.amount
        return revenue * self.percent_of_revenue


class CapExConfig(Model):
    existing_assets: Optional[ExistingAssets] = None
    items: Tuple[CapExItem, ...] = ()
    reinvestment: Optional[ReinvestmentPolicy] = None


class CapExAddition(Model):
    """An asset entering the schedule in a given year."""

    year: int
    amount: Decimal
    useful_life: int
    source: CapExSourceEnum


def scheduled_additions(
    config: CapExConfig,
    year: int,
    revenue: Decimal,
    reinvestment_start_year: Optional[int] = None,
) -> List[CapExAddition]:
    """
    Purchases falling in ``year``: manual items dated that year, plus a
    reinvestment when the policy is due. Pass ``reinvestment_start_year``
    as None to suppress reinvestment (it applies to the dynamic window only).
    """
    additions = [
        CapExAddition(year=year, amount=item.amount, useful_life=item.useful_life, source=CapExSourceEnum.MANUAL)
        for item in config.items
        if item.year == year and item.amount > 0
    ]
    policy = config.reinvestment
    if policy is not None and reinvestment_start_year is not None and policy.is_due(year, reinvestment_start_year):
        amount = policy.amount_for(revenue)
        if amount > 0:
            additions.append(
                CapExAddition(
                    year=year,
                    amount=amount,
                    useful_life=policy.useful_life,
                    source=CapExSourceEnum.REINVESTMENT,
                )
            )
    return additions
