# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""Rent payment structures for a lease contract"""

from __future__ import annotations

from decimal import Decimal
from typing import Literal, Union

from pydantic import Field
from typing_extensions import Annotated

from ..core.primitives import (
    DecimalBetween0And1,
    Frequency,
    GrowthRate,
    Model,
    NonNegativeDecimal,
)


class FixedEscalationRent(Model):
    """
    A base rent escalated in bands.

    Rent for dynamic year ``i`` is ``base_rent * (1 + growth_rate) **
    floor(i / frequency)``: constant within a band of ``frequency`` years and
    stepping up at each band boundary.

    Example:
        >>> rent = FixedEscalationRent(base_rent=10_000_000, growth_rate="0.03")
        >>> assert rent.kind == "fixed_escalation"
    """

    kind: Literal["fixed_escalation"] = "fixed_escalation"
    base_rent: NonNegativeDecimal = Field(..., description="Rent charged in the first contract year")
    growth_rate: GrowthRate = Field(
        default=Decimal("0"),
        description="Escalation applied at each band boundary (negative allowed down to -100%)",
    )
    frequency: Frequency = Field(default=1, description="Years per escalation band")


class RevenueShareRent(Model):
    """
    Rent as a share of the period's revenue.

    ``percent`` is a fraction in [0, 1]; both bounds are valid, so a 100%
    share passes the entire revenue through as rent.
    """

    kind: Literal["revenue_share"] = "revenue_share"
    percent: DecimalBetween0And1 = Field(..., description="Share of revenue paid as rent (0.15 for 15%)")


class PartnerInvestmentRent(Model):
    """
    Rent as a yield on the partner's land and construction investment.

    The base rent is ``yield_rate * (land_size * land_price_per_sqm +
    bua_size * construction_cost_per_sqm)`` and is escalated in bands the
    same way as ``FixedEscalationRent``.
    """

    kind: Literal["partner_investment"] = "partner_investment"
    land_size: NonNegativeDecimal = Field(..., description="Land area in square metres")
    land_price_per_sqm: NonNegativeDecimal
    bua_size: NonNegativeDecimal = Field(..., description="Built-up area in square metres")
    construction_cost_per_sqm: NonNegativeDecimal
    yield_rate: DecimalBetween0And1 = Field(..., description="Annual yield on the total investment")
    growth_rate: GrowthRate = Decimal("0")
    frequency: Frequency = 1

    @property
    def total_investment(self) -> Decimal:
        return self.land_size * self.land_price_per_sqm + self.bua_size * self.construction_cost_per_sqm

    @property
    def base_rent(self) -> Decimal:
        """First-year rent derived from the investment yield."""
        return self.yield_rate * self.total_investment


# The discriminated union for any rent model
AnyRentModel = Annotated[
    Union[FixedEscalationRent, RevenueShareRent, PartnerInvestmentRent],
    Field(discriminator="kind"),
]
