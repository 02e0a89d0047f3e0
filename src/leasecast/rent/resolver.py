# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""Rent expense for a single dynamic-window period."""

from __future__ import annotations

from decimal import Decimal
from typing import Union

from ..core.errors import ConfigurationError, raise_unknown_variant
from ..core.primitives.decimals import ZERO, banded_growth
from .models import FixedEscalationRent, PartnerInvestmentRent, RevenueShareRent

RentModel = Union[FixedEscalationRent, RevenueShareRent, PartnerInvestmentRent]


def resolve_rent(model: RentModel, period_index: int, trailing_revenue: Decimal = ZERO) -> Decimal:
    """
    Calculate rent expense for one period.

    Args:
        model: Rent structure with its parameters
        period_index: Zero-based year offset within the dynamic window
        trailing_revenue: Revenue of the period, used by revenue share only

    Returns:
        Rent expense. Negative only if a negative escalation rate drives it
        there, which the growth-rate bound of -100% prevents.

    Raises:
        ValueError: If ``period_index`` is negative
        ConfigurationError: If ``model`` is not a known rent structure
    """
    if period_index < 0:
        raise ValueError(f"period_index must be non-negative, got {period_index}")

    if isinstance(model, FixedEscalationRent):
        return banded_growth(model.base_rent, model.growth_rate, period_index, model.frequency)
    elif isinstance(model, RevenueShareRent):
        return trailing_revenue * model.percent
    elif isinstance(model, PartnerInvestmentRent):
        return banded_growth(model.base_rent, model.growth_rate, period_index, model.frequency)
    else:
        raise_unknown_variant(ConfigurationError.UNKNOWN_RENT_MODEL, model)
