# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Ratio-driven working capital.

Every balance is a ratio applied to the *current* period's revenue or
operating expense, never to a prior period's value:

- receivables and deferred revenue scale with total revenue
- prepaid expenses, payables and accruals scale with total opex (rent,
  staff and other opex; depreciation excluded)

Ratios are derived once from a confirmed baseline year and then locked.
"""

from __future__ import annotations

import logging
from decimal import Decimal
from typing import Optional

from pydantic import Field

from ..core.errors import ConfigurationError
from ..core.primitives import DecimalBetween0And1, Model, NonNegativeDecimal
from ..core.primitives.decimals import ONE, ZERO, safe_divide
from .balance_sheet import BalanceSheet
from .profit_loss import ProfitLossStatement

logger = logging.getLogger(__name__)


class WorkingCapitalRatios(Model):
    """Working capital ratios plus the other-revenue ratio used for prefill."""

    ar_percent: DecimalBetween0And1 = Field(default=Decimal("0.10"), description="Receivables / revenue")
    prepaid_percent: DecimalBetween0And1 = Field(default=Decimal("0.05"), description="Prepaid / opex")
    ap_percent: DecimalBetween0And1 = Field(default=Decimal("0.08"), description="Payables / opex")
    accrued_percent: DecimalBetween0And1 = Field(default=Decimal("0.05"), description="Accrued / opex")
    deferred_revenue_percent: DecimalBetween0And1 = Field(
        default=Decimal("0.15"), description="Deferred revenue / revenue"
    )
    other_revenue_ratio: NonNegativeDecimal = Field(
        default=Decimal("0"), description="Other revenue / tuition revenue"
    )
    locked: bool = False

    def lock(self) -> "WorkingCapitalRatios":
        """Return a locked copy; locked ratios cannot be re-derived."""
        if self.locked:
            return self
        return self.model_copy(update={"locked": True})


class WorkingCapitalBalances(Model):
    accounts_receivable: Decimal
    prepaid_expenses: Decimal
    accounts_payable: Decimal
    accrued_expenses: Decimal
    deferred_revenue: Decimal


def calculate_working_capital(
    ratios: WorkingCapitalRatios, revenue: Decimal, opex: Decimal
) -> WorkingCapitalBalances:
    """Closing working capital balances for a period's revenue and opex."""
    return WorkingCapitalBalances(
        accounts_receivable=revenue * ratios.ar_percent,
        prepaid_expenses=opex * ratios.prepaid_percent,
        accounts_payable=opex * ratios.ap_percent,
        accrued_expenses=opex * ratios.accrued_percent,
        deferred_revenue=revenue * ratios.deferred_revenue_percent,
    )


def derive_working_capital_ratios(
    profit_loss: ProfitLossStatement,
    balance_sheet: BalanceSheet,
    existing: Optional[WorkingCapitalRatios] = None,
) -> WorkingCapitalRatios:
    """
    Compute ratios from a confirmed baseline year.

    Zero revenue, opex or tuition yields zero for the affected ratios.
    Ratios are clamped to [0, 1].

    Raises:
        ConfigurationError: If ``existing`` is locked
    """
    if existing is not None and existing.locked:
        raise ConfigurationError(
            ConfigurationError.WORKING_CAPITAL_RATIOS_LOCKED,
            "Working capital ratios are locked and cannot be recomputed from a new baseline",
        )

    revenue = profit_loss.total_revenue
    opex = profit_loss.total_opex

    ratios = WorkingCapitalRatios(
        ar_percent=_bounded_ratio(balance_sheet.accounts_receivable, revenue),
        prepaid_percent=_bounded_ratio(balance_sheet.prepaid_expenses, opex),
        ap_percent=_bounded_ratio(balance_sheet.accounts_payable, opex),
        accrued_percent=_bounded_ratio(balance_sheet.accrued_expenses, opex),
        deferred_revenue_percent=_bounded_ratio(balance_sheet.deferred_revenue, revenue),
        other_revenue_ratio=max(ZERO, safe_divide(profit_loss.other_revenue, profit_loss.tuition_revenue)),
    )
    logger.debug("Derived working capital ratios: %s", ratios)
    return ratios


def _bounded_ratio(numerator: Decimal, denominator: Decimal) -> Decimal:
    return min(ONE, max(ZERO, safe_divide(numerator, denominator)))
