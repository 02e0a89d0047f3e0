# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Financial calculation functions.

Static, pure methods for the aggregate metrics reported with a projection.
Other modules delegate here so there is one definition of NPV, IRR and
payback.
"""

from __future__ import annotations

import math
from decimal import Decimal
from typing import Optional, Sequence

from pyxirr import irr

from .primitives.decimals import ONE, ZERO, safe_divide


class FinancialCalculations:
    """
    Pure mathematical functions over annual cash-flow sequences.

    Cash flows are indexed by year offset: the first element is year 0 and
    is not discounted.
    """

    @staticmethod
    def calculate_npv(cash_flows: Sequence[Decimal], discount_rate: Decimal) -> Decimal:
        """
        Net present value ``sum(cf_i / (1 + r) ** i)`` with ``i`` starting at 0.

        Computed in exact decimal arithmetic, so the result is reproducible
        across runs and platforms.

        Args:
            cash_flows: Annual cash flows, earliest first
            discount_rate: Annual discount rate as decimal (e.g. 0.05 for 5%)

        Returns:
            NPV as Decimal; zero for an empty sequence

        Example:
            ```python
            npv = FinancialCalculations.calculate_npv(
                [Decimal("-100"), Decimal("110")], Decimal("0.10")
            )
            assert npv == Decimal("0")
            ```
        """
        total = ZERO
        factor = ONE
        growth = ONE + discount_rate
        for cash_flow in cash_flows:
            total += cash_flow / factor
            factor *= growth
        return total

    @staticmethod
    def calculate_irr(cash_flows: Sequence[Decimal]) -> Optional[Decimal]:
        """
        Calculate Internal Rate of Return using PyXIRR.

        IRR is solved numerically in floating point, so the result is
        returned as a Decimal rounded to 10 places rather than as an exact
        value.

        Returns:
            IRR as decimal (e.g. 0.15 for 15%) or None if cannot calculate

        Edge Cases Handled:
            - Empty sequence -> None
            - All negative or all positive flows -> None
            - Solver failure or NaN -> None
        """
        if not cash_flows:
            return None

        has_negative = any(cf < 0 for cf in cash_flows)
        has_positive = any(cf > 0 for cf in cash_flows)
        if not (has_negative and has_positive):
            return None  # Need both outflows and inflows

        try:
            result = irr([float(cf) for cf in cash_flows])
        except Exception:
            # Return None for any calculation failures
            return None

        if result is None or math.isnan(result) or math.isinf(result):
            return None
        return Decimal(repr(result)).quantize(Decimal("1e-10"))

    @staticmethod
    def calculate_payback_period(cash_flows: Sequence[Decimal]) -> Optional[Decimal]:
        """
        Years until cumulative cash flow turns non-negative.

        The crossing year is interpolated linearly, so a payback halfway
        through year 3 returns ``2.5`` (year offsets start at 0).

        Returns:
            Fractional years or None if cumulative flow never recovers. Zero
            when the first flow is already non-negative.
        """
        cumulative = ZERO
        for index, cash_flow in enumerate(cash_flows):
            previous = cumulative
            cumulative += cash_flow
            if cumulative >= ZERO:
                if index == 0 or cash_flow == ZERO:
                    return Decimal(index)
                # previous < 0 here; fraction of this year needed to recover it
                return Decimal(index - 1) + (-previous / cash_flow)
        return None

    @staticmethod
    def annualization_factor(discount_rate: Decimal, years: int) -> Decimal:
        """
        Capital recovery factor ``r / (1 - (1 + r) ** -n)``.

        Multiplying a present value by this factor gives the level annual
        amount with the same present value over ``years`` years. With a zero
        rate the factor is ``1 / n``.
        """
        if years <= 0:
            return ZERO
        if discount_rate == ZERO:
            return ONE / Decimal(years)
        return safe_divide(discount_rate, ONE - (ONE + discount_rate) ** -years)
