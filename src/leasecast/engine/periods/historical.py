# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""Historical window: actuals taken as given."""

from __future__ import annotations

import logging
from typing import Optional

from ...core.primitives import PeriodTypeEnum
from ...statements import BalanceSheet, build_cash_flow
from ..inputs import HistoricalPeriod
from ..period import Period

logger = logging.getLogger(__name__)


def build_historical_period(actuals: HistoricalPeriod, prior: Optional[Period]) -> Period:
    """
    Wrap a year of actuals as a ``Period``.

    The cash flow is derived from balance sheet movements against the prior
    year (zero balances for the first year). Capex is the change in gross
    PP&E. Financing picks up whatever the actuals do not explain, so the
    historical cash flow always reconciles to the reported cash.
    """
    closing = actuals.to_balance_sheet()
    opening = prior.balance_sheet if prior is not None else BalanceSheet()
    profit_loss = actuals.profit_loss

    capital_expenditure = closing.gross_ppe - opening.gross_ppe
    provisional = build_cash_flow(
        opening=opening,
        closing=closing,
        net_income=profit_loss.net_income,
        depreciation=profit_loss.depreciation,
        capital_expenditure=capital_expenditure,
    )
    other_financing = closing.cash - provisional.ending_cash
    cash_flow = provisional.model_copy(update={"other_financing": other_financing})

    if closing.balance_difference != 0:
        logger.warning(
            "Historical balance sheet for %s does not balance (difference %s)",
            actuals.year,
            closing.balance_difference,
        )

    return Period(
        year=actuals.year,
        period_type=PeriodTypeEnum.HISTORICAL,
        profit_loss=profit_loss,
        balance_sheet=closing,
        cash_flow=cash_flow,
        immutable=actuals.immutable,
    )
