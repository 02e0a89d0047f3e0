# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""Dynamic window: contract years generated entirely from configuration."""

from __future__ import annotations

import logging
from typing import Optional, Tuple

from ...capex import DepreciationSchedule, scheduled_additions
from ...core.primitives import PeriodTypeEnum
from ...operations import calculate_revenue, calculate_staff_costs
from ...rent import resolve_rent
from ...statements import BalanceSheet, ProfitLossStatement, WorkingCapitalRatios
from ..inputs import DynamicPeriodConfig
from ..period import Period
from ..solver import CircularSolver
from .assembly import settle_period

logger = logging.getLogger(__name__)


def dynamic_operations(
    config: DynamicPeriodConfig,
    ratios: WorkingCapitalRatios,
    period_index: int,
) -> Tuple[ProfitLossStatement, int]:
    """
    Operating P&L (before depreciation) and total students for a contract year.

    Order matters: revenue first, since revenue-share rent, revenue-based
    staff cost and percent-of-revenue opex all read it.
    """
    year = config.start_year + period_index
    other_ratio = config.curriculum.other_revenue_ratio
    if other_ratio is None:
        other_ratio = ratios.other_revenue_ratio

    revenue = calculate_revenue(config.enrollment, config.curriculum, period_index, year, other_ratio)
    total_revenue = revenue.total_revenue
    students = revenue.total_students

    rent = resolve_rent(config.rent_model, period_index, total_revenue)
    staff = calculate_staff_costs(config.staff, students, total_revenue, period_index)
    other_opex = config.other_opex.amount_for_period(total_revenue, period_index)

    operating = ProfitLossStatement(
        tuition_revenue=revenue.tuition_revenue,
        other_revenue=revenue.other_revenue,
        rent_expense=rent,
        staff_costs=staff,
        other_opex=other_opex,
    )
    return operating, students


def build_dynamic_period(
    config: DynamicPeriodConfig,
    ratios: WorkingCapitalRatios,
    period_index: int,
    prior: Optional[Period],
    schedule: DepreciationSchedule,
    solver: CircularSolver,
) -> Tuple[Period, DepreciationSchedule]:
    """Settle one contract year and return it with the advanced depreciation schedule."""
    year = config.start_year + period_index
    operating, students = dynamic_operations(config, ratios, period_index)

    additions = scheduled_additions(
        config.capex, year, operating.total_revenue, reinvestment_start_year=config.start_year
    )
    schedule, capex_year = schedule.advance(year, additions)
    operating = operating.model_copy(update={"depreciation": capex_year.depreciation})

    period = settle_period(
        year=year,
        period_type=PeriodTypeEnum.DYNAMIC,
        operating=operating,
        capex_year=capex_year,
        ratios=ratios,
        opening=prior.balance_sheet if prior is not None else BalanceSheet(),
        solver=solver,
        students=students,
    )
    logger.debug(
        "Dynamic year %s: revenue %s, rent %s, net income %s",
        year,
        operating.total_revenue,
        operating.rent_expense,
        period.profit_loss.net_income,
    )
    return period, schedule
