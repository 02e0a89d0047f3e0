# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Transition window: bridging years between actuals and the contract.

Each year starts from the prior period and applies whatever overrides the
operator supplied, falling back to the admin baseline:

- tuition: students x average tuition when both are known, otherwise the
  prior year's tuition grown by the revenue growth rate
- other revenue: tuition x other-revenue ratio
- rent: prior rent grown by the rent growth rate
- staff: revenue x (override ratio, or the prior year's staff/revenue)
- other opex: override, or the prior year's amount
"""

from __future__ import annotations

from decimal import Decimal
from typing import Optional, Tuple

from ...capex import DepreciationSchedule, scheduled_additions
from ...core.primitives import PeriodTypeEnum
from ...core.primitives.decimals import ONE
from ...operations import staff_cost_ratio
from ...statements import BalanceSheet, ProfitLossStatement, WorkingCapitalRatios
from ..inputs import CalculationEngineInput, TransitionPeriod
from ..period import Period
from ..solver import CircularSolver
from .assembly import settle_period


def prefill_transition_operations(
    override: TransitionPeriod,
    engine_input: CalculationEngineInput,
    ratios: WorkingCapitalRatios,
    prior: Optional[Period],
) -> Tuple[ProfitLossStatement, Optional[int]]:
    """
    Operating P&L (revenue and opex, no depreciation yet) for a transition year.

    Returns:
        The operating P&L and the student count when one is known
    """
    baseline = engine_input.transition_baseline
    defaults = baseline.defaults_for(override.year)
    prior_pl = prior.profit_loss if prior is not None else ProfitLossStatement()

    students = override.students
    if students is None and defaults is not None:
        students = defaults.students
    avg_tuition = override.avg_tuition
    if avg_tuition is None and defaults is not None:
        avg_tuition = defaults.avg_tuition

    if students is not None and avg_tuition is not None:
        tuition = Decimal(students) * avg_tuition
    else:
        growth = override.revenue_growth_rate
        if growth is None:
            growth = baseline.revenue_growth_rate
        tuition = prior_pl.tuition_revenue * (ONE + growth)

    other_revenue = tuition * ratios.other_revenue_ratio
    revenue = tuition + other_revenue

    rent_growth = override.rent_growth_rate
    if rent_growth is None:
        rent_growth = baseline.rent_growth_rate
    rent = prior_pl.rent_expense * (ONE + rent_growth)

    staff_ratio = override.staff_cost_ratio
    if staff_ratio is None:
        staff_ratio = staff_cost_ratio(prior_pl.staff_costs, prior_pl.total_revenue)
    staff = revenue * staff_ratio

    other_opex = override.other_opex if override.other_opex is not None else prior_pl.other_opex

    operating = ProfitLossStatement(
        tuition_revenue=tuition,
        other_revenue=other_revenue,
        rent_expense=rent,
        staff_costs=staff,
        other_opex=other_opex,
    )
    return operating, students


def build_transition_period(
    override: TransitionPeriod,
    engine_input: CalculationEngineInput,
    ratios: WorkingCapitalRatios,
    prior: Optional[Period],
    schedule: DepreciationSchedule,
    solver: CircularSolver,
) -> Tuple[Period, DepreciationSchedule]:
    """Settle one transition year and return it with the advanced depreciation schedule."""
    operating, students = prefill_transition_operations(override, engine_input, ratios, prior)

    # Manual capex only; reinvestment belongs to the contract years
    additions = scheduled_additions(engine_input.dynamic.capex, override.year, operating.total_revenue)
    schedule, capex_year = schedule.advance(override.year, additions)
    operating = operating.model_copy(update={"depreciation": capex_year.depreciation})

    opening = prior.balance_sheet if prior is not None else BalanceSheet()
    period = settle_period(
        year=override.year,
        period_type=PeriodTypeEnum.TRANSITION,
        operating=operating,
        capex_year=capex_year,
        ratios=ratios,
        opening=opening,
        solver=solver,
        students=students,
    )
    return period, schedule