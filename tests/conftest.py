# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Test utilities and fixtures for Leasecast testing.

The example scenario used across the suite is a school operator with two
audited years (2023-2024), a three-year transition (2025-2027) and a
30-year contract starting in 2028. Historical balance sheets balance
exactly, so every projected period inherits a balanced opening position.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Optional

import pytest

from leasecast.engine import (
    CalculationEngineInput,
    DynamicPeriodConfig,
    HistoricalBalances,
    HistoricalPeriod,
    TransitionBaseline,
    TransitionPeriod,
)
from leasecast.operations import (
    CurriculumMix,
    CurriculumTrack,
    EnrollmentPlan,
    OtherOpexConfig,
    RatioStaffCost,
)
from leasecast.rent import AnyRentModel, FixedEscalationRent
from leasecast.statements import ProfitLossStatement


# Historical Utilities
def historical_2023() -> HistoricalPeriod:
    """45M revenue year; assets 31.15M = liabilities 21.04M + equity 10.11M."""
    return HistoricalPeriod(
        year=2023,
        profit_loss=ProfitLossStatement(
            tuition_revenue=Decimal("42000000"),
            other_revenue=Decimal("3000000"),
            rent_expense=Decimal("9000000"),
            staff_costs=Decimal("18000000"),
            other_opex=Decimal("6000000"),
            depreciation=Decimal("2000000"),
            interest_expense=Decimal("500000"),
            zakat_expense=Decimal("237500"),
        ),
        balances=HistoricalBalances(
            cash=Decimal("5000000"),
            accounts_receivable=Decimal("4500000"),
            prepaid_expenses=Decimal("1650000"),
            gross_ppe=Decimal("30000000"),
            accumulated_depreciation=Decimal("10000000"),
            accounts_payable=Decimal("2640000"),
            accrued_expenses=Decimal("1650000"),
            deferred_revenue=Decimal("6750000"),
            debt=Decimal("10000000"),
            total_equity=Decimal("10110000"),
        ),
    )


def historical_2024() -> HistoricalPeriod:
    """48M revenue year; assets 34.5M = liabilities 20.7M + equity 13.8M."""
    return HistoricalPeriod(
        year=2024,
        profit_loss=ProfitLossStatement(
            tuition_revenue=Decimal("44800000"),
            other_revenue=Decimal("3200000"),
            rent_expense=Decimal("9270000"),
            staff_costs=Decimal("19200000"),
            other_opex=Decimal("6200000"),
            depreciation=Decimal("2000000"),
            interest_expense=Decimal("450000"),
            interest_income=Decimal("50000"),
            zakat_expense=Decimal("300000"),
        ),
        balances=HistoricalBalances(
            cash=Decimal("8000000"),
            accounts_receivable=Decimal("4800000"),
            prepaid_expenses=Decimal("1700000"),
            gross_ppe=Decimal("32000000"),
            accumulated_depreciation=Decimal("12000000"),
            accounts_payable=Decimal("2800000"),
            accrued_expenses=Decimal("1700000"),
            deferred_revenue=Decimal("7200000"),
            debt=Decimal("9000000"),
            total_equity=Decimal("13800000"),
        ),
    )


# Dynamic Utilities
def create_curriculum(capacity: int = 1500, base_tuition: str = "40000") -> CurriculumMix:
    return CurriculumMix(
        tracks=(
            CurriculumTrack(
                name="National",
                capacity=capacity,
                base_tuition=Decimal(base_tuition),
                growth_rate=Decimal("0.03"),
                growth_frequency=2,
            ),
        )
    )


def create_ratio_staff() -> RatioStaffCost:
    return RatioStaffCost(
        students_per_teacher=15,
        students_per_non_teacher=40,
        avg_teacher_monthly_salary=Decimal("12000"),
        avg_non_teacher_monthly_salary=Decimal("6000"),
        cpi_rate=Decimal("0.02"),
        cpi_frequency=1,
    )


def create_dynamic_config(
    rent_model: Optional[AnyRentModel] = None,
    start_year: int = 2028,
    contract_period_years: int = 30,
    enrollment: Optional[EnrollmentPlan] = None,
    curriculum: Optional[CurriculumMix] = None,
) -> DynamicPeriodConfig:
    """
    Create a dynamic window configuration for testing.

    Defaults to a 10M fixed rent escalating 3% a year, ramping from 80% to
    full occupancy of 1,500 seats.
    """
    return DynamicPeriodConfig(
        start_year=start_year,
        contract_period_years=contract_period_years,
        enrollment=enrollment or EnrollmentPlan(ramp=(Decimal("0.8"), Decimal("0.9"), Decimal("1.0"))),
        curriculum=curriculum or create_curriculum(),
        staff=create_ratio_staff(),
        other_opex=OtherOpexConfig(percent_of_revenue=Decimal("0.12")),
        rent_model=rent_model
        or FixedEscalationRent(base_rent=Decimal("10000000"), growth_rate=Decimal("0.03"), frequency=1),
    )


def create_engine_input(
    rent_model: Optional[AnyRentModel] = None,
    contract_period_years: int = 30,
    with_transition: bool = True,
    **dynamic_overrides,
) -> CalculationEngineInput:
    """
    Build the example scenario.

    Args:
        rent_model: Rent structure for the contract; fixed escalation by default
        contract_period_years: Length of the dynamic window
        with_transition: Include the 2025-2027 transition years
        **dynamic_overrides: Passed through to ``create_dynamic_config``
    """
    transition = ()
    start_year = 2025
    if with_transition:
        transition = (
            TransitionPeriod(year=2025, revenue_growth_rate=Decimal("0.10")),
            TransitionPeriod(year=2026, revenue_growth_rate=Decimal("0.15")),
            TransitionPeriod(year=2027, revenue_growth_rate=Decimal("0.12"), rent_growth_rate=Decimal("0.05")),
        )
        start_year = 2028
    return CalculationEngineInput(
        historical_periods=(historical_2023(), historical_2024()),
        transition_baseline=TransitionBaseline(
            revenue_growth_rate=Decimal("0.10"), rent_growth_rate=Decimal("0.03")
        ),
        transition_periods=transition,
        dynamic=create_dynamic_config(
            rent_model=rent_model,
            start_year=start_year,
            contract_period_years=contract_period_years,
            **dynamic_overrides,
        ),
    )


@pytest.fixture
def engine_input() -> CalculationEngineInput:
    """Full 35-period example scenario."""
    return create_engine_input()


@pytest.fixture
def short_engine_input() -> CalculationEngineInput:
    """Historical years plus five contract years; fast enough for repeated runs."""
    return create_engine_input(contract_period_years=5, with_transition=False)


@pytest.fixture
def engine_input_factory():
    """Factory fixture returning ``create_engine_input``."""
    return create_engine_input


@pytest.fixture
def dynamic_config_factory():
    return create_dynamic_config
