# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Engine input models.

The caller assembles a ``CalculationEngineInput`` from validated request
data and admin-maintained baselines; the engine reads nothing else.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Optional, Tuple

from pydantic import Field, model_validator

from ..capex import CapExConfig
from ..core.primitives import (
    CircularSolverConfig,
    DecimalBetween0And1,
    GrowthRate,
    Model,
    NonNegativeDecimal,
    NonNegativeInt,
    PositiveInt,
    SystemConfig,
    ValidationMixin,
    ValidationSettings,
    Year,
)
from ..operations import AnyStaffCostModel, CurriculumMix, EnrollmentPlan, OtherOpexConfig
from ..rent import AnyRentModel
from ..statements import BalanceSheet, ProfitLossStatement, WorkingCapitalRatios


class HistoricalBalances(Model):
    """Audited closing balances; equity is given as a single total."""

    cash: Decimal = Decimal("0")
    accounts_receivable: Decimal = Decimal("0")
    prepaid_expenses: Decimal = Decimal("0")
    gross_ppe: Decimal = Decimal("0")
    accumulated_depreciation: Decimal = Decimal("0")
    accounts_payable: Decimal = Decimal("0")
    accrued_expenses: Decimal = Decimal("0")
    deferred_revenue: Decimal = Decimal("0")
    debt: Decimal = Decimal("0")
    total_equity: Decimal = Decimal("0")


class HistoricalPeriod(Model):
    """A year of actuals. Used as given and never recomputed."""

    year: Year
    profit_loss: ProfitLossStatement
    balances: HistoricalBalances
    immutable: bool = True

    def to_balance_sheet(self) -> BalanceSheet:
        """Split total equity into carried-in equity and the year's net income."""
        net_income = self.profit_loss.net_income
        return BalanceSheet(
            cash=self.balances.cash,
            accounts_receivable=self.balances.accounts_receivable,
            prepaid_expenses=self.balances.prepaid_expenses,
            gross_ppe=self.balances.gross_ppe,
            accumulated_depreciation=self.balances.accumulated_depreciation,
            accounts_payable=self.balances.accounts_payable,
            accrued_expenses=self.balances.accrued_expenses,
            deferred_revenue=self.balances.deferred_revenue,
            debt=self.balances.debt,
            retained_earnings=self.balances.total_equity - net_income,
            net_income_current_year=net_income,
        )


class TransitionPeriod(Model):
    """
    A bridging year. Every override is optional; missing values come from
    the prior period or the transition baseline.
    """

    year: Year
    students: Optional[NonNegativeInt] = None
    avg_tuition: Optional[NonNegativeDecimal] = None
    revenue_growth_rate: Optional[GrowthRate] = None
    rent_growth_rate: Optional[GrowthRate] = None
    staff_cost_ratio: Optional[DecimalBetween0And1] = None
    other_opex: Optional[NonNegativeDecimal] = None


class TransitionYearDefaults(Model):
    year: Year
    students: Optional[NonNegativeInt] = None
    avg_tuition: Optional[NonNegativeDecimal] = None


class TransitionBaseline(Model):
    """Admin-maintained defaults for the transition window."""

    revenue_growth_rate: GrowthRate = Decimal("0")
    rent_growth_rate: GrowthRate = Decimal("0")
    year_defaults: Tuple[TransitionYearDefaults, ...] = ()

    def defaults_for(self, year: int) -> Optional[TransitionYearDefaults]:
        for defaults in self.year_defaults:
            if defaults.year == year:
                return defaults
        return None


class DynamicPeriodConfig(Model):
    """Parameters generating every contract year of the dynamic window."""

    start_year: Year
    contract_period_years: PositiveInt = Field(default=30, description="Length of the dynamic window, e.g. 25 or 30")
    enrollment: EnrollmentPlan = Field(default_factory=EnrollmentPlan)
    curriculum: CurriculumMix
    staff: AnyStaffCostModel
    other_opex: OtherOpexConfig
    rent_model: AnyRentModel
    capex: CapExConfig = Field(default_factory=CapExConfig)

    @property
    def end_year(self) -> int:
        return self.start_year + self.contract_period_years - 1


class CalculationEngineInput(Model, ValidationMixin):
    """Everything one projection run depends on."""

    system_config: SystemConfig = Field(default_factory=SystemConfig)
    solver_config: CircularSolverConfig = Field(default_factory=CircularSolverConfig)
    validation_settings: ValidationSettings = Field(default_factory=ValidationSettings)
    working_capital_ratios: Optional[WorkingCapitalRatios] = Field(
        default=None, description="Derived from the last historical year and locked when omitted"
    )
    transition_baseline: TransitionBaseline = Field(default_factory=TransitionBaseline)
    historical_periods: Tuple[HistoricalPeriod, ...] = ()
    transition_periods: Tuple[TransitionPeriod, ...] = ()
    dynamic: DynamicPeriodConfig

    @model_validator(mode="after")
    def _validate_window_years(self) -> "CalculationEngineInput":
        self.validate_consecutive_years([p.year for p in self.historical_periods], "Historical")
        self.validate_consecutive_years([p.year for p in self.transition_periods], "Transition")
        return self

    @property
    def expected_period_count(self) -> int:
        return len(self.historical_periods) + len(self.transition_periods) + self.dynamic.contract_period_years
