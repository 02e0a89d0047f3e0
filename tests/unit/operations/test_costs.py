# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""Unit tests for staff cost models and other opex."""

from __future__ import annotations

from decimal import Decimal

import pytest
from pydantic import ValidationError

from leasecast.core import ConfigurationError
from leasecast.operations import (
    FixedVariableStaffCost,
    OtherOpexConfig,
    RatioStaffCost,
    RevenuePercentStaffCost,
    calculate_staff_costs,
    staff_cost_ratio,
)


@pytest.fixture
def ratio_staff() -> RatioStaffCost:
    return RatioStaffCost(
        students_per_teacher=15,
        students_per_non_teacher=40,
        avg_teacher_monthly_salary=Decimal("12000"),
        avg_non_teacher_monthly_salary=Decimal("6000"),
        cpi_rate=Decimal("0.02"),
        cpi_frequency=1,
    )


class TestRatioStaffCost:
    def test_headcount_rounds_up(self, ratio_staff):
        assert ratio_staff.headcount(1200) == (80, 30)
        assert ratio_staff.headcount(1201) == (81, 31)
        assert ratio_staff.headcount(0) == (0, 0)

    def test_annual_cost(self, ratio_staff):
        # 80 x 12,000 + 30 x 6,000 = 1,140,000 a month
        assert calculate_staff_costs(ratio_staff, 1200, Decimal("0"), 0) == Decimal("13680000")

    def test_cpi_escalation(self, ratio_staff):
        assert calculate_staff_costs(ratio_staff, 1200, Decimal("0"), 1) == Decimal("13953600")

    def test_zero_students_costs_nothing(self, ratio_staff):
        assert calculate_staff_costs(ratio_staff, 0, Decimal("0"), 3) == Decimal("0")

    def test_ratios_must_be_positive(self):
        with pytest.raises(ValidationError):
            RatioStaffCost(
                students_per_teacher=0,
                students_per_non_teacher=40,
                avg_teacher_monthly_salary=Decimal("1"),
                avg_non_teacher_monthly_salary=Decimal("1"),
            )


def test_revenue_percent_staff_cost():
    model = RevenuePercentStaffCost(percent=Decimal("0.35"))
    assert calculate_staff_costs(model, 500, Decimal("1000000"), 0) == Decimal("350000")


def test_fixed_variable_staff_cost():
    model = FixedVariableStaffCost(
        fixed_cost=Decimal("2000000"),
        variable_cost_per_student=Decimal("1500"),
        cpi_rate=Decimal("0.05"),
        cpi_frequency=2,
    )
    assert calculate_staff_costs(model, 100, Decimal("0"), 1) == Decimal("2150000")
    assert calculate_staff_costs(model, 0, Decimal("0"), 2) == Decimal("2100000")


def test_unknown_staff_model_is_configuration_error():
    with pytest.raises(ConfigurationError) as exc_info:
        calculate_staff_costs(object(), 10, Decimal("0"), 0)
    assert exc_info.value.code == ConfigurationError.UNKNOWN_STAFF_MODEL


def test_staff_cost_ratio():
    assert staff_cost_ratio(Decimal("40"), Decimal("100")) == Decimal("0.4")
    assert staff_cost_ratio(Decimal("40"), Decimal("0")) == Decimal("0")


class TestOtherOpex:
    def test_percent_of_revenue(self):
        config = OtherOpexConfig(percent_of_revenue=Decimal("0.12"))
        assert config.amount_for_period(Decimal("1000000"), 5) == Decimal("120000")

    def test_fixed_amount_escalates_with_cpi(self):
        config = OtherOpexConfig(fixed_amount=Decimal("500000"), cpi_rate=Decimal("0.03"), cpi_frequency=2)
        assert config.amount_for_period(Decimal("0"), 1) == Decimal("500000")
        assert config.amount_for_period(Decimal("0"), 2) == Decimal("515000")

    def test_exactly_one_basis(self):
        with pytest.raises(ValidationError):
            OtherOpexConfig()
        with pytest.raises(ValidationError):
            OtherOpexConfig(percent_of_revenue=Decimal("0.1"), fixed_amount=Decimal("1"))
