# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""Staff cost models for the dynamic window"""

from __future__ import annotations

import math
from decimal import Decimal
from typing import Literal, Union

from pydantic import Field
from typing_extensions import Annotated

from ..core.errors import ConfigurationError, raise_unknown_variant
from ..core.primitives import (
    DecimalBetween0And1,
    Frequency,
    GrowthRate,
    Model,
    NonNegativeDecimal,
    PositiveInt,
)
from ..core.primitives.decimals import ZERO, banded_growth

MONTHS_PER_YEAR = Decimal("12")


class RatioStaffCost(Model):
    """
    Headcount driven by student-to-staff ratios.

    Teachers and non-teaching staff are rounded up to whole people, paid a
    monthly salary, and escalated by CPI once every ``cpi_frequency`` years.
    """

    kind: Literal["ratio"] = "ratio"
    students_per_teacher: PositiveInt
    students_per_non_teacher: PositiveInt
    avg_teacher_monthly_salary: NonNegativeDecimal
    avg_non_teacher_monthly_salary: NonNegativeDecimal
    cpi_rate: GrowthRate = Decimal("0")
    cpi_frequency: Frequency = 1

    def headcount(self, students: int) -> tuple[int, int]:
        """(teachers, non-teachers) needed for ``students``."""
        teachers = math.ceil(students / self.students_per_teacher) if students > 0 else 0
        non_teachers = math.ceil(students / self.students_per_non_teacher) if students > 0 else 0
        return teachers, non_teachers


class RevenuePercentStaffCost(Model):
    """Staff cost as a flat share of revenue."""

    kind: Literal["revenue_percent"] = "revenue_percent"
    percent: DecimalBetween0And1 = Field(..., description="Staff cost / revenue (0.35 for 35%)")


class FixedVariableStaffCost(Model):
    """A CPI-escalated fixed payroll plus a cost per enrolled student."""

    kind: Literal["fixed_variable"] = "fixed_variable"
    fixed_cost: NonNegativeDecimal
    variable_cost_per_student: NonNegativeDecimal = Decimal("0")
    cpi_rate: GrowthRate = Decimal("0")
    cpi_frequency: Frequency = 1


# The discriminated union for any staff cost model
AnyStaffCostModel = Annotated[
    Union[RatioStaffCost, RevenuePercentStaffCost, FixedVariableStaffCost],
    Field(discriminator="kind"),
]

StaffCostModel = Union[RatioStaffCost, RevenuePercentStaffCost, FixedVariableStaffCost]


def calculate_staff_costs(
    model: StaffCostModel,
    students: int,
    revenue: Decimal,
    period_index: int,
) -> Decimal:
    """
    Annual staff cost for one dynamic year.

    Zero students yields zero cost for the ratio model and only the fixed
    payroll for the fixed/variable model; no branch divides by enrollment.
    """
    if isinstance(model, RatioStaffCost):
        teachers, non_teachers = model.headcount(students)
        monthly = Decimal(teachers) * model.avg_teacher_monthly_salary + Decimal(
            non_teachers
        ) * model.avg_non_teacher_monthly_salary
        return banded_growth(monthly * MONTHS_PER_YEAR, model.cpi_rate, period_index, model.cpi_frequency)
    elif isinstance(model, RevenuePercentStaffCost):
        return revenue * model.percent
    elif isinstance(model, FixedVariableStaffCost):
        fixed = banded_growth(model.fixed_cost, model.cpi_rate, period_index, model.cpi_frequency)
        return fixed + Decimal(students) * model.variable_cost_per_student
    else:
        raise_unknown_variant(ConfigurationError.UNKNOWN_STAFF_MODEL, model)


def staff_cost_ratio(staff_costs: Decimal, revenue: Decimal) -> Decimal:
    """Staff cost as a share of revenue; zero for zero revenue."""
    if revenue == ZERO:
        return ZERO
    return staff_costs / revenue
