# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from .curriculum import CurriculumMix, CurriculumTrack
from .enrollment import DEFAULT_RAMP, EnrollmentPlan
from .opex import OtherOpexConfig
from .revenue import RevenueBreakdown, calculate_revenue
from .staff import (
    AnyStaffCostModel,
    FixedVariableStaffCost,
    RatioStaffCost,
    RevenuePercentStaffCost,
    StaffCostModel,
    calculate_staff_costs,
    staff_cost_ratio,
)

__all__ = [
    # Enrollment and curriculum
    "EnrollmentPlan",
    "DEFAULT_RAMP",
    "CurriculumTrack",
    "CurriculumMix",
    # Revenue
    "RevenueBreakdown",
    "calculate_revenue",
    # Staff costs
    "RatioStaffCost",
    "RevenuePercentStaffCost",
    "FixedVariableStaffCost",
    "AnyStaffCostModel",
    "StaffCostModel",
    "calculate_staff_costs",
    "staff_cost_ratio",
    # Other opex
    "OtherOpexConfig",
]
