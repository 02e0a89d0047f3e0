# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""Period revenue from enrollment and curriculum mix."""

from __future__ import annotations

import logging
from decimal import Decimal
from typing import Dict

from ..core.primitives import Model
from ..core.primitives.decimals import ZERO
from .curriculum import CurriculumMix
from .enrollment import EnrollmentPlan

logger = logging.getLogger(__name__)


class RevenueBreakdown(Model):
    """Revenue for one dynamic year, split by source."""

    students_by_track: Dict[str, int]
    tuition_by_track: Dict[str, Decimal]
    tuition_revenue: Decimal
    other_revenue: Decimal

    @property
    def total_students(self) -> int:
        return sum(self.students_by_track.values())

    @property
    def total_revenue(self) -> Decimal:
        return self.tuition_revenue + self.other_revenue


def calculate_revenue(
    plan: EnrollmentPlan,
    mix: CurriculumMix,
    period_index: int,
    year: int,
    other_revenue_ratio: Decimal,
) -> RevenueBreakdown:
    """
    Revenue = sum(track students * track tuition) + other ratio * tuition.

    Args:
        plan: Occupancy ramp
        mix: Curriculum tracks with capacities and fees
        period_index: Zero-based year offset within the dynamic window
        year: Calendar year, used for track opening dates
        other_revenue_ratio: Other revenue as a share of tuition revenue
    """
    students = plan.students_by_track(mix, period_index, year)
    tuition_by_track: Dict[str, Decimal] = {}
    tuition_revenue = ZERO
    for track in mix.tracks:
        track_revenue = Decimal(students[track.name]) * track.tuition_for_period(period_index)
        tuition_by_track[track.name] = track_revenue
        tuition_revenue += track_revenue

    other_revenue = tuition_revenue * other_revenue_ratio
    logger.debug(
        "Year %s revenue: %s students, tuition %s, other %s",
        year,
        sum(students.values()),
        tuition_revenue,
        other_revenue,
    )
    return RevenueBreakdown(
        students_by_track=students,
        tuition_by_track=tuition_by_track,
        tuition_revenue=tuition_revenue,
        other_revenue=other_revenue,
    )
