# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""Enrollment ramp-up and per-track student counts."""

from __future__ import annotations

from decimal import Decimal
from typing import Dict, Tuple

from pydantic import Field

from ..core.primitives import DecimalBetween0And1, Model
from ..core.primitives.decimals import round_students
from .curriculum import CurriculumMix

DEFAULT_RAMP: Tuple[Decimal, ...] = (
    Decimal("0.2"),
    Decimal("0.4"),
    Decimal("0.6"),
    Decimal("0.8"),
    Decimal("1.0"),
)


class EnrollmentPlan(Model):
    """
    Occupancy fractions applied to curriculum capacity, one per dynamic year.

    Years past the end of the ramp hold the last fraction (steady state).
    """

    ramp: Tuple[DecimalBetween0And1, ...] = Field(default=DEFAULT_RAMP, min_length=1)

    def occupancy(self, period_index: int) -> Decimal:
        if period_index < 0:
            raise ValueError(f"period_index must be non-negative, got {period_index}")
        if period_index >= len(self.ramp):
            return self.ramp[-1]
        return self.ramp[period_index]

    def students_by_track(self, mix: CurriculumMix, period_index: int, year: int) -> Dict[str, int]:
        """Whole-student headcount per track; closed tracks enrol zero."""
        occupancy = self.occupancy(period_index)
        return {
            track.name: round_students(Decimal(track.capacity) * occupancy) if track.is_open(year) else 0
            for track in mix.tracks
        }

    def total_students(self, mix: CurriculumMix, period_index: int, year: int) -> int:
        return sum(self.students_by_track(mix, period_index, year).values())
