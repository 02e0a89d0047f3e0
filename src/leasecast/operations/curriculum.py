# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""Curriculum tracks and tuition escalation."""

from __future__ import annotations

from decimal import Decimal
from typing import Optional, Tuple

from pydantic import Field, model_validator

from ..core.primitives import (
    DecimalBetween0And1,
    Frequency,
    GrowthRate,
    Model,
    NonNegativeDecimal,
    NonNegativeInt,
    Year,
)
from ..core.primitives.decimals import banded_growth


class CurriculumTrack(Model):
    """
    One curriculum offered at the school, with its own capacity and fees.

    Tuition escalates in bands of ``growth_frequency`` years, mirroring rent
    escalation: ``base_tuition * (1 + growth_rate) ** floor(i / N)``. A
    track with ``start_year`` set enrols nobody before that year.
    """

    name: str
    capacity: NonNegativeInt = Field(..., description="Maximum students enrolled in this track")
    base_tuition: NonNegativeDecimal = Field(..., description="Annual fee per student in the first dynamic year")
    growth_rate: GrowthRate = Decimal("0")
    growth_frequency: Frequency = Field(default=1, description="Years between fee increases")
    start_year: Optional[Year] = None

    def is_open(self, year: int) -> bool:
        return self.start_year is None or year >= self.start_year

    def tuition_for_period(self, period_index: int) -> Decimal:
        """Per-student fee for the given dynamic year offset."""
        return banded_growth(self.base_tuition, self.growth_rate, period_index, self.growth_frequency)


class CurriculumMix(Model):
    """Tracks offered by the school, plus an optional other-revenue override."""

    tracks: Tuple[CurriculumTrack, ...] = Field(..., min_length=1)
    other_revenue_ratio: Optional[DecimalBetween0And1] = Field(
        default=None,
        description="Other revenue as a share of tuition; working-capital ratios supply it when omitted",
    )

    @model_validator(mode="after")
    def _validate_unique_names(self) -> "CurriculumMix":
        names = [track.name for track in self.tracks]
        if len(names) != len(set(names)):
            raise ValueError(f"Curriculum track names must be unique, got {names}")
        return self
