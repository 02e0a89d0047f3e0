# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Scenario dials applied to a baseline engine input.

Each dial is a percentage. Enrollment scales curriculum capacity relative
to the baseline (100 = unchanged); the growth dials replace the baseline's
annual rates outright. An omitted dial leaves its fields untouched. The
baseline is never modified: ``apply_scenario`` returns a deep copy.
"""

from __future__ import annotations

import logging
from decimal import Decimal
from typing import Optional

from pydantic import Field

from ..core.errors import ConfigurationError, raise_unknown_variant
from ..core.primitives import Model
from ..core.primitives.decimals import ZERO, engine_context, round_students
from ..engine.inputs import CalculationEngineInput, DynamicPeriodConfig
from ..operations import FixedVariableStaffCost, RatioStaffCost, RevenuePercentStaffCost, StaffCostModel
from ..rent import FixedEscalationRent, PartnerInvestmentRent, RentModel, RevenueShareRent

logger = logging.getLogger(__name__)

HUNDRED = Decimal("100")

ENROLLMENT_BOUNDS = (Decimal("50"), Decimal("150"))
CPI_BOUNDS = (Decimal("0"), Decimal("10"))
TUITION_GROWTH_BOUNDS = (Decimal("0"), Decimal("15"))
RENT_ESCALATION_BOUNDS = (Decimal("0"), Decimal("10"))


class ScenarioDials(Model):
    """Percentage dials; every dial is optional and independently bounded."""

    enrollment_percent: Optional[Decimal] = Field(
        default=None, ge=ENROLLMENT_BOUNDS[0], le=ENROLLMENT_BOUNDS[1], description="Capacity as % of baseline"
    )
    cpi_percent: Optional[Decimal] = Field(
        default=None, ge=CPI_BOUNDS[0], le=CPI_BOUNDS[1], description="Annual CPI escalation, %"
    )
    tuition_growth_percent: Optional[Decimal] = Field(
        default=None, ge=TUITION_GROWTH_BOUNDS[0], le=TUITION_GROWTH_BOUNDS[1], description="Annual tuition growth, %"
    )
    rent_escalation_percent: Optional[Decimal] = Field(
        default=None, ge=RENT_ESCALATION_BOUNDS[0], le=RENT_ESCALATION_BOUNDS[1], description="Rent growth rate, %"
    )


def apply_scenario(baseline: CalculationEngineInput, dials: ScenarioDials) -> CalculationEngineInput:
    """
    Derive a scenario input from ``baseline``.

    Returns:
        An independent copy; sharing nothing mutable with ``baseline``
    """
    scenario = baseline.model_copy(deep=True)
    dynamic = scenario.dynamic

    with engine_context():
        if dials.enrollment_percent is not None:
            dynamic = _scale_enrollment(dynamic, dials.enrollment_percent / HUNDRED)
        if dials.tuition_growth_percent is not None:
            dynamic = _replace_tuition_growth(dynamic, dials.tuition_growth_percent / HUNDRED)
        if dials.rent_escalation_percent is not None:
            rent_model = _replace_rent_growth(dynamic.rent_model, dials.rent_escalation_percent / HUNDRED)
            dynamic = dynamic.model_copy(update={"rent_model": rent_model})
        if dials.cpi_percent is not None:
            dynamic = _replace_cpi(dynamic, dials.cpi_percent / HUNDRED)

    logger.debug("Applied scenario dials %s", dials)
    return scenario.model_copy(update={"dynamic": dynamic})


def baseline_dials(engine_input: CalculationEngineInput) -> ScenarioDials:
    """
    Dials that reproduce ``engine_input`` unchanged.

    Growth dials read the first curriculum track, the staff model and the
    rent model; models without a rate report zero.
    """
    dynamic = engine_input.dynamic
    staff = dynamic.staff
    cpi = staff.cpi_rate if isinstance(staff, (RatioStaffCost, FixedVariableStaffCost)) else ZERO
    rent = dynamic.rent_model
    rent_growth = rent.growth_rate if isinstance(rent, (FixedEscalationRent, PartnerInvestmentRent)) else ZERO
    with engine_context():
        return ScenarioDials.model_construct(
            enrollment_percent=HUNDRED,
            cpi_percent=cpi * HUNDRED,
            tuition_growth_percent=dynamic.curriculum.tracks[0].growth_rate * HUNDRED,
            rent_escalation_percent=rent_growth * HUNDRED,
        )


def _scale_enrollment(dynamic: DynamicPeriodConfig, factor: Decimal) -> DynamicPeriodConfig:
    tracks = tuple(
        track.model_copy(update={"capacity": round_students(Decimal(track.capacity) * factor)})
        for track in dynamic.curriculum.tracks
    )
    return dynamic.model_copy(update={"curriculum": dynamic.curriculum.model_copy(update={"tracks": tracks})})


def _replace_tuition_growth(dynamic: DynamicPeriodConfig, rate: Decimal) -> DynamicPeriodConfig:
    tracks = tuple(track.model_copy(update={"growth_rate": rate}) for track in dynamic.curriculum.tracks)
    return dynamic.model_copy(update={"curriculum": dynamic.curriculum.model_copy(update={"tracks": tracks})})


def _replace_rent_growth(rent_model: RentModel, rate: Decimal) -> RentModel:
    if isinstance(rent_model, FixedEscalationRent):
        return rent_model.model_copy(update={"growth_rate": rate})
    elif isinstance(rent_model, PartnerInvestmentRent):
        return rent_model.model_copy(update={"growth_rate": rate})
    elif isinstance(rent_model, RevenueShareRent):
        # Revenue share has no escalation; rent follows revenue
        return rent_model
    else:
        raise_unknown_variant(ConfigurationError.UNKNOWN_RENT_MODEL, rent_model)


def _replace_staff_cpi(staff: StaffCostModel, rate: Decimal) -> StaffCostModel:
    if isinstance(staff, RatioStaffCost):
        return staff.model_copy(update={"cpi_rate": rate})
    elif isinstance(staff, FixedVariableStaffCost):
        return staff.model_copy(update={"cpi_rate": rate})
    elif isinstance(staff, RevenuePercentStaffCost):
        return staff
    else:
        raise_unknown_variant(ConfigurationError.UNKNOWN_STAFF_MODEL, staff)


def _replace_cpi(dynamic: DynamicPeriodConfig, rate: Decimal) -> DynamicPeriodConfig:
    return dynamic.model_copy(
        update={
            "staff": _replace_staff_cpi(dynamic.staff, rate),
            "other_opex": dynamic.other_opex.model_copy(update={"cpi_rate": rate}),
        }
    )
