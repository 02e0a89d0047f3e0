# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from enum import Enum


class PeriodTypeEnum(str, Enum):
    """
    Projection window a period belongs to.

    - HISTORICAL: audited actuals, taken as given and never recomputed
    - TRANSITION: bridging years partially overridden by the operator
    - DYNAMIC: contract years generated entirely from configuration
    """

    HISTORICAL = "historical"
    TRANSITION = "transition"
    DYNAMIC = "dynamic"


class SequencerState(str, Enum):
    """States of the period sequencer, in the only order they may occur."""

    HISTORICAL = "historical"
    TRANSITION = "transition"
    DYNAMIC = "dynamic"
    DONE = "done"


class CapExSourceEnum(str, Enum):
    """Origin of a capital expenditure entry."""

    EXISTING = "existing"
    MANUAL = "manual"
    REINVESTMENT = "reinvestment"


class ScenarioVariableEnum(str, Enum):
    """Scenario dials that sensitivity analysis can sweep."""

    ENROLLMENT = "enrollment"
    TUITION_GROWTH = "tuition_growth"
    CPI = "cpi"
    RENT_ESCALATION = "rent_escalation"


class SensitivityMetricEnum(str, Enum):
    """Projection metrics tracked by sensitivity analysis."""

    TOTAL_RENT = "total_rent"
    TOTAL_EBITDA = "total_ebitda"
    PEAK_DEBT = "peak_debt"
    FINAL_CASH = "final_cash"
    NPV = "npv"
