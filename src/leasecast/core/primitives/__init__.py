# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from .decimals import (
    ENGINE_CONTEXT,
    ONE,
    ZERO,
    banded_growth,
    compound_factor,
    engine_context,
    escalation_periods,
    is_within_tolerance,
    normalize,
    quantize_money,
    safe_divide,
    sum_decimals,
)
from .enums import (
    CapExSourceEnum,
    PeriodTypeEnum,
    ScenarioVariableEnum,
    SensitivityMetricEnum,
    SequencerState,
)
from .model import Model
from .settings import CircularSolverConfig, SystemConfig, ValidationSettings
from .types import (
    DecimalBetween0And1,
    Frequency,
    GrowthRate,
    NonNegativeDecimal,
    NonNegativeInt,
    PositiveDecimal,
    PositiveInt,
    RelaxationFactor,
    Year,
)
from .validation import ValidationMixin

__all__ = [
    # Base model and validation
    "Model",
    "ValidationMixin",
    # Settings
    "SystemConfig",
    "CircularSolverConfig",
    "ValidationSettings",
    # Enums
    "PeriodTypeEnum",
    "SequencerState",
    "CapExSourceEnum",
    "ScenarioVariableEnum",
    "SensitivityMetricEnum",
    # Constrained types
    "NonNegativeDecimal",
    "PositiveDecimal",
    "DecimalBetween0And1",
    "GrowthRate",
    "RelaxationFactor",
    "Frequency",
    "NonNegativeInt",
    "PositiveInt",
    "Year",
    # Decimal arithmetic
    "ENGINE_CONTEXT",
    "ZERO",
    "ONE",
    "engine_context",
    "safe_divide",
    "escalation_periods",
    "compound_factor",
    "banded_growth",
    "sum_decimals",
    "is_within_tolerance",
    "quantize_money",
    "normalize",
]
