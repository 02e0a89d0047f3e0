# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from .comparison import MetricChange, ScenarioResult, calculate_metric_change, compare_metrics, run_scenario
from .modifier import ScenarioDials, apply_scenario, baseline_dials
from .sensitivity import (
    SensitivityAnalyzer,
    SensitivityImpact,
    SensitivityPoint,
    SensitivityResult,
    dials_for,
    extract_metric,
    generate_range,
)

__all__ = [
    # Dials
    "ScenarioDials",
    "apply_scenario",
    "baseline_dials",
    # Comparison
    "MetricChange",
    "ScenarioResult",
    "calculate_metric_change",
    "compare_metrics",
    "run_scenario",
    # Sensitivity
    "SensitivityAnalyzer",
    "SensitivityResult",
    "SensitivityPoint",
    "SensitivityImpact",
    "generate_range",
    "dials_for",
    "extract_metric",
]
