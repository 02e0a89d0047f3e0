# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""Baseline-versus-scenario metric deltas."""

from __future__ import annotations

from decimal import Decimal
from typing import Callable, Dict, Optional

from ..core.primitives import Model
from ..core.primitives.decimals import ZERO, engine_context
from ..engine.api import run_projection
from ..engine.inputs import CalculationEngineInput
from ..engine.metrics import ProjectionMetrics
from ..engine.results import CalculationEngineOutput
from .modifier import ScenarioDials, apply_scenario

HUNDRED = Decimal("100")


class MetricChange(Model):
    baseline: Decimal
    scenario: Decimal
    absolute_change: Decimal
    percent_change: Optional[Decimal] = None


def calculate_metric_change(baseline: Decimal, scenario: Decimal) -> MetricChange:
    """
    Absolute and percent change from ``baseline`` to ``scenario``.

    Percent change is relative to ``|baseline|`` so a move from -10 to -5
    reads as +50%. It is None when the baseline is zero.
    """
    with engine_context():
        absolute = scenario - baseline
        percent = None if baseline == ZERO else absolute / abs(baseline) * HUNDRED
    return MetricChange(baseline=baseline, scenario=scenario, absolute_change=absolute, percent_change=percent)


def compare_metrics(baseline: ProjectionMetrics, scenario: ProjectionMetrics) -> Dict[str, MetricChange]:
    """Changes for every decimal metric present in both runs, keyed by metric name."""
    changes: Dict[str, MetricChange] = {}
    for name in ProjectionMetrics.model_fields:
        before = getattr(baseline, name)
        after = getattr(scenario, name)
        if isinstance(before, Decimal) and isinstance(after, Decimal):
            changes[name] = calculate_metric_change(before, after)
    return changes


class ScenarioResult(Model):
    dials: ScenarioDials
    baseline: CalculationEngineOutput
    scenario: CalculationEngineOutput
    changes: Dict[str, MetricChange]


def run_scenario(
    baseline_input: CalculationEngineInput,
    dials: ScenarioDials,
    runner: Callable[[CalculationEngineInput], CalculationEngineOutput] = run_projection,
) -> ScenarioResult:
    """
    Run the baseline and the dialled scenario and compare their metrics.

    ``runner`` may be ``ProjectionService.calculate`` so the baseline run is
    served from cache on repeated comparisons.
    """
    baseline = runner(baseline_input)
    scenario = runner(apply_scenario(baseline_input, dials))
    return ScenarioResult(
        dials=dials,
        baseline=baseline,
        scenario=scenario,
        changes=compare_metrics(baseline.metrics, scenario.metrics),
    )
