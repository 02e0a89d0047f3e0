# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
One-at-a-time sensitivity analysis.

A variable is swept across ``100 - range .. 100 + range`` percent of its
baseline value while every other dial stays at baseline. Enrollment is a
percentage of capacity already; growth variables scale the baseline rate.
Multi-variable runs are ordered by total impact, widest swing first, which
is the order a tornado chart draws them in.
"""

from __future__ import annotations

import logging
from decimal import Decimal
from typing import Callable, List, Optional, Sequence, Tuple

from ..core.primitives import Model, ScenarioVariableEnum, SensitivityMetricEnum
from ..core.primitives.decimals import engine_context
from ..engine.api import run_projection
from ..engine.inputs import CalculationEngineInput
from ..engine.results import CalculationEngineOutput
from .modifier import (
    CPI_BOUNDS,
    ENROLLMENT_BOUNDS,
    HUNDRED,
    RENT_ESCALATION_BOUNDS,
    TUITION_GROWTH_BOUNDS,
    ScenarioDials,
    apply_scenario,
    baseline_dials,
)

logger = logging.getLogger(__name__)


class SensitivityPoint(Model):
    variable_value: Decimal
    variable_percent: Decimal
    metric_value: Decimal


class SensitivityImpact(Model):
    positive_deviation: Decimal
    negative_deviation: Decimal
    total_impact: Decimal


class SensitivityResult(Model):
    variable: ScenarioVariableEnum
    metric: SensitivityMetricEnum
    baseline_value: Decimal
    points: Tuple[SensitivityPoint, ...]
    impact: SensitivityImpact


def generate_range(center: Decimal, spread: Decimal, points: int) -> List[Decimal]:
    """
    ``points`` evenly spaced values from ``center - spread`` to ``center + spread``.

    Example:
        >>> generate_range(Decimal(100), Decimal(20), 5)
        [Decimal('80'), Decimal('90'), Decimal('100'), Decimal('110'), Decimal('120')]
    """
    if points < 2:
        raise ValueError(f"points must be at least 2, got {points}")
    with engine_context():
        low = center - spread
        step = (2 * spread) / Decimal(points - 1)
        return [low + step * i for i in range(points)]


def extract_metric(output: CalculationEngineOutput, metric: SensitivityMetricEnum) -> Decimal:
    return getattr(output.metrics, metric.value)


def _clamp(value: Decimal, bounds: Tuple[Decimal, Decimal]) -> Decimal:
    return min(bounds[1], max(bounds[0], value))


def dials_for(
    variable: ScenarioVariableEnum, value: Decimal, baseline: ScenarioDials
) -> ScenarioDials:
    """
    Dials moving ``variable`` to ``value`` percent of its baseline.

    Values outside a dial's allowed range are clamped to the range.
    """
    if variable == ScenarioVariableEnum.ENROLLMENT:
        return ScenarioDials(enrollment_percent=_clamp(value, ENROLLMENT_BOUNDS))
    with engine_context():
        scale = value / HUNDRED
        if variable == ScenarioVariableEnum.TUITION_GROWTH:
            return ScenarioDials(
                tuition_growth_percent=_clamp(baseline.tuition_growth_percent * scale, TUITION_GROWTH_BOUNDS)
            )
        if variable == ScenarioVariableEnum.CPI:
            return ScenarioDials(cpi_percent=_clamp(baseline.cpi_percent * scale, CPI_BOUNDS))
        if variable == ScenarioVariableEnum.RENT_ESCALATION:
            return ScenarioDials(
                rent_escalation_percent=_clamp(baseline.rent_escalation_percent * scale, RENT_ESCALATION_BOUNDS)
            )
    raise ValueError(f"Unsupported sensitivity variable: {variable}")


class SensitivityAnalyzer:
    """
    Sweeps scenario dials and records one metric per run.

    Example:
        ```python
        analyzer = SensitivityAnalyzer()
        result = analyzer.analyze(
            engine_input, ScenarioVariableEnum.ENROLLMENT, SensitivityMetricEnum.NPV
        )
        ```
    """

    def __init__(self, runner: Callable[[CalculationEngineInput], CalculationEngineOutput] = run_projection):
        self.runner = runner

    def analyze(
        self,
        baseline_input: CalculationEngineInput,
        variable: ScenarioVariableEnum,
        metric: SensitivityMetricEnum,
        range_percent: Decimal = Decimal("20"),
        points: int = 5,
        baseline_output: Optional[CalculationEngineOutput] = None,
    ) -> SensitivityResult:
        if baseline_output is None:
            baseline_output = self.runner(baseline_input)
        baseline_value = extract_metric(baseline_output, metric)
        base_dials = baseline_dials(baseline_input)

        sweep: List[SensitivityPoint] = []
        for value in generate_range(HUNDRED, Decimal(range_percent), points):
            scenario_input = apply_scenario(baseline_input, dials_for(variable, value, base_dials))
            metric_value = extract_metric(self.runner(scenario_input), metric)
            sweep.append(
                SensitivityPoint(variable_value=value, variable_percent=value - HUNDRED, metric_value=metric_value)
            )
            logger.debug("%s=%s%% -> %s=%s", variable.value, value, metric.value, metric_value)

        # Impact uses the first point on each side of the baseline
        positive = next((p.metric_value for p in sweep if p.variable_percent > 0), baseline_value)
        negative = next((p.metric_value for p in sweep if p.variable_percent < 0), baseline_value)

        return SensitivityResult(
            variable=variable,
            metric=metric,
            baseline_value=baseline_value,
            points=tuple(sweep),
            impact=SensitivityImpact(
                positive_deviation=positive,
                negative_deviation=negative,
                total_impact=abs(positive - negative),
            ),
        )

    def analyze_many(
        self,
        baseline_input: CalculationEngineInput,
        variables: Sequence[ScenarioVariableEnum],
        metric: SensitivityMetricEnum,
        range_percent: Decimal = Decimal("20"),
    ) -> List[SensitivityResult]:
        """Five-point sweeps of each variable, widest total impact first."""
        baseline_output = self.runner(baseline_input)
        results = [
            self.analyze(baseline_input, variable, metric, range_percent, 5, baseline_output)
            for variable in variables
        ]
        return sorted(results, key=lambda result: result.impact.total_impact, reverse=True)
