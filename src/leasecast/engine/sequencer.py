# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Period sequencer.

Runs the three windows in their only valid order,
HISTORICAL -> TRANSITION -> DYNAMIC -> DONE, threading each period's
closing balance sheet into the next. Periods are appended to a single list
and the prior period is always ``periods[-1]``; a finalized period is never
revisited.
"""

from __future__ import annotations

import logging
from typing import List, Optional, Tuple

from ..capex import DepreciationSchedule
from ..core.errors import ConfigurationError
from ..core.primitives import SequencerState
from ..statements import WorkingCapitalRatios, derive_working_capital_ratios
from .inputs import CalculationEngineInput
from .period import Period
from .periods import build_dynamic_period, build_historical_period, build_transition_period
from .solver import CircularSolver

logger = logging.getLogger(__name__)


def resolve_working_capital_ratios(engine_input: CalculationEngineInput) -> WorkingCapitalRatios:
    """
    Ratios supplied with the input, or derived from the last historical year and locked.

    Raises:
        ConfigurationError: If neither ratios nor a historical baseline is available
    """
    if engine_input.working_capital_ratios is not None:
        return engine_input.working_capital_ratios
    if not engine_input.historical_periods:
        raise ConfigurationError(
            ConfigurationError.MISSING_WORKING_CAPITAL_RATIOS,
            "Working capital ratios were not supplied and there is no historical year to derive them from",
        )
    baseline = engine_input.historical_periods[-1]
    return derive_working_capital_ratios(baseline.profit_loss, baseline.to_balance_sheet()).lock()


class PeriodSequencer:
    """
    State machine producing the ordered period sequence for one run.

    Example:
        ```python
        sequencer = PeriodSequencer(engine_input, ratios, solver)
        periods = sequencer.run()
        assert sequencer.state == SequencerState.DONE
        ```
    """

    def __init__(
        self,
        engine_input: CalculationEngineInput,
        ratios: WorkingCapitalRatios,
        solver: CircularSolver,
    ):
        self.engine_input = engine_input
        self.ratios = ratios
        self.solver = solver
        self.state = SequencerState.HISTORICAL
        self.periods: List[Period] = []
        self._schedule: Optional[DepreciationSchedule] = None

    @property
    def prior(self) -> Optional[Period]:
        return self.periods[-1] if self.periods else None

    def run(self) -> Tuple[Period, ...]:
        """Run every window in order and return the finished sequence."""
        self.run_historical()
        self.run_transition()
        self.run_dynamic()
        return self.finish()

    def run_historical(self) -> None:
        self._expect(SequencerState.HISTORICAL)
        for actuals in self.engine_input.historical_periods:
            self.periods.append(build_historical_period(actuals, self.prior))
        self.state = SequencerState.TRANSITION

    def run_transition(self) -> None:
        self._expect(SequencerState.TRANSITION)
        transition_periods = self.engine_input.transition_periods
        if transition_periods:
            self._check_follows(transition_periods[0].year, "Transition")
        schedule = self._opening_schedule()
        for override in transition_periods:
            period, schedule = build_transition_period(
                override, self.engine_input, self.ratios, self.prior, schedule, self.solver
            )
            self.periods.append(period)
        self._schedule = schedule
        self.state = SequencerState.DYNAMIC

    def run_dynamic(self) -> None:
        self._expect(SequencerState.DYNAMIC)
        config = self.engine_input.dynamic
        self._check_follows(config.start_year, "Dynamic")
        schedule = self._schedule
        for period_index in range(config.contract_period_years):
            period, schedule = build_dynamic_period(
                config, self.ratios, period_index, self.prior, schedule, self.solver
            )
            self.periods.append(period)
        self._schedule = schedule
        self.state = SequencerState.DONE

    def finish(self) -> Tuple[Period, ...]:
        self._expect(SequencerState.DONE)
        expected = self.engine_input.expected_period_count
        if len(self.periods) != expected:
            raise RuntimeError(f"Sequenced {len(self.periods)} periods, expected {expected}")
        return tuple(self.periods)

    def _expect(self, state: SequencerState) -> None:
        if self.state != state:
            raise RuntimeError(f"Sequencer is in state {self.state.value}, expected {state.value}")

    def _check_follows(self, first_year: int, window: str) -> None:
        prior = self.prior
        if prior is not None and first_year != prior.year + 1:
            raise ConfigurationError(
                ConfigurationError.INVALID_PERIOD_SEQUENCE,
                f"{window} window starts in {first_year} but the previous period is {prior.year}",
            )

    def _opening_schedule(self) -> DepreciationSchedule:
        """
        Pool the PP&E carried out of the last closed period.

        Runoff follows the configured existing-asset policy; without one,
        the last historical year's depreciation charge continues until the
        carried book value is exhausted.
        """
        prior = self.prior
        if prior is None:
            return DepreciationSchedule()

        closing = prior.balance_sheet
        existing = self.engine_input.dynamic.capex.existing_assets
        if existing is not None:
            annual = existing.annual_amount(closing.net_ppe)
        else:
            annual = prior.profit_loss.depreciation
        logger.debug("Opening PP&E %s with annual runoff %s", closing.net_ppe, annual)
        return DepreciationSchedule.opening(
            gross_ppe=closing.gross_ppe,
            accumulated_depreciation=closing.accumulated_depreciation,
            existing_annual_depreciation=annual,
            as_of_year=prior.year,
        )
