# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""Fluent access to statement reports for one projection."""

from __future__ import annotations

from typing import Optional, Sequence

import pandas as pd

from ..engine.results import CalculationEngineOutput
from .financial_reports import BalanceSheetReport, CashFlowReport, ProfitLossReport, ValidationReport


class ReportingInterface:
    """
    Report factory bound to one engine output.

    Example:
        ```python
        reports = ReportingInterface(run_projection(engine_input))
        pnl = reports.profit_loss()
        print(pnl[2028])
        ```
    """

    def __init__(self, output: CalculationEngineOutput):
        self._output = output

    def profit_loss(self, rounded: bool = True, years: Optional[Sequence[int]] = None) -> pd.DataFrame:
        return ProfitLossReport(self._output).generate(rounded=rounded, years=years)

    def balance_sheet(self, rounded: bool = True, years: Optional[Sequence[int]] = None) -> pd.DataFrame:
        return BalanceSheetReport(self._output).generate(rounded=rounded, years=years)

    def cash_flow(self, rounded: bool = True, years: Optional[Sequence[int]] = None) -> pd.DataFrame:
        return CashFlowReport(self._output).generate(rounded=rounded, years=years)

    def validation(self) -> pd.DataFrame:
        return ValidationReport(self._output).generate()

    def metrics(self) -> pd.Series:
        """Aggregate metrics as a labelled series (None where undefined)."""
        return pd.Series(self._output.metrics.model_dump(), name="value")
