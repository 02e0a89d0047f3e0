# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Base class for statement reports.

Reports translate a finished ``CalculationEngineOutput`` into
presentation-ready tables. They only select and arrange figures; every
number comes from the output unchanged.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from decimal import Decimal
from typing import Callable, Dict, List, Optional, Sequence, Tuple

import pandas as pd

from ..core.primitives.decimals import quantize_money
from ..engine.period import Period
from ..engine.results import CalculationEngineOutput

LineItems = Sequence[Tuple[str, Callable[[Period], Decimal]]]


class BaseReport(ABC):
    """Abstract base class for report formatters over one engine output."""

    def __init__(self, output: CalculationEngineOutput):
        if not isinstance(output, CalculationEngineOutput):
            raise TypeError("Reports require a CalculationEngineOutput")
        self._output = output

    @abstractmethod
    def generate(self, **kwargs) -> pd.DataFrame:
        """Build the report table."""

    def _line_item_frame(self, lines: LineItems, rounded: bool, years: Optional[Sequence[int]] = None) -> pd.DataFrame:
        """Rows are line items, columns are years. Values stay Decimal (object dtype)."""
        periods = [p for p in self._output.periods if years is None or p.year in years]
        data: Dict[int, List[Decimal]] = {}
        for period in periods:
            column = [getter(period) for _, getter in lines]
            data[period.year] = [quantize_money(value) for value in column] if rounded else column
        frame = pd.DataFrame(data, index=[label for label, _ in lines])
        frame.columns.name = "year"
        return frame
