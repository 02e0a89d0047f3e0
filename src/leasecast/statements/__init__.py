# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from .balance_sheet import BalanceSheet
from .cash_flow import CashFlowStatement, build_cash_flow
from .profit_loss import ProfitLossStatement
from .working_capital import (
    WorkingCapitalBalances,
    WorkingCapitalRatios,
    calculate_working_capital,
    derive_working_capital_ratios,
)

__all__ = [
    # Statements
    "ProfitLossStatement",
    "BalanceSheet",
    "CashFlowStatement",
    "build_cash_flow",
    # Working capital
    "WorkingCapitalRatios",
    "WorkingCapitalBalances",
    "calculate_working_capital",
    "derive_working_capital_ratios",
]
