# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Leasecast Reporting

Statement tables built from a finished projection:

    reports = ReportingInterface(run_projection(engine_input))
    pnl = reports.profit_loss()
    checks = reports.validation()
"""

from .base import BaseReport
from .financial_reports import BalanceSheetReport, CashFlowReport, ProfitLossReport, ValidationReport
from .interface import ReportingInterface

__all__ = [
    # Base class for custom reports
    "BaseReport",
    # Fluent interface
    "ReportingInterface",
    # Statement reports
    "ProfitLossReport",
    "BalanceSheetReport",
    "CashFlowReport",
    "ValidationReport",
]
