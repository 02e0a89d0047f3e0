# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from .calculations import FinancialCalculations
from .errors import CalculationTimeoutError, ConfigurationError, LeasecastError

__all__ = [
    "FinancialCalculations",
    "LeasecastError",
    "ConfigurationError",
    "CalculationTimeoutError",
]
