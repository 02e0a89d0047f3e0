# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from .assembly import settle_period
from .dynamic import build_dynamic_period, dynamic_operations
from .historical import build_historical_period
from .transition import build_transition_period, prefill_transition_operations

__all__ = [
    "settle_period",
    "build_historical_period",
    "build_transition_period",
    "prefill_transition_operations",
    "build_dynamic_period",
    "dynamic_operations",
]
