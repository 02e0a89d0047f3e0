# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Error taxonomy for the projection engine.

Configuration errors are fatal and carry a machine-readable ``code`` for
the caller. Timeouts are a separate branch so a caller can retry or narrow
a scenario without confusing them with bad input. Non-convergence and
imbalance are not exceptions at all: they are reported on the output's
validation summary.
"""

from __future__ import annotations

from typing import Optional

from typing_extensions import Never


class LeasecastError(Exception):
    """Base class for errors raised by the engine."""


class ConfigurationError(LeasecastError):
    """Input cannot be projected as given. Never retried automatically."""

    UNKNOWN_RENT_MODEL = "UNKNOWN_RENT_MODEL"
    UNKNOWN_STAFF_MODEL = "UNKNOWN_STAFF_MODEL"
    MISSING_WORKING_CAPITAL_RATIOS = "MISSING_WORKING_CAPITAL_RATIOS"
    WORKING_CAPITAL_RATIOS_LOCKED = "WORKING_CAPITAL_RATIOS_LOCKED"
    INVALID_PERIOD_SEQUENCE = "INVALID_PERIOD_SEQUENCE"

    def __init__(self, code: str, message: str):
        super().__init__(f"[{code}] {message}")
        self.code = code
        self.message = message


class CalculationTimeoutError(LeasecastError):
    """A projection exceeded its wall-clock limit."""

    def __init__(self, timeout_seconds: float, fingerprint: Optional[str] = None):
        message = f"Projection did not finish within {timeout_seconds} seconds"
        if fingerprint:
            message = f"{message} (input {fingerprint[:12]})"
        super().__init__(message)
        self.timeout_seconds = timeout_seconds
        self.fingerprint = fingerprint


def raise_unknown_variant(code: str, value: Never) -> Never:
    """
    Terminate an exhaustive ``isinstance`` chain over a tagged union.

    The ``Never`` annotation makes a static type checker report any variant
    the chain forgot to handle; at runtime an unexpected object becomes a
    fatal configuration error instead of a silent default.
    """
    raise ConfigurationError(code, f"Unsupported variant: {type(value).__name__}")
