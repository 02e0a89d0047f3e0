# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Decimal arithmetic helpers used by every calculator in the engine.

Financial fields never pass through ``float``. All engine arithmetic runs
inside ``ENGINE_CONTEXT`` (34 significant digits, banker's rounding) so a
projection produces the same digits regardless of the caller's ambient
decimal context.
"""

from __future__ import annotations

from decimal import ROUND_HALF_EVEN, Context, Decimal, localcontext
from typing import Iterable

ZERO = Decimal("0")
ONE = Decimal("1")
CENT = Decimal("0.01")

ENGINE_CONTEXT = Context(prec=34, rounding=ROUND_HALF_EVEN)


def engine_context():
    """Context manager installing the engine's decimal context."""
    return localcontext(ENGINE_CONTEXT)


def safe_divide(numerator: Decimal, denominator: Decimal, default: Decimal = ZERO) -> Decimal:
    """Divide, returning ``default`` when the denominator is zero."""
    if denominator == ZERO:
        return default
    return numerator / denominator


def escalation_periods(period_index: int, frequency: int) -> int:
    """Number of completed escalation bands: ``floor(period_index / frequency)``."""
    if period_index < 0:
        raise ValueError(f"period_index must be non-negative, got {period_index}")
    if frequency < 1:
        raise ValueError(f"frequency must be at least 1, got {frequency}")
    return period_index // frequency


def compound_factor(rate: Decimal, periods: int) -> Decimal:
    """``(1 + rate) ** periods`` using integer exponentiation (exact up to context precision)."""
    if periods < 0:
        raise ValueError(f"periods must be non-negative, got {periods}")
    return (ONE + rate) ** periods


def banded_growth(amount: Decimal, rate: Decimal, period_index: int, frequency: int) -> Decimal:
    """Escalate ``amount`` by ``rate`` once per completed band of ``frequency`` periods."""
    return amount * compound_factor(rate, escalation_periods(period_index, frequency))


def sum_decimals(values: Iterable[Decimal]) -> Decimal:
    """Sum starting from Decimal zero so an empty iterable yields ``Decimal('0')``."""
    total = ZERO
    for value in values:
        total += value
    return total


def is_within_tolerance(a: Decimal, b: Decimal, tolerance: Decimal) -> bool:
    """Absolute comparison ``|a - b| < tolerance``."""
    return abs(a - b) < tolerance


def clamp_non_negative(value: Decimal) -> Decimal:
    return value if value > ZERO else ZERO


def round_students(value: Decimal) -> int:
    """Round a fractional headcount to whole students (half-even)."""
    return int(value.quantize(ONE, rounding=ROUND_HALF_EVEN))


def quantize_money(value: Decimal) -> Decimal:
    """Round to cents for presentation. Engine values are never quantized."""
    return value.quantize(CENT, rounding=ROUND_HALF_EVEN)


def normalize(value: Decimal) -> str:
    """
    Canonical string form of a decimal value.

    ``Decimal('1.0')`` and ``Decimal('1.00')`` both normalize to ``'1'``;
    exponent notation is expanded so the result is stable across values.
    """
    if value == ZERO:
        return "0"
    text = format(value.normalize(), "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text
