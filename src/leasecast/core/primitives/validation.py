# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Reusable Pydantic validation helpers.

- Mutual exclusivity (exactly one of two fields)
- Strictly increasing year sequences
"""

from __future__ import annotations

from typing import Any, Optional, Sequence


class ValidationMixin:
    """
    Mixin providing reusable validation methods for Pydantic models.

    Inherited alongside ``Model`` and called from ``model_validator`` hooks.
    """

    @classmethod
    def validate_either_or_required(
        cls,
        instance: Any,
        field_a: str,
        field_b: str,
        error_message: Optional[str] = None,
    ) -> Any:
        """
        Validate that exactly one of two fields is provided.

        Raises:
            ValueError: If neither or both fields are provided
        """
        value_a = getattr(instance, field_a)
        value_b = getattr(instance, field_b)

        if value_a is None and value_b is None:
            msg = error_message or f"Either {field_a} or {field_b} must be provided"
            raise ValueError(msg)

        if value_a is not None and value_b is not None:
            msg = error_message or f"Cannot provide both {field_a} and {field_b}"
            raise ValueError(msg)

        return instance

    @classmethod
    def validate_consecutive_years(cls, years: Sequence[int], label: str) -> None:
        """
        Validate that ``years`` increase by exactly one.

        Raises:
            ValueError: If a gap or a repeated year is found
        """
        for previous, current in zip(years, years[1:]):
            if current != previous + 1:
                raise ValueError(
                    f"{label} years must be consecutive; found {previous} followed by {current}"
                )
