# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class Model(BaseModel):
    """Base Pydantic model shared by every engine input and output.

    Models are immutable: the engine derives each period from the previous
    period's closing state and never updates an object in place. Derived
    copies are produced with ``model_copy(update=...)``.
    """

    model_config = ConfigDict(
        frozen=True,  # Inputs and outputs are values; runs must be repeatable
        extra="forbid",  # Catches typos and missing field definitions immediately
    )
