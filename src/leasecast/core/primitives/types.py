# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from decimal import Decimal

from pydantic import Field
from typing_extensions import Annotated

# constrained types
NonNegativeDecimal = Annotated[Decimal, Field(ge=0)]
PositiveDecimal = Annotated[Decimal, Field(gt=0)]
DecimalBetween0And1 = Annotated[Decimal, Field(ge=0, le=1)]
GrowthRate = Annotated[Decimal, Field(ge=-1)]
RelaxationFactor = Annotated[Decimal, Field(gt=0, le=1)]
Frequency = Annotated[int, Field(strict=True, ge=1)]
NonNegativeInt = Annotated[int, Field(strict=True, ge=0)]
PositiveInt = Annotated[int, Field(strict=True, ge=1)]
Year = Annotated[int, Field(strict=True, ge=1900, le=2200)]
