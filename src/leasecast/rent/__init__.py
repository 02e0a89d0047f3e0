# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from .models import AnyRentModel, FixedEscalationRent, PartnerInvestmentRent, RevenueShareRent
from .resolver import RentModel, resolve_rent

__all__ = [
    # Rent structures
    "FixedEscalationRent",
    "RevenueShareRent",
    "PartnerInvestmentRent",
    # Type unions
    "AnyRentModel",
    "RentModel",
    # Resolution
    "resolve_rent",
]
