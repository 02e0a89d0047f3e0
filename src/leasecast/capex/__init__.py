# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from .assets import (
    CapExAddition,
    CapExConfig,
    CapExItem,
    ExistingAssets,
    ReinvestmentPolicy,
    scheduled_additions,
)
from .depreciation import AssetSchedule, CapExYear, DepreciationSchedule

__all__ = [
    # Configuration
    "CapExConfig",
    "ExistingAssets",
    "CapExItem",
    "ReinvestmentPolicy",
    "CapExAddition",
    "scheduled_additions",
    # Depreciation
    "AssetSchedule",
    "CapExYear",
    "DepreciationSchedule",
]
