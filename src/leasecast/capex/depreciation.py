# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Straight-line depreciation schedule.

The schedule is an immutable value advanced one year at a time. Each call
to ``DepreciationSchedule.advance`` returns the next schedule plus a
``CapExYear`` summary, so a period never reaches back into another period's
state.
"""

from __future__ import annotations

import logging
from decimal import Decimal
from typing import Sequence, Tuple

from ..core.primitives import CapExSourceEnum, Model
from ..core.primitives.decimals import ZERO
from .assets import CapExAddition

logger = logging.getLogger(__name__)


class AssetSchedule(Model):
    """One depreciating asset (or the pooled existing assets)."""

    source: CapExSourceEnum
    acquisition_year: int
    cost: Decimal
    annual_depreciation: Decimal
    accumulated_depreciation: Decimal = ZERO

    @property
    def net_book_value(self) -> Decimal:
        return self.cost - self.accumulated_depreciation

    @property
    def fully_depreciated(self) -> bool:
        return self.net_book_value <= ZERO

    def charge_for(self, year: int) -> Decimal:
        """Depreciation for ``year``; the final charge takes whatever NBV is left."""
        if year < self.acquisition_year or self.fully_depreciated:
            return ZERO
        return min(self.annual_depreciation, self.net_book_value)


class CapExYear(Model):
    """Capital expenditure and PP&E position for one year."""

    year: int
    capital_expenditure: Decimal
    depreciation: Decimal
    gross_ppe: Decimal
    accumulated_depreciation: Decimal

    @property
    def net_ppe(self) -> Decimal:
        return self.gross_ppe - self.accumulated_depreciation


class DepreciationSchedule(Model):
    assets: Tuple[AssetSchedule, ...] = ()
    gross_ppe: Decimal = ZERO
    accumulated_depreciation: Decimal = ZERO

    @classmethod
    def opening(
        cls,
        gross_ppe: Decimal,
        accumulated_depreciation: Decimal,
        existing_annual_depreciation: Decimal,
        as_of_year: int,
    ) -> "DepreciationSchedule":
        """
        Start a schedule from a closing balance sheet.

        The carried net book value is pooled into a single existing asset
        depreciating from the year after ``as_of_year``.
        """
        net_book_value = gross_ppe - accumulated_depreciation
        assets: Tuple[AssetSchedule, ...] = ()
        if net_book_value > ZERO and existing_annual_depreciation > ZERO:
            assets = (
                AssetSchedule(
                    source=CapExSourceEnum.EXISTING,
                    acquisition_year=as_of_year + 1,
                    cost=net_book_value,
                    annual_depreciation=existing_annual_depreciation,
                ),
            )
        return cls(assets=assets, gross_ppe=gross_ppe, accumulated_depreciation=accumulated_depreciation)

    @property
    def net_ppe(self) -> Decimal:
        return self.gross_ppe - self.accumulated_depreciation

    def advance(
        self, year: int, additions: Sequence[CapExAddition] = ()
    ) -> Tuple["DepreciationSchedule", CapExYear]:
        """
        Add ``additions`` in ``year`` and charge the year's depreciation.

        New assets depreciate starting in their acquisition year. Fully
        depreciated assets stay in gross PP&E and contribute zero.
        """
        new_assets = tuple(
            AssetSchedule(
                source=addition.source,
                acquisition_year=addition.year,
                cost=addition.amount,
                annual_depreciation=addition.amount / Decimal(addition.useful_life),
            )
            for addition in additions
        )
        capex = sum((addition.amount for addition in additions), ZERO)

        depreciation = ZERO
        advanced = []
        for asset in self.assets + new_assets:
            charge = asset.charge_for(year)
            depreciation += charge
            if charge > ZERO:
                asset = asset.model_copy(
                    update={"accumulated_depreciation": asset.accumulated_depreciation + charge}
                )
            advanced.append(asset)

        schedule = DepreciationSchedule(
            assets=tuple(advanced),
            gross_ppe=self.gross_ppe + capex,
            accumulated_depreciation=self.accumulated_depreciation + depreciation,
        )
        if capex > ZERO:
            logger.debug("Year %s capex %s across %d additions", year, capex, len(additions))
        return schedule, CapExYear(
            year=year,
            capital_expenditure=capex,
            depreciation=depreciation,
            gross_ppe=schedule.gross_ppe,
            accumulated_depreciation=schedule.accumulated_depreciation,
        )
