# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""Unit tests for capex configuration and the depreciation schedule."""

from __future__ import annotations

from decimal import Decimal

import pytest
from pydantic import ValidationError

from leasecast.capex import (
    AssetSchedule,
    CapExAddition,
    CapExConfig,
    CapExItem,
    DepreciationSchedule,
    ExistingAssets,
    ReinvestmentPolicy,
    scheduled_additions,
)
from leasecast.core.primitives import CapExSourceEnum


class TestExistingAssets:
    def test_runoff_over_remaining_life(self):
        assets = ExistingAssets(remaining_useful_life=8)
        assert assets.annual_amount(Decimal("20000000")) == Decimal("2500000")

    def test_explicit_annual_amount(self):
        assets = ExistingAssets(annual_depreciation=Decimal("1000"))
        assert assets.annual_amount(Decimal("20000000")) == Decimal("1000")

    def test_exactly_one_basis(self):
        with pytest.raises(ValidationError):
            ExistingAssets()
        with pytest.raises(ValidationError):
            ExistingAssets(remaining_useful_life=5, annual_depreciation=Decimal("1"))


class TestReinvestmentPolicy:
    def test_due_on_positive_multiples_only(self):
        policy = ReinvestmentPolicy(frequency=5, amount=Decimal("1000000"))
        due = [year for year in range(2028, 2045) if policy.is_due(year, 2028)]
        assert due == [2033, 2038, 2043]

    def test_explicit_start_year(self):
        policy = ReinvestmentPolicy(frequency=2, amount=Decimal("1"), start_year=2030)
        assert not policy.is_due(2030, 2028)
        assert policy.is_due(2032, 2028)

    def test_percent_of_revenue(self):
        policy = ReinvestmentPolicy(frequency=1, percent_of_revenue=Decimal("0.02"))
        assert policy.amount_for(Decimal("50000000")) == Decimal("1000000")

    def test_amount_basis_required(self):
        with pytest.raises(ValidationError):
            ReinvestmentPolicy(frequency=3)


class TestScheduledAdditions:
    @pytest.fixture
    def config(self) -> CapExConfig:
        return CapExConfig(
            items=(
                CapExItem(year=2029, amount=Decimal("3000000"), useful_life=10, description="Sports hall"),
                CapExItem(year=2030, amount=Decimal("0"), useful_life=5),
            ),
            reinvestment=ReinvestmentPolicy(frequency=1, amount=Decimal("500000"), useful_life=5),
        )

    def test_manual_and_reinvestment(self, config):
        additions = scheduled_additions(config, 2029, Decimal("0"), reinvestment_start_year=2028)
        assert [a.source for a in additions] == [CapExSourceEnum.MANUAL, CapExSourceEnum.REINVESTMENT]
        assert sum(a.amount for a in additions) == Decimal("3500000")

    def test_reinvestment_suppressed_without_start_year(self, config):
        additions = scheduled_additions(config, 2029, Decimal("0"))
        assert [a.source for a in additions] == [CapExSourceEnum.MANUAL]

    def test_zero_amount_items_skipped(self, config):
        assert scheduled_additions(config, 2030, Decimal("0")) == []


class TestDepreciationSchedule:
    def test_opening_pools_carried_book_value(self):
        schedule = DepreciationSchedule.opening(
            gross_ppe=Decimal("32000000"),
            accumulated_depreciation=Decimal("12000000"),
            existing_annual_depreciation=Decimal("2000000"),
            as_of_year=2024,
        )
        assert len(schedule.assets) == 1
        pooled = schedule.assets[0]
        assert pooled.source == CapExSourceEnum.EXISTING
        assert pooled.cost == Decimal("20000000")
        assert pooled.acquisition_year == 2025
        assert schedule.net_ppe == Decimal("20000000")

    def test_opening_without_runoff_has_no_assets(self):
        schedule = DepreciationSchedule.opening(Decimal("10"), Decimal("0"), Decimal("0"), 2024)
        assert schedule.assets == ()

    def test_advance_adds_capex_and_charges_depreciation(self):
        schedule = DepreciationSchedule.opening(
            Decimal("32000000"), Decimal("12000000"), Decimal("2000000"), 2024
        )
        addition = CapExAddition(
            year=2025, amount=Decimal("1000000"), useful_life=5, source=CapExSourceEnum.MANUAL
        )
        advanced, year = schedule.advance(2025, [addition])

        assert year.capital_expenditure == Decimal("1000000")
        assert year.depreciation == Decimal("2200000")
        assert year.gross_ppe == Decimal("33000000")
        assert year.accumulated_depreciation == Decimal("14200000")
        assert year.net_ppe == Decimal("18800000")
        # The input schedule is unchanged
        assert schedule.gross_ppe == Decimal("32000000")
        assert advanced.net_ppe == year.net_ppe

    def test_final_charge_takes_remaining_book_value(self):
        schedule = DepreciationSchedule(
            assets=(
                AssetSchedule(
                    source=CapExSourceEnum.MANUAL,
                    acquisition_year=2025,
                    cost=Decimal("5"),
                    annual_depreciation=Decimal("2"),
                ),
            ),
            gross_ppe=Decimal("5"),
        )
        charges = []
        for year in range(2025, 2029):
            schedule, capex_year = schedule.advance(year)
            charges.append(capex_year.depreciation)
        assert charges == [Decimal("2"), Decimal("2"), Decimal("1"), Decimal("0")]
        assert schedule.assets[0].fully_depreciated
        assert schedule.net_ppe == Decimal("0")

    def test_asset_not_charged_before_acquisition(self):
        asset = AssetSchedule(
            source=CapExSourceEnum.MANUAL, acquisition_year=2030, cost=Decimal("10"), annual_depreciation=Decimal("1")
        )
        assert asset.charge_for(2029) == Decimal("0")
        assert asset.charge_for(2030) == Decimal("1")
