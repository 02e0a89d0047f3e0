# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""Aggregate metrics over a finished period sequence."""

from __future__ import annotations

from decimal import Decimal
from typing import Optional, Sequence

from ..core.calculations import FinancialCalculations
from ..core.primitives import Model, PeriodTypeEnum, SystemConfig
from ..core.primitives.decimals import ZERO, safe_divide, sum_decimals
from .period import Period


class ProjectionMetrics(Model):
    """
    Headline figures for a projection.

    Whole-horizon figures cover every period. The contract figures cover
    the dynamic window only and are discounted from its first year.
    """

    total_revenue: Decimal
    total_rent: Decimal
    total_ebitda: Decimal
    average_ebitda: Decimal
    total_net_income: Decimal
    average_roe: Decimal
    peak_debt: Decimal
    final_cash: Decimal
    npv: Decimal
    irr: Optional[Decimal] = None
    payback_period: Optional[Decimal] = None
    discount_rate: Decimal
    contract_years: int
    contract_rent_npv: Decimal
    contract_ebitda_npv: Decimal
    net_tenant_surplus: Decimal
    annualized_rent_nav: Decimal
    rent_to_revenue_ratio: Decimal


def calculate_metrics(periods: Sequence[Period], system_config: SystemConfig) -> ProjectionMetrics:
    """
    Compute metrics for ``periods``.

    NPV, IRR and payback are taken over each period's net change in cash.
    An empty sequence yields zeros rather than raising.
    """
    rate = system_config.effective_discount_rate
    calc = FinancialCalculations

    revenues = [p.profit_loss.total_revenue for p in periods]
    rents = [p.profit_loss.rent_expense for p in periods]
    ebitdas = [p.profit_loss.ebitda for p in periods]
    net_incomes = [p.profit_loss.net_income for p in periods]
    equities = [p.balance_sheet.total_equity for p in periods]
    net_cash_flows = [p.cash_flow.net_change_in_cash for p in periods]

    total_ebitda = sum_decimals(ebitdas)
    total_net_income = sum_decimals(net_incomes)

    contract = [p for p in periods if p.period_type == PeriodTypeEnum.DYNAMIC]
    contract_rents = [p.profit_loss.rent_expense for p in contract]
    contract_revenue = sum_decimals(p.profit_loss.total_revenue for p in contract)
    rent_npv = calc.calculate_npv(contract_rents, rate)
    ebitda_npv = calc.calculate_npv([p.profit_loss.ebitda for p in contract], rate)

    return ProjectionMetrics(
        total_revenue=sum_decimals(revenues),
        total_rent=sum_decimals(rents),
        total_ebitda=total_ebitda,
        average_ebitda=safe_divide(total_ebitda, Decimal(len(periods))),
        total_net_income=total_net_income,
        average_roe=safe_divide(total_net_income, sum_decimals(equities)),
        peak_debt=max((p.balance_sheet.debt for p in periods), default=ZERO),
        final_cash=periods[-1].balance_sheet.cash if periods else ZERO,
        npv=calc.calculate_npv(net_cash_flows, rate),
        irr=calc.calculate_irr(net_cash_flows),
        payback_period=calc.calculate_payback_period(net_cash_flows),
        discount_rate=rate,
        contract_years=len(contract),
        contract_rent_npv=rent_npv,
        contract_ebitda_npv=ebitda_npv,
        net_tenant_surplus=ebitda_npv - rent_npv,
        annualized_rent_nav=rent_npv * calc.annualization_factor(rate, len(contract)),
        rent_to_revenue_ratio=safe_divide(sum_decimals(contract_rents), contract_revenue),
    )
