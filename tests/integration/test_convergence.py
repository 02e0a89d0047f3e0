# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""Circular solver convergence over the full example horizon."""

from __future__ import annotations

from decimal import Decimal

import pytest

from leasecast import run_projection
from leasecast.rent import RevenueShareRent


def test_default_settings_converge_within_iteration_limit(engine_input):
    output = run_projection(engine_input)

    assert output.validation.all_periods_converged
    assert output.performance.max_solver_iterations < engine_input.solver_config.max_iterations
    assert output.performance.total_solver_iterations > 0


@pytest.mark.parametrize("relaxation", ["0.3", "0.8", "1"])
def test_relaxation_factors_converge(engine_input, relaxation):
    solver_config = engine_input.solver_config.model_copy(update={"relaxation_factor": Decimal(relaxation)})
    output = run_projection(engine_input.model_copy(update={"solver_config": solver_config}))

    assert output.validation.all_periods_converged
    assert output.all_periods_balanced


def test_heavier_relaxation_needs_fewer_iterations(engine_input):
    damped = engine_input.solver_config.model_copy(update={"relaxation_factor": Decimal("0.3")})
    undamped = engine_input.solver_config.model_copy(update={"relaxation_factor": Decimal("1")})

    slow = run_projection(engine_input.model_copy(update={"solver_config": damped}))
    fast = run_projection(engine_input.model_copy(update={"solver_config": undamped}))

    assert fast.performance.total_solver_iterations < slow.performance.total_solver_iterations


def test_loss_making_contract_converges(engine_input_factory):
    output = run_projection(engine_input_factory(rent_model=RevenueShareRent(percent=Decimal("0.9"))))
    assert output.validation.all_periods_converged
