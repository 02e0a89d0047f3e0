# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from datetime import date
from decimal import Decimal

import pytest

from leasecast.cache import canonical_json, canonicalize, fingerprint
from leasecast.core.primitives import PeriodTypeEnum
from leasecast.rent import FixedEscalationRent


def test_key_order_does_not_matter():
    assert fingerprint({"a": 1, "b": Decimal("2")}) == fingerprint({"b": Decimal("2"), "a": 1})


def test_equal_decimals_collide():
    assert fingerprint(Decimal("1.0")) == fingerprint(Decimal("1.00"))
    assert fingerprint({"rate": Decimal("0.030")}) == fingerprint({"rate": Decimal("0.03")})


def test_int_and_decimal_of_same_value_collide():
    assert fingerprint(5) == fingerprint(Decimal("5.0"))


def test_strings_are_not_numbers():
    assert fingerprint("5") != fingerprint(5)


def test_models_fingerprint_by_content():
    a = FixedEscalationRent(base_rent=Decimal("10000000"), growth_rate=Decimal("0.03"))
    b = FixedEscalationRent(base_rent=Decimal("10000000.00"), growth_rate=Decimal("0.030"))
    c = FixedEscalationRent(base_rent=Decimal("10000000"), growth_rate=Decimal("0.04"))
    assert fingerprint(a) == fingerprint(b)
    assert fingerprint(a) != fingerprint(c)


def test_engine_input_is_stable(engine_input, engine_input_factory):
    assert fingerprint(engine_input) == fingerprint(engine_input_factory())
    assert len(fingerprint(engine_input)) == 64


def test_engine_input_change_changes_fingerprint(engine_input):
    dynamic = engine_input.dynamic.model_copy(update={"contract_period_years": 25})
    assert fingerprint(engine_input) != fingerprint(engine_input.model_copy(update={"dynamic": dynamic}))


def test_canonical_forms():
    assert canonicalize(PeriodTypeEnum.DYNAMIC) == "dynamic"
    assert canonicalize((1, 2)) == [{"$decimal": "1"}, {"$decimal": "2"}]
    assert canonicalize(date(2028, 1, 1)) == "2028-01-01"
    assert canonicalize(None) is None
    assert canonicalize(True) is True
    assert canonical_json({"b": 1, "a": None}) == '{"a":null,"b":{"$decimal":"1"}}'


def test_unsupported_types_rejected():
    with pytest.raises(TypeError):
        fingerprint(object())
