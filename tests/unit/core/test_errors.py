# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

import pytest

from leasecast.core import CalculationTimeoutError, ConfigurationError, LeasecastError
from leasecast.core.errors import raise_unknown_variant


def test_configuration_error_carries_code():
    error = ConfigurationError(ConfigurationError.UNKNOWN_RENT_MODEL, "bad rent")
    assert error.code == "UNKNOWN_RENT_MODEL"
    assert error.message == "bad rent"
    assert "[UNKNOWN_RENT_MODEL]" in str(error)
    assert isinstance(error, LeasecastError)


def test_timeout_error_is_separate_from_configuration_errors():
    error = CalculationTimeoutError(2.5, "abcdef0123456789")
    assert isinstance(error, LeasecastError)
    assert not isinstance(error, ConfigurationError)
    assert error.timeout_seconds == 2.5
    assert "abcdef012345" in str(error)


def test_raise_unknown_variant():
    with pytest.raises(ConfigurationError) as exc_info:
        raise_unknown_variant(ConfigurationError.UNKNOWN_STAFF_MODEL, object())
    assert exc_info.value.code == ConfigurationError.UNKNOWN_STAFF_MODEL
    assert "object" in exc_info.value.message
