# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Canonical input fingerprints.

The fingerprint is the sha256 of a canonical JSON rendering of the input
value graph:

- mapping keys are sorted, so field order never matters
- decimals are normalized, so ``1.0`` and ``1.00`` are the same value
- enums are reduced to their values and tuples to lists

Nothing run-specific (clock, random salt, object identity) enters the hash.
"""

from __future__ import annotations

import hashlib
import json
from datetime import date, datetime
from decimal import Decimal
from enum import Enum
from typing import Any

from pydantic import BaseModel

from ..core.primitives.decimals import normalize


def canonicalize(value: Any) -> Any:
    """Reduce ``value`` to JSON-compatible primitives in canonical form."""
    if isinstance(value, BaseModel):
        return canonicalize(value.model_dump(mode="python"))
    if isinstance(value, dict):
        return {str(key): canonicalize(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [canonicalize(item) for item in value]
    if isinstance(value, Enum):
        return canonicalize(value.value)
    if isinstance(value, bool) or value is None or isinstance(value, str):
        return value
    if isinstance(value, Decimal):
        return {"$decimal": normalize(value)}
    if isinstance(value, int):
        return {"$decimal": str(value)}
    if isinstance(value, (datetime, date)):
        return value.isoformat()
    if isinstance(value, float):
        return {"$decimal": normalize(Decimal(repr(value)))}
    raise TypeError(f"Cannot fingerprint value of type {type(value).__name__}")


def canonical_json(value: Any) -> str:
    return json.dumps(canonicalize(value), sort_keys=True, separators=(",", ":"))


def fingerprint(value: Any) -> str:
    """Hex sha256 of the canonical JSON form of ``value``."""
    return hashlib.sha256(canonical_json(value).encode("utf-8")).hexdigest()
