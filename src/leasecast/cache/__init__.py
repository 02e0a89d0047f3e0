# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from .calculation_cache import DEFAULT_CAPACITY, CacheEntry, CacheStats, FingerprintCache
from .fingerprint import canonical_json, canonicalize, fingerprint

__all__ = [
    "FingerprintCache",
    "CacheEntry",
    "CacheStats",
    "DEFAULT_CAPACITY",
    "fingerprint",
    "canonicalize",
    "canonical_json",
]
