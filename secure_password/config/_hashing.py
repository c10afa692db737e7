# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2025 Waldiez and contributors.

"""Password hashing related configuration.

Environment variables (with prefix SECURE_PASSWORD_)
----------------------------------------------------
HASH_COST (int) # default: 12
HASHING_MODE (str) # default: sync_on_set

Command line arguments (no prefix)
----------------------------------
--hash-cost (int)
--hashing-mode (str)
"""
# HASH_COST=12
# HASHING_MODE=sync_on_set

from typing import Literal, get_args

from ._common import get_value

DEFAULT_HASH_COST = 12
# bcrypt accepts log rounds in this range
MIN_HASH_COST = 4
MAX_HASH_COST = 31

HashingModeType = Literal["sync_on_set", "async_on_persist"]
"""Possible hashing modes."""


def get_hash_cost() -> int:
    """Get the default bcrypt cost factor.

    Returns
    -------
    int
        The cost factor, falls back to the default if out of range
    """
    value = get_value("--hash-cost", "HASH_COST", int, DEFAULT_HASH_COST)
    if value < MIN_HASH_COST or value > MAX_HASH_COST:
        return DEFAULT_HASH_COST
    return value


def get_hashing_mode() -> HashingModeType:
    """Get the default hashing mode.

    Returns
    -------
    HashingModeType
        The hashing mode
    """
    value = get_value("--hashing-mode", "HASHING_MODE", str, "sync_on_set")
    value = value.strip().lower().replace("-", "_")
    if value in get_args(HashingModeType):
        return value  # type: ignore[return-value]
    return "sync_on_set"
