# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2025 Waldiez and contributors.
"""Configuration module for secure_password."""

from ._common import ENV_PREFIX
from ._hashing import (
    DEFAULT_HASH_COST,
    MAX_HASH_COST,
    MIN_HASH_COST,
    HashingModeType,
)
from .settings import LogLevelType, Settings
from .settings_manager import SettingsManager

__all__ = [
    "Settings",
    "SettingsManager",
    "ENV_PREFIX",
    "DEFAULT_HASH_COST",
    "MIN_HASH_COST",
    "MAX_HASH_COST",
    "HashingModeType",
    "LogLevelType",
]
