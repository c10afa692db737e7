# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2025 Waldiez and contributors.
"""Models for SQLAlchemy ORM."""

from .common import Base, get_next_id
from .lifecycle import SavingHook, SavingHooks
from .secure import PasswordAttribute, SecurePasswordMixin

__all__ = [
    "Base",
    "get_next_id",
    "SavingHook",
    "SavingHooks",
    "PasswordAttribute",
    "SecurePasswordMixin",
]
