# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2025 Waldiez and contributors.
"""Secure password support for SQLAlchemy models."""

from ._logging import configure_logging
from ._version import __version__
from .authenticator import Authenticator
from .controller import PasswordHashingController
from .errors import (
    HashingFailureError,
    NotConfiguredError,
    PasswordMismatchError,
    SecurePasswordError,
)
from .hashing import BcryptHasher, Hasher, password_hasher
from .models import Base, SavingHooks, SecurePasswordMixin
from .policy import (
    DEFAULT_DIGEST_FIELD,
    HashingMode,
    SecurePasswordConfig,
    resolve_digest_field,
    resolve_hash_cost,
)
from .services import RecordService

__all__ = [
    "__version__",
    "configure_logging",
    "Authenticator",
    "PasswordHashingController",
    "HashingFailureError",
    "NotConfiguredError",
    "PasswordMismatchError",
    "SecurePasswordError",
    "BcryptHasher",
    "Hasher",
    "password_hasher",
    "Base",
    "SavingHooks",
    "SecurePasswordMixin",
    "DEFAULT_DIGEST_FIELD",
    "HashingMode",
    "SecurePasswordConfig",
    "resolve_digest_field",
    "resolve_hash_cost",
    "RecordService",
]
