# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2025 Waldiez and contributors.

"""Password hashing and verification."""

from ._bcrypt_hasher import BcryptHasher
from .protocol import Hasher

password_hasher: Hasher = BcryptHasher()

__all__ = ["password_hasher", "Hasher", "BcryptHasher"]
