# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2025 Waldiez and contributors.

# pylint: disable=unnecessary-ellipsis

"""Password hashing protocol."""

from typing import Protocol, runtime_checkable


@runtime_checkable
class Hasher(Protocol):  # pragma: no cover
    """Protocol for password hashing implementations."""

    def gen_salt(self, cost: int) -> str:
        """Generate a salt for the given cost factor.

        Parameters
        ----------
        cost : int
            The cost factor
        """
        ...

    async def gen_salt_async(self, cost: int) -> str:
        """Generate a salt without blocking the event loop.

        Parameters
        ----------
        cost : int
            The cost factor
        """
        ...

    def hash(self, plain: str, salt: str) -> str:
        """Hash a plain text password with a salt.

        Parameters
        ----------
        plain : str
            The plain text password
        salt : str
            The salt from gen_salt
        """
        ...

    async def hash_async(self, plain: str, salt: str) -> str:
        """Hash a plain text password without blocking the event loop.

        Parameters
        ----------
        plain : str
            The plain text password
        salt : str
            The salt from gen_salt
        """
        ...

    def verify(self, plain: str, digest: str) -> bool:
        """Verify a plain text password against a digest.

        Parameters
        ----------
        plain : str
            The plain text password
        digest : str
            The stored digest
        """
        ...

    async def compare(self, plain: str, digest: str) -> bool:
        """Verify a plain text password without blocking the event loop.

        Parameters
        ----------
        plain : str
            The plain text password
        digest : str
            The stored digest
        """
        ...


__all__ = ["Hasher"]
