# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2025 Waldiez and contributors.

"""Bcrypt password hasher implementation."""

import re
from dataclasses import dataclass

import anyio.to_thread
import bcrypt

BCRYPT_PREFIXES = ("$2a$", "$2b$", "$2y$")
# bcrypt only looks at the first 72 bytes of the secret
MAX_SECRET_BYTES = 72
_COST_RE = re.compile(r"^\$2[aby]\$(\d{2})\$")


def _secret_bytes(plain: str) -> bytes:
    """Encode and truncate a secret the way bcrypt sees it."""
    return plain.encode("utf-8")[:MAX_SECRET_BYTES]


@dataclass(frozen=True)
class BcryptHasher:
    """Bcrypt password hasher."""

    prefix: bytes = b"2b"

    def gen_salt(self, cost: int) -> str:
        """Generate a bcrypt salt.

        Parameters
        ----------
        cost : int
            The log2 number of rounds.

        Returns
        -------
        str
            The salt, including the algorithm and cost markers.
        """
        return bcrypt.gensalt(rounds=cost, prefix=self.prefix).decode("ascii")

    async def gen_salt_async(self, cost: int) -> str:
        """Generate a bcrypt salt in a worker thread.

        Parameters
        ----------
        cost : int
            The log2 number of rounds.

        Returns
        -------
        str
            The salt, including the algorithm and cost markers.
        """
        return await anyio.to_thread.run_sync(self.gen_salt, cost)

    def hash(self, plain: str, salt: str) -> str:
        """Hash password using bcrypt.

        Parameters
        ----------
        plain : str
            The plain secret to hash.
        salt : str
            A salt returned by gen_salt.

        Returns
        -------
        str
            The hashed secret.
        """
        hashed = bcrypt.hashpw(_secret_bytes(plain), salt.encode("ascii"))
        return hashed.decode("ascii")

    async def hash_async(self, plain: str, salt: str) -> str:
        """Hash password using bcrypt in a worker thread.

        Parameters
        ----------
        plain : str
            The plain secret to hash.
        salt : str
            A salt returned by gen_salt.

        Returns
        -------
        str
            The hashed secret.
        """
        return await anyio.to_thread.run_sync(self.hash, plain, salt)

    def verify(self, plain: str, digest: str) -> bool:
        """Verify password against bcrypt hash.

        Parameters
        ----------
        plain : str
            The plain secret to check.
        digest : str
            The stored hashed secret.

        Returns
        -------
        bool
            True if the verification succeeds, false otherwise.
        """
        if not digest.startswith(BCRYPT_PREFIXES):
            return False
        try:
            return bcrypt.checkpw(_secret_bytes(plain), digest.encode("utf-8"))
        except ValueError:
            # malformed salt or digest
            return False

    async def compare(self, plain: str, digest: str) -> bool:
        """Verify password against bcrypt hash in a worker thread.

        Parameters
        ----------
        plain : str
            The plain secret to check.
        digest : str
            The stored hashed secret.

        Returns
        -------
        bool
            True if the verification succeeds, false otherwise.
        """
        return await anyio.to_thread.run_sync(self.verify, plain, digest)

    @staticmethod
    def cost_of(digest: str) -> int | None:
        """Get the cost factor encoded in a bcrypt digest.

        Parameters
        ----------
        digest : str
            The bcrypt digest.

        Returns
        -------
        int | None
            The cost factor, or None if this is not a bcrypt digest.
        """
        match = _COST_RE.match(digest)
        if not match:
            return None
        return int(match.group(1))


__all__ = ["BcryptHasher", "BCRYPT_PREFIXES", "MAX_SECRET_BYTES"]
