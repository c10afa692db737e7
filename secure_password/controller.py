# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2025 Waldiez and contributors.

"""Turn assigned plaintext passwords into stored digests."""

import logging
from dataclasses import dataclass
from typing import Any

from .errors import HashingFailureError
from .hashing import Hasher
from .policy import (
    HashingMode,
    SecurePasswordConfig,
    resolve_digest_field,
    resolve_hash_cost,
)

LOG = logging.getLogger(__name__)

PENDING_PASSWORD_SLOT = "_secure_password_pending"


class _Marker:
    """Sentinel values."""

    def __init__(self, name: str) -> None:
        self._name = name

    def __repr__(self) -> str:
        return self._name


MISSING: Any = _Marker("MISSING")
"""No value was given at all."""

UNCHANGED: Any = _Marker("UNCHANGED")
"""Leave the existing digest as it is."""


def is_empty(value: Any) -> bool:
    """Check if a password value is empty.

    Whitespace-only strings are not empty.

    Parameters
    ----------
    value : Any
        The value to check.

    Returns
    -------
    bool
        True for a missing value, None or the empty string.
    """
    if value is MISSING or value is None:
        return True
    return len(str(value)) == 0


@dataclass
class PendingPassword:
    """Plaintext waiting for the next save (never mapped to a column)."""

    value: Any = MISSING
    changed: bool = False

    def __repr__(self) -> str:
        # never show the plaintext
        return f"PendingPassword(changed={self.changed})"


def get_pending(instance: Any) -> PendingPassword | None:
    """Get the pending password slot of an instance, if any.

    Parameters
    ----------
    instance : Any
        The model instance.

    Returns
    -------
    PendingPassword | None
        The slot or None if nothing was ever assigned.
    """
    return instance.__dict__.get(PENDING_PASSWORD_SLOT)


class PasswordHashingController:
    """Hash plaintext passwords into a model's digest column."""

    def __init__(self, config: SecurePasswordConfig, hasher: Hasher) -> None:
        """Initialize the controller.

        Parameters
        ----------
        config : SecurePasswordConfig
            The model's secure password configuration.
        hasher : Hasher
            The hash primitive to use.
        """
        self.config = config
        self.hasher = hasher
        self.digest_field = resolve_digest_field(config)
        self.cost = resolve_hash_cost(config)

    def assign(self, instance: Any, value: Any) -> None:
        """Handle a plaintext assigned to the password attribute.

        In sync mode the digest is written before returning. In async
        mode the value is kept aside until the next save.

        Parameters
        ----------
        instance : Any
            The model instance.
        value : Any
            The assigned plaintext.

        Raises
        ------
        HashingFailureError
            If hashing fails (sync mode only).
        """
        if self.config.hashing_mode is HashingMode.SYNC_ON_SET:
            self._write(instance, self.digest_for(value))
            return
        pending = get_pending(instance)
        if pending is None:
            pending = PendingPassword()
            instance.__dict__[PENDING_PASSWORD_SLOT] = pending
        pending.value = value
        pending.changed = True

    def digest_for(self, value: Any) -> str | None:
        """Get the digest for a plaintext, blocking while hashing.

        Parameters
        ----------
        value : Any
            The plaintext.

        Returns
        -------
        str | None
            The new digest, None to clear it or UNCHANGED.

        Raises
        ------
        HashingFailureError
            If the hash primitive fails.
        """
        if value is None:
            return None
        if is_empty(value):
            return UNCHANGED
        # pylint: disable=broad-exception-caught
        try:
            salt = self.hasher.gen_salt(self.cost)
            return self.hasher.hash(str(value), salt)
        except Exception as exc:
            raise HashingFailureError("Could not hash the password") from exc

    async def digest_for_async(self, value: Any) -> str | None:
        """Get the digest for a plaintext without blocking the event loop.

        Parameters
        ----------
        value : Any
            The plaintext.

        Returns
        -------
        str | None
            The new digest, None to clear it or UNCHANGED.

        Raises
        ------
        HashingFailureError
            If the hash primitive fails.
        """
        if value is None:
            return None
        if is_empty(value):
            return UNCHANGED
        # pylint: disable=broad-exception-caught
        try:
            salt = await self.hasher.gen_salt_async(self.cost)
            return await self.hasher.hash_async(str(value), salt)
        except Exception as exc:
            raise HashingFailureError("Could not hash the password") from exc

    async def before_save(self, instance: Any) -> None:
        """Hash the pending plaintext, if it changed since the last save.

        The plaintext stays pending until after_save, so a save that
        fails later on hashes it again when retried.

        Parameters
        ----------
        instance : Any
            The model instance about to be saved.
        """
        pending = get_pending(instance)
        if pending is None or not pending.changed:
            return
        digest = await self.digest_for_async(pending.value)
        self._write(instance, digest)

    def after_save(self, instance: Any) -> None:
        """Drop the pending plaintext once the save committed.

        Parameters
        ----------
        instance : Any
            The saved model instance.
        """
        pending = get_pending(instance)
        if pending is not None:
            pending.value = MISSING
            pending.changed = False

    def _write(self, instance: Any, digest: str | None) -> None:
        """Store the digest, unless it is UNCHANGED."""
        if digest is UNCHANGED:
            return
        setattr(instance, self.digest_field, digest)
        LOG.debug(
            "%s %s on %s",
            "Cleared" if digest is None else "Updated",
            self.digest_field,
            type(instance).__name__,
        )


__all__ = [
    "MISSING",
    "UNCHANGED",
    "PENDING_PASSWORD_SLOT",
    "PendingPassword",
    "PasswordHashingController",
    "get_pending",
    "is_empty",
]
