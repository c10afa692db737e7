# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2025 Waldiez and contributors.

"""Verify a plaintext password against a model's stored digest."""

import inspect
import logging
from typing import Any, Callable, TypeVar

from .controller import MISSING, is_empty
from .errors import NotConfiguredError, PasswordMismatchError
from .hashing import Hasher
from .policy import SecurePasswordConfig, resolve_digest_field

LOG = logging.getLogger(__name__)

M = TypeVar("M")


class Authenticator:
    """Stateless password verification."""

    def __init__(
        self,
        config: SecurePasswordConfig,
        hasher: Hasher,
        fallback: Callable[..., Any] | None = None,
    ) -> None:
        """Initialize the authenticator.

        Parameters
        ----------
        config : SecurePasswordConfig
            The model's secure password configuration.
        hasher : Hasher
            The hash primitive to compare with.
        fallback : Callable[..., Any] | None
            The authenticate to call instead, if secure
            password support is disabled.
        """
        self.config = config
        self.hasher = hasher
        self.fallback = fallback

    async def authenticate(self, model: M, plaintext: Any = MISSING) -> M:
        """Check a plaintext password against the model's digest.

        Parameters
        ----------
        model : M
            The model instance.
        plaintext : Any
            The password to check.

        Returns
        -------
        M
            The same model instance if the password matches.

        Raises
        ------
        PasswordMismatchError
            If the password does not match for any reason.
        NotConfiguredError
            If secure password support is disabled and
            there is nothing to fall back to.
        """
        if not self.config.enabled:
            return await self._fall_back(model, plaintext)
        digest_field = resolve_digest_field(self.config)
        digest = getattr(model, digest_field, None)
        if is_empty(plaintext) or is_empty(digest):
            LOG.debug("No password or digest to compare on %s", _name(model))
            raise PasswordMismatchError()
        # pylint: disable=broad-exception-caught
        try:
            matches = await self.hasher.compare(str(plaintext), str(digest))
        except Exception:
            LOG.debug("Could not compare %s on %s", digest_field, _name(model))
            matches = False
        if not matches:
            raise PasswordMismatchError()
        return model

    async def _fall_back(self, model: M, plaintext: Any) -> M:
        """Call the fallback authenticate, awaiting it if needed."""
        if self.fallback is None:
            raise NotConfiguredError(_name(model))
        args = () if plaintext is MISSING else (plaintext,)
        result = self.fallback(*args)
        if inspect.isawaitable(result):
            result = await result
        return result


def _name(model: Any) -> str:
    return type(model).__name__


__all__ = ["Authenticator"]
