# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2025 Waldiez and contributors.

"""Secure password support for models.

Usage
-----
class User(SecurePasswordMixin, Base):
    __tablename__ = "users"

    has_secure_password = True  # or a custom digest column name
    hash_cost = 10  # optional
    hashing_mode = HashingMode.ASYNC_ON_PERSIST  # optional

    password_digest: Mapped[str | None] = mapped_column(String)

The mixin has to come before ``Base`` in the bases.
"""

from typing import Any

from typing_extensions import Self

from ..authenticator import Authenticator
from ..controller import MISSING, PasswordHashingController
from ..errors import PasswordMismatchError
from ..hashing import Hasher, password_hasher
from ..policy import (
    DEFAULT_PASSWORD_FIELD,
    HashingMode,
    SecurePasswordConfig,
)
from .lifecycle import SavingHooks


class PasswordAttribute:
    """Write-only virtual password attribute.

    Reading it always gives None, the plaintext is never stored
    as model state.
    """

    def __get__(self, instance: Any, owner: type | None = None) -> Any:
        if instance is None:
            return self
        return None

    def __set__(self, instance: Any, value: Any) -> None:
        type(instance).password_controller().assign(instance, value)


class SecurePasswordMixin:
    """Hash a ``password`` virtual attribute and authenticate against it."""

    # plain class attributes, declarative mapping ignores them
    has_secure_password = False
    hash_cost = None
    hashing_mode = None
    PasswordMismatchError = PasswordMismatchError

    def __init_subclass__(cls, **kwargs: Any) -> None:
        config = SecurePasswordConfig.from_model(cls)
        cls.__secure_password_config__ = config
        inherited = isinstance(
            getattr(cls, DEFAULT_PASSWORD_FIELD, None), PasswordAttribute
        )
        if config.enabled and not inherited:
            setattr(cls, DEFAULT_PASSWORD_FIELD, PasswordAttribute())
        elif not config.enabled and inherited:
            # opted out below an enabled class
            setattr(cls, DEFAULT_PASSWORD_FIELD, None)
        super().__init_subclass__(**kwargs)

    @classmethod
    def secure_password_hasher(cls) -> Hasher:
        """Get the hash primitive for this model.

        Override to inject another implementation.

        Returns
        -------
        Hasher
            The hasher.
        """
        return password_hasher

    @classmethod
    def password_controller(cls) -> PasswordHashingController:
        """Get the hashing controller for this model.

        Returns
        -------
        PasswordHashingController
            The controller.
        """
        return PasswordHashingController(
            cls.__secure_password_config__, cls.secure_password_hasher()
        )

    def register_saving_hooks(self, hooks: SavingHooks) -> None:
        """Register the hashing hook when hashing happens on save.

        Parameters
        ----------
        hooks : SavingHooks
            The instance's hooks.
        """
        parent = getattr(super(), "register_saving_hooks", None)
        if parent is not None:
            parent(hooks)
        config = self.__secure_password_config__
        if config.enabled and config.hashing_mode is HashingMode.ASYNC_ON_PERSIST:
            hooks.register(self._hash_pending_password)

    def after_save(self) -> None:
        """Drop the pending plaintext once the save committed."""
        parent = getattr(super(), "after_save", None)
        if parent is not None:
            parent()
        if self.__secure_password_config__.enabled:
            self.password_controller().after_save(self)

    @staticmethod
    async def _hash_pending_password(instance: Any) -> None:
        await type(instance).password_controller().before_save(instance)

    async def authenticate(self, password: Any = MISSING) -> Self:
        """Check a password against the stored digest.

        Parameters
        ----------
        password : Any
            The plaintext password.

        Returns
        -------
        Self
            This instance if the password matches.

        Raises
        ------
        PasswordMismatchError
            If the password does not match.
        NotConfiguredError
            If secure password support is disabled on the model
            and no other authenticate is available.
        """
        authenticator = Authenticator(
            self.__secure_password_config__,
            self.secure_password_hasher(),
            fallback=getattr(super(), "authenticate", None),
        )
        return await authenticator.authenticate(self, password)


__all__ = ["PasswordAttribute", "SecurePasswordMixin"]
