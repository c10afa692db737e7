# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2025 Waldiez and contributors.

"""Secure password errors."""


class SecurePasswordError(Exception):
    """Base error for secure password handling."""


class PasswordMismatchError(SecurePasswordError):
    """Authentication failed.

    Raised for a wrong password, an empty password, a missing digest
    or a digest the hash primitive could not read. The cause is not
    exposed to the caller.
    """

    def __init__(self, message: str | None = None) -> None:
        """Initialize the error.

        Parameters
        ----------
        message : str | None
            Optional message, defaults to "Invalid password".
        """
        super().__init__(message or "Invalid password")


class NotConfiguredError(SecurePasswordError, TypeError):
    """Authenticate called on a model without secure password support."""

    def __init__(self, model_name: str) -> None:
        """Initialize the error.

        Parameters
        ----------
        model_name : str
            The name of the model class.
        """
        super().__init__(
            f"{model_name} does not have secure password support enabled"
        )
        self.model_name = model_name


class HashingFailureError(SecurePasswordError):
    """The hash primitive failed while hashing a password."""


__all__ = [
    "SecurePasswordError",
    "PasswordMismatchError",
    "NotConfiguredError",
    "HashingFailureError",
]
