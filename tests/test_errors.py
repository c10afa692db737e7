# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2025 Waldiez and contributors.
"""Tests for secure_password.errors."""

from secure_password.errors import (
    HashingFailureError,
    NotConfiguredError,
    PasswordMismatchError,
    SecurePasswordError,
)


def test_password_mismatch_error() -> None:
    """Test the default message."""
    error = PasswordMismatchError()
    assert str(error) == "Invalid password"
    assert isinstance(error, SecurePasswordError)
    assert str(PasswordMismatchError("nope")) == "nope"


def test_not_configured_error() -> None:
    """Test it is a TypeError naming the model."""
    error = NotConfiguredError("User")
    assert isinstance(error, TypeError)
    assert isinstance(error, SecurePasswordError)
    assert error.model_name == "User"
    assert "User" in str(error)


def test_hashing_failure_error() -> None:
    """Test the hashing failure error."""
    assert issubclass(HashingFailureError, SecurePasswordError)
    assert not issubclass(HashingFailureError, PasswordMismatchError)
