# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2025 Waldiez and contributors.

"""Secure password configuration and field policy resolution."""

import enum
from dataclasses import dataclass, field
from typing import Any, Union

from .config import DEFAULT_HASH_COST, SettingsManager

DEFAULT_PASSWORD_FIELD = "password"
DEFAULT_DIGEST_FIELD = "password_digest"


class HashingMode(str, enum.Enum):
    """When the plaintext password gets hashed."""

    SYNC_ON_SET = "sync_on_set"
    ASYNC_ON_PERSIST = "async_on_persist"


@dataclass(frozen=True)
class Disabled:
    """Secure password support is off."""


@dataclass(frozen=True)
class Default:
    """Store the digest in the default column."""


@dataclass(frozen=True)
class Named:
    """Store the digest in a custom column."""

    column: str


DigestFieldConfig = Union[Disabled, Default, Named]


def digest_field_from_flag(flag: Any) -> DigestFieldConfig:
    """Build the digest field config from a model's flag.

    Parameters
    ----------
    flag : Any
        The ``has_secure_password`` value, a bool or a column name.

    Returns
    -------
    DigestFieldConfig
        Named for a non-empty string, Default for other truthy
        values, Disabled otherwise.
    """
    if isinstance(flag, str):
        return Named(flag) if flag else Disabled()
    if flag:
        return Default()
    return Disabled()


@dataclass(frozen=True)
class SecurePasswordConfig:
    """Per model secure password configuration."""

    digest_field: DigestFieldConfig = field(default_factory=Disabled)
    hash_cost: int | None = None
    hashing_mode: HashingMode = HashingMode.SYNC_ON_SET
    default_hash_cost: int = DEFAULT_HASH_COST

    @property
    def enabled(self) -> bool:
        """Check if secure password support is enabled.

        Returns
        -------
        bool
            False only for a Disabled digest field.
        """
        return not isinstance(self.digest_field, Disabled)

    @classmethod
    def from_model(cls, model: type) -> "SecurePasswordConfig":
        """Build the configuration from a model's class flags.

        Unset flags fall back to the loaded settings.

        Parameters
        ----------
        model : type
            The model class.

        Returns
        -------
        SecurePasswordConfig
            The configuration.
        """
        settings = SettingsManager.get_settings()
        mode = getattr(model, "hashing_mode", None)
        if mode is None:
            mode = settings.hashing_mode
        return cls(
            digest_field=digest_field_from_flag(
                getattr(model, "has_secure_password", False)
            ),
            hash_cost=getattr(model, "hash_cost", None),
            hashing_mode=HashingMode(mode),
            default_hash_cost=settings.hash_cost,
        )


def resolve_digest_field(config: SecurePasswordConfig) -> str:
    """Get the column that stores the password digest.

    Parameters
    ----------
    config : SecurePasswordConfig
        The model configuration.

    Returns
    -------
    str
        The custom column name if one is configured,
        otherwise ``password_digest``.
    """
    if isinstance(config.digest_field, Named):
        return config.digest_field.column
    return DEFAULT_DIGEST_FIELD


def resolve_hash_cost(config: SecurePasswordConfig) -> int:
    """Get the hash cost factor to use.

    Parameters
    ----------
    config : SecurePasswordConfig
        The model configuration.

    Returns
    -------
    int
        The configured cost if it is a positive integer,
        otherwise the default cost.
    """
    cost = config.hash_cost
    # bool is an int subclass
    if isinstance(cost, int) and not isinstance(cost, bool) and cost > 0:
        return cost
    return config.default_hash_cost


__all__ = [
    "DEFAULT_PASSWORD_FIELD",
    "DEFAULT_DIGEST_FIELD",
    "HashingMode",
    "Disabled",
    "Default",
    "Named",
    "DigestFieldConfig",
    "digest_field_from_flag",
    "SecurePasswordConfig",
    "resolve_digest_field",
    "resolve_hash_cost",
]
