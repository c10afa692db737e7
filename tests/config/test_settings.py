# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2025 Waldiez and contributors.

# pylint: disable=missing-return-doc,missing-param-doc,missing-yield-doc
"""Test secure_password.config.settings."""

import os
from unittest.mock import patch

import pytest
from pydantic import ValidationError

from secure_password.config import ENV_PREFIX, Settings, SettingsManager


def test_default_settings_load() -> None:
    """Ensure default settings are loaded properly."""
    settings = Settings.load()
    assert settings.hash_cost == 12
    assert settings.hashing_mode == "sync_on_set"
    assert settings.log_level == "INFO"


@patch.dict(
    os.environ,
    {
        f"{ENV_PREFIX}HASH_COST": "10",
        f"{ENV_PREFIX}HASHING_MODE": "async_on_persist",
    },
)
def test_env_override() -> None:
    """Ensure environment variables override default settings."""
    settings = Settings()
    assert settings.hash_cost == 10
    assert settings.hashing_mode == "async_on_persist"


@pytest.mark.parametrize("cost", [3, 32])
def test_hash_cost_range(cost: int) -> None:
    """Ensure the hash cost stays in bcrypt's range."""
    with pytest.raises(ValidationError):
        Settings(hash_cost=cost)


@patch.dict(os.environ, {f"{ENV_PREFIX}LOG_LEVEL": "warning"})
def test_log_level_is_upper_cased() -> None:
    """Ensure the log level is read case insensitively."""
    assert Settings().log_level == "WARNING"


def test_invalid_log_level() -> None:
    """Ensure unknown log levels are rejected."""
    with pytest.raises(ValidationError):
        Settings(log_level="loud")  # type: ignore[arg-type]


def test_invalid_hashing_mode() -> None:
    """Ensure unknown hashing modes are rejected."""
    with pytest.raises(ValidationError):
        Settings(hashing_mode="later")  # type: ignore[arg-type]


def test_settings_manager_caches() -> None:
    """Ensure the manager returns the same instance until reset."""
    first = SettingsManager.get_settings()
    assert SettingsManager.get_settings() is first

    with patch.dict(os.environ, {f"{ENV_PREFIX}HASH_COST": "9"}):
        assert SettingsManager.get_settings().hash_cost == 12
        reloaded = SettingsManager.load_settings(force_reload=True)
        assert reloaded is not first
        assert reloaded.hash_cost == 9

    SettingsManager.reset_settings()
    assert SettingsManager.get_settings() is not reloaded
