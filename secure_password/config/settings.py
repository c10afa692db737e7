# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2025 Waldiez and contributors.

"""Secure password settings module."""

import logging
from typing import Any, Literal

from dotenv import load_dotenv
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from typing_extensions import Annotated

from ._common import DOT_ENV_PATH, ENV_PREFIX
from ._hashing import (
    MAX_HASH_COST,
    MIN_HASH_COST,
    HashingModeType,
    get_hash_cost,
    get_hashing_mode,
)

LOG = logging.getLogger(__name__)

LogLevelType = Literal["CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"]
"""Possible log levels."""


class Settings(BaseSettings):
    """Settings class."""

    hash_cost: Annotated[int, Field(ge=MIN_HASH_COST, le=MAX_HASH_COST)] = (
        get_hash_cost()
    )
    hashing_mode: HashingModeType = get_hashing_mode()
    log_level: LogLevelType = "INFO"

    model_config = SettingsConfigDict(
        env_prefix=ENV_PREFIX,
        env_ignore_empty=True,
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def validate_log_level(cls, value: Any) -> Any:
        """Validate the log level.

        Parameters
        ----------
        value : Any
            The value

        Returns
        -------
        Any
            The upper case log level
        """
        if isinstance(value, str):
            return value.upper()
        return value  # pragma: no cover

    @classmethod
    def load(cls) -> "Settings":
        """Load the settings.

        Returns
        -------
        Settings
            The settings instance
        """
        if DOT_ENV_PATH.exists():
            load_dotenv(DOT_ENV_PATH, override=True)
        instance = cls()
        LOG.debug(
            "Loaded settings: hash_cost=%s, hashing_mode=%s",
            instance.hash_cost,
            instance.hashing_mode,
        )
        return instance
