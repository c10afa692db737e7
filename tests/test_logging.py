# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2025 Waldiez and contributors.

"""Tests for the logging configuration."""
# pylint: disable=missing-return-doc,missing-param-doc,missing-raises-doc

import logging
import os
from unittest.mock import patch

# noinspection PyProtectedMember
from secure_password._logging import configure_logging, get_logging_config
from secure_password.config import ENV_PREFIX


def test_get_logging_config() -> None:
    """Test the get_logging_config function."""
    log_level = "WARNING"
    config = get_logging_config(log_level)
    assert config["version"] == 1
    assert config["formatters"]["default"]["datefmt"] == "%Y-%m-%d %H:%M:%S"
    package_logger = config["loggers"]["secure_password"]
    assert package_logger["level"] == log_level
    assert package_logger["handlers"] == ["default"]
    assert package_logger["propagate"] is False
    for module in ["sqlalchemy.engine", "aiosqlite"]:
        module_logger = config["loggers"][module]
        assert module_logger["level"] == "WARNING"
        assert module_logger["handlers"] == ["default"]


def test_configure_logging() -> None:
    """Test an explicit level is applied."""
    configure_logging("ERROR")
    assert logging.getLogger("secure_password").level == logging.ERROR
    configure_logging("INFO")
    assert logging.getLogger("secure_password").level == logging.INFO


def test_configure_logging_from_settings() -> None:
    """Test the level falls back to the log_level setting."""
    with patch.dict(os.environ, {f"{ENV_PREFIX}LOG_LEVEL": "debug"}):
        configure_logging()
    assert logging.getLogger("secure_password").level == logging.DEBUG
    configure_logging("INFO")
