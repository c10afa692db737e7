# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2025 Waldiez and contributors.
"""Logging configuration module."""

import logging.config
from typing import Any, Dict

from .config import SettingsManager


# fmt: off
def get_logging_config(log_level: str) -> Dict[str, Any]:
    """Get logging config dict.

    Parameters
    ----------
    log_level : str
        The log level

    Returns
    -------
    Dict[str, Any]
        The logging config dict
    """
    # skip spamming logs from these modules
    modules_to_have_level_warning = [
        "sqlalchemy.engine",
        "aiosqlite",
    ]
    logging_config: Dict[str, Any] = {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "default": {
                "format": "%(levelname)s %(asctime)s.%(msecs)03d [%(name)s:%(filename)s:%(lineno)d] %(message)s",  # pylint: disable=line-too-long # noqa: E501
                "datefmt": "%Y-%m-%d %H:%M:%S",
            },
        },
        "handlers": {
            "default": {
                "class": "logging.StreamHandler",
                "formatter": "default",
                "stream": "ext://sys.stderr",
            },
        },
        "loggers": {
            "secure_password": {
                "handlers": ["default"],
                "level": log_level,
                "propagate": False,
            },
        },
    }
    for module in modules_to_have_level_warning:
        logging_config["loggers"][module] = {
            "handlers": ["default"],
            "level": "WARNING",
            "propagate": False,
        }
    return logging_config
# fmt: on


def configure_logging(log_level: str | None = None) -> None:
    """Apply the logging config.

    Parameters
    ----------
    log_level : str | None
        The log level, the ``log_level`` setting if not given.
    """
    if log_level is None:
        log_level = SettingsManager.get_settings().log_level
    logging.config.dictConfig(get_logging_config(log_level))
