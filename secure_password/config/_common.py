# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2025 Waldiez and contributors.

"""Common configuration constants and functions."""

import os
import sys
from pathlib import Path
from typing import Callable, TypeVar

from dotenv import load_dotenv

ENV_PREFIX = "SECURE_PASSWORD_"
DOT_ENV_PATH = Path(__file__).parent.parent.parent.resolve() / ".env"
if DOT_ENV_PATH.exists():
    load_dotenv(DOT_ENV_PATH, override=True)

T = TypeVar("T")


def get_value(
    cli_key: str,
    env_key: str,
    cast: Callable[[str], T],
    fallback: T,
) -> T:
    """Get a value from CLI args, env vars, or fallback, with type casting.

    Parameters
    ----------
    cli_key : str
        The CLI argument key, e.g. ``--hash-cost``
    env_key : str
        The environment variable key, without the prefix
    cast : Callable[[str], T]
        The casting function
    fallback : T
        Returned if nothing is set or casting fails

    Returns
    -------
    T
        The value
    """
    raw = os.environ.get(f"{ENV_PREFIX}{env_key}", "")
    if cli_key in sys.argv:
        index = sys.argv.index(cli_key) + 1
        if index < len(sys.argv) and sys.argv[index]:
            raw = sys.argv[index]
    if not raw:
        return fallback
    try:
        return cast(raw)
    except (ValueError, TypeError):
        return fallback
