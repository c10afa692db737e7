# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2025 Waldiez and contributors.
# pylint: disable=missing-return-doc,missing-param-doc,missing-yield-doc
"""Shared fixtures for tests."""

import os
from collections.abc import AsyncGenerator, Generator
from pathlib import Path

import pytest
from sqlalchemy.ext.asyncio import (
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from secure_password.config import SettingsManager
from secure_password.models import Base

ENV_KEY_PREFIX = "SECURE_PASSWORD_"


@pytest.fixture(scope="session")
def anyio_backend() -> str:
    """Return the backend to use for anyio tests."""
    return "asyncio"


@pytest.fixture(scope="function", autouse=True)
def reset_settings_and_env() -> Generator[None, None, None]:
    """Automatically reset SettingsManager before each test."""
    SettingsManager.reset_settings()
    for key in list(os.environ):
        if key.startswith(ENV_KEY_PREFIX):
            os.environ.pop(key, "")
    yield
    SettingsManager.reset_settings()


@pytest.fixture(name="session_maker")
async def session_maker_fixture(
    tmp_path: Path,
) -> AsyncGenerator[
    async_sessionmaker[AsyncSession], None
]:
    """Get a session maker bound to a fresh database."""
    engine = create_async_engine(
        f"sqlite+aiosqlite:///{tmp_path / 'test.db'}",
        connect_args={"check_same_thread": False, "timeout": 60},
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield async_sessionmaker(
        bind=engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
    )
    await engine.dispose()


@pytest.fixture(name="async_session")
async def async_session_fixture(
    session_maker: async_sessionmaker[AsyncSession],
) -> AsyncGenerator[AsyncSession, None]:
    """Get an async session."""
    async with session_maker() as session:
        yield session
