# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2025 Waldiez and contributors.

# pylint: disable=missing-param-doc,missing-return-doc
"""Tests for saving hooks."""

from typing import Any

import pytest

from secure_password.models import SavingHooks
from tests.tables import AsyncUser, FastUser


@pytest.mark.anyio
async def test_runs_hooks_in_order() -> None:
    """Test sync and async hooks run in registration order."""
    calls: list[str] = []
    hooks = SavingHooks()

    def first(instance: Any) -> None:
        calls.append(f"first:{instance}")

    async def second(instance: Any) -> None:
        calls.append(f"second:{instance}")

    hooks.register(first)
    hooks.register(second)
    await hooks.run("x")

    assert calls == ["first:x", "second:x"]
    assert len(hooks) == 2
    assert list(hooks) == [first, second]


@pytest.mark.anyio
async def test_stops_on_error() -> None:
    """Test the first failing hook stops the run."""
    calls: list[str] = []
    hooks = SavingHooks()

    async def failing(_instance: Any) -> None:
        raise RuntimeError("nope")

    hooks.register(failing)
    hooks.register(lambda _instance: calls.append("after"))

    with pytest.raises(RuntimeError):
        await hooks.run(object())
    assert not calls


def test_hashing_hook_only_in_async_mode() -> None:
    """Test only async mode registers the hashing hook, exactly once."""
    assert len(FastUser(id="1").saving_hooks) == 0

    user = AsyncUser(id="1")
    assert len(user.saving_hooks) == 1
    assert len(user.saving_hooks) == 1


def test_on_saving_runs_after_the_hashing_hook() -> None:
    """Test extra hooks are added after the model's own hook."""
    user = AsyncUser(id="1")

    def validate(_instance: Any) -> None:
        """Validate."""

    user.on_saving(validate)

    hooks = list(user.saving_hooks)
    assert len(hooks) == 2
    assert hooks[-1] is validate


def test_hooks_are_per_instance() -> None:
    """Test hooks are not shared between instances."""
    first = AsyncUser(id="1")
    second = AsyncUser(id="2")
    first.on_saving(lambda _instance: None)

    assert len(first.saving_hooks) == 2
    assert len(second.saving_hooks) == 1
