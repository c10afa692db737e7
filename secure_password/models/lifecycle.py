# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2025 Waldiez and contributors.

"""Hooks that run before an instance is persisted."""

import inspect
import logging
from collections.abc import Awaitable, Iterator
from typing import Any, Callable, Union

LOG = logging.getLogger(__name__)

SAVING_HOOKS_SLOT = "_saving_hooks"

SavingHook = Callable[[Any], Union[Awaitable[None], None]]


class SavingHooks:
    """Ordered pre-persist callbacks of one instance."""

    def __init__(self) -> None:
        """Initialize an empty hook list."""
        self._hooks: list[SavingHook] = []

    def register(self, hook: SavingHook) -> None:
        """Append a hook.

        Parameters
        ----------
        hook : SavingHook
            The hook to run on save.
        """
        self._hooks.append(hook)

    def __len__(self) -> int:
        return len(self._hooks)

    def __iter__(self) -> Iterator[SavingHook]:
        return iter(self._hooks)

    async def run(self, instance: Any) -> None:
        """Run every hook in order, awaiting async ones.

        The first hook that raises stops the run and the error propagates.

        Parameters
        ----------
        instance : Any
            The instance being saved.
        """
        for hook in self._hooks:
            result = hook(instance)
            if inspect.isawaitable(result):
                await result
        LOG.debug(
            "Ran %d saving hook(s) for %s", len(self), type(instance).__name__
        )


__all__ = ["SAVING_HOOKS_SLOT", "SavingHook", "SavingHooks"]
