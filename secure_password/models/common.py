# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2025 Waldiez and contributors.

"""Common models and functions."""

from typing import Annotated, Any

from sqlalchemy import String, inspect
from sqlalchemy.ext.asyncio import AsyncAttrs
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column
from ulid import ULID

from .lifecycle import SAVING_HOOKS_SLOT, SavingHook, SavingHooks

PrimaryKey = Annotated[str, mapped_column(primary_key=True)]


def get_next_id() -> str:
    """Get next id.

    Returns
    -------
    str
        The Next id.
    """
    return ULID().hex


class Base(DeclarativeBase, AsyncAttrs):
    """Base table to be inherited by all tables."""

    id: Mapped[PrimaryKey] = mapped_column(
        String, primary_key=True, default=get_next_id
    )

    @property
    def saving_hooks(self) -> SavingHooks:
        """The hooks to run before this instance is saved.

        Returns
        -------
        SavingHooks
            The instance's hooks, created on first access.
        """
        hooks: SavingHooks | None = self.__dict__.get(SAVING_HOOKS_SLOT)
        if hooks is None:
            hooks = SavingHooks()
            self.__dict__[SAVING_HOOKS_SLOT] = hooks
            self.register_saving_hooks(hooks)
        return hooks

    def register_saving_hooks(self, hooks: SavingHooks) -> None:
        """Register the model's own saving hooks.

        Called once per instance, before any hook added with on_saving.

        Parameters
        ----------
        hooks : SavingHooks
            The instance's hooks.
        """

    def after_save(self) -> None:
        """Called once the instance was committed."""

    def on_saving(self, hook: SavingHook) -> None:
        """Run a hook before each save of this instance.

        Parameters
        ----------
        hook : SavingHook
            Called with the instance, may be async.
            Raising aborts the save.
        """
        self.saving_hooks.register(hook)

    def to_dict(self) -> dict[str, Any]:
        """Get the loaded column values of the instance.

        Returns
        -------
        dict[str, Any]
            Column key to value.
        """
        state = inspect(self)
        return {
            attr.key: state.dict[attr.key]
            for attr in state.mapper.column_attrs
            if attr.key in state.dict
        }
