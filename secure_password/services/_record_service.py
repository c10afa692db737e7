# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2025 Waldiez and contributors.

"""Persist model instances after running their saving hooks."""

import logging
from typing import Any, TypeVar

from sqlalchemy import inspect
from sqlalchemy.ext.asyncio.session import AsyncSession

from secure_password.models.common import Base

LOG = logging.getLogger(__name__)

B = TypeVar("B", bound=Base)
_NOT_LOADED = object()


async def save_record(session: AsyncSession, record: B) -> B:
    """Run the record's saving hooks, then add and commit it.

    If a hook fails, the record's column values are put back to what
    they were before the call. If the commit fails, the session is
    rolled back and a persistent record is reloaded from the database.
    Either way the error propagates.

    Parameters
    ----------
    session : AsyncSession
        The database session.
    record : B
        The record to save.

    Returns
    -------
    B
        The saved record.
    """
    before = record.to_dict()
    try:
        await record.saving_hooks.run(record)
    except Exception:
        LOG.debug("Saving hook failed for %s", type(record).__name__)
        _restore(record, before)
        raise
    session.add(record)
    try:
        await session.commit()
    except Exception:
        LOG.debug("Commit failed for %s", type(record).__name__)
        _restore(record, before)
        await session.rollback()
        if inspect(record).persistent:
            await session.refresh(record)
        raise
    await session.refresh(record)
    record.after_save()
    return record


async def get_record(
    session: AsyncSession, model: type[B], record_id: str
) -> B | None:
    """Get a record by its id.

    Parameters
    ----------
    session : AsyncSession
        The database session.
    model : type[B]
        The model class.
    record_id : str
        The record id.

    Returns
    -------
    B | None
        The record or None if not found.
    """
    return await session.get(model, record_id)


def _restore(record: Base, values: dict[str, Any]) -> None:
    """Put back the column values a failed save changed."""
    state = inspect(record)
    for attr in state.mapper.column_attrs:
        key = attr.key
        if key in state.expired_attributes:
            continue
        current = state.dict.get(key, _NOT_LOADED)
        if key in values:
            if current is not values[key]:
                setattr(record, key, values[key])
        elif current is not _NOT_LOADED:
            # set during the failed save, it was not there before
            if state.has_identity and state.session is not None:
                state.session.expire(record, [key])
            else:
                delattr(record, key)
