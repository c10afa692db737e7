# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2025 Waldiez and contributors.

"""Record service."""

from ._record_service import get_record, save_record


# pylint: disable=too-few-public-methods
class RecordService:
    """Record service."""

    save = staticmethod(save_record)
    get = staticmethod(get_record)


__all__ = ["RecordService"]
