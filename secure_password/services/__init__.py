# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2025 Waldiez and contributors.
"""Secure password services."""

from .record_service import RecordService

__all__ = ["RecordService"]
