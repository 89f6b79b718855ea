# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Consul Read Consistency Mode Enumeration."""

from enum import Enum


class EnumConsistencyMode(str, Enum):
    """Read consistency modes supported by the Consul HTTP API.

    DEFAULT sends no consistency flag. CONSISTENT and STALE are sent as
    bare query flags (``?consistent`` / ``?stale``).
    """

    DEFAULT = "default"
    CONSISTENT = "consistent"
    STALE = "stale"


__all__ = ["EnumConsistencyMode"]
