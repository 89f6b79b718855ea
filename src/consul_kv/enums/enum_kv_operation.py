# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""KV Operation Enumeration.

Names the public KV operations. Values are used as the ``operation`` field
in error context and structured log records.
"""

from enum import Enum


class EnumKVOperation(str, Enum):
    """Public operations of the Consul KV client."""

    GET = "kv.get"
    PUT = "kv.put"
    DELETE = "kv.delete"
    ACQUIRE = "kv.acquire"
    RELEASE = "kv.release"


__all__ = ["EnumKVOperation"]
