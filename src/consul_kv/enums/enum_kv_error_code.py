# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""KV Client Error Code Enumeration.

Classifies every error raised by the Consul KV client so callers can
branch on a stable code instead of on exception message text.
"""

from enum import Enum


class EnumKVErrorCode(str, Enum):
    """Error codes for the Consul KV client error hierarchy.

    Attributes:
        OPERATION_FAILED: Generic failure, including store-side HTTP errors
        INVALID_CONFIGURATION: Invalid configuration or local precondition failure
        CONNECTION_ERROR: Network connection to Consul failed
        TIMEOUT_ERROR: Request exceeded the configured timeout
        AUTHENTICATION_ERROR: ACL token rejected by Consul
        ENCODE_ERROR: Value could not be serialized for the wire
        DECODE_ERROR: Stored value could not be decoded into the target type
    """

    OPERATION_FAILED = "OPERATION_FAILED"
    INVALID_CONFIGURATION = "INVALID_CONFIGURATION"
    CONNECTION_ERROR = "CONNECTION_ERROR"
    TIMEOUT_ERROR = "TIMEOUT_ERROR"
    AUTHENTICATION_ERROR = "AUTHENTICATION_ERROR"
    ENCODE_ERROR = "ENCODE_ERROR"
    DECODE_ERROR = "DECODE_ERROR"


__all__ = ["EnumKVErrorCode"]
