# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Error Sanitization Utilities.

Consul error bodies are plain text and can echo request details back,
including ACL tokens. Anything taken from a response body and placed into
an error message or log record goes through sanitize_error_string first.
"""

from __future__ import annotations

SENSITIVE_PATTERNS: tuple[str, ...] = (
    "token",
    "secret",
    "password",
    "authorization",
    "x-consul-token",
    "://",
)


def sanitize_error_string(error_str: str, max_length: int = 200) -> str:
    """Sanitize a raw error string for safe inclusion in logs and errors.

    Sanitization rules:
        1. If a sensitive pattern is present, return a generic redacted message
        2. Truncate long messages

    Example:
        >>> sanitize_error_string("ACL not found for token abc")
        '[REDACTED - potentially sensitive data]'
        >>> sanitize_error_string("rpc error: No cluster leader")
        'rpc error: No cluster leader'
    """
    if not error_str:
        return ""

    error_lower = error_str.lower()
    for pattern in SENSITIVE_PATTERNS:
        if pattern in error_lower:
            return "[REDACTED - potentially sensitive data]"

    if len(error_str) > max_length:
        return error_str[:max_length] + "... [truncated]"

    return error_str


__all__: list[str] = ["SENSITIVE_PATTERNS", "sanitize_error_string"]
