# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Utility functions for the Consul KV client."""

from consul_kv.utils.util_env_parsing import parse_env_float, parse_env_int
from consul_kv.utils.util_error_sanitization import sanitize_error_string

__all__: list[str] = [
    "parse_env_float",
    "parse_env_int",
    "sanitize_error_string",
]
