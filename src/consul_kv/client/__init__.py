# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Consul KV client."""

from consul_kv.client.client_consul_kv import SUPPORTED_OPERATIONS, ConsulKVClient

__all__: list[str] = ["ConsulKVClient", "SUPPORTED_OPERATIONS"]
