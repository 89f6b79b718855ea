# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""HTTP transport for the Consul KV client."""

from consul_kv.transport.transport_consul_http import ConsulHttpTransport

__all__: list[str] = ["ConsulHttpTransport"]
