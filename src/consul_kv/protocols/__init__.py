# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Protocol definitions for the Consul KV client."""

from consul_kv.protocols.protocol_kv_transport import ProtocolKVTransport

__all__: list[str] = ["ProtocolKVTransport"]
