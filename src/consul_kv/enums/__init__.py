# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Enumerations for the Consul KV client.

Exports:
    EnumConsistencyMode: Read consistency modes (default, consistent, stale)
    EnumInfraTransportType: Transport types for error context
    EnumKVErrorCode: Error classification codes
    EnumKVOperation: Public KV operation names
"""

from consul_kv.enums.enum_consistency_mode import EnumConsistencyMode
from consul_kv.enums.enum_infra_transport_type import EnumInfraTransportType
from consul_kv.enums.enum_kv_error_code import EnumKVErrorCode
from consul_kv.enums.enum_kv_operation import EnumKVOperation

__all__: list[str] = [
    "EnumConsistencyMode",
    "EnumInfraTransportType",
    "EnumKVErrorCode",
    "EnumKVOperation",
]
