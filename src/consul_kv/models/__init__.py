# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Pydantic models for the Consul KV client."""

from consul_kv.models.model_consul_client_config import ModelConsulClientConfig
from consul_kv.models.model_kv_entry import ModelKVEntry
from consul_kv.models.model_kv_wire_record import ModelKVWireRecord
from consul_kv.models.model_query_meta import ModelQueryMeta
from consul_kv.models.model_query_options import ModelQueryOptions
from consul_kv.models.model_write_meta import ModelWriteMeta
from consul_kv.models.model_write_options import ModelWriteOptions

__all__: list[str] = [
    "ModelConsulClientConfig",
    "ModelKVEntry",
    "ModelKVWireRecord",
    "ModelQueryMeta",
    "ModelQueryOptions",
    "ModelWriteMeta",
    "ModelWriteOptions",
]
