# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""consul_kv - typed async client for the Consul KV namespace.

Provides typed get/put/delete over Consul's ``/v1/kv`` HTTP API and
session-based distributed locking (acquire/release). Values travel as
UTF-8 JSON and are decoded into caller-specified types via pydantic.

Example:
    >>> from consul_kv import ConsulKVClient, ModelConsulClientConfig, ModelKVEntry
    >>> async with ConsulKVClient.from_config(ModelConsulClientConfig()) as kv:
    ...     await kv.put(ModelKVEntry(key="service/leader", value={"node": "a"}))
    ...     entry, meta = await kv.get("service/leader", dict[str, str])
"""

from consul_kv.client import ConsulKVClient
from consul_kv.codecs import decode_entry, encode_value
from consul_kv.enums import EnumConsistencyMode, EnumKVOperation
from consul_kv.errors import (
    InfraAuthenticationError,
    InfraConnectionError,
    InfraConsulError,
    InfraTimeoutError,
    KVDecodeError,
    KVEncodeError,
    KVSessionRequiredError,
    ProtocolConfigurationError,
    RuntimeHostError,
)
from consul_kv.models import (
    ModelConsulClientConfig,
    ModelKVEntry,
    ModelKVWireRecord,
    ModelQueryMeta,
    ModelQueryOptions,
    ModelWriteMeta,
    ModelWriteOptions,
)
from consul_kv.protocols import ProtocolKVTransport
from consul_kv.transport import ConsulHttpTransport

__version__ = "0.1.0"

__all__: list[str] = [
    "ConsulHttpTransport",
    "ConsulKVClient",
    "EnumConsistencyMode",
    "EnumKVOperation",
    "InfraAuthenticationError",
    "InfraConnectionError",
    "InfraConsulError",
    "InfraTimeoutError",
    "KVDecodeError",
    "KVEncodeError",
    "KVSessionRequiredError",
    "ModelConsulClientConfig",
    "ModelKVEntry",
    "ModelKVWireRecord",
    "ModelQueryMeta",
    "ModelQueryOptions",
    "ModelWriteMeta",
    "ModelWriteOptions",
    "ProtocolConfigurationError",
    "ProtocolKVTransport",
    "RuntimeHostError",
    "decode_entry",
    "encode_value",
]
