# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Consul KV Client Errors Module.

Exports:
    ModelInfraErrorContext: Configuration model for bundled error context
    RuntimeHostError: Base error class
    ProtocolConfigurationError: Configuration and local input validation errors
    InfraConnectionError: Connection errors
    InfraTimeoutError: Timeout errors
    InfraAuthenticationError: ACL token rejected
    InfraConsulError: Consul API errors (status codes, malformed bodies)
    KVSessionRequiredError: Lock operation without a session
    KVEncodeError: Value serialization failure
    KVDecodeError: Stored value decoding failure

Correlation ID Assignment:
    Every error accepts a correlation_id through ModelInfraErrorContext.
    The client generates one per operation with uuid4() and propagates it to
    the transport, so one request's errors and log records share an ID.

Error Sanitization Guidelines:
    NEVER include in error messages or context:
        - ACL tokens
        - Full response bodies (use sanitize_error_string on excerpts)
        - Decoded values (they may hold application secrets)

    SAFE to include:
        - Keys, operation names, status codes, correlation IDs
"""

from consul_kv.errors.error_consul import InfraConsulError
from consul_kv.errors.error_kv import (
    KVDecodeError,
    KVEncodeError,
    KVSessionRequiredError,
)
from consul_kv.errors.infra_errors import (
    InfraAuthenticationError,
    InfraConnectionError,
    InfraTimeoutError,
    ProtocolConfigurationError,
    RuntimeHostError,
)
from consul_kv.errors.model_infra_error_context import ModelInfraErrorContext

__all__: list[str] = [
    "ModelInfraErrorContext",
    "RuntimeHostError",
    "ProtocolConfigurationError",
    "InfraConnectionError",
    "InfraTimeoutError",
    "InfraAuthenticationError",
    "InfraConsulError",
    "KVSessionRequiredError",
    "KVEncodeError",
    "KVDecodeError",
]
