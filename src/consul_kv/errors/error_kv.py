# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""KV Value and Lock Error Classes.

Errors raised by the KV core itself, as opposed to the transport:

    KVSessionRequiredError: acquire/release called without a session
    KVEncodeError: value could not be serialized for the request body
    KVDecodeError: stored value could not be decoded into the target type
"""

from __future__ import annotations

from consul_kv.enums import EnumKVErrorCode
from consul_kv.errors.infra_errors import ProtocolConfigurationError, RuntimeHostError
from consul_kv.errors.model_infra_error_context import ModelInfraErrorContext


class KVSessionRequiredError(ProtocolConfigurationError):
    """Raised when a lock operation is attempted on an entry without a session.

    Detected locally; no request is sent to Consul.
    """

    def __init__(
        self,
        message: str,
        context: ModelInfraErrorContext | None = None,
        consul_key: str | None = None,
        **extra_context: object,
    ) -> None:
        if consul_key is not None:
            extra_context["consul_key"] = consul_key
        super().__init__(message=message, context=context, **extra_context)


class KVEncodeError(RuntimeHostError):
    """Raised when a value cannot be serialized to JSON."""

    def __init__(
        self,
        message: str,
        context: ModelInfraErrorContext | None = None,
        consul_key: str | None = None,
        **extra_context: object,
    ) -> None:
        if consul_key is not None:
            extra_context["consul_key"] = consul_key
        super().__init__(
            message=message,
            error_code=EnumKVErrorCode.ENCODE_ERROR,
            context=context,
            **extra_context,
        )


class KVDecodeError(RuntimeHostError):
    """Raised when a stored value cannot be decoded.

    The ``stage`` attribute names the step that failed: ``base64``,
    ``utf8`` or ``deserialize``.
    """

    def __init__(
        self,
        message: str,
        stage: str,
        context: ModelInfraErrorContext | None = None,
        consul_key: str | None = None,
        **extra_context: object,
    ) -> None:
        extra_context["stage"] = stage
        if consul_key is not None:
            extra_context["consul_key"] = consul_key
        super().__init__(
            message=message,
            error_code=EnumKVErrorCode.DECODE_ERROR,
            context=context,
            **extra_context,
        )
        self.stage: str = stage


__all__: list[str] = [
    "KVDecodeError",
    "KVEncodeError",
    "KVSessionRequiredError",
]
