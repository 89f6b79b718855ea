# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Infrastructure-Specific Error Classes.

This module defines the base error classes for the consul_kv package.

Error Hierarchy:
    RuntimeHostError (base infrastructure error)
    ├── ProtocolConfigurationError
    ├── InfraConnectionError
    ├── InfraTimeoutError
    └── InfraAuthenticationError

All errors:
    - Use EnumKVErrorCode for error classification
    - Support proper error chaining with `raise ... from e`
    - Include structured context for debugging
    - Support correlation IDs for request tracking
    - Accept ModelInfraErrorContext for bundled context parameters
"""

from __future__ import annotations

from typing import Optional
from uuid import UUID

from consul_kv.enums import EnumKVErrorCode
from consul_kv.errors.model_infra_error_context import ModelInfraErrorContext


class RuntimeHostError(Exception):
    """Base error class for Consul KV client errors.

    All client errors inherit from this class. Structured fields from
    ModelInfraErrorContext and any extra keyword arguments are collected
    into the ``context`` dict.

    Example:
        >>> context = ModelInfraErrorContext(
        ...     transport_type=EnumInfraTransportType.CONSUL,
        ...     operation="kv.get",
        ...     target_name="consul_kv_client",
        ... )
        >>> raise RuntimeHostError("Operation failed", context=context, key="a/b")
    """

    def __init__(
        self,
        message: str,
        error_code: Optional[EnumKVErrorCode] = None,
        context: Optional[ModelInfraErrorContext] = None,
        **extra_context: object,
    ) -> None:
        """Initialize RuntimeHostError with structured fields.

        Args:
            message: Human-readable error message
            error_code: Error code (defaults to OPERATION_FAILED)
            context: Bundled infrastructure context (transport_type, operation, etc.)
            **extra_context: Additional context information
        """
        structured_context: dict[str, object] = dict(extra_context)

        correlation_id: Optional[UUID] = None
        if context is not None:
            if context.transport_type is not None:
                structured_context["transport_type"] = context.transport_type
            if context.operation is not None:
                structured_context["operation"] = context.operation
            if context.target_name is not None:
                structured_context["target_name"] = context.target_name
            correlation_id = context.correlation_id

        super().__init__(message)
        self.message: str = message
        self.error_code: EnumKVErrorCode = (
            error_code or EnumKVErrorCode.OPERATION_FAILED
        )
        self.correlation_id: Optional[UUID] = correlation_id
        self.context: dict[str, object] = structured_context

    def __str__(self) -> str:
        return f"[{self.error_code.value}] {self.message}"


class ProtocolConfigurationError(RuntimeHostError):
    """Raised when configuration or local input validation fails.

    Used for invalid environment values, empty keys, and other problems
    detected before any request is sent.
    """

    def __init__(
        self,
        message: str,
        context: Optional[ModelInfraErrorContext] = None,
        **extra_context: object,
    ) -> None:
        super().__init__(
            message=message,
            error_code=EnumKVErrorCode.INVALID_CONFIGURATION,
            context=context,
            **extra_context,
        )


class InfraConnectionError(RuntimeHostError):
    """Raised when the connection to Consul fails.

    Example:
        >>> raise InfraConnectionError(
        ...     "Failed to connect to Consul",
        ...     context=context,
        ...     host="consul.example.com",
        ...     port=8500,
        ... )
    """

    def __init__(
        self,
        message: str,
        context: Optional[ModelInfraErrorContext] = None,
        **extra_context: object,
    ) -> None:
        super().__init__(
            message=message,
            error_code=EnumKVErrorCode.CONNECTION_ERROR,
            context=context,
            **extra_context,
        )


class InfraTimeoutError(RuntimeHostError):
    """Raised when a request exceeds the configured timeout."""

    def __init__(
        self,
        message: str,
        context: Optional[ModelInfraErrorContext] = None,
        **extra_context: object,
    ) -> None:
        super().__init__(
            message=message,
            error_code=EnumKVErrorCode.TIMEOUT_ERROR,
            context=context,
            **extra_context,
        )


class InfraAuthenticationError(RuntimeHostError):
    """Raised when Consul rejects the ACL token (HTTP 401/403)."""

    def __init__(
        self,
        message: str,
        context: Optional[ModelInfraErrorContext] = None,
        **extra_context: object,
    ) -> None:
        super().__init__(
            message=message,
            error_code=EnumKVErrorCode.AUTHENTICATION_ERROR,
            context=context,
            **extra_context,
        )


__all__ = [
    "RuntimeHostError",
    "ProtocolConfigurationError",
    "InfraConnectionError",
    "InfraTimeoutError",
    "InfraAuthenticationError",
]
