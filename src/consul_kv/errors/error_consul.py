# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Consul-Specific Infrastructure Error Class.

This module defines InfraConsulError for failures reported by the Consul
HTTP API itself: unexpected status codes and malformed response bodies.
"""

from __future__ import annotations

from consul_kv.enums import EnumKVErrorCode
from consul_kv.errors.infra_errors import RuntimeHostError
from consul_kv.errors.model_infra_error_context import ModelInfraErrorContext


class InfraConsulError(RuntimeHostError):
    """Error reported by Consul while serving a KV request.

    Common use cases:
        - Non-2xx status other than authentication failures
        - Response body that is not valid JSON
        - Response body of the wrong shape for the operation

    Example:
        >>> raise InfraConsulError(
        ...     "Consul returned HTTP 500",
        ...     context=context,
        ...     consul_key="config/database/connection",
        ...     status_code=500,
        ... )
    """

    def __init__(
        self,
        message: str,
        context: ModelInfraErrorContext | None = None,
        consul_key: str | None = None,
        status_code: int | None = None,
        **extra_context: object,
    ) -> None:
        """Initialize InfraConsulError with Consul-specific context.

        Args:
            message: Human-readable error message
            context: Bundled infrastructure context
            consul_key: Optional KV key that caused the error
            status_code: Optional HTTP status code returned by Consul
            **extra_context: Additional context information
        """
        if consul_key is not None:
            extra_context["consul_key"] = consul_key
        if status_code is not None:
            extra_context["status_code"] = status_code

        super().__init__(
            message=message,
            error_code=EnumKVErrorCode.OPERATION_FAILED,
            context=context,
            **extra_context,
        )
        self.status_code: int | None = status_code


__all__: list[str] = [
    "InfraConsulError",
]
