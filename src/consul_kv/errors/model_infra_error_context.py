# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Infrastructure Error Context Configuration Model.

This module defines the configuration model for infrastructure error context,
encapsulating common structured fields to keep error constructors short
while maintaining strong typing.
"""

from __future__ import annotations

from typing import Optional
from uuid import UUID, uuid4

from pydantic import BaseModel, ConfigDict, Field

from consul_kv.enums import EnumInfraTransportType


class ModelInfraErrorContext(BaseModel):
    """Configuration model for infrastructure error context.

    Attributes:
        transport_type: Type of transport (HTTP, CONSUL)
        operation: Operation being performed (kv.get, kv.acquire, etc.)
        target_name: Target resource or endpoint name
        correlation_id: Request correlation ID for distributed tracing

    Example:
        >>> context = ModelInfraErrorContext(
        ...     transport_type=EnumInfraTransportType.CONSUL,
        ...     operation="kv.get",
        ...     target_name="consul_kv_client",
        ...     correlation_id=uuid4(),
        ... )
        >>> raise RuntimeHostError("Operation failed", context=context)
    """

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
    )

    transport_type: Optional[EnumInfraTransportType] = Field(
        default=None,
        description="Type of infrastructure transport (HTTP, CONSUL)",
    )
    operation: Optional[str] = Field(
        default=None,
        description=(
            "Operation being performed (kv.get, kv.put, kv.delete, kv.acquire, "
            "kv.release, http.<method>, parse_env)"
        ),
    )
    target_name: Optional[str] = Field(
        default=None,
        description="Target resource or endpoint name",
    )
    correlation_id: Optional[UUID] = Field(
        default=None,
        description="Request correlation ID for distributed tracing",
    )

    @classmethod
    def with_correlation(
        cls,
        correlation_id: Optional[UUID] = None,
        **kwargs: object,
    ) -> ModelInfraErrorContext:
        """Create a context, generating a correlation ID when none is given."""
        return cls(correlation_id=correlation_id or uuid4(), **kwargs)


__all__ = ["ModelInfraErrorContext"]
