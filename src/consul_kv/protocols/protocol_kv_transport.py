# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Protocol for the KV Request Primitive.

This module defines the narrow request interface the KV client calls
through. The client owns URL construction, parameter shaping and value
encoding; the transport owns the HTTP exchange, response parsing,
metadata extraction and mapping of transport failures onto the error
hierarchy.

ConsulHttpTransport is the production implementation. Tests substitute
recording doubles to assert which requests were (or were not) issued.

Example:
    >>> class RecordingTransport:
    ...     def __init__(self) -> None:
    ...         self.calls: list[tuple[str, str]] = []
    ...
    ...     async def put(self, path, body, params=None, options=None, *, correlation_id=None):
    ...         self.calls.append(("PUT", path))
    ...         return True, ModelWriteMeta()
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable
from uuid import UUID

if TYPE_CHECKING:
    from consul_kv.models import (
        ModelQueryMeta,
        ModelQueryOptions,
        ModelWriteMeta,
        ModelWriteOptions,
    )


@runtime_checkable
class ProtocolKVTransport(Protocol):
    """Request primitive used by ConsulKVClient.

    Methods:
        get: Issue a GET and return the parsed JSON array of records
        put: Issue a PUT with a raw body and return the boolean result
        delete: Issue a DELETE and return the boolean result

    Implementations must not retry. Every failure is raised as a
    RuntimeHostError subclass.
    """

    async def get(
        self,
        path: str,
        params: dict[str, str] | None = None,
        options: ModelQueryOptions | None = None,
        *,
        correlation_id: UUID | None = None,
    ) -> tuple[list[dict[str, object]], ModelQueryMeta]:
        """Fetch records at ``path``.

        Returns:
            Tuple of (records, metadata). An absent key yields an empty list.
        """
        ...

    async def put(
        self,
        path: str,
        body: bytes | None,
        params: dict[str, str] | None = None,
        options: ModelWriteOptions | None = None,
        *,
        correlation_id: UUID | None = None,
    ) -> tuple[bool, ModelWriteMeta]:
        """Write ``body`` to ``path``.

        Returns:
            Tuple of (store result, metadata).
        """
        ...

    async def delete(
        self,
        path: str,
        params: dict[str, str] | None = None,
        options: ModelWriteOptions | None = None,
        *,
        correlation_id: UUID | None = None,
    ) -> tuple[bool, ModelWriteMeta]:
        """Delete ``path``.

        Returns:
            Tuple of (store result, metadata).
        """
        ...


__all__: list[str] = ["ProtocolKVTransport"]
