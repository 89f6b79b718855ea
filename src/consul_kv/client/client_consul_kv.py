# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Consul KV Client - typed get/put/delete and session locking.

Supported Operations:
    - get: Read a single key into a typed entry (None when absent)
    - put: Unconditional write of an entry's value
    - delete: Unconditional, non-recursive delete of a key
    - acquire: Write an entry's value while acquiring its lock for a session
    - release: Write an entry's value while releasing its lock for a session

Every operation is a single request through a ProtocolKVTransport and
returns ``(result, metadata)``. A ``False`` result from a write is a valid
response meaning Consul declined the operation (e.g. lock contention); it is
never raised as an error.

Lock state for a key is owned by Consul:

    Unlocked --acquire(S) ok--> LockedBy(S) --release(S) ok / session destroyed--> Unlocked

The client never polls or retries that transition.
"""

from __future__ import annotations

import logging
from typing import Any, TypeVar
from urllib.parse import quote
from uuid import UUID, uuid4

from pydantic import ValidationError

from consul_kv.codecs import decode_entry, encode_value
from consul_kv.enums import EnumInfraTransportType, EnumKVOperation
from consul_kv.errors import (
    InfraConsulError,
    KVSessionRequiredError,
    ModelInfraErrorContext,
    ProtocolConfigurationError,
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

T = TypeVar("T")

logger = logging.getLogger(__name__)

_TARGET_NAME: str = "consul_kv_client"
_KV_PATH_PREFIX: str = "/v1/kv/"

SUPPORTED_OPERATIONS: frozenset[str] = frozenset(op.value for op in EnumKVOperation)


class ConsulKVClient:
    """Typed client for the Consul KV namespace.

    The client holds no per-call state and is safe to share between
    concurrent tasks. When built with ``from_config`` it owns its transport
    and manages its lifecycle through ``async with``; a transport passed to
    the constructor is left for the caller to manage.

    Example:
        >>> async with ConsulKVClient.from_config(ModelConsulClientConfig()) as kv:
        ...     ok, _ = await kv.put(ModelKVEntry(key="app/mode", value="active"))
        ...     entry, meta = await kv.get("app/mode", str)
        ...     entry.value
        'active'
    """

    def __init__(
        self,
        transport: ProtocolKVTransport,
        *,
        owns_transport: bool = False,
    ) -> None:
        self._transport = transport
        self._owns_transport = owns_transport

    @classmethod
    def from_config(
        cls, config: ModelConsulClientConfig | None = None
    ) -> ConsulKVClient:
        """Build a client with its own ConsulHttpTransport.

        Args:
            config: Client configuration; read from the environment when None.
        """
        resolved = config if config is not None else ModelConsulClientConfig.from_env()
        return cls(ConsulHttpTransport(resolved), owns_transport=True)

    @property
    def transport(self) -> ProtocolKVTransport:
        return self._transport

    async def __aenter__(self) -> ConsulKVClient:
        if self._owns_transport and isinstance(self._transport, ConsulHttpTransport):
            await self._transport.initialize()
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        if self._owns_transport and isinstance(self._transport, ConsulHttpTransport):
            await self._transport.shutdown()

    # Operations

    async def get(
        self,
        key: str,
        value_type: type[T] | Any,
        options: ModelQueryOptions | None = None,
    ) -> tuple[ModelKVEntry[T] | None, ModelQueryMeta]:
        """Read a single key.

        Args:
            key: Key path (non-empty)
            value_type: Type the stored JSON value is decoded into
            options: Optional query options (datacenter, consistency, token)

        Returns:
            Tuple of (entry or None when the key is absent, query metadata).

        Raises:
            ProtocolConfigurationError: If key is empty.
            KVDecodeError: If the stored value cannot be decoded.
            InfraConsulError: If Consul returns a malformed record.
            RuntimeHostError: Any transport failure, unchanged.
        """
        correlation_id = uuid4()
        path = self._kv_path(key, EnumKVOperation.GET, correlation_id)

        records, meta = await self._transport.get(
            path, {}, options, correlation_id=correlation_id
        )
        if not records:
            logger.debug(
                "Key not found",
                extra={
                    "operation": EnumKVOperation.GET.value,
                    "key": key,
                    "correlation_id": str(correlation_id),
                },
            )
            return None, meta

        if len(records) > 1:
            logger.warning(
                "Consul returned %d records for single-key get, using the first",
                len(records),
                extra={
                    "operation": EnumKVOperation.GET.value,
                    "key": key,
                    "record_count": len(records),
                    "correlation_id": str(correlation_id),
                },
            )

        record = self._parse_record(records[0], key, correlation_id)
        entry: ModelKVEntry[T] = decode_entry(
            record, value_type, correlation_id=correlation_id
        )
        return entry, meta

    async def put(
        self,
        entry: ModelKVEntry[Any],
        options: ModelWriteOptions | None = None,
    ) -> tuple[bool, ModelWriteMeta]:
        """Write an entry's value unconditionally.

        ``flags`` is sent only when set and non-zero.

        Returns:
            Tuple of (Consul's boolean result, write metadata).
        """
        correlation_id = uuid4()
        path = self._kv_path(entry.key, EnumKVOperation.PUT, correlation_id)
        params = self._flag_params(entry)
        body = encode_value(entry.value, key=entry.key, correlation_id=correlation_id)
        return await self._transport.put(
            path, body, params, options, correlation_id=correlation_id
        )

    async def delete(
        self,
        key: str,
        options: ModelWriteOptions | None = None,
    ) -> tuple[bool, ModelWriteMeta]:
        """Delete a single key (never recursive).

        Deleting a key that does not exist reports success.
        """
        correlation_id = uuid4()
        path = self._kv_path(key, EnumKVOperation.DELETE, correlation_id)
        return await self._transport.delete(
            path, {}, options, correlation_id=correlation_id
        )

    async def acquire(
        self,
        entry: ModelKVEntry[Any],
        options: ModelWriteOptions | None = None,
    ) -> tuple[bool, ModelWriteMeta]:
        """Acquire the lock on ``entry.key`` for ``entry.session``.

        The entry's value is written as part of the acquisition.

        Returns:
            Tuple of (True if the lock is now held by the session, metadata).
            False means another session holds the lock.

        Raises:
            KVSessionRequiredError: If entry.session is not set. No request
                is sent.
        """
        return await self._lock_request(entry, EnumKVOperation.ACQUIRE, options)

    async def release(
        self,
        entry: ModelKVEntry[Any],
        options: ModelWriteOptions | None = None,
    ) -> tuple[bool, ModelWriteMeta]:
        """Release the lock on ``entry.key`` held by ``entry.session``.

        Returns:
            Tuple of (True if the session held and released the lock,
            metadata).

        Raises:
            KVSessionRequiredError: If entry.session is not set. No request
                is sent.
        """
        return await self._lock_request(entry, EnumKVOperation.RELEASE, options)

    async def _lock_request(
        self,
        entry: ModelKVEntry[Any],
        operation: EnumKVOperation,
        options: ModelWriteOptions | None,
    ) -> tuple[bool, ModelWriteMeta]:
        correlation_id = uuid4()
        # acquire -> "acquire", release -> "release"
        verb = operation.value.split(".", 1)[1]
        session = self._require_session(entry, operation, verb, correlation_id)
        path = self._kv_path(entry.key, operation, correlation_id)

        params = self._flag_params(entry)
        params[verb] = session
        body = encode_value(entry.value, key=entry.key, correlation_id=correlation_id)

        acquired, meta = await self._transport.put(
            path, body, params, options, correlation_id=correlation_id
        )
        logger.debug(
            "Lock %s for session %s returned %s",
            verb,
            session,
            acquired,
            extra={
                "operation": operation.value,
                "key": entry.key,
                "result": acquired,
                "correlation_id": str(correlation_id),
            },
        )
        return acquired, meta

    # Request shaping helpers

    def _context(
        self, operation: EnumKVOperation, correlation_id: UUID
    ) -> ModelInfraErrorContext:
        return ModelInfraErrorContext.with_correlation(
            correlation_id=correlation_id,
            transport_type=EnumInfraTransportType.CONSUL,
            operation=operation.value,
            target_name=_TARGET_NAME,
        )

    def _kv_path(
        self, key: str, operation: EnumKVOperation, correlation_id: UUID
    ) -> str:
        if not isinstance(key, str) or not key:
            raise ProtocolConfigurationError(
                "Missing or invalid 'key' - must be a non-empty string",
                context=self._context(operation, correlation_id),
            )
        return _KV_PATH_PREFIX + quote(key, safe="/")

    def _require_session(
        self,
        entry: ModelKVEntry[Any],
        operation: EnumKVOperation,
        verb: str,
        correlation_id: UUID,
    ) -> str:
        if not entry.session:
            raise KVSessionRequiredError(
                f"Session is required to {verb} lock",
                context=self._context(operation, correlation_id),
                consul_key=entry.key,
            )
        return entry.session

    @staticmethod
    def _flag_params(entry: ModelKVEntry[Any]) -> dict[str, str]:
        if entry.flags:
            return {"flags": str(entry.flags)}
        return {}

    def _parse_record(
        self, raw: dict[str, object], key: str, correlation_id: UUID
    ) -> ModelKVWireRecord:
        try:
            return ModelKVWireRecord.model_validate(raw)
        except ValidationError as e:
            raise InfraConsulError(
                "Consul returned a malformed KV record",
                context=self._context(EnumKVOperation.GET, correlation_id),
                consul_key=key,
            ) from e

    def describe(self) -> dict[str, object]:
        """Return client metadata and capabilities (never the token)."""
        description: dict[str, object] = {
            "client_type": EnumInfraTransportType.CONSUL.value,
            "supported_operations": sorted(SUPPORTED_OPERATIONS),
            "transport": type(self._transport).__name__,
        }
        if isinstance(self._transport, ConsulHttpTransport):
            description["base_url"] = self._transport.config.base_url
            description["initialized"] = self._transport.is_initialized
        return description


__all__: list[str] = ["ConsulKVClient", "SUPPORTED_OPERATIONS"]
