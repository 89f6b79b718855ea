# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""KV Value Codec.

Consul stores request bodies as opaque bytes and returns them base64
encoded. This client fixes the payload format to UTF-8 JSON:

    write: value --to_json--> bytes --(HTTP body)--> Consul
    read:  Consul --(base64 text)--> bytes --utf-8--> text --TypeAdapter--> value

``encode_value`` and ``decode_entry`` are the two halves. Both are pure and
raise typed errors instead of substituting defaults: an empty stored value
decoded into a structured type is an error, not ``None``.
"""

from __future__ import annotations

import base64
import binascii
from functools import lru_cache
from typing import Any, TypeVar
from uuid import UUID

from pydantic import TypeAdapter, ValidationError
from pydantic_core import PydanticSerializationError, to_json

from consul_kv.enums import EnumInfraTransportType, EnumKVOperation
from consul_kv.errors import KVDecodeError, KVEncodeError, ModelInfraErrorContext
from consul_kv.models.model_kv_entry import ModelKVEntry
from consul_kv.models.model_kv_wire_record import ModelKVWireRecord

T = TypeVar("T")

_TARGET_NAME = "consul_kv_codec"


@lru_cache(maxsize=128)
def _type_adapter(value_type: Any) -> TypeAdapter[Any]:
    return TypeAdapter(value_type)


def encode_value(
    value: object,
    *,
    key: str | None = None,
    correlation_id: UUID | None = None,
) -> bytes:
    """Serialize a value to the JSON bytes sent as a KV request body.

    Handles pydantic models, dataclasses and JSON-compatible builtins.

    Raises:
        KVEncodeError: If the value is not JSON-serializable.
    """
    try:
        return to_json(value)
    except (PydanticSerializationError, TypeError, ValueError) as e:
        ctx = ModelInfraErrorContext.with_correlation(
            correlation_id=correlation_id,
            transport_type=EnumInfraTransportType.CONSUL,
            operation=EnumKVOperation.PUT.value,
            target_name=_TARGET_NAME,
        )
        raise KVEncodeError(
            f"Value of type {type(value).__name__} is not JSON-serializable",
            context=ctx,
            consul_key=key,
        ) from e


def decode_entry(
    record: ModelKVWireRecord,
    value_type: type[T] | Any,
    *,
    correlation_id: UUID | None = None,
) -> ModelKVEntry[T]:
    """Convert a wire record into a typed entry.

    Args:
        record: Wire record as returned by Consul
        value_type: Target type for the decoded value (any type pydantic
            can validate: builtins, generics, models, dataclasses)
        correlation_id: Correlation ID for error context

    Returns:
        A new frozen ModelKVEntry carrying the record's metadata and the
        decoded value.

    Raises:
        KVDecodeError: If base64 decoding, UTF-8 validation or JSON
            deserialization fails. ``stage`` names the failing step.
    """
    ctx = ModelInfraErrorContext.with_correlation(
        correlation_id=correlation_id,
        transport_type=EnumInfraTransportType.CONSUL,
        operation=EnumKVOperation.GET.value,
        target_name=_TARGET_NAME,
    )

    try:
        raw = base64.b64decode(record.value, validate=True)
    except (binascii.Error, ValueError) as e:
        raise KVDecodeError(
            "Stored value is not valid base64",
            stage="base64",
            context=ctx,
            consul_key=record.key,
        ) from e

    try:
        text = raw.decode("utf-8")
    except UnicodeDecodeError as e:
        raise KVDecodeError(
            "Stored value is not valid UTF-8 text",
            stage="utf8",
            context=ctx,
            consul_key=record.key,
        ) from e

    try:
        value = _type_adapter(value_type).validate_json(text)
    except ValidationError as e:
        raise KVDecodeError(
            f"Stored value could not be deserialized: {e.error_count()} validation error(s)",
            stage="deserialize",
            context=ctx,
            consul_key=record.key,
        ) from e

    return ModelKVEntry[value_type](  # type: ignore[valid-type]
        key=record.key,
        value=value,
        create_index=record.create_index,
        modify_index=record.modify_index,
        lock_index=record.lock_index,
        flags=record.flags,
        session=record.session,
    )


__all__: list[str] = ["decode_entry", "encode_value"]
