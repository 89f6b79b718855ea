# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Typed KV Entry Model.

The application-facing representation of a KV entry, generic over the
value type. Callers construct one for put/acquire/release; ``decode_entry``
constructs one for every successful get.

The model is frozen: a decoded value may be handed to many readers without
copying, and nobody can rebind a field underneath them. Derive a new entry
with ``model_copy(update=...)`` instead of mutating.

Example:
    >>> entry = ModelKVEntry[dict[str, int]](
    ...     key="config/limits",
    ...     value={"max_connections": 100},
    ...     flags=5,
    ... )
    >>> locked = entry.model_copy(update={"session": session_id})
"""

from __future__ import annotations

from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field

from consul_kv.models.model_kv_wire_record import UINT64_LIMIT

T = TypeVar("T")


class ModelKVEntry(BaseModel, Generic[T]):
    """Typed KV entry.

    Attributes:
        key: Full key path (non-empty)
        value: Decoded, strongly typed payload
        create_index: Raft index at which the key was created (reads only)
        modify_index: Raft index of the last modification (reads only)
        lock_index: Number of times the key has been acquired (reads only)
        flags: Opaque application tag; 0 and None are equivalent
        session: Session holding (or requesting) the lock
    """

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
        arbitrary_types_allowed=True,
    )

    key: str = Field(min_length=1, description="Full key path")
    value: T = Field(description="Decoded payload")
    create_index: int | None = Field(default=None, ge=0, lt=UINT64_LIMIT)
    modify_index: int | None = Field(default=None, ge=0, lt=UINT64_LIMIT)
    lock_index: int | None = Field(default=None, ge=0, lt=UINT64_LIMIT)
    flags: int | None = Field(default=None, ge=0, lt=UINT64_LIMIT)
    session: str | None = Field(default=None)

    @property
    def is_locked(self) -> bool:
        """True when a session holds the lock on this entry."""
        return bool(self.session)


__all__: list[str] = ["ModelKVEntry"]
