# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Consul KV Wire Record Model.

The untyped, wire-shaped representation of one stored KV entry exactly as
Consul returns it from ``GET /v1/kv/{key}``. Field aliases match Consul's
PascalCase JSON keys; Python attributes are snake_case.

Records are produced per response and consumed immediately by
``decode_entry``; nothing holds on to them.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator

# Consul indices and flags are uint64.
UINT64_LIMIT: int = 2**64


class ModelKVWireRecord(BaseModel):
    """One KV entry as returned on the wire.

    Attributes:
        key: Full key path (non-empty)
        create_index: Raft index at which the key was created
        modify_index: Raft index of the last modification
        lock_index: Number of times the key has been acquired as a lock
        flags: Opaque application tag
        value: Base64 text of the stored bytes ("" when Consul sends null)
        session: ID of the session currently holding the lock, if any
    """

    model_config = ConfigDict(
        frozen=True,
        extra="ignore",
        populate_by_name=True,
    )

    key: str = Field(alias="Key", min_length=1)
    create_index: int | None = Field(
        default=None, alias="CreateIndex", ge=0, lt=UINT64_LIMIT
    )
    modify_index: int | None = Field(
        default=None, alias="ModifyIndex", ge=0, lt=UINT64_LIMIT
    )
    lock_index: int | None = Field(
        default=None, alias="LockIndex", ge=0, lt=UINT64_LIMIT
    )
    flags: int | None = Field(default=None, alias="Flags", ge=0, lt=UINT64_LIMIT)
    value: str = Field(default="", alias="Value")
    session: str | None = Field(default=None, alias="Session")

    @field_validator("value", mode="before")
    @classmethod
    def _null_value_as_empty(cls, v: object) -> object:
        # Consul reports a key stored with an empty body as "Value": null.
        return "" if v is None else v


__all__: list[str] = ["ModelKVWireRecord", "UINT64_LIMIT"]
