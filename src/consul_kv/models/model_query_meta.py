# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Query Response Metadata Model."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class ModelQueryMeta(BaseModel):
    """Metadata returned alongside a KV read.

    Parsed from Consul's ``X-Consul-*`` response headers. The client passes
    it through without interpreting it; callers use ``last_index`` for their
    own consistency decisions.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    last_index: int | None = Field(
        default=None, ge=0, description="X-Consul-Index header"
    )
    last_contact_ms: int | None = Field(
        default=None, ge=0, description="X-Consul-LastContact header"
    )
    known_leader: bool | None = Field(
        default=None, description="X-Consul-KnownLeader header"
    )
    request_time_seconds: float = Field(
        default=0.0, ge=0.0, description="Client-side elapsed request time"
    )


__all__: list[str] = ["ModelQueryMeta"]
