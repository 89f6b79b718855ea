# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Write Response Metadata Model."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class ModelWriteMeta(BaseModel):
    """Metadata returned alongside a KV write (put/delete/acquire/release)."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    request_time_seconds: float = Field(
        default=0.0, ge=0.0, description="Client-side elapsed request time"
    )


__all__: list[str] = ["ModelWriteMeta"]
