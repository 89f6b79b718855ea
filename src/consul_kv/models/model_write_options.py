# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Per-Request Write Options Model."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, SecretStr


class ModelWriteOptions(BaseModel):
    """Options for a single KV write.

    Attributes:
        datacenter: Datacenter to write to (overrides the client default)
        token: ACL token override for this request
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    datacenter: str | None = Field(default=None, min_length=1)
    token: SecretStr | None = Field(default=None)


__all__: list[str] = ["ModelWriteOptions"]
