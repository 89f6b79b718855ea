# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Per-Request Query Options Model."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, SecretStr

from consul_kv.enums import EnumConsistencyMode


class ModelQueryOptions(BaseModel):
    """Options for a single KV read.

    Attributes:
        datacenter: Datacenter to query (overrides the client default)
        consistency: Read consistency mode
        token: ACL token override for this request
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    datacenter: str | None = Field(default=None, min_length=1)
    consistency: EnumConsistencyMode = Field(default=EnumConsistencyMode.DEFAULT)
    token: SecretStr | None = Field(default=None)


__all__: list[str] = ["ModelQueryOptions"]
