# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Consul KV Client Configuration Model.

This module provides the Pydantic configuration model for the Consul KV
client's HTTP transport.

Security Note:
    The token field uses SecretStr to prevent accidental logging of
    sensitive credentials. Tokens should come from environment variables,
    never from configuration files.
"""

from __future__ import annotations

import os
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, SecretStr

from consul_kv.enums import EnumInfraTransportType
from consul_kv.utils.util_env_parsing import parse_env_float, parse_env_int

_DEFAULT_HOST: str = "localhost"
_DEFAULT_PORT: int = 8500
_DEFAULT_TIMEOUT_SECONDS: float = 30.0


class ModelConsulClientConfig(BaseModel):
    """Configuration for the Consul KV client.

    Attributes:
        host: Consul agent hostname
        port: Consul HTTP API port (1-65535, default 8500)
        scheme: "http" or "https"
        token: ACL token (SecretStr, optional)
        datacenter: Default datacenter for requests (optional)
        timeout_seconds: Overall request timeout (1.0-300.0, default 30.0)
        connect_timeout_seconds: Connect timeout (1.0-60.0, default 10.0)
        verify_ssl: Whether to verify TLS certificates

    Example:
        >>> config = ModelConsulClientConfig(
        ...     host="consul.example.com",
        ...     port=8501,
        ...     scheme="https",
        ...     token=SecretStr("acl-token"),
        ... )
        >>> config.base_url
        'https://consul.example.com:8501'
        >>> print(config.token)
        **********
    """

    model_config = ConfigDict(
        strict=True,
        frozen=True,
        extra="forbid",
    )

    host: str = Field(default=_DEFAULT_HOST, min_length=1)
    port: int = Field(default=_DEFAULT_PORT, ge=1, le=65535)
    scheme: Literal["http", "https"] = Field(default="http")
    token: SecretStr | None = Field(
        default=None,
        description="Consul ACL token (use SecretStr for security)",
    )
    datacenter: str | None = Field(default=None, min_length=1)
    timeout_seconds: float = Field(default=_DEFAULT_TIMEOUT_SECONDS, ge=1.0, le=300.0)
    connect_timeout_seconds: float = Field(default=10.0, ge=1.0, le=60.0)
    verify_ssl: bool = Field(default=True)

    @property
    def base_url(self) -> str:
        """Return the Consul HTTP API base URL."""
        return f"{self.scheme}://{self.host}:{self.port}"

    @classmethod
    def from_env(cls) -> ModelConsulClientConfig:
        """Build a configuration from environment variables.

        Environment Variables:
            CONSUL_HOST: Consul hostname (default: localhost)
            CONSUL_PORT: Consul port (default: 8500)
            CONSUL_SCHEME: http or https (default: http)
            CONSUL_TOKEN: Optional ACL token
            CONSUL_DATACENTER: Optional default datacenter
            CONSUL_TIMEOUT_SECONDS: Request timeout (default: 30.0)

        Raises:
            ProtocolConfigurationError: If a numeric variable is not numeric.
            pydantic.ValidationError: If a value fails model validation
                (e.g. an unsupported scheme).
        """
        port = parse_env_int(
            "CONSUL_PORT",
            _DEFAULT_PORT,
            min_value=1,
            max_value=65535,
            transport_type=EnumInfraTransportType.CONSUL,
            service_name="consul_kv_client",
        )
        timeout = parse_env_float(
            "CONSUL_TIMEOUT_SECONDS",
            _DEFAULT_TIMEOUT_SECONDS,
            min_value=1.0,
            max_value=300.0,
            transport_type=EnumInfraTransportType.CONSUL,
            service_name="consul_kv_client",
        )
        token_raw = os.environ.get("CONSUL_TOKEN")
        return cls(
            host=os.environ.get("CONSUL_HOST", _DEFAULT_HOST),
            port=port,
            scheme=os.environ.get("CONSUL_SCHEME", "http"),  # type: ignore[arg-type]
            token=SecretStr(token_raw) if token_raw else None,
            datacenter=os.environ.get("CONSUL_DATACENTER") or None,
            timeout_seconds=timeout,
        )


__all__: list[str] = ["ModelConsulClientConfig"]
