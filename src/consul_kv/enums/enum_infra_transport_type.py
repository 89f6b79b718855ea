# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Infrastructure Transport Type Enumeration.

Defines the transport types used for error context and transport
identification in the Consul KV client.
"""

from enum import Enum


class EnumInfraTransportType(str, Enum):
    """Transport types for Consul KV client components.

    Attributes:
        HTTP: Raw HTTP transport (request primitive level)
        CONSUL: Consul KV API transport (operation level)
    """

    HTTP = "http"
    CONSUL = "consul"


__all__ = ["EnumInfraTransportType"]
