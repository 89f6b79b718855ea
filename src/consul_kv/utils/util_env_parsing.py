# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Environment Variable Parsing Utilities.

Numeric environment parsing with range validation. Non-numeric values are
configuration errors; numeric values outside the allowed range fall back to
the default with a warning.
"""

from __future__ import annotations

import logging
import os

from consul_kv.enums import EnumInfraTransportType
from consul_kv.errors import ModelInfraErrorContext, ProtocolConfigurationError

logger = logging.getLogger(__name__)


def _config_error(
    env_var: str,
    raw: str,
    expected: str,
    transport_type: EnumInfraTransportType,
    service_name: str,
) -> ProtocolConfigurationError:
    ctx = ModelInfraErrorContext.with_correlation(
        transport_type=transport_type,
        operation="parse_env",
        target_name=service_name,
    )
    return ProtocolConfigurationError(
        f"Invalid value for {env_var}: expected {expected}",
        context=ctx,
        env_var=env_var,
        raw_length=len(raw),
    )


def _check_range(
    env_var: str,
    value: float,
    default: float,
    min_value: float | None,
    max_value: float | None,
) -> bool:
    if min_value is not None and value < min_value:
        logger.warning(
            "%s value %s is below minimum %s, using default %s",
            env_var,
            value,
            min_value,
            default,
            extra={"env_var": env_var, "min_value": min_value},
        )
        return False
    if max_value is not None and value > max_value:
        logger.warning(
            "%s value %s is above maximum %s, using default %s",
            env_var,
            value,
            max_value,
            default,
            extra={"env_var": env_var, "max_value": max_value},
        )
        return False
    return True


def parse_env_float(
    env_var: str,
    default: float,
    *,
    min_value: float | None = None,
    max_value: float | None = None,
    transport_type: EnumInfraTransportType = EnumInfraTransportType.CONSUL,
    service_name: str = "consul_kv_client",
) -> float:
    """Parse a float environment variable with range validation.

    Args:
        env_var: Environment variable name
        default: Value used when the variable is unset or out of range
        min_value: Inclusive lower bound
        max_value: Inclusive upper bound
        transport_type: Transport type for error context
        service_name: Target name for error context

    Returns:
        The parsed value, or ``default``.

    Raises:
        ProtocolConfigurationError: If the value is set but not numeric.
    """
    raw = os.environ.get(env_var)
    if raw is None:
        return default
    try:
        value = float(raw)
    except ValueError as e:
        raise _config_error(
            env_var, raw, "numeric value", transport_type, service_name
        ) from e
    if not _check_range(env_var, value, default, min_value, max_value):
        return default
    return value


def parse_env_int(
    env_var: str,
    default: int,
    *,
    min_value: int | None = None,
    max_value: int | None = None,
    transport_type: EnumInfraTransportType = EnumInfraTransportType.CONSUL,
    service_name: str = "consul_kv_client",
) -> int:
    """Parse an integer environment variable with range validation.

    Same contract as parse_env_float.
    """
    raw = os.environ.get(env_var)
    if raw is None:
        return default
    try:
        value = int(raw)
    except ValueError as e:
        raise _config_error(
            env_var, raw, "numeric integer value", transport_type, service_name
        ) from e
    if not _check_range(env_var, value, default, min_value, max_value):
        return default
    return value


__all__: list[str] = ["parse_env_float", "parse_env_int"]
