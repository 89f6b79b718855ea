# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Consul HTTP Transport - request primitive using httpx async client.

Performs exactly one HTTP exchange per call against the Consul HTTP API.
No request is retried: every failure is mapped onto the error hierarchy
and raised to the caller.

Security Features:
    - ACL token held as SecretStr and sent only as the X-Consul-Token header
    - Token never appears in log records or error context
    - Response body excerpts in errors are sanitized
"""

from __future__ import annotations

import json
import logging
import time
from uuid import UUID, uuid4

import httpx

from consul_kv.enums import EnumConsistencyMode, EnumInfraTransportType
from consul_kv.errors import (
    InfraAuthenticationError,
    InfraConnectionError,
    InfraConsulError,
    InfraTimeoutError,
    ModelInfraErrorContext,
    RuntimeHostError,
)
from consul_kv.models import (
    ModelConsulClientConfig,
    ModelQueryMeta,
    ModelQueryOptions,
    ModelWriteMeta,
    ModelWriteOptions,
)
from consul_kv.utils.util_error_sanitization import sanitize_error_string

logger = logging.getLogger(__name__)

_TARGET_NAME: str = "consul_http_transport"
_TOKEN_HEADER: str = "X-Consul-Token"
_AUTH_STATUS_CODES: frozenset[int] = frozenset({401, 403})


def _parse_int_header(response: httpx.Response, name: str) -> int | None:
    raw = response.headers.get(name)
    if raw is None:
        return None
    try:
        value = int(raw)
    except ValueError:
        logger.debug(
            "Ignoring non-integer %s header",
            name,
            extra={"header": name},
        )
        return None
    return value if value >= 0 else None


def _parse_bool_header(response: httpx.Response, name: str) -> bool | None:
    raw = response.headers.get(name)
    if raw is None:
        return None
    lowered = raw.strip().lower()
    if lowered == "true":
        return True
    if lowered == "false":
        return False
    return None


class ConsulHttpTransport:
    """Consul HTTP API request primitive using httpx.AsyncClient.

    Lifecycle:
        ``initialize()`` creates the underlying client; ``shutdown()`` closes
        it. The transport is also an async context manager. Calling a request
        method on an uninitialized transport raises RuntimeHostError.

    Response Mapping:
        - 2xx: JSON body parsed (records for GET, boolean for writes)
        - 404 on GET: empty record list (absent key)
        - 401/403: InfraAuthenticationError
        - other non-2xx: InfraConsulError with status_code
        - httpx.TimeoutException: InfraTimeoutError
        - httpx.ConnectError / other httpx.HTTPError: InfraConnectionError
    """

    def __init__(
        self,
        config: ModelConsulClientConfig,
        *,
        http_transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize transport in uninitialized state.

        Args:
            config: Validated client configuration
            http_transport: Optional httpx transport to mount (e.g.
                httpx.MockTransport in tests)
        """
        self._config = config
        self._http_transport = http_transport
        self._client: httpx.AsyncClient | None = None
        self._initialized: bool = False

    @property
    def config(self) -> ModelConsulClientConfig:
        return self._config

    @property
    def is_initialized(self) -> bool:
        return self._initialized

    async def initialize(self) -> None:
        """Create the httpx client from configuration."""
        if self._initialized:
            return
        self._client = httpx.AsyncClient(
            base_url=self._config.base_url,
            timeout=httpx.Timeout(
                self._config.timeout_seconds,
                connect=self._config.connect_timeout_seconds,
            ),
            verify=self._config.verify_ssl,
            transport=self._http_transport,
        )
        self._initialized = True
        logger.info(
            "ConsulHttpTransport initialized",
            extra={
                "base_url": self._config.base_url,
                "datacenter": self._config.datacenter,
                "timeout_seconds": self._config.timeout_seconds,
                "token_configured": self._config.token is not None,
            },
        )

    async def shutdown(self) -> None:
        """Close the httpx client and release resources."""
        if self._client is not None:
            await self._client.aclose()
            self._client = None
        self._initialized = False
        logger.info("ConsulHttpTransport shutdown complete")

    async def __aenter__(self) -> ConsulHttpTransport:
        await self.initialize()
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.shutdown()

    async def get(
        self,
        path: str,
        params: dict[str, str] | None = None,
        options: ModelQueryOptions | None = None,
        *,
        correlation_id: UUID | None = None,
    ) -> tuple[list[dict[str, object]], ModelQueryMeta]:
        """Issue a GET and parse the JSON array of records.

        Raises:
            InfraAuthenticationError: On 401/403.
            InfraConsulError: On other non-2xx statuses (except 404) or a
                body that is not a JSON array of objects.
            InfraTimeoutError: On timeout.
            InfraConnectionError: On connection failure.
        """
        correlation_id = correlation_id or uuid4()
        query = self._base_params(options.datacenter if options else None)
        if options is not None and options.consistency != EnumConsistencyMode.DEFAULT:
            query[options.consistency.value] = ""
        query.update(params or {})
        token = options.token.get_secret_value() if options and options.token else None

        response, elapsed = await self._send(
            "GET", path, query, token, None, correlation_id
        )
        meta = ModelQueryMeta(
            last_index=_parse_int_header(response, "X-Consul-Index"),
            last_contact_ms=_parse_int_header(response, "X-Consul-LastContact"),
            known_leader=_parse_bool_header(response, "X-Consul-KnownLeader"),
            request_time_seconds=elapsed,
        )

        if response.status_code == 404:
            return [], meta
        self._raise_for_status(response, "GET", path, correlation_id)

        body = self._parse_json(response, "GET", path, correlation_id)
        if not isinstance(body, list) or not all(isinstance(r, dict) for r in body):
            raise InfraConsulError(
                f"Expected JSON array of records, got {type(body).__name__}",
                context=self._context("GET", path, correlation_id),
                status_code=response.status_code,
            )
        return body, meta

    async def put(
        self,
        path: str,
        body: bytes | None,
        params: dict[str, str] | None = None,
        options: ModelWriteOptions | None = None,
        *,
        correlation_id: UUID | None = None,
    ) -> tuple[bool, ModelWriteMeta]:
        """Issue a PUT with a raw body and parse the boolean result."""
        return await self._write("PUT", path, body, params, options, correlation_id)

    async def delete(
        self,
        path: str,
        params: dict[str, str] | None = None,
        options: ModelWriteOptions | None = None,
        *,
        correlation_id: UUID | None = None,
    ) -> tuple[bool, ModelWriteMeta]:
        """Issue a DELETE and parse the boolean result."""
        return await self._write("DELETE", path, None, params, options, correlation_id)

    async def _write(
        self,
        method: str,
        path: str,
        body: bytes | None,
        params: dict[str, str] | None,
        options: ModelWriteOptions | None,
        correlation_id: UUID | None,
    ) -> tuple[bool, ModelWriteMeta]:
        correlation_id = correlation_id or uuid4()
        query = self._base_params(options.datacenter if options else None)
        query.update(params or {})
        token = options.token.get_secret_value() if options and options.token else None

        response, elapsed = await self._send(
            method, path, query, token, body, correlation_id
        )
        self._raise_for_status(response, method, path, correlation_id)

        result = self._parse_json(response, method, path, correlation_id)
        if not isinstance(result, bool):
            raise InfraConsulError(
                f"Expected boolean body for {method}, got {type(result).__name__}",
                context=self._context(method, path, correlation_id),
                status_code=response.status_code,
            )
        return result, ModelWriteMeta(request_time_seconds=elapsed)

    def _base_params(self, datacenter: str | None) -> dict[str, str]:
        dc = datacenter or self._config.datacenter
        return {"dc": dc} if dc else {}

    def _context(
        self, method: str, path: str, correlation_id: UUID
    ) -> ModelInfraErrorContext:
        return ModelInfraErrorContext(
            transport_type=EnumInfraTransportType.HTTP,
            operation=f"http.{method.lower()}",
            target_name=path,
            correlation_id=correlation_id,
        )

    async def _send(
        self,
        method: str,
        path: str,
        params: dict[str, str],
        token: str | None,
        body: bytes | None,
        correlation_id: UUID,
    ) -> tuple[httpx.Response, float]:
        if not self._initialized or self._client is None:
            raise RuntimeHostError(
                "ConsulHttpTransport not initialized. Call initialize() first.",
                context=self._context(method, path, correlation_id),
            )

        headers: dict[str, str] = {}
        effective_token = token
        if effective_token is None and self._config.token is not None:
            effective_token = self._config.token.get_secret_value()
        if effective_token:
            headers[_TOKEN_HEADER] = effective_token

        ctx = self._context(method, path, correlation_id)
        start = time.perf_counter()
        try:
            response = await self._client.request(
                method,
                path,
                params=params,
                headers=headers,
                content=body,
            )
        except httpx.TimeoutException as e:
            raise InfraTimeoutError(
                f"HTTP {method} request timed out after {self._config.timeout_seconds}s",
                context=ctx,
                timeout_seconds=self._config.timeout_seconds,
            ) from e
        except httpx.ConnectError as e:
            raise InfraConnectionError(
                f"Failed to connect to {self._config.base_url}",
                context=ctx,
                host=self._config.host,
                port=self._config.port,
            ) from e
        except httpx.HTTPError as e:
            raise InfraConnectionError(
                f"HTTP error during {method} request: {type(e).__name__}",
                context=ctx,
            ) from e
        elapsed = time.perf_counter() - start

        logger.debug(
            "Consul %s %s -> %s",
            method,
            path,
            response.status_code,
            extra={
                "method": method,
                "path": path,
                "status_code": response.status_code,
                "request_time_seconds": round(elapsed, 6),
                "correlation_id": str(correlation_id),
            },
        )
        return response, elapsed

    def _raise_for_status(
        self,
        response: httpx.Response,
        method: str,
        path: str,
        correlation_id: UUID,
    ) -> None:
        status = response.status_code
        if 200 <= status < 300:
            return
        ctx = self._context(method, path, correlation_id)
        if status in _AUTH_STATUS_CODES:
            raise InfraAuthenticationError(
                "Consul ACL permission denied - check token validity and permissions",
                context=ctx,
                status_code=status,
            )
        raise InfraConsulError(
            f"Consul returned HTTP {status} for {method}",
            context=ctx,
            status_code=status,
            response_excerpt=sanitize_error_string(response.text),
        )

    def _parse_json(
        self,
        response: httpx.Response,
        method: str,
        path: str,
        correlation_id: UUID,
    ) -> object:
        try:
            return response.json()
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise InfraConsulError(
                f"Consul returned a non-JSON body for {method}",
                context=self._context(method, path, correlation_id),
                status_code=response.status_code,
                response_excerpt=sanitize_error_string(response.text),
            ) from e

    def describe(self) -> dict[str, object]:
        """Return transport metadata (never the token)."""
        return {
            "transport_type": EnumInfraTransportType.HTTP.value,
            "base_url": self._config.base_url,
            "datacenter": self._config.datacenter,
            "timeout_seconds": self._config.timeout_seconds,
            "initialized": self._initialized,
        }


__all__: list[str] = ["ConsulHttpTransport"]
