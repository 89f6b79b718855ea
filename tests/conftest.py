# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Pytest configuration and shared fixtures for consul_kv tests."""

from __future__ import annotations

from collections.abc import AsyncGenerator

import pytest
import pytest_asyncio

from consul_kv import ConsulHttpTransport, ConsulKVClient, ModelConsulClientConfig
from tests.helpers import FakeConsulKV, RecordingTransport


@pytest.fixture
def consul_config() -> ModelConsulClientConfig:
    """Provide a test client configuration."""
    return ModelConsulClientConfig(host="consul.test", port=8500, datacenter="dc1")


@pytest.fixture
def fake_consul() -> FakeConsulKV:
    """Provide an empty in-memory Consul KV with sessions S1 and S2."""
    fake = FakeConsulKV()
    fake.create_session("S1")
    fake.create_session("S2")
    return fake


@pytest_asyncio.fixture
async def http_transport(
    consul_config: ModelConsulClientConfig, fake_consul: FakeConsulKV
) -> AsyncGenerator[ConsulHttpTransport, None]:
    """Provide an initialized ConsulHttpTransport backed by fake_consul."""
    transport = ConsulHttpTransport(
        consul_config, http_transport=fake_consul.transport()
    )
    await transport.initialize()
    yield transport
    await transport.shutdown()


@pytest.fixture
def kv_client(http_transport: ConsulHttpTransport) -> ConsulKVClient:
    """Provide a ConsulKVClient wired through the real HTTP transport."""
    return ConsulKVClient(http_transport)


@pytest.fixture
def recording_transport() -> RecordingTransport:
    """Provide a recording transport double."""
    return RecordingTransport()
