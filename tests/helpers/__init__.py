# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Test helpers for consul_kv tests.

Available Utilities:
    FakeConsulKV: In-memory emulation of Consul's /v1/kv endpoint, served
        through httpx.MockTransport
    RecordingTransport: ProtocolKVTransport double that records calls and
        returns canned results
"""

from tests.helpers.fake_consul_kv import FakeConsulKV
from tests.helpers.recording_transport import RecordingTransport

__all__: list[str] = ["FakeConsulKV", "RecordingTransport"]
