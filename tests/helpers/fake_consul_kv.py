# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""In-memory Consul KV emulator for unit tests.

Implements the subset of ``/v1/kv`` the client uses, with Consul's
observable behavior:

    - GET returns a one-element JSON array, or 404 when the key is absent
    - Values are stored as raw request bytes and returned base64 encoded
    - ``flags`` is stored per key (0 when omitted)
    - ``acquire`` succeeds if the key is unlocked or held by the same
      session; ``release`` succeeds only for the holding session
    - Unknown sessions are rejected with HTTP 500 ("invalid session")
    - DELETE is idempotent and always returns true

Every request is appended to ``requests`` for assertions.
"""

from __future__ import annotations

import base64
import json
from dataclasses import dataclass, field

import httpx

_KV_PREFIX = "/v1/kv/"


@dataclass
class _StoredKey:
    value: bytes
    flags: int
    create_index: int
    modify_index: int
    lock_index: int = 0
    session: str | None = None


@dataclass
class FakeConsulKV:
    sessions: set[str] = field(default_factory=set)
    requests: list[httpx.Request] = field(default_factory=list)
    _store: dict[str, _StoredKey] = field(default_factory=dict)
    _raw_records: dict[str, list[dict[str, object]]] = field(default_factory=dict)
    _index: int = 0

    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handle)

    def create_session(self, session_id: str) -> str:
        self.sessions.add(session_id)
        return session_id

    def destroy_session(self, session_id: str) -> None:
        """Drop a session and release every lock it holds."""
        self.sessions.discard(session_id)
        for stored in self._store.values():
            if stored.session == session_id:
                stored.session = None

    def seed_raw_records(self, key: str, records: list[dict[str, object]]) -> None:
        """Serve ``records`` verbatim for GETs of ``key``."""
        self._raw_records[key] = records

    def stored_value(self, key: str) -> bytes | None:
        stored = self._store.get(key)
        return stored.value if stored else None

    def holder(self, key: str) -> str | None:
        stored = self._store.get(key)
        return stored.session if stored else None

    def handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        path = request.url.path
        if not path.startswith(_KV_PREFIX):
            return httpx.Response(404, text="unsupported path")
        key = path[len(_KV_PREFIX) :]

        if request.method == "GET":
            return self._get(key)
        if request.method == "PUT":
            return self._put(key, request)
        if request.method == "DELETE":
            self._store.pop(key, None)
            self._index += 1
            return self._json(True)
        return httpx.Response(405, text="method not allowed")

    def _json(self, body: object, status_code: int = 200) -> httpx.Response:
        return httpx.Response(
            status_code,
            content=json.dumps(body).encode(),
            headers={
                "Content-Type": "application/json",
                "X-Consul-Index": str(self._index),
                "X-Consul-LastContact": "0",
                "X-Consul-KnownLeader": "true",
            },
        )

    def _get(self, key: str) -> httpx.Response:
        if key in self._raw_records:
            return self._json(self._raw_records[key])
        stored = self._store.get(key)
        if stored is None:
            return httpx.Response(404, headers={"X-Consul-Index": str(self._index)})
        record: dict[str, object] = {
            "Key": key,
            "CreateIndex": stored.create_index,
            "ModifyIndex": stored.modify_index,
            "LockIndex": stored.lock_index,
            "Flags": stored.flags,
            "Value": base64.b64encode(stored.value).decode() if stored.value else None,
        }
        if stored.session is not None:
            record["Session"] = stored.session
        return self._json([record])

    def _put(self, key: str, request: httpx.Request) -> httpx.Response:
        params = request.url.params
        flags = int(params.get("flags", "0"))
        acquire = params.get("acquire")
        release = params.get("release")
        body = request.content

        for session in (acquire, release):
            if session is not None and session not in self.sessions:
                return httpx.Response(500, text=f"invalid session \"{session}\"")

        stored = self._store.get(key)
        if acquire is not None:
            if stored is not None and stored.session not in (None, acquire):
                return self._json(False)
        if release is not None:
            if stored is None or stored.session != release:
                return self._json(False)

        self._index += 1
        if stored is None:
            stored = _StoredKey(
                value=body,
                flags=flags,
                create_index=self._index,
                modify_index=self._index,
            )
            self._store[key] = stored
        else:
            stored.value = body
            stored.flags = flags
            stored.modify_index = self._index

        if acquire is not None and stored.session is None:
            stored.session = acquire
            stored.lock_index += 1
        if release is not None:
            stored.session = None
        return self._json(True)


__all__: list[str] = ["FakeConsulKV"]
