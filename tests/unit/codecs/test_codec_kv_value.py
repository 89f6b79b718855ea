# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Unit tests for the KV value codec (encode_value / decode_entry)."""

from __future__ import annotations

import base64
from uuid import uuid4

import pytest
from pydantic import BaseModel

from consul_kv.codecs import decode_entry, encode_value
from consul_kv.enums import EnumKVErrorCode
from consul_kv.errors import KVDecodeError, KVEncodeError
from consul_kv.models import ModelKVEntry, ModelKVWireRecord


class FeatureFlags(BaseModel):
    enabled: bool
    rollout: float


def _record(value: str | None, **fields: object) -> ModelKVWireRecord:
    return ModelKVWireRecord.model_validate({"Key": "cfg/flags", "Value": value, **fields})


def _b64(raw: bytes) -> str:
    return base64.b64encode(raw).decode()


@pytest.mark.unit
class TestEncodeValue:
    """Tests for encode_value."""

    def test_encodes_builtin_as_json(self) -> None:
        assert encode_value({"a": [1, 2]}) == b'{"a":[1,2]}'

    def test_encodes_model(self) -> None:
        assert (
            encode_value(FeatureFlags(enabled=True, rollout=0.5))
            == b'{"enabled":true,"rollout":0.5}'
        )

    def test_encodes_text_as_utf8(self) -> None:
        assert encode_value("é").decode("utf-8") == '"é"'

    def test_unserializable_value_raises_encode_error(self) -> None:
        with pytest.raises(KVEncodeError) as exc_info:
            encode_value(object(), key="cfg/bad")

        error = exc_info.value
        assert error.error_code == EnumKVErrorCode.ENCODE_ERROR
        assert error.context["consul_key"] == "cfg/bad"
        assert error.__cause__ is not None


@pytest.mark.unit
class TestDecodeEntry:
    """Tests for decode_entry."""

    def test_decodes_model_and_copies_metadata(self) -> None:
        record = _record(
            _b64(b'{"enabled": false, "rollout": 0.25}'),
            CreateIndex=3,
            ModifyIndex=9,
            LockIndex=2,
            Flags=7,
            Session="sess-1",
        )

        entry = decode_entry(record, FeatureFlags)

        assert isinstance(entry, ModelKVEntry)
        assert entry.value == FeatureFlags(enabled=False, rollout=0.25)
        assert entry.key == "cfg/flags"
        assert (entry.create_index, entry.modify_index, entry.lock_index) == (3, 9, 2)
        assert entry.flags == 7
        assert entry.session == "sess-1"

    def test_absent_metadata_stays_none(self) -> None:
        entry = decode_entry(_record(_b64(b"1")), int)

        assert entry.value == 1
        assert entry.create_index is None
        assert entry.flags is None
        assert entry.session is None
        assert entry.is_locked is False

    def test_invalid_base64_fails(self) -> None:
        correlation_id = uuid4()

        with pytest.raises(KVDecodeError) as exc_info:
            decode_entry(_record("not base64!"), str, correlation_id=correlation_id)

        error = exc_info.value
        assert error.stage == "base64"
        assert error.correlation_id == correlation_id
        assert error.context["consul_key"] == "cfg/flags"

    def test_decode_error_gets_correlation_id_when_none_given(self) -> None:
        with pytest.raises(KVDecodeError) as exc_info:
            decode_entry(_record("not base64!"), str)

        assert exc_info.value.correlation_id is not None

    def test_invalid_utf8_fails(self) -> None:
        with pytest.raises(KVDecodeError) as exc_info:
            decode_entry(_record(_b64(b"\xff\xfe\xfa")), str)

        assert exc_info.value.stage == "utf8"

    def test_invalid_json_fails(self) -> None:
        with pytest.raises(KVDecodeError) as exc_info:
            decode_entry(_record(_b64(b"{not json")), dict[str, int])

        assert exc_info.value.stage == "deserialize"

    def test_empty_value_does_not_default(self) -> None:
        with pytest.raises(KVDecodeError) as exc_info:
            decode_entry(_record(""), FeatureFlags)

        assert exc_info.value.stage == "deserialize"

    def test_null_value_treated_as_empty(self) -> None:
        with pytest.raises(KVDecodeError):
            decode_entry(_record(None), list[int])

    def test_schema_mismatch_fails(self) -> None:
        with pytest.raises(KVDecodeError):
            decode_entry(_record(_b64(b'{"enabled": "maybe"}')), FeatureFlags)

    def test_round_trip_with_encode_value(self) -> None:
        value = {"limits": [1, 2, 3], "name": "api"}

        entry = decode_entry(_record(_b64(encode_value(value))), dict[str, object])

        assert entry.value == value
