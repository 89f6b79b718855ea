# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Unit tests for consul_kv entry, wire record, option and meta models."""

from __future__ import annotations

import pytest
from pydantic import SecretStr, ValidationError

from consul_kv.enums import EnumConsistencyMode
from consul_kv.models import (
    ModelKVEntry,
    ModelKVWireRecord,
    ModelQueryMeta,
    ModelQueryOptions,
    ModelWriteOptions,
)


@pytest.mark.unit
class TestModelKVWireRecord:
    """Tests for ModelKVWireRecord."""

    def test_parses_consul_field_names(self) -> None:
        record = ModelKVWireRecord.model_validate(
            {
                "Key": "a/b",
                "CreateIndex": 1,
                "ModifyIndex": 2,
                "LockIndex": 0,
                "Flags": 0,
                "Value": "eA==",
                "Session": "s",
            }
        )

        assert record.key == "a/b"
        assert record.create_index == 1
        assert record.modify_index == 2
        assert record.value == "eA=="
        assert record.session == "s"

    def test_ignores_unknown_fields(self) -> None:
        record = ModelKVWireRecord.model_validate(
            {"Key": "a", "Value": "", "Namespace": "default", "Partition": "p"}
        )

        assert record.key == "a"

    def test_null_value_becomes_empty_string(self) -> None:
        record = ModelKVWireRecord.model_validate({"Key": "a", "Value": None})

        assert record.value == ""

    def test_empty_key_rejected(self) -> None:
        with pytest.raises(ValidationError):
            ModelKVWireRecord.model_validate({"Key": "", "Value": ""})

    def test_uint64_bounds(self) -> None:
        ModelKVWireRecord.model_validate({"Key": "a", "ModifyIndex": 2**64 - 1})
        with pytest.raises(ValidationError):
            ModelKVWireRecord.model_validate({"Key": "a", "ModifyIndex": 2**64})
        with pytest.raises(ValidationError):
            ModelKVWireRecord.model_validate({"Key": "a", "Flags": -1})


@pytest.mark.unit
class TestModelKVEntry:
    """Tests for ModelKVEntry."""

    def test_typed_entry_validates_value(self) -> None:
        entry = ModelKVEntry[int](key="n", value=3)

        assert entry.value == 3
        with pytest.raises(ValidationError):
            ModelKVEntry[int](key="n", value="three")

    def test_entry_is_frozen(self) -> None:
        entry = ModelKVEntry(key="k", value="v")

        with pytest.raises(ValidationError):
            entry.session = "S1"  # type: ignore[misc]

    @pytest.mark.parametrize("session", [None, ""])
    def test_missing_or_empty_session_is_not_locked(
        self, session: str | None
    ) -> None:
        entry = ModelKVEntry(key="k", value="v", session=session)

        assert entry.is_locked is False

    def test_model_copy_derives_new_entry(self) -> None:
        entry = ModelKVEntry(key="k", value="v")

        locked = entry.model_copy(update={"session": "S1"})

        assert locked.is_locked is True
        assert entry.is_locked is False
        assert locked.value is entry.value

    def test_extra_fields_forbidden(self) -> None:
        with pytest.raises(ValidationError):
            ModelKVEntry(key="k", value="v", cas=3)  # type: ignore[call-arg]

    def test_empty_key_rejected(self) -> None:
        with pytest.raises(ValidationError):
            ModelKVEntry(key="", value="v")


@pytest.mark.unit
class TestOptionsAndMeta:
    """Tests for option and metadata models."""

    def test_query_options_defaults(self) -> None:
        options = ModelQueryOptions()

        assert options.datacenter is None
        assert options.consistency == EnumConsistencyMode.DEFAULT
        assert options.token is None

    def test_write_options_token_is_secret(self) -> None:
        options = ModelWriteOptions(token=SecretStr("hidden-token"))

        assert "hidden-token" not in repr(options)

    def test_query_meta_rejects_negative_index(self) -> None:
        with pytest.raises(ValidationError):
            ModelQueryMeta(last_index=-1)
