# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Value encoding and decoding for the Consul KV client."""

from consul_kv.codecs.codec_kv_value import decode_entry, encode_value

__all__: list[str] = ["decode_entry", "encode_value"]
