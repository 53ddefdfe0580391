"""
woofwoof/codec/framing.py — Length-prefixed frame layout.

A frame is a 4-byte big-endian payload length ``N`` followed by exactly
``N`` payload bytes. Anything after ``4 + N`` in a decoded buffer is
padding residue and is ignored.
"""

from __future__ import annotations

import math
import struct

from woofwoof.codec.errors import (
    InvalidInputError,
    TruncatedHeaderError,
    TruncatedPayloadError,
)
from woofwoof.core.constants import C

_HEADER = struct.Struct(C.HEADER_FORMAT)


def build_frame(payload: bytes) -> bytes:
    """
    Prefix *payload* with its big-endian uint32 length.

    Raises:
        InvalidInputError: If the payload is longer than the header can describe.
    """
    if len(payload) > C.MAX_PAYLOAD_BYTES:
        raise InvalidInputError(
            f"input too large: {len(payload)} bytes exceeds {C.MAX_PAYLOAD_BYTES}",
            length=len(payload),
        )
    return _HEADER.pack(len(payload)) + payload


def parse_frame(buffer: bytes) -> bytes:
    """
    Return the payload slice of a decoded *buffer*.

    Bytes beyond the declared payload length are ignored.

    Raises:
        TruncatedHeaderError: Fewer than 4 bytes in *buffer*.
        TruncatedPayloadError: Header declares more bytes than follow it.
    """
    if len(buffer) < C.HEADER_BYTES:
        raise TruncatedHeaderError(have=len(buffer))

    (length,) = _HEADER.unpack_from(buffer)
    available = len(buffer) - C.HEADER_BYTES
    if available < length:
        raise TruncatedPayloadError(expected=length, have=available)

    return bytes(buffer[C.HEADER_BYTES:C.HEADER_BYTES + length])


def token_count(payload_length: int) -> int:
    """Number of tokens an encoded frame carrying *payload_length* bytes occupies."""
    return math.ceil((C.HEADER_BYTES + payload_length) * C.BYTE_BITS / C.GROUP_BITS)
