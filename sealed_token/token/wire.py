"""Fixed little-endian binary layout of a token."""

from __future__ import annotations

import struct
from dataclasses import dataclass

from ..errors import DecodeError, ErrorKind

# type u16, identity u64, expired_at u32, nonce u32; signature follows.
_HEADER = struct.Struct("<HQII")
HEADER_SIZE = _HEADER.size


@dataclass(frozen=True)
class WireFields:
    """Unvalidated fields read from a binary record."""

    token_type: int
    identity: int
    expired_at: int
    nonce: int
    signature: bytes


def pack_token(token_type: int, identity: int, expired_at: int, nonce: int, signature: bytes) -> bytes:
    return _HEADER.pack(token_type, identity, expired_at, nonce) + signature


def unpack_token(data: bytes) -> WireFields:
    """Split a binary record into header fields and the trailing signature."""
    if len(data) < HEADER_SIZE:
        raise DecodeError(
            ErrorKind.PAYLOAD_TOO_SHORT,
            f"token payload shorter than {HEADER_SIZE} bytes",
            details={"length": len(data)},
        )
    token_type, identity, expired_at, nonce = _HEADER.unpack_from(data)
    return WireFields(
        token_type=token_type,
        identity=identity,
        expired_at=expired_at,
        nonce=nonce,
        signature=bytes(data[HEADER_SIZE:]),
    )
