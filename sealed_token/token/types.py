"""Signed token value and verification datatypes."""

from __future__ import annotations

import hmac
from dataclasses import dataclass, field
from datetime import datetime
from typing import Type

from ..config import TokenConfig
from ..errors import DomainError, ErrorKind, TokenError, VerificationError
from ..utils.encoding import b64url_encode
from ..utils.time import from_timestamp, to_timestamp, utc_now
from .signing import sign
from .wire import pack_token

TYPE_MIN, TYPE_MAX = 1, 255
IDENTITY_MIN, IDENTITY_MAX = 1, 2**64 - 1
EXPIRED_AT_MIN, EXPIRED_AT_MAX = 0, 2**32 - 1
NONCE_MIN, NONCE_MAX = 268_435_456, 4_294_967_295


def check_range(
    value: object,
    low: int,
    high: int,
    *,
    kind: ErrorKind,
    name: str,
    error: Type[TokenError] = DomainError,
) -> int:
    """Return ``value`` if it is an int within ``[low, high]``, else raise ``error``."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise error(ErrorKind.INVALID_FIELD_TYPE, f"{name} must be an integer", details={"field": name})
    if value < low or value > high:
        raise error(kind, f"{name} must be within [{low}, {high}]", details={"field": name, "value": value})
    return value


@dataclass(frozen=True)
class Token:
    """Immutable signed token.

    Construction validates every field and re-derives the signature, so an
    instance always carries a signature that matches its own fields.
    """

    token_type: int
    identity: int
    expired_at: int
    nonce: int
    signature: bytes = field(repr=False)
    config: TokenConfig = field(repr=False, compare=False)

    def __post_init__(self) -> None:
        self.config.validate()
        check_range(self.token_type, TYPE_MIN, TYPE_MAX, kind=ErrorKind.TYPE_OUT_OF_RANGE, name="type")
        check_range(self.identity, IDENTITY_MIN, IDENTITY_MAX, kind=ErrorKind.IDENTITY_OUT_OF_RANGE, name="identity")
        check_range(
            self.expired_at, EXPIRED_AT_MIN, EXPIRED_AT_MAX, kind=ErrorKind.EXPIRED_AT_OUT_OF_RANGE, name="expired_at"
        )
        check_range(self.nonce, NONCE_MIN, NONCE_MAX, kind=ErrorKind.NONCE_OUT_OF_RANGE, name="nonce")
        expected = sign(self.config, self.token_type, self.identity, self.expired_at, self.nonce)
        if not isinstance(self.signature, bytes) or not hmac.compare_digest(expected, self.signature):
            raise VerificationError(ErrorKind.SIGNATURE_MISMATCH, "signature does not match token fields")

    @property
    def expires(self) -> datetime:
        """Expiry as an aware UTC datetime."""
        return from_timestamp(self.expired_at)

    def is_expired(self, now: datetime | int | None = None) -> bool:
        current = to_timestamp(now if now is not None else utc_now())
        return self.expired_at < current

    def type_of(self, token_type: int) -> bool:
        return not isinstance(token_type, bool) and self.token_type == token_type

    def encode(self) -> str:
        """Return the URL-safe text form of the binary record."""
        self.config.validate()
        return b64url_encode(pack_token(self.token_type, self.identity, self.expired_at, self.nonce, self.signature))

    def __str__(self) -> str:
        return self.encode()


@dataclass(frozen=True)
class VerificationResult:
    valid: bool
    reason: str
    token: Token | None = None
    error_kind: ErrorKind | None = None
