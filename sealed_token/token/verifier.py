"""Token decoding and signature verification."""

from __future__ import annotations

import hmac
from datetime import datetime
from typing import Any, Callable

import structlog

from ..config import TokenConfig
from ..errors import DecodeError, ErrorKind, VerificationError
from ..utils.encoding import b64url_decode, is_canonical
from ..utils.hashing import digest_size
from ..utils.time import utc_now
from .signing import sign
from .types import (
    EXPIRED_AT_MAX,
    EXPIRED_AT_MIN,
    IDENTITY_MAX,
    IDENTITY_MIN,
    NONCE_MAX,
    NONCE_MIN,
    TYPE_MAX,
    TYPE_MIN,
    Token,
    VerificationResult,
    check_range,
)
from .wire import unpack_token

logger = structlog.get_logger(__name__)


class TokenVerifier:
    """Decode encoded tokens and prove their signatures."""

    def __init__(self, config: TokenConfig, *, clock: Callable[[], datetime] = utc_now) -> None:
        self._config = config
        self._clock = clock

    @property
    def config(self) -> TokenConfig:
        return self._config

    def decode(self, raw: str) -> Token:
        """Return the token encoded in ``raw`` or raise ``DecodeError``/``VerificationError``."""
        self._config.validate()
        try:
            return self._decode(raw)
        except (DecodeError, VerificationError) as exc:
            logger.debug("token_rejected", kind=exc.kind.value, reason=exc.message)
            raise

    def _decode(self, raw: str) -> Token:
        try:
            data = b64url_decode(raw)
        except ValueError as exc:
            raise DecodeError(ErrorKind.MALFORMED_ENCODING, "token is not valid base64url") from exc

        fields = unpack_token(data)
        check_range(
            fields.token_type, TYPE_MIN, TYPE_MAX, kind=ErrorKind.TYPE_OUT_OF_RANGE, name="type", error=DecodeError
        )
        check_range(
            fields.identity,
            IDENTITY_MIN,
            IDENTITY_MAX,
            kind=ErrorKind.IDENTITY_OUT_OF_RANGE,
            name="identity",
            error=DecodeError,
        )
        check_range(
            fields.expired_at,
            EXPIRED_AT_MIN,
            EXPIRED_AT_MAX,
            kind=ErrorKind.EXPIRED_AT_OUT_OF_RANGE,
            name="expired_at",
            error=DecodeError,
        )
        check_range(fields.nonce, NONCE_MIN, NONCE_MAX, kind=ErrorKind.NONCE_OUT_OF_RANGE, name="nonce", error=DecodeError)
        if not fields.signature:
            raise DecodeError(ErrorKind.SIGNATURE_MISSING, "token carries no signature")
        expected_length = digest_size(self._config.algorithm)
        if len(fields.signature) != expected_length:
            raise DecodeError(
                ErrorKind.SIGNATURE_LENGTH_MISMATCH,
                f"signature must be {expected_length} bytes",
                details={"length": len(fields.signature)},
            )

        expected = sign(self._config, fields.token_type, fields.identity, fields.expired_at, fields.nonce)
        if not hmac.compare_digest(expected, fields.signature):
            raise VerificationError(ErrorKind.SIGNATURE_MISMATCH, "signature does not match token fields")
        # Set trailing bits decode to the same bytes; only the canonical string is accepted.
        if not is_canonical(raw, data):
            raise DecodeError(ErrorKind.MALFORMED_ENCODING, "token is not canonical base64url")

        return Token(
            token_type=fields.token_type,
            identity=fields.identity,
            expired_at=fields.expired_at,
            nonce=fields.nonce,
            signature=fields.signature,
            config=self._config,
        )

    def verify(self, raw: str, *, reject_expired: bool = False) -> VerificationResult:
        """Decode without raising for bad tokens.

        ``reason`` is ``"ok"``, ``"expired"`` or ``"invalid_token"``; the
        specific failure is only exposed through ``error_kind``.
        Configuration errors still raise.
        """
        try:
            token = self.decode(raw)
        except (DecodeError, VerificationError) as exc:
            return VerificationResult(False, "invalid_token", error_kind=exc.kind)

        if reject_expired and token.is_expired(self._clock()):
            return VerificationResult(False, "expired", token=token)

        return VerificationResult(True, "ok", token=token)

    def deserialize(self, data: Any) -> Token:
        """Rebuild a token from a mapping produced by ``TokenIssuer.serialize``."""
        raw = data.get("token") if isinstance(data, dict) else None
        if not isinstance(raw, str):
            raise DecodeError(ErrorKind.INVALID_SERIALIZATION, "invalid serialization data")
        return self.decode(raw)
