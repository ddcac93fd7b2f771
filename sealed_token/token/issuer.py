"""Token issuance."""

from __future__ import annotations

import secrets
from datetime import datetime
from typing import Callable, Dict

import structlog

from ..config import TokenConfig
from ..errors import DomainError, ErrorKind
from ..utils.time import to_timestamp
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
    check_range,
)

logger = structlog.get_logger(__name__)

NonceSource = Callable[[], int]


def random_nonce() -> int:
    """Return a CSPRNG nonce in ``[NONCE_MIN, NONCE_MAX]``."""
    return NONCE_MIN + secrets.randbelow(NONCE_MAX - NONCE_MIN + 1)


class TokenIssuer:
    """Issue signed tokens for one configured token kind."""

    def __init__(self, config: TokenConfig, *, nonce_source: NonceSource | None = None) -> None:
        self._config = config
        self._nonce_source = nonce_source or random_nonce

    @property
    def config(self) -> TokenConfig:
        return self._config

    def create(
        self,
        identity: int,
        expired_at: datetime | int,
        token_type: int | None = None,
    ) -> Token:
        """Build a token with a fresh nonce and signature.

        Checks run in a fixed order: configuration, type, identity, expiry.
        """
        self._config.validate()
        if token_type is None:
            token_type = self._config.default_type
        check_range(token_type, TYPE_MIN, TYPE_MAX, kind=ErrorKind.TYPE_OUT_OF_RANGE, name="type")
        check_range(identity, IDENTITY_MIN, IDENTITY_MAX, kind=ErrorKind.IDENTITY_OUT_OF_RANGE, name="identity")
        try:
            timestamp = to_timestamp(expired_at)
        except TypeError as exc:
            raise DomainError(
                ErrorKind.INVALID_FIELD_TYPE, "expired_at must be a datetime or an integer timestamp"
            ) from exc
        check_range(
            timestamp, EXPIRED_AT_MIN, EXPIRED_AT_MAX, kind=ErrorKind.EXPIRED_AT_OUT_OF_RANGE, name="expired_at"
        )

        nonce = self._nonce_source()
        signature = sign(self._config, token_type, identity, timestamp, nonce)
        token = Token(
            token_type=token_type,
            identity=identity,
            expired_at=timestamp,
            nonce=nonce,
            signature=signature,
            config=self._config,
        )
        logger.debug("token_issued", token_type=token_type, expired_at=timestamp)
        return token

    def encode(self, token: Token) -> str:
        self._config.validate()
        return token.encode()

    def serialize(self, token: Token) -> Dict[str, str]:
        """Return a plain mapping holding only the encoded text."""
        return {"token": self.encode(token)}
