"""Single entry point combining issuance and verification for one token kind."""

from __future__ import annotations

from datetime import datetime
from typing import Any, Callable, Dict

from ..config import TokenConfig
from ..utils.time import utc_now
from .issuer import NonceSource, TokenIssuer
from .types import Token, VerificationResult
from .verifier import TokenVerifier


class TokenCodec:
    """Create, encode, decode and check tokens under one ``TokenConfig``."""

    def __init__(
        self,
        config: TokenConfig,
        *,
        clock: Callable[[], datetime] = utc_now,
        nonce_source: NonceSource | None = None,
    ) -> None:
        self._clock = clock
        self.issuer = TokenIssuer(config, nonce_source=nonce_source)
        self.verifier = TokenVerifier(config, clock=clock)

    @classmethod
    def from_env(cls, prefix: str = "SEALED_TOKEN") -> "TokenCodec":
        return cls(TokenConfig.from_env(prefix))

    @property
    def config(self) -> TokenConfig:
        return self.issuer.config

    def create(self, identity: int, expired_at: datetime | int, token_type: int | None = None) -> Token:
        return self.issuer.create(identity, expired_at, token_type)

    def encode(self, token: Token) -> str:
        return self.issuer.encode(token)

    def decode(self, raw: str) -> Token:
        return self.verifier.decode(raw)

    def verify(self, raw: str, *, reject_expired: bool = False) -> VerificationResult:
        return self.verifier.verify(raw, reject_expired=reject_expired)

    def serialize(self, token: Token) -> Dict[str, str]:
        return self.issuer.serialize(token)

    def deserialize(self, data: Any) -> Token:
        return self.verifier.deserialize(data)

    def is_expired(self, token: Token) -> bool:
        """True iff the expiry is strictly before the clock's current second."""
        return token.is_expired(self._clock())

    @staticmethod
    def type_of(token: Token, token_type: int) -> bool:
        return token.type_of(token_type)
