"""Sealed token package.

Compact stateless tokens: a fixed binary record (type, identity, expiry,
nonce, signature) rendered as unpadded base64url and authenticated by a
salted digest over its fields.
"""

from .config import TokenConfig
from .errors import ConfigurationError, DecodeError, DomainError, ErrorKind, TokenError, VerificationError
from .token import Token, TokenCodec, TokenIssuer, TokenVerifier, VerificationResult

__all__ = [
    "TokenConfig",
    "TokenCodec",
    "TokenIssuer",
    "TokenVerifier",
    "Token",
    "VerificationResult",
    "ErrorKind",
    "TokenError",
    "ConfigurationError",
    "DomainError",
    "DecodeError",
    "VerificationError",
]
