"""Error taxonomy for token construction, decoding and verification."""

from __future__ import annotations

from enum import Enum
from typing import Any, Dict


class ErrorKind(str, Enum):
    """Discriminates every way a token operation can fail."""

    SALT_TOO_SHORT = "salt_too_short"
    UNSUPPORTED_ALGORITHM = "unsupported_algorithm"
    TYPE_OUT_OF_RANGE = "type_out_of_range"
    IDENTITY_OUT_OF_RANGE = "identity_out_of_range"
    EXPIRED_AT_OUT_OF_RANGE = "expired_at_out_of_range"
    NONCE_OUT_OF_RANGE = "nonce_out_of_range"
    INVALID_FIELD_TYPE = "invalid_field_type"
    MALFORMED_ENCODING = "malformed_encoding"
    PAYLOAD_TOO_SHORT = "payload_too_short"
    SIGNATURE_MISSING = "signature_missing"
    SIGNATURE_LENGTH_MISMATCH = "signature_length_mismatch"
    SIGNATURE_MISMATCH = "signature_mismatch"
    INVALID_SERIALIZATION = "invalid_serialization"
    INVALID_DEFAULT_TYPE = "invalid_default_type"


class TokenError(Exception):
    """Base exception for all token failures."""

    def __init__(self, kind: ErrorKind, message: str, details: Dict[str, Any] | None = None) -> None:
        self.kind = kind
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(kind={self.kind.value!r}, message={self.message!r})"


class ConfigurationError(TokenError, ValueError):
    """Salt or algorithm configuration is unusable."""


class DomainError(TokenError, ValueError):
    """A caller-supplied field is outside its domain."""


class DecodeError(TokenError):
    """Input is not a well-formed token."""


class VerificationError(TokenError):
    """Fields are well-formed but the signature does not match."""
