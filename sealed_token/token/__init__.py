"""Signed token issuance and verification."""

from .codec import TokenCodec
from .issuer import TokenIssuer, random_nonce
from .types import Token, VerificationResult
from .verifier import TokenVerifier

__all__ = ["TokenCodec", "TokenIssuer", "TokenVerifier", "Token", "VerificationResult", "random_nonce"]
