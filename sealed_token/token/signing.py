"""Keyed signature over the token fields."""

from __future__ import annotations

from typing import TYPE_CHECKING

from ..utils.hashing import digest

if TYPE_CHECKING:
    from ..config import TokenConfig


def signing_input(salt: bytes, token_type: int, identity: int, expired_at: int, nonce: int) -> bytes:
    """Return the canonical byte string that gets hashed.

    Numbers are rendered as decimal text between fixed delimiters so that
    adjacent fields cannot run into each other.
    """
    return salt + f">{nonce}%{expired_at}#{identity}%{token_type}<".encode("ascii")


def sign(config: "TokenConfig", token_type: int, identity: int, expired_at: int, nonce: int) -> bytes:
    """Return raw signature bytes; raises ``ConfigurationError`` for unusable config."""
    config.validate()
    return digest(config.algorithm, signing_input(config.salt, token_type, identity, expired_at, nonce))
