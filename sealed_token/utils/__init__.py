"""Collaborator helpers: hashing, base64url text encoding and time."""

from .encoding import b64url_decode, b64url_encode, is_canonical
from .hashing import digest, digest_size, is_supported, supported_algorithms
from .time import from_timestamp, to_timestamp, utc_now

__all__ = [
    "b64url_encode",
    "b64url_decode",
    "is_canonical",
    "digest",
    "digest_size",
    "is_supported",
    "supported_algorithms",
    "from_timestamp",
    "to_timestamp",
    "utc_now",
]
