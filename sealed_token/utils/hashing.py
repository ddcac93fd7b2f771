"""Named digest and checksum registry."""

from __future__ import annotations

import hashlib
import zlib
from typing import Callable, Dict, FrozenSet, Tuple

import xxhash

# name -> (output size, raw big-endian digest function)
_CHECKSUMS: Dict[str, Tuple[int, Callable[[bytes], bytes]]] = {
    "crc32b": (4, lambda data: zlib.crc32(data).to_bytes(4, "big")),
    "adler32": (4, lambda data: zlib.adler32(data).to_bytes(4, "big")),
    "xxh32": (4, lambda data: xxhash.xxh32(data).digest()),
    "xxh64": (8, lambda data: xxhash.xxh64(data).digest()),
    "xxh3": (8, lambda data: xxhash.xxh3_64(data).digest()),
    "xxh128": (16, lambda data: xxhash.xxh3_128(data).digest()),
}

# hash_algos() spellings used by existing deployments.
ALIASES: Dict[str, str] = {
    "sha3-224": "sha3_224",
    "sha3-256": "sha3_256",
    "sha3-384": "sha3_384",
    "sha3-512": "sha3_512",
    "sha512/224": "sha512_224",
    "sha512/256": "sha512_256",
}


def _probe_digest_size(name: str) -> int | None:
    # OpenSSL may list digests whose provider is not loaded.
    try:
        return hashlib.new(name).digest_size
    except ValueError:
        return None


def _load_digest_sizes() -> Dict[str, int]:
    sizes: Dict[str, int] = {}
    for name in sorted(hashlib.algorithms_available):
        if name.lower().startswith("shake"):
            continue
        size = _probe_digest_size(name)
        if size:
            sizes[name] = size
    return sizes


_DIGEST_SIZES = _load_digest_sizes()


def canonical_name(algorithm: str) -> str:
    """Map an alias to the registry name; other names pass through unchanged."""
    return ALIASES.get(algorithm, algorithm)


def supported_algorithms() -> FrozenSet[str]:
    """Return every algorithm name accepted for signing, aliases included."""
    names = set(_DIGEST_SIZES) | set(_CHECKSUMS)
    names.update(alias for alias, target in ALIASES.items() if target in _DIGEST_SIZES)
    return frozenset(names)


def is_supported(algorithm: object) -> bool:
    if not isinstance(algorithm, str):
        return False
    name = canonical_name(algorithm)
    return name in _DIGEST_SIZES or name in _CHECKSUMS


def digest(algorithm: str, data: bytes) -> bytes:
    """Return the raw (non-hex) output of ``algorithm`` over ``data``."""
    name = canonical_name(algorithm)
    if name in _CHECKSUMS:
        return _CHECKSUMS[name][1](data)
    if name not in _DIGEST_SIZES:
        raise ValueError(f"Unknown algorithm '{algorithm}'.")
    return hashlib.new(name, data).digest()


def digest_size(algorithm: str) -> int:
    """Return the output length in bytes for ``algorithm``."""
    name = canonical_name(algorithm)
    if name in _CHECKSUMS:
        return _CHECKSUMS[name][0]
    if name not in _DIGEST_SIZES:
        raise ValueError(f"Unknown algorithm '{algorithm}'.")
    return _DIGEST_SIZES[name]
