"""URL-safe base64 without padding."""

from __future__ import annotations

import base64
import binascii
import re

_B64URL_RE = re.compile(r"[A-Za-z0-9_-]*")


def b64url_encode(data: bytes) -> str:
    return base64.urlsafe_b64encode(data).rstrip(b"=").decode("ascii")


def b64url_decode(text: str) -> bytes:
    """Decode unpadded base64url.

    Raises ``ValueError`` on foreign characters, padding and impossible
    lengths. Unused trailing bits are ignored; see ``is_canonical``.
    """
    if not isinstance(text, str) or _B64URL_RE.fullmatch(text) is None:
        raise ValueError("input is not base64url text")
    try:
        return base64.urlsafe_b64decode(text + "=" * (-len(text) % 4))
    except binascii.Error as exc:
        raise ValueError(str(exc)) from exc


def is_canonical(text: str, data: bytes) -> bool:
    """True if ``text`` is exactly what ``b64url_encode(data)`` produces."""
    return b64url_encode(data) == text
