import hashlib

import pytest

from sealed_token import DecodeError, ErrorKind, TokenConfig
from sealed_token.token.signing import sign, signing_input
from sealed_token.token.wire import HEADER_SIZE, pack_token, unpack_token
from sealed_token.utils.encoding import b64url_decode, b64url_encode, is_canonical

SALT = b"s" * 32


def test_header_layout_is_little_endian() -> None:
    packed = pack_token(1, 12345, 100, 268_435_456, b"sig")
    assert HEADER_SIZE == 18
    assert packed == bytes.fromhex("0100" "3930000000000000" "64000000" "00000010") + b"sig"


def test_unpack_takes_remaining_bytes_as_signature() -> None:
    fields = unpack_token(pack_token(255, 2**64 - 1, 2**32 - 1, 4_294_967_295, b"\x01\x02"))
    assert fields.token_type == 255
    assert fields.identity == 2**64 - 1
    assert fields.expired_at == 2**32 - 1
    assert fields.nonce == 4_294_967_295
    assert fields.signature == b"\x01\x02"
    assert unpack_token(pack_token(1, 1, 0, 1, b"")).signature == b""


def test_unpack_short_payload() -> None:
    with pytest.raises(DecodeError) as excinfo:
        unpack_token(b"\x00" * 17)
    assert excinfo.value.kind is ErrorKind.PAYLOAD_TOO_SHORT


def test_signing_input_uses_decimal_fields_and_delimiters() -> None:
    assert signing_input(SALT, 1, 12345, 100, 268_435_456) == SALT + b">268435456%100#12345%1<"


def test_delimiters_keep_fields_apart() -> None:
    assert signing_input(SALT, 1, 1, 3, 12) != signing_input(SALT, 1, 1, 23, 1)


def test_sign_is_raw_digest_of_signing_input() -> None:
    config = TokenConfig(salt=SALT, algorithm="sha256")
    expected = hashlib.sha256(SALT + b">268435456%100#12345%1<").digest()
    assert sign(config, 1, 12345, 100, 268_435_456) == expected


def test_b64url_alphabet_and_padding() -> None:
    data = bytes(range(256))
    text = b64url_encode(data)
    assert "=" not in text and "+" not in text and "/" not in text
    assert b64url_decode(text) == data
    assert b64url_encode(b"\xfb\xff") == "-_8"


@pytest.mark.parametrize("text", ["ab+c", "ab/c", "abc=", "A", "abcde", "a b"])
def test_b64url_decode_rejects(text: str) -> None:
    with pytest.raises(ValueError):
        b64url_decode(text)


def test_is_canonical() -> None:
    assert is_canonical("-_8", b"\xfb\xff") is True
    assert b64url_decode("-_9") == b"\xfb\xff"
    assert is_canonical("-_9", b"\xfb\xff") is False
