from datetime import datetime, timedelta, timezone

import pytest

from sealed_token import ConfigurationError, ErrorKind, TokenCodec, TokenConfig

LONG_SALT = "test_salt_that_is_at_least_32_bytes_long_for_security"


def expires() -> datetime:
    return datetime.now(timezone.utc) + timedelta(hours=1)


@pytest.mark.parametrize("salt", ["", "1234567890123456", "1" * 31])
def test_short_salt_fails_every_call(salt: str) -> None:
    codec = TokenCodec(TokenConfig(salt=salt))
    for identity, token_type in ((1, 1), (12345, 42), (2**63, 255)):
        with pytest.raises(ConfigurationError) as excinfo:
            codec.create(identity, expires(), token_type)
        assert excinfo.value.kind is ErrorKind.SALT_TOO_SHORT
    with pytest.raises(ConfigurationError):
        codec.decode("AQA")


@pytest.mark.parametrize("salt", ["1" * 32, "x" * 1024, b"\x00" * 32])
def test_salt_at_or_above_minimum(salt: object) -> None:
    codec = TokenCodec(TokenConfig(salt=salt))  # type: ignore[arg-type]
    token = codec.create(12345, expires())
    assert codec.decode(codec.encode(token)).identity == 12345


def test_salt_counts_bytes_not_characters() -> None:
    # 16 two-byte characters.
    config = TokenConfig(salt="é" * 16)
    assert config.salt == "é".encode("utf-8") * 16
    config.validate()


def test_salt_checked_before_algorithm() -> None:
    with pytest.raises(ConfigurationError) as excinfo:
        TokenConfig(salt="short", algorithm="md6").validate()
    assert excinfo.value.kind is ErrorKind.SALT_TOO_SHORT


@pytest.mark.parametrize("algorithm", ["invalid_algorithm", "", "12345", "sha@256!", "md6", "Sha256", "shake_128"])
def test_unsupported_algorithm(algorithm: str) -> None:
    codec = TokenCodec(TokenConfig(salt=LONG_SALT, algorithm=algorithm))
    with pytest.raises(ConfigurationError) as excinfo:
        codec.create(12345, expires())
    assert excinfo.value.kind is ErrorKind.UNSUPPORTED_ALGORITHM


def test_encode_under_broken_config_fails() -> None:
    token = TokenCodec(TokenConfig(salt=LONG_SALT)).create(12345, expires())
    with pytest.raises(ConfigurationError):
        TokenCodec(TokenConfig(salt="short")).encode(token)


def test_repr_hides_salt() -> None:
    assert LONG_SALT not in repr(TokenConfig(salt=LONG_SALT))


def test_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("INVITE_TOKEN_SALT", LONG_SALT)
    monkeypatch.setenv("INVITE_TOKEN_ALGORITHM", "sha512")
    monkeypatch.setenv("INVITE_TOKEN_DEFAULT_TYPE", "3")
    config = TokenConfig.from_env("INVITE_TOKEN")
    assert config.salt == LONG_SALT.encode("utf-8")
    assert config.algorithm == "sha512"
    assert config.default_type == 3

    token = TokenCodec.from_env("INVITE_TOKEN").create(1, expires())
    assert token.token_type == 3
    assert len(token.signature) == 64


def test_from_env_without_salt_is_unusable(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("SEALED_TOKEN_SALT", raising=False)
    monkeypatch.delenv("SEALED_TOKEN_ALGORITHM", raising=False)
    config = TokenConfig.from_env()
    assert config.algorithm == "sha256"
    assert config.default_type == 1
    with pytest.raises(ConfigurationError):
        config.validate()


def test_from_env_rejects_non_numeric_default_type(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("SEALED_TOKEN_SALT", LONG_SALT)
    monkeypatch.setenv("SEALED_TOKEN_DEFAULT_TYPE", "abc")
    with pytest.raises(ConfigurationError) as excinfo:
        TokenConfig.from_env()
    assert excinfo.value.kind is ErrorKind.INVALID_DEFAULT_TYPE
