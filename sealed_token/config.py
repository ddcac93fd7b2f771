"""Per-kind token configuration."""

from __future__ import annotations

import os
from dataclasses import dataclass

from .errors import ConfigurationError, ErrorKind
from .utils.hashing import is_supported

MIN_SALT_BYTES = 32
DEFAULT_ALGORITHM = "sha256"
DEFAULT_TYPE = 1


@dataclass(frozen=True)
class TokenConfig:
    """Default type, secret salt and signing algorithm for one token kind."""

    salt: bytes | str
    algorithm: str = DEFAULT_ALGORITHM
    default_type: int = DEFAULT_TYPE

    def __post_init__(self) -> None:
        if isinstance(self.salt, str):
            object.__setattr__(self, "salt", self.salt.encode("utf-8"))

    def __repr__(self) -> str:
        return f"TokenConfig(salt=<{len(self.salt)} bytes>, algorithm={self.algorithm!r}, default_type={self.default_type!r})"

    @classmethod
    def from_env(cls, prefix: str = "SEALED_TOKEN") -> "TokenConfig":
        """Load ``<prefix>_SALT``, ``<prefix>_ALGORITHM`` and ``<prefix>_DEFAULT_TYPE``."""
        raw_type = os.getenv(f"{prefix}_DEFAULT_TYPE", str(DEFAULT_TYPE))
        try:
            default_type = int(raw_type)
        except ValueError as exc:
            raise ConfigurationError(
                ErrorKind.INVALID_DEFAULT_TYPE,
                f"{prefix}_DEFAULT_TYPE must be an integer",
                details={"value": raw_type},
            ) from exc
        return cls(
            salt=os.getenv(f"{prefix}_SALT", ""),
            algorithm=os.getenv(f"{prefix}_ALGORITHM", DEFAULT_ALGORITHM),
            default_type=default_type,
        )

    def validate(self) -> None:
        """Raise ``ConfigurationError`` unless salt and algorithm are usable."""
        if len(self.salt) < MIN_SALT_BYTES:
            raise ConfigurationError(
                ErrorKind.SALT_TOO_SHORT,
                f"salt must be at least {MIN_SALT_BYTES} bytes",
                details={"salt_length": len(self.salt)},
            )
        if not is_supported(self.algorithm):
            raise ConfigurationError(
                ErrorKind.UNSUPPORTED_ALGORITHM,
                f"algorithm {self.algorithm!r} is not supported",
                details={"algorithm": self.algorithm},
            )
