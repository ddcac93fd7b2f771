"""Example: issue and check invite links for two token kinds."""

from __future__ import annotations

import os
from datetime import timedelta

from sealed_token import TokenCodec, TokenConfig
from sealed_token.logging import configure_logging
from sealed_token.utils.time import utc_now

INVITE = 2


def main() -> None:
    configure_logging(os.getenv("LOG_LEVEL", "info"))
    salt = os.getenv("SEALED_TOKEN_SALT", "example-only-salt-0123456789abcdef")

    sessions = TokenCodec(TokenConfig(salt=salt, algorithm="sha256", default_type=1))
    invites = TokenCodec(TokenConfig(salt=salt, algorithm="blake2s", default_type=INVITE))

    session = sessions.create(42, utc_now() + timedelta(hours=12))
    invite = invites.create(42, utc_now() + timedelta(days=7))
    print("session:", session)
    print("invite: ", invite)

    result = invites.verify(str(invite), reject_expired=True)
    print("invite valid:", result.valid, "type ok:", result.token is not None and result.token.type_of(INVITE))

    crossed = invites.verify(str(session))
    print("session accepted as invite:", crossed.valid, crossed.reason)


if __name__ == "__main__":
    main()
