from __future__ import annotations

from passlib.context import CryptContext

from movie_api.application.ports.password_hasher_port import PasswordHasherPort
from movie_api.domain.exceptions import MalformedPasswordHashError

DEFAULT_BCRYPT_ROUNDS = 10


class PasswordHasher(PasswordHasherPort):
    def __init__(self, *, rounds: int = DEFAULT_BCRYPT_ROUNDS):
        self._ctx = CryptContext(
            schemes=["bcrypt"],
            deprecated="auto",
            bcrypt__rounds=rounds,
        )

    def hash(self, plain_password: str) -> str:
        return self._ctx.hash(plain_password)

    def verify(self, plain_password: str, password_hash: str) -> bool:
        # passlib raises ValueError/TypeError for hashes it cannot parse.
        try:
            return bool(self._ctx.verify(plain_password, password_hash))
        except (ValueError, TypeError) as exc:
            raise MalformedPasswordHashError("Stored password hash is malformed.") from exc
