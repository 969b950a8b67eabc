from __future__ import annotations

from typing import Protocol

from movie_api.domain.entities.user import User


class CredentialStorePort(Protocol):
    def find_user_by_username(self, *, username: str) -> User | None:
        ...

    def find_user_by_id(self, *, user_id: str) -> User | None:
        ...
