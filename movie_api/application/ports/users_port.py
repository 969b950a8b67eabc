from __future__ import annotations

from datetime import date, datetime
from typing import Protocol

from movie_api.application.ports.credential_store_port import CredentialStorePort
from movie_api.domain.entities.user import User


class UsersPort(CredentialStorePort, Protocol):
    def list_users(self) -> list[User]:
        ...

    def create_user(
        self,
        *,
        user_id: str,
        username: str,
        password_hash: str,
        email: str,
        birthday: date | None,
        created_at: datetime,
    ) -> User:
        ...

    def update_user(
        self,
        *,
        username: str,
        new_username: str,
        password_hash: str,
        email: str,
        birthday: date | None,
    ) -> User | None:
        ...

    def delete_user(self, *, username: str) -> bool:
        ...

    def add_favorite_movie(self, *, username: str, movie_id: str) -> User | None:
        ...

    def remove_favorite_movie(self, *, username: str, movie_id: str) -> User | None:
        ...
