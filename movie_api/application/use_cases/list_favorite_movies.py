from __future__ import annotations

from movie_api.application.ports.users_port import UsersPort
from movie_api.domain.exceptions import UserNotFoundError


class ListFavoriteMoviesUseCase:
    def __init__(self, *, users_port: UsersPort):
        self._users_port = users_port

    def execute(self, *, username: str) -> list[str]:
        user = self._users_port.find_user_by_username(username=username)
        if user is None:
            raise UserNotFoundError(f"{username} was not found.")
        return list(user.favorite_movie_ids)
