from __future__ import annotations

from movie_api.application.dto.auth import PublicUserOutput
from movie_api.application.ports.users_port import UsersPort

from .auth_common import build_public_user_output


class ListUsersUseCase:
    def __init__(self, *, users_port: UsersPort):
        self._users_port = users_port

    def execute(self) -> list[PublicUserOutput]:
        return [build_public_user_output(user) for user in self._users_port.list_users()]
