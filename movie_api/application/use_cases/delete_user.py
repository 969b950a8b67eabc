from __future__ import annotations

import logging

from movie_api.application.dto.users import DeleteUserInput
from movie_api.application.ports.users_port import UsersPort
from movie_api.domain.exceptions import UserNotFoundError

from .auth_common import ensure_same_user

logger = logging.getLogger(__name__)


class DeleteUserUseCase:
    def __init__(self, *, users_port: UsersPort):
        self._users_port = users_port

    def execute(self, command: DeleteUserInput) -> None:
        ensure_same_user(acting_username=command.acting_username, username=command.username)
        if not self._users_port.delete_user(username=command.username):
            raise UserNotFoundError(f"{command.username} was not found.")
        logger.info("delete_user: deleted username=%s", command.username)
