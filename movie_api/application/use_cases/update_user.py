from __future__ import annotations

import logging

from movie_api.application.dto.auth import PublicUserOutput
from movie_api.application.dto.users import UpdateUserInput
from movie_api.application.ports.password_hasher_port import PasswordHasherPort
from movie_api.application.ports.users_port import UsersPort
from movie_api.domain.exceptions import UsernameAlreadyExistsError, UserNotFoundError

from .auth_common import build_public_user_output, ensure_same_user

logger = logging.getLogger(__name__)


class UpdateUserUseCase:
    def __init__(
        self,
        *,
        users_port: UsersPort,
        password_hasher: PasswordHasherPort,
    ):
        self._users_port = users_port
        self._password_hasher = password_hasher

    def execute(self, command: UpdateUserInput) -> PublicUserOutput:
        ensure_same_user(acting_username=command.acting_username, username=command.username)

        new_username = command.new_username.strip()
        if new_username != command.username:
            if self._users_port.find_user_by_username(username=new_username) is not None:
                raise UsernameAlreadyExistsError(f"{new_username} already exists")

        user = self._users_port.update_user(
            username=command.username,
            new_username=new_username,
            password_hash=self._password_hasher.hash(command.password),
            email=command.email.strip(),
            birthday=command.birthday,
        )
        if user is None:
            raise UserNotFoundError("User not found")
        logger.info("update_user: updated user_id=%s username=%s", user.id, user.username)
        return build_public_user_output(user)
