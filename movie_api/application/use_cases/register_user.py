from __future__ import annotations

import logging
from uuid import uuid4

from movie_api.application.dto.auth import PublicUserOutput
from movie_api.application.dto.users import RegisterUserInput
from movie_api.application.ports.password_hasher_port import PasswordHasherPort
from movie_api.application.ports.users_port import UsersPort
from movie_api.domain.exceptions import UsernameAlreadyExistsError

from .auth_common import build_public_user_output, utcnow

logger = logging.getLogger(__name__)


class RegisterUserUseCase:
    def __init__(
        self,
        *,
        users_port: UsersPort,
        password_hasher: PasswordHasherPort,
    ):
        self._users_port = users_port
        self._password_hasher = password_hasher

    def execute(self, command: RegisterUserInput) -> PublicUserOutput:
        username = command.username.strip()
        if not username:
            raise ValueError("username is required.")
        if not command.password:
            raise ValueError("password is required.")

        if self._users_port.find_user_by_username(username=username) is not None:
            raise UsernameAlreadyExistsError(f"{username} already exists")

        user = self._users_port.create_user(
            user_id=str(uuid4()),
            username=username,
            password_hash=self._password_hasher.hash(command.password),
            email=command.email.strip(),
            birthday=command.birthday,
            created_at=utcnow(),
        )
        logger.info("register_user: created user_id=%s username=%s", user.id, user.username)
        return build_public_user_output(user)
