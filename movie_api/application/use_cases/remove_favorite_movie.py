from __future__ import annotations

import logging

from movie_api.application.dto.auth import PublicUserOutput
from movie_api.application.dto.users import FavoriteMovieInput
from movie_api.application.ports.users_port import UsersPort
from movie_api.domain.exceptions import UserNotFoundError

from .auth_common import build_public_user_output, ensure_same_user

logger = logging.getLogger(__name__)


class RemoveFavoriteMovieUseCase:
    def __init__(self, *, users_port: UsersPort):
        self._users_port = users_port

    def execute(self, command: FavoriteMovieInput) -> PublicUserOutput:
        ensure_same_user(acting_username=command.acting_username, username=command.username)
        user = self._users_port.remove_favorite_movie(
            username=command.username,
            movie_id=command.movie_id.strip(),
        )
        if user is None:
            raise UserNotFoundError("User not found")
        logger.info("remove_favorite_movie: user_id=%s movie_id=%s", user.id, command.movie_id)
        return build_public_user_output(user)
