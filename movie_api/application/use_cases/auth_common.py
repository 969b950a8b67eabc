from __future__ import annotations

from datetime import datetime, timezone

from movie_api.application.dto.auth import PublicUserOutput
from movie_api.domain.entities.user import User
from movie_api.domain.exceptions import ForbiddenUserError


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def build_public_user_output(user: User) -> PublicUserOutput:
    return PublicUserOutput(
        id=user.id,
        username=user.username,
        email=user.email,
        birthday=user.birthday,
        favorite_movie_ids=list(user.favorite_movie_ids),
    )


def ensure_same_user(*, acting_username: str, username: str) -> None:
    if acting_username != username:
        raise ForbiddenUserError("Unauthorized")
